from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

# --- Enums / Literals ---
MemberStatus = Literal["all", "public", "private", "featured"]
BadgeTone = Literal["owner", "host", "supporter", "numbered", "default"]

# --- Option defaults (overridable via registry.yaml) ---
COUNTRIES = (
    "United Kingdom",
    "Australia",
    "Japan",
    "Germany",
    "France",
    "Netherlands",
    "Belgium",
    "Switzerland",
    "Austria",
    "Other",
)
REGION_COUNTRY = "United Kingdom"
UK_REGIONS = (
    "London",
    "South East",
    "South West",
    "East of England",
    "East Midlands",
    "West Midlands",
    "Yorkshire and the Humber",
    "North West",
    "North East",
    "Scotland",
    "Wales",
    "Northern Ireland",
)
YEARS = (2015, 2016)
TRANSMISSIONS = ("Manual", "Auto")
COLOURS = ("White", "Red", "Black", "Grey", "Silver")
MAX_PHOTOS = 3
MAX_POST_URLS = 3

# --- Profiles ---

class ProfileRecord(BaseModel):
    """One registered member and their car. Immutable snapshot of a fetched row."""

    model_config = ConfigDict(frozen=True)

    id: str
    user_id: str | None = None
    display_name: str
    username: str
    country: str
    region: str = ""
    year: int
    transmission: str
    colour: str
    mod_list: str = ""
    instagram_handle: str = ""
    instagram_post_urls: tuple[str, ...] = ()
    public_profile: bool = False
    featured: bool = False
    show_on_map: bool = False
    photo_urls: tuple[str, ...] = ()
    badges: tuple[str, ...] = ()
    featured_quote: str = ""
    created_at: datetime | None = None

    @field_validator("badges")
    @classmethod
    def validate_unique_badges(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(v)) != len(v):
            raise ValueError("Badge labels must be unique")
        return v

    @field_validator("photo_urls")
    @classmethod
    def validate_photo_limit(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) > MAX_PHOTOS:
            raise ValueError(f"At most {MAX_PHOTOS} photos are allowed")
        return v

    @field_validator("instagram_post_urls")
    @classmethod
    def validate_post_limit(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) > MAX_POST_URLS:
            raise ValueError(f"At most {MAX_POST_URLS} Instagram posts are allowed")
        return v

    def effective_region(self, region_country: str = REGION_COUNTRY) -> str:
        """Region, or "" when the country does not carry one."""
        if self.country != region_country:
            return ""
        return self.region

# --- Site Content ---

class SiteSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    site_title: str = ""
    homepage_tagline: str = ""
    homepage_intro: str = ""
    hero_cta: str = ""
    site_logo_url: str = ""
    favicon_url: str = ""
    meta_description: str = ""
    homepage_main_heading: str = ""
    homepage_sub_heading: str = ""
    footer_text: str = ""
