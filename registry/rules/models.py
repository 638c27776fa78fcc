from pydantic import BaseModel, Field

from registry.domain.entities import (
    COLOURS,
    COUNTRIES,
    MAX_PHOTOS,
    MAX_POST_URLS,
    REGION_COUNTRY,
    TRANSMISSIONS,
    UK_REGIONS,
    YEARS,
)


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class RangeRule(BaseModel):
    min: int
    max: int

class RegexRule(RangeRule):
    pattern: str

class ProfileRules(BaseModel):
    countries: list[str]
    region_country: str = "United Kingdom"
    uk_regions: list[str] = Field(default_factory=list)
    years: list[int]
    transmissions: list[str]
    colours: list[str]
    max_photos: int = Field(default=MAX_PHOTOS, ge=0, le=MAX_PHOTOS)
    max_post_urls: int = Field(default=MAX_POST_URLS, ge=0, le=MAX_POST_URLS)
    username: RegexRule = RegexRule(pattern="^[a-z0-9][a-z0-9-]*$", min=3, max=40)

class BadgeRules(BaseModel):
    named: list[str] = Field(default_factory=list)
    numbered_prefix: str = "#"
    numbered_width: int = 3
    numbered_count: int = 0

class HomeRules(BaseModel):
    recent_limit: int = 6
    featured_limit: int = 3

class Rules(BaseModel):
    project: ProjectRules
    profile: ProfileRules
    badges: BadgeRules = BadgeRules()
    home: HomeRules = HomeRules()


DEFAULT_PROFILE_RULES = ProfileRules(
    countries=list(COUNTRIES),
    region_country=REGION_COUNTRY,
    uk_regions=list(UK_REGIONS),
    years=list(YEARS),
    transmissions=list(TRANSMISSIONS),
    colours=list(COLOURS),
    max_photos=MAX_PHOTOS,
    max_post_urls=MAX_POST_URLS,
)
