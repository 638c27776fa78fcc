"""Response models for the registry read API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from registry.components.stats import ProfileStats
from registry.components.views import ProfileCard
from registry.domain.entities import BadgeTone, ProfileRecord, SiteSettings


class BadgeResponse(BaseModel):
    label: str
    tone: BadgeTone


class StatsResponse(BaseModel):
    total: int
    countries: int
    featured: int
    public: int

    @classmethod
    def from_stats(cls, stats: ProfileStats) -> "StatsResponse":
        return cls(
            total=stats.total,
            countries=stats.countries,
            featured=stats.featured,
            public=stats.public,
        )


class ProfileCardResponse(BaseModel):
    """Public subset of a profile - no owning-user reference."""

    username: str
    display_name: str
    path: str
    image: str | None
    location: str
    vehicle: str
    instagram_handle: str
    featured_quote: str
    badges: list[BadgeResponse]

    @classmethod
    def from_card(cls, card: ProfileCard) -> "ProfileCardResponse":
        record = card.record
        return cls(
            username=record.username,
            display_name=record.display_name,
            path=card.path,
            image=card.image,
            location=card.location,
            vehicle=card.vehicle,
            instagram_handle=record.instagram_handle,
            featured_quote=record.featured_quote,
            badges=[BadgeResponse(label=b.label, tone=b.tone) for b in card.badges],
        )


class DirectoryResponse(BaseModel):
    filters: dict[str, str]
    options: dict[str, list[Any]]
    total: int
    shown: int
    stats: StatsResponse
    profiles: list[ProfileCardResponse]


class HomeResponse(BaseModel):
    settings: SiteSettings
    stats: StatsResponse
    recent: list[ProfileCardResponse]
    featured: list[ProfileCardResponse]


class ProfileResponse(BaseModel):
    profile: ProfileCardResponse
    instagram_url: str | None
    instagram_posts: list[str]
    photos: list[str]
    mod_list: str
    member_since: datetime | None


class AdminMembersResponse(BaseModel):
    options: dict[str, list[Any]]
    total: int
    shown: int
    stats: StatsResponse
    members: list[ProfileRecord]


class BadgeCatalogueResponse(BaseModel):
    named: list[str]
    numbered: list[str]
