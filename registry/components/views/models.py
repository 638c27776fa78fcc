"""
Views component - Render-ready view models.

Every collection is a tuple and every mapping a read-only proxy, so the
presentation layer can treat them as snapshots.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from registry.components.badges import BadgeCatalogue
from registry.components.directory import AdminCriteria, DirectoryCriteria, FilterCriteria
from registry.components.stats import ProfileStats
from registry.domain.entities import REGION_COUNTRY, BadgeTone, ProfileRecord, SiteSettings


@dataclass(frozen=True)
class ViewContext:
    """
    Request-scoped inputs that used to live in global hooks.

    Built by the I/O layer for each render and passed in explicitly.
    """

    settings: SiteSettings = field(default_factory=SiteSettings)
    is_admin: bool = False
    region_country: str = REGION_COUNTRY
    catalogue: BadgeCatalogue = field(default_factory=lambda: BadgeCatalogue((), ()))


@dataclass(frozen=True)
class BadgeLabel:
    label: str
    tone: BadgeTone


@dataclass(frozen=True)
class ProfileCard:
    """Directory/home card for one profile."""

    record: ProfileRecord
    path: str
    image: str | None
    location: str
    vehicle: str
    badges: tuple[BadgeLabel, ...]


@dataclass(frozen=True)
class BadgeEditView:
    """State of the open badge modal."""

    profile_id: str
    display_name: str
    selected: tuple[str, ...]
    available: tuple[str, ...]
    has_changes: bool


@dataclass(frozen=True)
class DirectoryView:
    criteria: DirectoryCriteria
    records: tuple[ProfileRecord, ...]
    cards: tuple[ProfileCard, ...]
    options: Mapping[str, tuple[Any, ...]]
    stats: ProfileStats
    total: int
    shown: int
    settings: SiteSettings


@dataclass(frozen=True)
class AdminMemberView:
    criteria: AdminCriteria
    records: tuple[ProfileRecord, ...]
    options: Mapping[str, tuple[Any, ...]]
    stats: ProfileStats
    total: int
    shown: int
    active_badge_edit: BadgeEditView | None


@dataclass(frozen=True)
class HomeView:
    settings: SiteSettings
    recent: tuple[ProfileCard, ...]
    featured: tuple[ProfileCard, ...]
    stats: ProfileStats


@dataclass(frozen=True)
class ProfileView:
    card: ProfileCard
    instagram_url: str | None
    instagram_posts: tuple[str, ...]
    photos: tuple[str, ...]
    mod_list: str
    featured_quote: str
    member_since: datetime | None


@dataclass(frozen=True)
class ComposedView:
    """The generic four-part view: filtered rows, option lists, stats, badge edit."""

    filtered_records: tuple[ProfileRecord, ...]
    available_filter_options: Mapping[str, tuple[Any, ...]]
    stats: ProfileStats
    active_badge_edit: BadgeEditView | None
    criteria: FilterCriteria
