"""
Views component - Assembles filter, stats and badge state into view models.

Functional Core - no I/O and no memoization. Safe to call on every input
change; each call recomputes from the records it is given.
"""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from registry.components.badges import BadgeEditSession, has_changes
from registry.components.directory import (
    ADMIN_OPTION_FIELDS,
    DIRECTORY_OPTION_FIELDS,
    AdminCriteria,
    DirectoryCriteria,
    FilterCriteria,
    filter_options,
    filter_profiles,
)
from registry.components.profiles import (
    badge_tone,
    instagram_profile_url,
    location_label,
    primary_image,
    profile_path,
    vehicle_summary,
)
from registry.components.stats import compute_stats
from registry.domain.entities import ProfileRecord

from .models import (
    AdminMemberView,
    BadgeEditView,
    BadgeLabel,
    ComposedView,
    DirectoryView,
    HomeView,
    ProfileCard,
    ProfileView,
    ViewContext,
)

DEFAULT_CONTEXT = ViewContext()


# --- Building Blocks ---


def build_card(record: ProfileRecord, ctx: ViewContext = DEFAULT_CONTEXT) -> ProfileCard:
    return ProfileCard(
        record=record,
        path=profile_path(record),
        image=primary_image(record),
        location=location_label(record, ctx.region_country),
        vehicle=vehicle_summary(record),
        badges=tuple(BadgeLabel(label=b, tone=badge_tone(b)) for b in record.badges),
    )


def _options(records: Sequence[ProfileRecord], criteria: FilterCriteria) -> MappingProxyType:
    if isinstance(criteria, AdminCriteria):
        names = ADMIN_OPTION_FIELDS
    else:
        names = DIRECTORY_OPTION_FIELDS
    return MappingProxyType(filter_options(records, names))


def badge_edit_view(
    records: Sequence[ProfileRecord],
    session: BadgeEditSession | None,
    ctx: ViewContext = DEFAULT_CONTEXT,
) -> BadgeEditView | None:
    """View of an open badge session; None when there is none or it has closed."""
    if session is None or not session.is_open:
        return None
    target = next((r for r in records if r.id == session.profile_id), None)
    return BadgeEditView(
        profile_id=session.profile_id,
        display_name=target.display_name if target else "",
        selected=session.badges,
        available=ctx.catalogue.labels,
        has_changes=has_changes(session),
    )


def _newest_first(records: Sequence[ProfileRecord]) -> list[ProfileRecord]:
    def key(record: ProfileRecord) -> float:
        if record.created_at is None:
            return float("-inf")
        return record.created_at.timestamp()

    return sorted(records, key=key, reverse=True)


# --- Composition ---


def compose_view(
    records: Sequence[ProfileRecord],
    criteria: FilterCriteria,
    badge_session: BadgeEditSession | None = None,
    ctx: ViewContext = DEFAULT_CONTEXT,
) -> ComposedView:
    records = tuple(records)
    return ComposedView(
        filtered_records=filter_profiles(records, criteria),
        available_filter_options=_options(records, criteria),
        stats=compute_stats(records),
        active_badge_edit=badge_edit_view(records, badge_session, ctx),
        criteria=criteria,
    )


def compose_directory_view(
    records: Sequence[ProfileRecord],
    criteria: DirectoryCriteria | None = None,
    ctx: ViewContext = DEFAULT_CONTEXT,
) -> DirectoryView:
    """
    Public directory page.

    records should already be the public subset; options and stats are
    taken over all of them, not just the filtered rows.
    """
    criteria = criteria or DirectoryCriteria()
    records = tuple(records)
    filtered = filter_profiles(records, criteria)
    return DirectoryView(
        criteria=criteria,
        records=filtered,
        cards=tuple(build_card(r, ctx) for r in filtered),
        options=_options(records, criteria),
        stats=compute_stats(records),
        total=len(records),
        shown=len(filtered),
        settings=ctx.settings,
    )


def compose_admin_view(
    records: Sequence[ProfileRecord],
    criteria: AdminCriteria | None = None,
    ctx: ViewContext = DEFAULT_CONTEXT,
    badge_session: BadgeEditSession | None = None,
) -> AdminMemberView:
    """Admin member management table. Requires an admin context."""
    if not ctx.is_admin:
        msg = "Admin member view requires an admin context"
        raise PermissionError(msg)

    criteria = criteria or AdminCriteria()
    records = tuple(records)
    filtered = filter_profiles(records, criteria)
    return AdminMemberView(
        criteria=criteria,
        records=filtered,
        options=_options(records, criteria),
        stats=compute_stats(records),
        total=len(records),
        shown=len(filtered),
        active_badge_edit=badge_edit_view(records, badge_session, ctx),
    )


def compose_home_view(
    records: Sequence[ProfileRecord],
    ctx: ViewContext = DEFAULT_CONTEXT,
    recent_limit: int = 6,
    featured_limit: int = 3,
) -> HomeView:
    """Home page: newest public profiles, featured ones, headline stats."""
    public = [r for r in records if r.public_profile]
    ordered = _newest_first(public)
    featured = [r for r in ordered if r.featured][:featured_limit]
    return HomeView(
        settings=ctx.settings,
        recent=tuple(build_card(r, ctx) for r in ordered[:recent_limit]),
        featured=tuple(build_card(r, ctx) for r in featured),
        stats=compute_stats(public),
    )


def compose_profile_view(
    records: Sequence[ProfileRecord],
    username: str,
    ctx: ViewContext = DEFAULT_CONTEXT,
) -> ProfileView | None:
    """Member page by username. Private profiles are only visible to admins."""
    record = next((r for r in records if r.username == username), None)
    if record is None:
        return None
    if not record.public_profile and not ctx.is_admin:
        return None
    return ProfileView(
        card=build_card(record, ctx),
        instagram_url=instagram_profile_url(record),
        instagram_posts=record.instagram_post_urls,
        photos=record.photo_urls,
        mod_list=record.mod_list,
        featured_quote=record.featured_quote,
        member_since=record.created_at,
    )
