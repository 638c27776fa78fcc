"""Public read endpoints: directory, home page, member profiles, site settings."""

from fastapi import APIRouter, Depends, HTTPException, status

from registry.api.deps import get_records, get_rules, get_view_context
from registry.api.schemas import (
    DirectoryResponse,
    HomeResponse,
    ProfileCardResponse,
    ProfileResponse,
    StatsResponse,
)
from registry.components.directory import DirectoryCriteria, criteria_for
from registry.components.views import (
    ViewContext,
    compose_directory_view,
    compose_home_view,
    compose_profile_view,
)
from registry.domain.entities import ProfileRecord, SiteSettings
from registry.rules.models import Rules

router = APIRouter()


@router.get("/directory", response_model=DirectoryResponse)
def get_directory(
    colour: str = "",
    country: str = "",
    transmission: str = "",
    records: tuple[ProfileRecord, ...] = Depends(get_records),
    ctx: ViewContext = Depends(get_view_context),
) -> DirectoryResponse:
    """
    Public owners directory.

    Only public profiles are listed. Filters are exact matches; an empty
    value leaves that filter off.
    """
    criteria = criteria_for(
        DirectoryCriteria, colour=colour, country=country, transmission=transmission
    )
    public = [r for r in records if r.public_profile]
    view = compose_directory_view(public, criteria, ctx)

    return DirectoryResponse(
        filters={"colour": colour, "country": country, "transmission": transmission},
        options={name: list(values) for name, values in view.options.items()},
        total=view.total,
        shown=view.shown,
        stats=StatsResponse.from_stats(view.stats),
        profiles=[ProfileCardResponse.from_card(card) for card in view.cards],
    )


@router.get("/home", response_model=HomeResponse)
def get_home(
    records: tuple[ProfileRecord, ...] = Depends(get_records),
    ctx: ViewContext = Depends(get_view_context),
    rules: Rules = Depends(get_rules),
) -> HomeResponse:
    view = compose_home_view(
        records,
        ctx,
        recent_limit=rules.home.recent_limit,
        featured_limit=rules.home.featured_limit,
    )
    return HomeResponse(
        settings=view.settings,
        stats=StatsResponse.from_stats(view.stats),
        recent=[ProfileCardResponse.from_card(card) for card in view.recent],
        featured=[ProfileCardResponse.from_card(card) for card in view.featured],
    )


@router.get("/members/{username}", response_model=ProfileResponse)
def get_member(
    username: str,
    records: tuple[ProfileRecord, ...] = Depends(get_records),
    ctx: ViewContext = Depends(get_view_context),
) -> ProfileResponse:
    view = compose_profile_view(records, username, ctx)
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")

    return ProfileResponse(
        profile=ProfileCardResponse.from_card(view.card),
        instagram_url=view.instagram_url,
        instagram_posts=list(view.instagram_posts),
        photos=list(view.photos),
        mod_list=view.mod_list,
        member_since=view.member_since,
    )


@router.get("/settings", response_model=SiteSettings)
def get_site_settings(ctx: ViewContext = Depends(get_view_context)) -> SiteSettings:
    return ctx.settings
