"""Admin read endpoints: member management table and badge catalogue."""

from typing import Literal

from fastapi import APIRouter, Depends

from registry.api.deps import get_admin_context, get_records
from registry.api.schemas import AdminMembersResponse, BadgeCatalogueResponse, StatsResponse
from registry.components.directory import AdminCriteria, criteria_for
from registry.components.views import ViewContext, compose_admin_view
from registry.domain.entities import ProfileRecord

router = APIRouter()


@router.get("/members", response_model=AdminMembersResponse)
def list_members(
    colour: str = "",
    country: str = "",
    year: int | None = None,
    status: Literal["all", "public", "private", "featured"] = "all",
    search: str = "",
    records: tuple[ProfileRecord, ...] = Depends(get_records),
    ctx: ViewContext = Depends(get_admin_context),
) -> AdminMembersResponse:
    """All members, public and private, with admin filters."""
    criteria = criteria_for(
        AdminCriteria,
        colour=colour,
        country=country,
        year=year,
        status=status,
        search=search,
    )
    view = compose_admin_view(records, criteria, ctx)

    return AdminMembersResponse(
        options={name: list(values) for name, values in view.options.items()},
        total=view.total,
        shown=view.shown,
        stats=StatsResponse.from_stats(view.stats),
        members=list(view.records),
    )


@router.get("/badges", response_model=BadgeCatalogueResponse)
def get_badge_catalogue(ctx: ViewContext = Depends(get_admin_context)) -> BadgeCatalogueResponse:
    return BadgeCatalogueResponse(
        named=list(ctx.catalogue.named),
        numbered=list(ctx.catalogue.numbered),
    )
