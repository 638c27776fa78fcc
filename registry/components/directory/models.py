"""
Directory component - Filter criteria models.

Criteria are immutable. Every field defaults to "unconstrained"; a fresh
value is built each time a filter control changes.
"""

from __future__ import annotations

from dataclasses import dataclass

# Scalar ProfileRecord fields that can feed a filter option list.
OPTION_FIELDS: tuple[str, ...] = (
    "display_name",
    "username",
    "country",
    "region",
    "year",
    "transmission",
    "colour",
    "instagram_handle",
)

DIRECTORY_OPTION_FIELDS: tuple[str, ...] = ("colour", "country", "transmission")
ADMIN_OPTION_FIELDS: tuple[str, ...] = ("colour", "country", "year")


@dataclass(frozen=True)
class DirectoryCriteria:
    """Public directory filters."""

    colour: str = ""
    country: str = ""
    transmission: str = ""
    impossible: bool = False


@dataclass(frozen=True)
class AdminCriteria:
    """
    Admin member list filters.

    public/featured are None when unconstrained. The status dropdown maps
    onto them via status_criteria(). search_terms must all appear
    (case-insensitive) in the display name, Instagram handle or country.
    """

    colour: str = ""
    country: str = ""
    year: int | None = None
    public: bool | None = None
    featured: bool | None = None
    search_terms: tuple[str, ...] = ()
    impossible: bool = False


FilterCriteria = DirectoryCriteria | AdminCriteria
