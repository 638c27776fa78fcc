"""
Directory component - Filtering and option lists over profile collections.

Functional Core - pure functions, no caching. Results are recomputed from
the collection passed in on every call.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import fields, replace
from typing import Any

from registry.domain.entities import MemberStatus, ProfileRecord

from .models import OPTION_FIELDS, AdminCriteria, DirectoryCriteria, FilterCriteria

_EQUALITY_FIELDS = ("colour", "country", "transmission", "year")
_TEXT_FIELDS = frozenset({"colour", "country", "transmission"})


# --- Criteria Construction ---


def status_criteria(status: MemberStatus) -> dict[str, bool | None]:
    """Map the admin status dropdown onto public/featured constraints."""
    if status == "all":
        return {"public": None, "featured": None}
    if status == "public":
        return {"public": True, "featured": None}
    if status == "private":
        return {"public": False, "featured": None}
    if status == "featured":
        return {"public": None, "featured": True}
    msg = f"Unknown member status: {status}"
    raise ValueError(msg)


def update_criteria(criteria: FilterCriteria, field: str, value: Any) -> FilterCriteria:
    """
    Return new criteria with one control changed.

    An empty value clears that constraint.
    """
    if isinstance(criteria, AdminCriteria):
        if field == "status":
            return replace(criteria, **status_criteria(value or "all"))
        if field == "year":
            return replace(criteria, year=int(value) if value not in (None, "") else None)
        if field == "search":
            term = (value or "").strip()
            return replace(criteria, search_terms=(term,) if term else ())

    names = {f.name for f in fields(criteria)} & _TEXT_FIELDS
    if field not in names:
        msg = f"Unknown filter field '{field}' for {type(criteria).__name__}"
        raise ValueError(msg)
    return replace(criteria, **{field: value or ""})


def clear_criteria(criteria: FilterCriteria) -> FilterCriteria:
    return type(criteria)()


def merge_criteria(a: FilterCriteria, b: FilterCriteria) -> FilterCriteria:
    """
    Conjunction of two criteria of the same kind.

    Where both constrain the same field to different values nothing can
    match, so the result is flagged impossible.
    """
    if type(a) is not type(b):
        msg = f"Cannot merge {type(a).__name__} with {type(b).__name__}"
        raise TypeError(msg)

    merged: dict[str, Any] = {"impossible": a.impossible or b.impossible}
    for f in fields(a):
        if f.name in ("impossible", "search_terms"):
            continue
        left, right = getattr(a, f.name), getattr(b, f.name)
        unset = f.default
        if left == unset:
            merged[f.name] = right
        elif right == unset or left == right:
            merged[f.name] = left
        else:
            merged[f.name] = left
            merged["impossible"] = True

    if isinstance(a, AdminCriteria) and isinstance(b, AdminCriteria):
        merged["search_terms"] = tuple(dict.fromkeys(a.search_terms + b.search_terms))

    return type(a)(**merged)


def is_unconstrained(criteria: FilterCriteria) -> bool:
    return criteria == type(criteria)()


# --- Filtering ---


def _matches_search(record: ProfileRecord, term: str) -> bool:
    needle = term.lower()
    return (
        needle in record.display_name.lower()
        or needle in record.instagram_handle.lower()
        or needle in record.country.lower()
    )


def matches(record: ProfileRecord, criteria: FilterCriteria) -> bool:
    """True when the record satisfies every non-default constraint."""
    if criteria.impossible:
        return False

    for name in _EQUALITY_FIELDS:
        wanted = getattr(criteria, name, None)
        if wanted in (None, ""):
            continue
        if getattr(record, name) != wanted:
            return False

    if isinstance(criteria, AdminCriteria):
        if criteria.public is not None and record.public_profile != criteria.public:
            return False
        if criteria.featured is not None and record.featured != criteria.featured:
            return False
        if not all(_matches_search(record, term) for term in criteria.search_terms):
            return False

    return True


def filter_profiles(
    records: Iterable[ProfileRecord],
    criteria: FilterCriteria,
) -> tuple[ProfileRecord, ...]:
    """Stable filter: matching records in their original relative order."""
    return tuple(record for record in records if matches(record, criteria))


def distinct_values(records: Sequence[ProfileRecord], field: str) -> tuple[Any, ...]:
    """
    Distinct values of one field, ascending, falsy values excluded.

    Used to populate filter dropdowns.
    """
    if field not in OPTION_FIELDS:
        msg = f"Field '{field}' cannot be used for filter options"
        raise ValueError(msg)
    values = {getattr(r, field) for r in records}
    return tuple(sorted(v for v in values if v))


def filter_options(
    records: Sequence[ProfileRecord],
    option_fields: Iterable[str],
) -> dict[str, tuple[Any, ...]]:
    return {name: distinct_values(records, name) for name in option_fields}


def criteria_for(
    kind: type[DirectoryCriteria] | type[AdminCriteria],
    **values: Any,
) -> FilterCriteria:
    """Build criteria from query parameters, ignoring empty values."""
    criteria: FilterCriteria = kind()
    for name, value in values.items():
        if value in (None, ""):
            continue
        criteria = update_criteria(criteria, name, value)
    return criteria
