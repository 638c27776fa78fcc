"""
Stats component - Summary counts over a profile collection.

Functional Core - each function is a single pass reduction. Callers decide
the visibility subset (e.g. public profiles only) before calling.
"""

from __future__ import annotations

from collections.abc import Sequence

from registry.domain.entities import ProfileRecord

from .models import ProfileStats


def total(records: Sequence[ProfileRecord]) -> int:
    return len(records)


def country_count(records: Sequence[ProfileRecord]) -> int:
    """Number of distinct non-empty countries."""
    return len({r.country for r in records if r.country})


def featured_count(records: Sequence[ProfileRecord]) -> int:
    return sum(1 for r in records if r.featured)


def public_count(records: Sequence[ProfileRecord]) -> int:
    return sum(1 for r in records if r.public_profile)


def private_count(records: Sequence[ProfileRecord]) -> int:
    return total(records) - public_count(records)


def compute_stats(records: Sequence[ProfileRecord]) -> ProfileStats:
    return ProfileStats(
        total=total(records),
        countries=country_count(records),
        featured=featured_count(records),
        public=public_count(records),
    )
