"""
Stats component - Member totals, country and visibility counts.
"""

from .component import (
    compute_stats,
    country_count,
    featured_count,
    private_count,
    public_count,
    total,
)
from .models import ProfileStats

__all__ = [
    "compute_stats",
    "country_count",
    "featured_count",
    "private_count",
    "public_count",
    "total",
    "ProfileStats",
]
