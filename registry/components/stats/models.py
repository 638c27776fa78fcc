"""
Stats component - Summary count models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileStats:
    """Scalar aggregates over whatever subset the caller passed in."""

    total: int = 0
    countries: int = 0
    featured: int = 0
    public: int = 0

    @property
    def private(self) -> int:
        return self.total - self.public
