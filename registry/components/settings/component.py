"""
Settings component - Site content settings.

Site content is stored as key/value rows. settings_from_rows() is pure;
SettingsStore is the explicit, invalidatable cache the I/O layer owns in
place of a process-wide settings hook.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from registry.domain.entities import SiteSettings

from .ports import SettingsSourcePort

logger = logging.getLogger(__name__)

SETTINGS_KEYS: tuple[str, ...] = tuple(SiteSettings.model_fields)


def settings_from_rows(rows: Iterable[Mapping[str, Any]]) -> SiteSettings:
    """
    Fold key/value rows into SiteSettings.

    Unknown keys are ignored; missing or null values become "". A later
    row for the same key wins.
    """
    values: dict[str, str] = {}
    for row in rows:
        key = row.get("key")
        if key not in SETTINGS_KEYS:
            continue
        value = row.get("value")
        values[key] = "" if value is None else str(value)
    return SiteSettings(**values)


class SettingsStore:
    """
    Cached site settings.

    Fetches from the source on first get() and after each invalidate().
    """

    def __init__(self, source: SettingsSourcePort) -> None:
        self._source = source
        self._cached: SiteSettings | None = None

    def get(self) -> SiteSettings:
        if self._cached is None:
            rows = self._source.fetch_rows()
            logger.debug("Loaded %d site content rows", len(rows))
            self._cached = settings_from_rows(rows)
        return self._cached

    def invalidate(self) -> None:
        self._cached = None

    @property
    def is_loaded(self) -> bool:
        return self._cached is not None
