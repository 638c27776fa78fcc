"""
Settings component port definitions.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class SettingsSourcePort(Protocol):
    """Source of site content rows ({"key": ..., "value": ...})."""

    def fetch_rows(self) -> list[Mapping[str, Any]]:
        """Fetch every site content row."""
        ...
