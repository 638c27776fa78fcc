"""
Fetch collaborator port.

Rows are untyped mappings straight from the hosted backend. Nothing about
freshness is promised between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class ProfileSourcePort(Protocol):
    def fetch_rows(self) -> list[Mapping[str, Any]]:
        """Return every owner row currently stored."""
        ...
