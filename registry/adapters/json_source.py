"""
JSON file row sources.

Reads owner and site content rows exported from the hosted backend.
Implements ProfileSourcePort and SettingsSourcePort. The file is re-read
on every call.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """Row file exists but cannot be used."""


def _read_rows(path: Path, wrapper_key: str) -> list[Mapping[str, Any]]:
    if not path.exists():
        logger.info("Row file %s not found; treating as empty", path)
        return []

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SourceError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get(wrapper_key, [])
    if not isinstance(data, list):
        raise SourceError(f"Expected a list of rows in {path}, got {type(data).__name__}")

    rows = [row for row in data if isinstance(row, dict)]
    if len(rows) != len(data):
        logger.warning("Skipped %d non-object entries in %s", len(data) - len(rows), path)
    logger.debug("Read %d rows from %s", len(rows), path)
    return rows


class JsonProfileSource:
    """Owner rows from a JSON array, or {"owners": [...]}."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch_rows(self) -> list[Mapping[str, Any]]:
        return _read_rows(self.path, "owners")


class JsonSettingsSource:
    """Site content rows from a JSON array, or {"site_content": [...]}."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch_rows(self) -> list[Mapping[str, Any]]:
        return _read_rows(self.path, "site_content")


class InMemoryRowSource:
    """Fixed rows, for tests and seeding."""

    def __init__(self, rows: list[Mapping[str, Any]] | None = None) -> None:
        self.rows = list(rows or [])
        self.fetch_count = 0

    def fetch_rows(self) -> list[Mapping[str, Any]]:
        self.fetch_count += 1
        return [dict(row) for row in self.rows]
