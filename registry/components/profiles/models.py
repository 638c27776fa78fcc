"""
Profiles component - Data models.

Normalization results and registration payload shapes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from registry.domain.entities import ProfileRecord

NormalizeStatus = Literal["ok", "invalid"]

REQUIRED_FIELDS: tuple[str, ...] = (
    "display_name",
    "username",
    "country",
    "year",
    "transmission",
    "colour",
)

LIST_FIELDS: tuple[str, ...] = ("instagram_post_urls", "photo_urls", "badges")


# --- Normalization Output ---


@dataclass(frozen=True)
class NormalizeResult:
    """
    Tagged outcome of normalizing one raw row.

    status == "ok" carries a record; status == "invalid" carries the
    offending field names in canonical order.
    """

    status: NormalizeStatus
    record: ProfileRecord | None = None
    missing_fields: tuple[str, ...] = ()
    row_id: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True)
class RejectedRow:
    """A raw row excluded from the usable collection."""

    index: int
    row_id: str | None
    missing_fields: tuple[str, ...]


@dataclass(frozen=True)
class NormalizeBatchOutput:
    """Usable records in input order, plus what was dropped."""

    records: tuple[ProfileRecord, ...]
    rejected: tuple[RejectedRow, ...]


# --- Registration Payload ---


@dataclass(frozen=True)
class ProfileValidationError:
    """Profile form validation error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class ProfileFormInput:
    """Values submitted from the registration form, as entered."""

    display_name: str
    username: str
    country: str
    year: str | int
    transmission: str
    colour: str
    uk_region: str = ""
    instagram_handle: str = ""
    instagram_post_urls: tuple[str, ...] = ()
    photo_urls: tuple[str, ...] = ()
    mod_list: str = ""
    public_profile: bool = True
    show_on_map: bool = True
    user_id: str | None = None


@dataclass(frozen=True)
class ProfilePayloadOutput:
    """Insert/update payload for the persistence layer, or the reasons it was refused."""

    payload: dict[str, Any] | None
    errors: tuple[ProfileValidationError, ...]
    success: bool
