"""
Profiles component - Raw row normalization and registration payloads.

Functional Core - no I/O. Rows come from the hosted backend as loosely
typed mappings; this module is the only place they become ProfileRecords.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from registry.domain.entities import ProfileRecord
from registry.domain.slugs import is_valid_slug
from registry.rules.models import DEFAULT_PROFILE_RULES, ProfileRules

from .models import (
    LIST_FIELDS,
    REQUIRED_FIELDS,
    NormalizeBatchOutput,
    NormalizeResult,
    ProfileFormInput,
    ProfilePayloadOutput,
    ProfileValidationError,
    RejectedRow,
)

logger = logging.getLogger(__name__)

_TRUE_STRINGS = frozenset({"true", "t", "1", "yes"})


# --- Coercion Helpers ---


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _flag(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _is_list_value(value: Any) -> bool:
    return value is None or isinstance(value, (str, list, tuple))


def _string_list(value: Any, limit: int | None = None) -> tuple[str, ...]:
    """Clean a list column. Non-scalar entries are skipped."""
    if not isinstance(value, (str, list, tuple)):
        return ()
    if isinstance(value, str):
        value = [value]
    texts = (_text(v) for v in value if isinstance(v, (str, int, float)))
    items = tuple(s for s in texts if s)
    if limit is not None:
        return items[:limit]
    return items


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    """Drop repeats, keeping first occurrence order."""
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return tuple(out)


def _year(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, str):
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def _timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    text = _text(value)
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        logger.debug("Unparseable created_at %r", text)
        return None


# --- Normalization ---


def normalize_row(
    raw: Mapping[str, Any],
    rules: ProfileRules = DEFAULT_PROFILE_RULES,
) -> NormalizeResult:
    """
    Convert one fetched row into a ProfileRecord.

    Never raises for bad data: a row missing any required field comes back
    as status "invalid" naming those fields.
    """
    row_id = _text(raw.get("id")) or None

    missing = [name for name in REQUIRED_FIELDS if name != "year" and not _text(raw.get(name))]
    year = _year(raw.get("year"))
    if year is None:
        missing.append("year")

    if missing:
        ordered = tuple(name for name in REQUIRED_FIELDS if name in missing)
        return NormalizeResult(status="invalid", missing_fields=ordered, row_id=row_id)

    malformed = tuple(name for name in LIST_FIELDS if not _is_list_value(raw.get(name)))
    if malformed:
        return NormalizeResult(status="invalid", missing_fields=malformed, row_id=row_id)

    try:
        record = ProfileRecord(
            id=row_id or "",
            user_id=_text(raw.get("user_id")) or None,
            display_name=_text(raw.get("display_name")),
            username=_text(raw.get("username")),
            country=_text(raw.get("country")),
            region=_text(raw.get("uk_region") or raw.get("region")),
            year=year,
            transmission=_text(raw.get("transmission")),
            colour=_text(raw.get("colour")),
            mod_list=_text(raw.get("mod_list")),
            instagram_handle=_text(raw.get("instagram_handle")).lstrip("@"),
            instagram_post_urls=_string_list(
                raw.get("instagram_post_urls"), rules.max_post_urls
            ),
            public_profile=_flag(raw.get("public_profile")),
            featured=_flag(raw.get("featured")),
            show_on_map=_flag(raw.get("show_on_map")),
            photo_urls=_string_list(raw.get("photo_urls"), rules.max_photos),
            badges=_unique(_string_list(raw.get("badges"))),
            featured_quote=_text(raw.get("featured_quote")),
            created_at=_timestamp(raw.get("created_at")),
        )
    except ValidationError as e:
        fields = tuple(dict.fromkeys(str(err["loc"][0]) for err in e.errors() if err["loc"]))
        return NormalizeResult(status="invalid", missing_fields=fields, row_id=row_id)

    return NormalizeResult(status="ok", record=record, row_id=row_id)


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    rules: ProfileRules = DEFAULT_PROFILE_RULES,
) -> NormalizeBatchOutput:
    """Normalize a fetched batch, keeping usable records in input order."""
    records: list[ProfileRecord] = []
    rejected: list[RejectedRow] = []

    for index, raw in enumerate(rows):
        result = normalize_row(raw, rules)
        if result.record is not None:
            records.append(result.record)
            continue
        logger.warning(
            "Dropping profile row %d (id=%s): missing or invalid %s",
            index,
            result.row_id,
            ", ".join(result.missing_fields),
        )
        rejected.append(
            RejectedRow(index=index, row_id=result.row_id, missing_fields=result.missing_fields)
        )

    return NormalizeBatchOutput(records=tuple(records), rejected=tuple(rejected))


# --- Registration Payload ---


def _check_option(
    value: Any,
    allowed: list[Any],
    field: str,
    label: str,
) -> list[ProfileValidationError]:
    if value in (None, ""):
        return [
            ProfileValidationError(
                code=f"{field}_required",
                message=f"{label} is required",
                field=field,
            )
        ]
    if value not in allowed:
        return [
            ProfileValidationError(
                code=f"{field}_invalid",
                message=f"{label} must be one of: {', '.join(str(a) for a in allowed)}",
                field=field,
            )
        ]
    return []


def validate_profile_form(
    form: ProfileFormInput,
    rules: ProfileRules = DEFAULT_PROFILE_RULES,
    taken_usernames: frozenset[str] = frozenset(),
) -> list[ProfileValidationError]:
    """Validate registration form values."""
    errors: list[ProfileValidationError] = []

    display_name = form.display_name.strip()
    if not display_name:
        errors.append(
            ProfileValidationError(
                code="display_name_required",
                message="Display name is required",
                field="display_name",
            )
        )
    elif len(display_name) > 100:
        errors.append(
            ProfileValidationError(
                code="display_name_too_long",
                message="Display name must be 100 characters or less",
                field="display_name",
            )
        )

    username = form.username.strip()
    if not username:
        errors.append(
            ProfileValidationError(
                code="username_required",
                message="Username is required",
                field="username",
            )
        )
    elif not is_valid_slug(username, rules.username):
        errors.append(
            ProfileValidationError(
                code="username_invalid",
                message=(
                    f"Username must be {rules.username.min}-{rules.username.max} "
                    "lowercase letters, digits or hyphens"
                ),
                field="username",
            )
        )
    elif username in taken_usernames:
        errors.append(
            ProfileValidationError(
                code="username_taken",
                message=f"Username '{username}' is already taken",
                field="username",
            )
        )

    errors.extend(_check_option(form.country.strip(), rules.countries, "country", "Country"))
    errors.extend(_check_option(_year(form.year), rules.years, "year", "Year"))
    errors.extend(
        _check_option(
            form.transmission.strip(), rules.transmissions, "transmission", "Transmission"
        )
    )
    errors.extend(_check_option(form.colour.strip(), rules.colours, "colour", "Colour"))

    region = form.uk_region.strip()
    if region and form.country.strip() == rules.region_country and region not in rules.uk_regions:
        errors.append(
            ProfileValidationError(
                code="uk_region_invalid",
                message=f"Unknown region '{region}'",
                field="uk_region",
            )
        )

    post_urls = _string_list(form.instagram_post_urls)
    if len(post_urls) > rules.max_post_urls:
        errors.append(
            ProfileValidationError(
                code="instagram_post_urls_too_many",
                message=f"At most {rules.max_post_urls} Instagram posts are allowed",
                field="instagram_post_urls",
            )
        )
    for url in post_urls:
        if not url.startswith(("http://", "https://")):
            errors.append(
                ProfileValidationError(
                    code="instagram_post_url_invalid_scheme",
                    message="Post URL must start with http:// or https://",
                    field="instagram_post_urls",
                )
            )
            break

    if len(_string_list(form.photo_urls)) > rules.max_photos:
        errors.append(
            ProfileValidationError(
                code="photo_urls_too_many",
                message=f"At most {rules.max_photos} photos are allowed",
                field="photo_urls",
            )
        )

    return errors


def build_profile_payload(
    form: ProfileFormInput,
    rules: ProfileRules = DEFAULT_PROFILE_RULES,
    taken_usernames: frozenset[str] = frozenset(),
) -> ProfilePayloadOutput:
    """
    Shape a registration form into a row for insert/update.

    Blank post URLs are dropped and year becomes an int. The payload is
    handed to the persistence layer; nothing is written here.
    """
    errors = validate_profile_form(form, rules, taken_usernames)
    if errors:
        return ProfilePayloadOutput(payload=None, errors=tuple(errors), success=False)

    payload: dict[str, Any] = {
        "display_name": form.display_name.strip(),
        "username": form.username.strip(),
        "instagram_handle": form.instagram_handle.strip().lstrip("@"),
        "instagram_post_urls": list(_string_list(form.instagram_post_urls)),
        "country": form.country.strip(),
        "uk_region": form.uk_region.strip(),
        "year": _year(form.year),
        "transmission": form.transmission.strip(),
        "colour": form.colour.strip(),
        "mod_list": form.mod_list.strip(),
        "public_profile": form.public_profile,
        "show_on_map": form.show_on_map,
        "photo_urls": list(_string_list(form.photo_urls)),
    }
    if form.user_id:
        payload["user_id"] = form.user_id

    return ProfilePayloadOutput(payload=payload, errors=(), success=True)


def drop_duplicate_usernames(records: Iterable[ProfileRecord]) -> tuple[ProfileRecord, ...]:
    """Keep the first record per username; later duplicates are logged and dropped."""
    seen: set[str] = set()
    kept: list[ProfileRecord] = []
    for record in records:
        if record.username in seen:
            logger.warning(
                "Duplicate username %r on profile %s; keeping the first", record.username, record.id
            )
            continue
        seen.add(record.username)
        kept.append(record)
    return tuple(kept)
