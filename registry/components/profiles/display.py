"""
Profiles component - Derived display fields.

Pure helpers used by the view layer to render cards and profile pages.
"""

from __future__ import annotations

from registry.domain.entities import REGION_COUNTRY, BadgeTone, ProfileRecord

INSTAGRAM_BASE = "https://www.instagram.com"

_NAMED_TONES: dict[str, BadgeTone] = {
    "Owner / Creator": "owner",
    "Community Host": "host",
    "Club Supporter": "supporter",
}


def instagram_post_id(url: str) -> str | None:
    """Extract the post id from ".../p/<id>/..." URLs."""
    if "/p/" not in url:
        return None
    post_id = url.split("/p/", 1)[1].split("/", 1)[0].split("?", 1)[0]
    return post_id or None


def primary_image(record: ProfileRecord) -> str | None:
    """
    Card image for a profile.

    First uploaded photo, else the media URL of the first Instagram post,
    else None.
    """
    if record.photo_urls:
        return record.photo_urls[0]
    if record.instagram_post_urls:
        post_id = instagram_post_id(record.instagram_post_urls[0])
        if post_id:
            return f"{INSTAGRAM_BASE}/p/{post_id}/media/?size=m"
    return None


def instagram_profile_url(record: ProfileRecord) -> str | None:
    if not record.instagram_handle:
        return None
    return f"{INSTAGRAM_BASE}/{record.instagram_handle}"


def location_label(record: ProfileRecord, region_country: str = REGION_COUNTRY) -> str:
    region = record.effective_region(region_country)
    if region:
        return f"{record.country} • {region}"
    return record.country


def vehicle_summary(record: ProfileRecord) -> str:
    return f"{record.year} • {record.colour} • {record.transmission}"


def badge_tone(label: str) -> BadgeTone:
    if label in _NAMED_TONES:
        return _NAMED_TONES[label]
    if label.startswith("#"):
        return "numbered"
    return "default"


def profile_path(record: ProfileRecord) -> str:
    return f"/member/{record.username}"
