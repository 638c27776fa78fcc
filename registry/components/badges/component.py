"""
Badges component - Badge selection state for one profile.

Two states: "editing" after open_session(), "closed" after commit() or
discard(). Sessions are values; the source record is never touched.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from registry.domain.entities import ProfileRecord
from registry.rules.models import BadgeRules

from .models import BadgeCatalogue, BadgeEditSession, CommitOutput, SessionClosed

logger = logging.getLogger(__name__)


def _require_open(session: BadgeEditSession, operation: str) -> None:
    if not session.is_open:
        raise SessionClosed(session.profile_id, operation)


def open_session(record: ProfileRecord) -> BadgeEditSession:
    """Start editing the record's badges."""
    seed = tuple(record.badges)
    return BadgeEditSession(profile_id=record.id, seed=seed, badges=seed)


def toggle(session: BadgeEditSession, label: str) -> BadgeEditSession:
    """Remove label if selected, otherwise append it."""
    _require_open(session, "toggle")
    if not label or not label.strip():
        msg = "Badge label must be a non-empty string"
        raise ValueError(msg)

    if label in session.badges:
        badges = tuple(b for b in session.badges if b != label)
    else:
        badges = session.badges + (label,)
    return replace(session, badges=badges)


def is_selected(session: BadgeEditSession, label: str) -> bool:
    return label in session.badges


def has_changes(session: BadgeEditSession) -> bool:
    return session.badges != session.seed


def commit(session: BadgeEditSession) -> CommitOutput:
    """Close the session and return the badge list to persist."""
    _require_open(session, "commit")
    logger.info(
        "Committing %d badge(s) for profile %s", len(session.badges), session.profile_id
    )
    return CommitOutput(
        profile_id=session.profile_id,
        badges=session.badges,
        session=replace(session, state="closed"),
    )


def discard(session: BadgeEditSession) -> BadgeEditSession:
    _require_open(session, "discard")
    return replace(session, state="closed")


def build_catalogue(rules: BadgeRules) -> BadgeCatalogue:
    """
    Badge labels from the rules file.

    numbered_count=3, prefix "#", width 3 -> "#001", "#002", "#003".
    """
    numbered = tuple(
        f"{rules.numbered_prefix}{n:0{rules.numbered_width}d}"
        for n in range(1, rules.numbered_count + 1)
    )
    return BadgeCatalogue(named=tuple(rules.named), numbered=numbered)
