"""
Badges component - Edit session and catalogue models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

SessionState = Literal["editing", "closed"]


class SessionClosed(RuntimeError):
    """A badge edit session was used after commit or discard."""

    def __init__(self, profile_id: str, operation: str) -> None:
        super().__init__(
            f"Badge session for profile {profile_id!r} is closed; cannot {operation}"
        )
        self.profile_id = profile_id
        self.operation = operation


@dataclass(frozen=True)
class BadgeEditSession:
    """
    Working badge selection for one profile.

    seed is the record's badges when the session opened; badges is the
    current selection. Each transition returns a new session.
    """

    profile_id: str
    seed: tuple[str, ...]
    badges: tuple[str, ...]
    state: SessionState = "editing"

    @property
    def is_open(self) -> bool:
        return self.state == "editing"


@dataclass(frozen=True)
class CommitOutput:
    """Final badge list to hand to the persistence layer."""

    profile_id: str
    badges: tuple[str, ...]
    session: BadgeEditSession


@dataclass(frozen=True)
class BadgeCatalogue:
    """Badges an admin can assign: named ones first, then numbered."""

    named: tuple[str, ...]
    numbered: tuple[str, ...]

    @property
    def labels(self) -> tuple[str, ...]:
        return self.named + self.numbered
