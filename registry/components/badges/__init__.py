"""
Badges component - Badge edit sessions and the badge catalogue.
"""

from .component import (
    build_catalogue,
    commit,
    discard,
    has_changes,
    is_selected,
    open_session,
    toggle,
)
from .models import (
    BadgeCatalogue,
    BadgeEditSession,
    CommitOutput,
    SessionClosed,
    SessionState,
)

__all__ = [
    # Entry points
    "open_session",
    "toggle",
    "commit",
    "discard",
    "is_selected",
    "has_changes",
    "build_catalogue",
    # Models
    "BadgeCatalogue",
    "BadgeEditSession",
    "CommitOutput",
    "SessionClosed",
    "SessionState",
]
