"""
Views component - Render-ready view models for directory, admin, home and profile pages.
"""

from .component import (
    badge_edit_view,
    build_card,
    compose_admin_view,
    compose_directory_view,
    compose_home_view,
    compose_profile_view,
    compose_view,
)
from .models import (
    AdminMemberView,
    BadgeEditView,
    BadgeLabel,
    ComposedView,
    DirectoryView,
    HomeView,
    ProfileCard,
    ProfileView,
    ViewContext,
)

__all__ = [
    # Entry points
    "compose_view",
    "compose_directory_view",
    "compose_admin_view",
    "compose_home_view",
    "compose_profile_view",
    "build_card",
    "badge_edit_view",
    # Models
    "AdminMemberView",
    "BadgeEditView",
    "BadgeLabel",
    "ComposedView",
    "DirectoryView",
    "HomeView",
    "ProfileCard",
    "ProfileView",
    "ViewContext",
]
