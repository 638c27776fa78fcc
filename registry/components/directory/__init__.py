"""
Directory component - Profile filtering and filter option lists.
"""

from .component import (
    clear_criteria,
    criteria_for,
    distinct_values,
    filter_options,
    filter_profiles,
    is_unconstrained,
    matches,
    merge_criteria,
    status_criteria,
    update_criteria,
)
from .models import (
    ADMIN_OPTION_FIELDS,
    DIRECTORY_OPTION_FIELDS,
    OPTION_FIELDS,
    AdminCriteria,
    DirectoryCriteria,
    FilterCriteria,
)

__all__ = [
    # Entry points
    "filter_profiles",
    "distinct_values",
    "filter_options",
    "matches",
    # Criteria
    "criteria_for",
    "update_criteria",
    "clear_criteria",
    "merge_criteria",
    "status_criteria",
    "is_unconstrained",
    # Models
    "AdminCriteria",
    "DirectoryCriteria",
    "FilterCriteria",
    "OPTION_FIELDS",
    "DIRECTORY_OPTION_FIELDS",
    "ADMIN_OPTION_FIELDS",
]
