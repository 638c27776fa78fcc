"""
Profiles component - Row normalization, display fields and registration payloads.
"""

from .component import (
    build_profile_payload,
    drop_duplicate_usernames,
    normalize_row,
    normalize_rows,
    validate_profile_form,
)
from .display import (
    badge_tone,
    instagram_post_id,
    instagram_profile_url,
    location_label,
    primary_image,
    profile_path,
    vehicle_summary,
)
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

__all__ = [
    # Entry points
    "normalize_row",
    "normalize_rows",
    "build_profile_payload",
    "drop_duplicate_usernames",
    "validate_profile_form",
    # Display
    "badge_tone",
    "instagram_post_id",
    "instagram_profile_url",
    "location_label",
    "primary_image",
    "profile_path",
    "vehicle_summary",
    # Models
    "LIST_FIELDS",
    "REQUIRED_FIELDS",
    "NormalizeBatchOutput",
    "NormalizeResult",
    "ProfileFormInput",
    "ProfilePayloadOutput",
    "ProfileValidationError",
    "RejectedRow",
]
