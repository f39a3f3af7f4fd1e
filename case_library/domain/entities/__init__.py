from .video_case import (
    VideoCase,
    SUGGESTED_CATEGORIES,
    SUGGESTED_ROBOT_TYPES,
    MIN_RATING,
    MAX_RATING,
)
from .admin_user import AdminUser, UserProfile, is_admin_email, normalize_email
from .filter_state import FilterState, FilterOptions
from .store_result import StoreResult

__all__ = [
    "VideoCase",
    "SUGGESTED_CATEGORIES",
    "SUGGESTED_ROBOT_TYPES",
    "MIN_RATING",
    "MAX_RATING",
    "AdminUser",
    "UserProfile",
    "is_admin_email",
    "normalize_email",
    "FilterState",
    "FilterOptions",
    "StoreResult",
]
