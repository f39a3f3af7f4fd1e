from .video_case import VideoCaseModel
from .admin_user import AdminUserModel

__all__ = [
    "VideoCaseModel",
    "AdminUserModel",
]
