from .case_repository import CaseRepository
from .admin_repository import AdminRepository
from .store_transport import StoreTransport
from .user_prompt import UserPrompt

__all__ = [
    "CaseRepository",
    "AdminRepository",
    "StoreTransport",
    "UserPrompt",
]
