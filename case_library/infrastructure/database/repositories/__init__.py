from .case_repository import SQLAlchemyCaseRepository
from .admin_repository import SQLAlchemyAdminRepository

__all__ = [
    "SQLAlchemyCaseRepository",
    "SQLAlchemyAdminRepository",
]
