"""Abstract repository interface (port) for AdminUser persistence."""

from abc import ABC, abstractmethod

from case_library.domain.entities import AdminUser


class AdminRepository(ABC):
    """Port for admin list persistence. Email lookups are case-insensitive."""

    @abstractmethod
    async def get_all(self) -> list[AdminUser]:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> AdminUser | None:
        ...

    @abstractmethod
    async def add(self, admin: AdminUser) -> AdminUser:
        ...

    @abstractmethod
    async def delete_by_email(self, email: str) -> bool:
        """Delete an admin. Returns True if deleted, False if not found."""
        ...
