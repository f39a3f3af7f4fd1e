"""In-process repositories backing the fallback store.

Entities are copied on the way in and out so nothing outside the
repository can alter stored state by mutating a returned object.
"""

from copy import deepcopy

from case_library.application.interfaces import AdminRepository, CaseRepository
from case_library.domain.entities import AdminUser, VideoCase
from case_library.domain.exceptions import EntityNotFoundError


class InMemoryCaseRepository(CaseRepository):
    """Cases kept in a list in storage order."""

    def __init__(self, cases: list[VideoCase] | None = None):
        self._cases: list[VideoCase] = [deepcopy(case) for case in cases or []]

    def _index_of(self, case_id: str) -> int | None:
        for index, case in enumerate(self._cases):
            if case.id == case_id:
                return index
        return None

    async def get_by_id(self, case_id: str) -> VideoCase | None:
        index = self._index_of(case_id)
        return deepcopy(self._cases[index]) if index is not None else None

    async def get_all(self) -> list[VideoCase]:
        return deepcopy(self._cases)

    async def create(self, case: VideoCase) -> VideoCase:
        self._cases.append(deepcopy(case))
        return deepcopy(case)

    async def update(self, case: VideoCase) -> VideoCase:
        index = self._index_of(case.id)
        if index is None:
            raise EntityNotFoundError("VideoCase", case.id)
        self._cases[index] = deepcopy(case)
        return deepcopy(case)

    async def delete(self, case_id: str) -> bool:
        index = self._index_of(case_id)
        if index is None:
            return False
        del self._cases[index]
        return True


class InMemoryAdminRepository(AdminRepository):
    """Admin list kept in insertion order."""

    def __init__(self, admins: list[AdminUser] | None = None):
        self._admins: list[AdminUser] = [deepcopy(admin) for admin in admins or []]

    async def get_all(self) -> list[AdminUser]:
        return deepcopy(self._admins)

    async def get_by_email(self, email: str) -> AdminUser | None:
        for admin in self._admins:
            if admin.matches(email):
                return deepcopy(admin)
        return None

    async def add(self, admin: AdminUser) -> AdminUser:
        self._admins.append(deepcopy(admin))
        return deepcopy(admin)

    async def delete_by_email(self, email: str) -> bool:
        remaining = [admin for admin in self._admins if not admin.matches(email)]
        deleted = len(remaining) != len(self._admins)
        self._admins = remaining
        return deleted
