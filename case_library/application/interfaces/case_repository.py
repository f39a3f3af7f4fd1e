"""Abstract repository interface (port) for VideoCase persistence."""

from abc import ABC, abstractmethod

from case_library.domain.entities import VideoCase


class CaseRepository(ABC):
    """Port for case persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, case_id: str) -> VideoCase | None:
        """Retrieve a single case by its id."""
        ...

    @abstractmethod
    async def get_all(self) -> list[VideoCase]:
        """Retrieve every case in storage order."""
        ...

    @abstractmethod
    async def create(self, case: VideoCase) -> VideoCase:
        """Persist a new case and return it."""
        ...

    @abstractmethod
    async def update(self, case: VideoCase) -> VideoCase:
        """Replace an existing case. Raises EntityNotFoundError if unknown."""
        ...

    @abstractmethod
    async def delete(self, case_id: str) -> bool:
        """Delete a case. Returns True if deleted, False if not found."""
        ...
