"""Abstract interface (port) for carrying store protocol requests."""

from abc import ABC, abstractmethod

from case_library.application.schemas.store_protocol import StoreEnvelope, StoreRequest


class StoreTransport(ABC):
    """Delivers one protocol request to the case store and returns its envelope.

    Implementations must not raise: transport failures come back as an
    envelope with ``success=False`` and a message.
    """

    @property
    @abstractmethod
    def mode(self) -> str:
        """Short label for the transport, e.g. ``remote`` or ``local``."""
        ...

    @abstractmethod
    async def send(self, request: StoreRequest) -> StoreEnvelope:
        ...

    async def aclose(self) -> None:
        """Release any resources held by the transport."""
        return None
