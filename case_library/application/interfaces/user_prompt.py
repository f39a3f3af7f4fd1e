"""Abstract interface (port) for blocking user interaction."""

from abc import ABC, abstractmethod


class UserPrompt(ABC):
    """Confirmation dialogs and blocking notifications shown by the UI."""

    @abstractmethod
    def confirm(self, message: str) -> bool:
        ...

    @abstractmethod
    def notify(self, message: str) -> None:
        ...
