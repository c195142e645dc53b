"""
Change token abstractions.

A change token is a one-shot notification: it fires at most once, after
which ``has_changed`` stays ``True`` forever. Consumers that want to keep
listening must fetch a fresh token and register again after every firing.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional


ChangeCallback = Callable[[], None]


class TokenRegistration:
    """
    Handle returned by ``ChangeToken.register_callback``.

    Disposing it before the token fires guarantees the callback never runs.
    Disposing more than once is harmless.
    """

    __slots__ = ("_dispose",)

    def __init__(self, dispose: Optional[Callable[[], None]] = None):
        self._dispose = dispose

    def dispose(self) -> None:
        dispose, self._dispose = self._dispose, None
        if dispose is not None:
            dispose()

    def __enter__(self) -> "TokenRegistration":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()


EMPTY_REGISTRATION = TokenRegistration()


class ChangeToken(ABC):
    """Abstract interface for one-shot change notifications."""

    @property
    @abstractmethod
    def has_changed(self) -> bool:
        """True once the token has fired."""
        pass

    @property
    @abstractmethod
    def active_change_callbacks(self) -> bool:
        """True when the token will actively invoke registered callbacks."""
        pass

    @abstractmethod
    def register_callback(self, callback: ChangeCallback) -> TokenRegistration:
        """Register ``callback`` to run when the token fires."""
        pass


class NeverChangeToken(ChangeToken):
    """
    Token for providers without change detection.

    It never fires and never calls the callbacks handed to it.
    """

    @property
    def has_changed(self) -> bool:
        return False

    @property
    def active_change_callbacks(self) -> bool:
        return False

    def register_callback(self, callback: ChangeCallback) -> TokenRegistration:
        return EMPTY_REGISTRATION

    def __repr__(self) -> str:
        return "NeverChangeToken()"


NEVER_CHANGE_TOKEN = NeverChangeToken()
