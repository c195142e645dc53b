import threading
from itertools import count
from typing import Dict

from .change_token import (
    ChangeCallback, ChangeToken, TokenRegistration, EMPTY_REGISTRATION
)


class ReloadToken(ChangeToken):
    """
    One-shot change token that is fired explicitly with ``notify_changed``.

    States are pending and fired; fired is terminal. Callbacks run
    synchronously, once each, in the order they were registered.
    """

    def __init__(self):
        self._has_changed = False
        self._callbacks: Dict[int, ChangeCallback] = {}
        self._ids = count()
        self._lock = threading.Lock()

    @property
    def has_changed(self) -> bool:
        return self._has_changed

    @property
    def active_change_callbacks(self) -> bool:
        return True

    def notify_changed(self) -> None:
        """Fire the token. Calling it again after the first time does nothing."""
        with self._lock:
            if self._has_changed:
                return
            self._has_changed = True
            # Callbacks may register or dispose while we iterate
            snapshot = list(self._callbacks.values())
            self._callbacks.clear()

        for callback in snapshot:
            callback()

    def register_callback(self, callback: ChangeCallback) -> TokenRegistration:
        """
        Register ``callback`` to run when the token fires.

        On a token that already fired the callback runs immediately and an
        inert registration is returned.
        """
        with self._lock:
            if not self._has_changed:
                callback_id = next(self._ids)
                self._callbacks[callback_id] = callback
                return TokenRegistration(lambda: self._unregister(callback_id))

        callback()
        return EMPTY_REGISTRATION

    def _unregister(self, callback_id: int) -> None:
        with self._lock:
            self._callbacks.pop(callback_id, None)

    def __repr__(self) -> str:
        state = "fired" if self._has_changed else "pending"
        return f"ReloadToken({state}, callbacks={len(self._callbacks)})"
