from .change_token import ChangeToken
from .reload_token import ReloadToken


class ChangeNotifier:
    """
    Holds the single current ``ReloadToken`` and rotates it on every reload.
    """

    def __init__(self):
        self._current = ReloadToken()

    def get_change_token(self) -> ChangeToken:
        return self._current

    def on_reload(self) -> None:
        """Install a fresh token, then fire the previous one."""
        previous = self._current
        # Callbacks that query the notifier while firing must see the new token
        self._current = ReloadToken()
        previous.notify_changed()
