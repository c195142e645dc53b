"""
Change notification primitives.

- ChangeToken / TokenRegistration: one-shot notification interface
- ReloadToken: explicitly fired token
- NeverChangeToken: token that never fires
- ChangeNotifier: rotates a current ReloadToken on every reload
"""

from .change_token import (
    ChangeToken, TokenRegistration, NeverChangeToken, ChangeCallback,
    EMPTY_REGISTRATION, NEVER_CHANGE_TOKEN
)
from .reload_token import ReloadToken
from .notifier import ChangeNotifier

__all__ = [
    'ChangeToken',
    'ChangeCallback',
    'TokenRegistration',
    'NeverChangeToken',
    'ReloadToken',
    'ChangeNotifier',
    'EMPTY_REGISTRATION',
    'NEVER_CHANGE_TOKEN'
]
