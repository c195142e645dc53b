"""
Configuration provider base class.

A provider owns one flat store of normalized, colon-separated keys mapped to
optional string values. Concrete providers flatten their source (JSON, nested
mappings, environment variables, ...) into this store inside ``load``.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Tuple
import threading

from iconfig.logger import get_iconfig_logger
from iconfig.reload.change_token import ChangeToken
from iconfig.reload.reload_token import ReloadToken
from .path import KeyNormalizer, SEPARATOR


class ConfigProvider(ABC):
    """
    Abstract base class for configuration providers.

    Subclasses must implement ``load``, which clears and fully repopulates
    ``data``. A provider that detects changes in its source reloads its store
    and then calls ``on_reload`` to fire its current reload token.

    A stored value of ``None`` is an explicit null and is distinct from the
    key being absent; ``try_get`` tells the two apart, ``get`` does not.
    """

    def __init__(self):
        self.data: Dict[str, Optional[str]] = {}
        self.logger = get_iconfig_logger().bind(component=type(self).__name__)
        self._lock = threading.RLock()
        self._reload_token = ReloadToken()

    @abstractmethod
    def load(self) -> None:
        """Clear and repopulate ``data`` from the source."""
        pass

    def get(self, key: str) -> Optional[str]:
        """Value for ``key``, ``None`` when absent or explicitly null."""
        with self._lock:
            return self.data.get(KeyNormalizer.normalize(key))

    def try_get(self, key: str) -> Tuple[bool, Optional[str]]:
        """Return ``(found, value)`` for ``key``."""
        normalized = KeyNormalizer.normalize(key)
        with self._lock:
            if normalized in self.data:
                return True, self.data[normalized]
            return False, None

    def set(self, key: str, value: Optional[str]) -> None:
        with self._lock:
            self.data[KeyNormalizer.normalize(key)] = value

    def contains(self, key: str) -> bool:
        with self._lock:
            return KeyNormalizer.normalize(key) in self.data

    def get_reload_token(self) -> ChangeToken:
        """Current reload token; fires the next time this provider reloads itself."""
        return self._reload_token

    def get_child_keys(self, earlier_keys: Iterable[str],
                       parent_path: Optional[str] = None) -> List[str]:
        """
        Immediate child segments under ``parent_path`` found in this store.

        Segments already present in ``earlier_keys`` are left out, so a root
        can walk providers from highest to lowest precedence and report each
        child name once. Top-level segments are returned when
        ``parent_path`` is empty or ``None``.
        """
        seen = set(earlier_keys)
        prefix = f"{parent_path.lower()}{SEPARATOR}" if parent_path else ""

        result: List[str] = []
        with self._lock:
            keys = list(self.data.keys())

        for key in keys:
            if prefix and not key.startswith(prefix):
                continue
            segment = key[len(prefix):].split(SEPARATOR, 1)[0]
            if segment and segment not in seen:
                seen.add(segment)
                result.append(segment)
        return result

    def on_reload(self) -> None:
        """Rotate this provider's token and fire the previous one."""
        previous = self._reload_token
        self._reload_token = ReloadToken()
        previous.notify_changed()

    def _replace_data(self, data: Dict[str, Optional[str]]) -> None:
        """Swap in a freshly built store so readers never see a half-loaded one."""
        with self._lock:
            self.data.clear()
            self.data.update(data)
        self.logger.debug("Provider loaded", keys=len(data))

    @staticmethod
    def normalize_key(key: str) -> str:
        return KeyNormalizer.normalize(key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={len(self.data)})"
