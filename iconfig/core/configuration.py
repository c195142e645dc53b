"""
Configuration capability shared by roots, managers and sections.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .exceptions import MissingRequiredKeyError


class Configuration(ABC):
    """
    Keyed, case-insensitive access to merged configuration values.

    Keys are colon-separated paths such as ``database:host``. Reading a key
    nobody defines returns ``None``; use ``get_required`` when a value must
    be present.
    """

    @abstractmethod
    def __getitem__(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def __setitem__(self, key: str, value: Optional[str]) -> None:
        pass

    @abstractmethod
    def __contains__(self, key: str) -> bool:
        pass

    @abstractmethod
    def get_section(self, key: str) -> "Configuration":
        """Return the section at ``key``. Always succeeds, even for unknown paths."""
        pass

    @abstractmethod
    def get_children(self, parent_path: str = "") -> List["Configuration"]:
        """Immediate child sections of ``parent_path``, relative to this configuration."""
        pass

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self[key]
        return default if value is None else value

    def get_required(self, key: str) -> str:
        """
        Value for ``key``.

        Raises
        ------
        MissingRequiredKeyError
            If the key resolves to nothing or to an explicit null.
        """
        value = self[key]
        if value is None:
            raise MissingRequiredKeyError(key)
        return value
