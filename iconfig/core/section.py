from typing import List, Optional

from .configuration import Configuration
from .exceptions import MissingRequiredKeyError
from .path import ConfigurationPath


class ConfigurationSection(Configuration):
    """
    Path-scoped view over a root or manager.

    A section stores nothing but its owner and its path; every read and
    write is forwarded to the owner with the path prepended.
    """

    def __init__(self, owner: Configuration, path: str):
        self._owner = owner
        self._path = path

    @property
    def key(self) -> str:
        """Last segment of the section path."""
        return ConfigurationPath.get_section_key(self._path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def value(self) -> Optional[str]:
        """Value stored at the section path itself."""
        return self._owner[self._path]

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self._owner[self._path] = value

    def __getitem__(self, key: str) -> Optional[str]:
        return self._owner[ConfigurationPath.combine(self._path, key)]

    def __setitem__(self, key: str, value: Optional[str]) -> None:
        self._owner[ConfigurationPath.combine(self._path, key)] = value

    def __contains__(self, key: str) -> bool:
        return ConfigurationPath.combine(self._path, key) in self._owner

    def exists(self) -> bool:
        """True when the section has a value or any children."""
        return self.value is not None or bool(self.get_children())

    def get_section(self, key: str) -> "ConfigurationSection":
        return self._owner.get_section(ConfigurationPath.combine(self._path, key))

    def get_children(self, parent_path: str = "") -> List["ConfigurationSection"]:
        return self._owner.get_children(ConfigurationPath.combine(self._path, parent_path))

    def get_required(self, key: str) -> str:
        full_key = ConfigurationPath.combine(self._path, key)
        value = self._owner[full_key]
        if value is None:
            raise MissingRequiredKeyError(full_key)
        return value

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConfigurationSection):
            return NotImplemented
        return self._owner is other._owner and self._path == other._path

    def __hash__(self) -> int:
        return hash((id(self._owner), self._path))

    def __repr__(self) -> str:
        return f"ConfigurationSection(path={self._path!r})"
