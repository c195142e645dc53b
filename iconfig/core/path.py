"""
Colon-delimited configuration path helpers.

All helpers are pure and lowercase the segments they return, so paths built
here compare equal regardless of the casing callers used.
"""

from typing import Iterable, List

SEPARATOR = ":"


class KeyNormalizer:
    """Canonical case-insensitive key comparison."""

    @staticmethod
    def normalize(key: str) -> str:
        return key.lower()

    @staticmethod
    def equals(a: str, b: str) -> bool:
        return a.lower() == b.lower()


class ConfigurationPath:
    """
    Static helpers for building and splitting configuration paths.

    ``database:primary:host`` has the section key ``host`` and the parent
    path ``database:primary``.
    """

    separator = SEPARATOR

    @staticmethod
    def combine(path1: str, path2: str) -> str:
        """Join two path fragments, skipping whichever one is empty."""
        if not path1:
            return path2
        if not path2:
            return path1
        return f"{path1.lower()}{SEPARATOR}{path2.lower()}"

    @staticmethod
    def combine_all(paths: Iterable[str]) -> str:
        return SEPARATOR.join(p.lower() for p in paths if p)

    @staticmethod
    def get_section_key(path: str) -> str:
        """Last segment of ``path``, or the whole path when it has no separator."""
        if not path:
            return ""
        index = path.rfind(SEPARATOR)
        if index < 0:
            return path.lower()
        return path[index + 1:].lower()

    @staticmethod
    def get_parent_path(path: str) -> str:
        """Everything before the last separator; empty for top-level keys."""
        if not path:
            return ""
        index = path.rfind(SEPARATOR)
        if index < 0:
            return ""
        return path[:index].lower()

    @staticmethod
    def get_segments(path: str) -> List[str]:
        if not path:
            return []
        return path.lower().split(SEPARATOR)
