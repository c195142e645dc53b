"""
Base class for providers backed by a file on disk.
"""

from abc import abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from iconfig.core.exceptions import MalformedConfigError, ProviderLoadError
from iconfig.core.provider import ConfigProvider
from iconfig.reload.change_token import ChangeToken, NEVER_CHANGE_TOKEN
from .mapping import flatten


class FileConfigProvider(ConfigProvider):
    """
    File-based configuration provider.

    Subclasses parse the file text in ``parse``; the base class handles
    missing files, flattening and change detection.

    When ``reload_on_change`` is set, the provider remembers the file's
    modification time after each load and ``check_for_changes`` reloads and
    fires the provider's reload token when the file was modified, created
    or removed. Polling is left to the caller.
    """

    def __init__(self, path: Union[str, Path], optional: bool = False,
                 reload_on_change: bool = False):
        super().__init__()
        self.path = Path(path)
        self.optional = optional
        self.reload_on_change = reload_on_change
        self._last_modified: Optional[float] = None

    @abstractmethod
    def parse(self, content: str) -> Any:
        """Parse file text into a nested structure."""
        pass

    def stringify(self, value: Any) -> str:
        return str(value)

    def load(self) -> None:
        content = self._read()
        if content is None:
            self._replace_data({})
            self._last_modified = None
            return

        document = self.parse(content)
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise MalformedConfigError(
                type(self).__name__,
                f"root must be an object, got {type(document).__name__}",
                source=str(self.path),
            )

        data: Dict[str, Optional[str]] = flatten(document, stringify=self.stringify, keep_empty=True)
        self._replace_data(data)

    def get_reload_token(self) -> ChangeToken:
        if not self.reload_on_change:
            return NEVER_CHANGE_TOKEN
        return super().get_reload_token()

    def check_for_changes(self) -> bool:
        """
        Reload the file if it changed since the last load.

        Returns
        -------
        bool
            True when the file changed and the provider reloaded
        """
        if not self.reload_on_change:
            return False

        if self._current_mtime() == self._last_modified:
            return False

        self.logger.info("Configuration file changed", path=str(self.path))
        self.load()
        self.on_reload()
        return True

    def _read(self) -> Optional[str]:
        if not self.path.exists():
            if self.optional:
                return None
            raise ProviderLoadError(
                type(self).__name__,
                "required configuration file not found",
                source=str(self.path),
            )

        try:
            mtime = self.path.stat().st_mtime
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise MalformedConfigError(
                type(self).__name__, f"invalid UTF-8: {e}", source=str(self.path)
            ) from e
        except OSError as e:
            raise ProviderLoadError(type(self).__name__, str(e), source=str(self.path)) from e

        self._last_modified = mtime
        return content

    def _current_mtime(self) -> Optional[float]:
        try:
            return self.path.stat().st_mtime
        except FileNotFoundError:
            return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self.path)!r}, optional={self.optional})"
