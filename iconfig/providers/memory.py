from typing import Mapping, Optional

from iconfig.core.path import KeyNormalizer
from iconfig.core.provider import ConfigProvider
from iconfig.core.source import ConfigSource
from iconfig.reload.change_token import ChangeToken, NEVER_CHANGE_TOKEN


class MemoryConfigProvider(ConfigProvider):
    """
    Provider over a flat in-memory mapping of paths to values.

    The initial data is copied on every ``load``, so writes made through the
    configuration never reach the caller's mapping.
    """

    def __init__(self, initial_data: Optional[Mapping[str, Optional[str]]] = None):
        super().__init__()
        self._initial_data = dict(initial_data or {})

    def load(self) -> None:
        self._replace_data({
            KeyNormalizer.normalize(key): value
            for key, value in self._initial_data.items()
        })

    def get_reload_token(self) -> ChangeToken:
        return NEVER_CHANGE_TOKEN


class MemoryConfigSource(ConfigSource):

    def __init__(self, initial_data: Optional[Mapping[str, Optional[str]]] = None):
        self.initial_data = dict(initial_data or {})

    def build(self) -> MemoryConfigProvider:
        return MemoryConfigProvider(self.initial_data)
