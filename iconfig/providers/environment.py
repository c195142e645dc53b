import os
from typing import Mapping, Optional

from iconfig.core.path import KeyNormalizer, SEPARATOR
from iconfig.core.provider import ConfigProvider
from iconfig.core.source import ConfigSource
from iconfig.reload.change_token import ChangeToken, NEVER_CHANGE_TOKEN


class EnvironmentConfigProvider(ConfigProvider):
    """
    Provider over environment variables.

    A snapshot of ``environ`` (``os.environ`` by default) is taken on every
    ``load``. With a ``prefix`` only matching variables (case-insensitive)
    are kept and the prefix is stripped. A double underscore maps to the
    path separator, so ``APP__DATABASE__HOST`` with prefix ``APP_`` is
    stored as ``database:host``.
    """

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None):
        super().__init__()
        self.prefix = prefix
        self._environ = environ

    def load(self) -> None:
        environ = dict(os.environ if self._environ is None else self._environ)
        prefix = KeyNormalizer.normalize(self.prefix)

        data = {}
        for name, value in environ.items():
            key = KeyNormalizer.normalize(name)
            if prefix:
                if not key.startswith(prefix):
                    continue
                key = key[len(prefix):]
            if key.startswith("_"):
                key = key[1:]
            key = key.replace("__", SEPARATOR)
            if key:
                data[key] = value

        self._replace_data(data)

    def get_reload_token(self) -> ChangeToken:
        return NEVER_CHANGE_TOKEN


class EnvironmentConfigSource(ConfigSource):

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        self.environ = environ

    def build(self) -> EnvironmentConfigProvider:
        return EnvironmentConfigProvider(self.prefix, self.environ)
