from typing import Any

import yaml

from iconfig.core.exceptions import MalformedConfigError
from iconfig.core.source import ConfigSource
from .file import FileConfigProvider


class YamlFileConfigProvider(FileConfigProvider):
    """
    Provider that reads a YAML file with ``yaml.safe_load``.

    An empty document loads as an empty store. Scalars are stored with
    ``str``, so YAML booleans come out as ``'True'``/``'False'``.
    """

    def parse(self, content: str) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise MalformedConfigError(
                type(self).__name__, f"invalid YAML: {e}", source=str(self.path)
            ) from e


class YamlFileConfigSource(ConfigSource):

    def __init__(self, path, optional: bool = False, reload_on_change: bool = False):
        self.path = path
        self.optional = optional
        self.reload_on_change = reload_on_change

    def build(self) -> YamlFileConfigProvider:
        return YamlFileConfigProvider(self.path, self.optional, self.reload_on_change)
