"""
JSON configuration providers, from a string or from a file.
"""

import json
from typing import Any

from iconfig.core.exceptions import MalformedConfigError
from iconfig.core.provider import ConfigProvider
from iconfig.core.source import ConfigSource
from iconfig.reload.change_token import ChangeToken, NEVER_CHANGE_TOKEN
from .file import FileConfigProvider
from .mapping import flatten


def stringify_json(value: Any) -> str:
    """Stringify a JSON scalar the way it is spelled in JSON."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_json(content: str, provider: str, source: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise MalformedConfigError(provider, f"invalid JSON: {e}", source=source) from e


class JsonStringConfigProvider(ConfigProvider):
    """
    Provider that parses JSON text held in memory.

    The document root must be a JSON object. Nested objects and arrays are
    flattened into colon-separated keys; empty ones are kept as null section
    markers.
    """

    def __init__(self, json_content: str):
        super().__init__()
        self._json_content = json_content

    def load(self) -> None:
        document = parse_json(self._json_content, type(self).__name__, "<string>")
        if not isinstance(document, dict):
            raise MalformedConfigError(
                type(self).__name__,
                f"root must be a JSON object, got {type(document).__name__}",
                source="<string>",
            )
        self._replace_data(flatten(document, stringify=stringify_json, keep_empty=True))

    def get_reload_token(self) -> ChangeToken:
        return NEVER_CHANGE_TOKEN


class JsonStringConfigSource(ConfigSource):

    def __init__(self, json_content: str):
        self.json_content = json_content

    def build(self) -> JsonStringConfigProvider:
        return JsonStringConfigProvider(self.json_content)


class JsonFileConfigProvider(FileConfigProvider):
    """Provider that reads a JSON file."""

    def parse(self, content: str) -> Any:
        document = parse_json(content, type(self).__name__, str(self.path))
        if document is None:
            # ``null`` is not an empty document
            raise MalformedConfigError(
                type(self).__name__, "root must be a JSON object, got null", source=str(self.path)
            )
        return document

    def stringify(self, value: Any) -> str:
        return stringify_json(value)


class JsonFileConfigSource(ConfigSource):

    def __init__(self, path, optional: bool = False, reload_on_change: bool = False):
        self.path = path
        self.optional = optional
        self.reload_on_change = reload_on_change

    def build(self) -> JsonFileConfigProvider:
        return JsonFileConfigProvider(self.path, self.optional, self.reload_on_change)
