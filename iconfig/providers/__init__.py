"""
Concrete configuration providers and their sources.

- MemoryConfigProvider: flat in-memory mapping
- MapConfigProvider: nested mapping flattened into colon paths
- JsonStringConfigProvider / JsonFileConfigProvider: JSON documents
- YamlFileConfigProvider: YAML documents
- EnvironmentConfigProvider: process environment variables
"""

from .mapping import MapConfigProvider, MapConfigSource, flatten
from .memory import MemoryConfigProvider, MemoryConfigSource
from .file import FileConfigProvider
from .json_provider import (
    JsonStringConfigProvider, JsonStringConfigSource,
    JsonFileConfigProvider, JsonFileConfigSource
)
from .yaml_provider import YamlFileConfigProvider, YamlFileConfigSource
from .environment import EnvironmentConfigProvider, EnvironmentConfigSource

__all__ = [
    'flatten',
    'MapConfigProvider',
    'MapConfigSource',
    'MemoryConfigProvider',
    'MemoryConfigSource',
    'FileConfigProvider',
    'JsonStringConfigProvider',
    'JsonStringConfigSource',
    'JsonFileConfigProvider',
    'JsonFileConfigSource',
    'YamlFileConfigProvider',
    'YamlFileConfigSource',
    'EnvironmentConfigProvider',
    'EnvironmentConfigSource'
]
