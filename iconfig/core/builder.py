"""
Fluent builder that assembles a ConfigurationRoot from sources.
"""

from typing import Any, List, Mapping, Optional, Tuple

from iconfig.logger import get_iconfig_logger
from .root import ConfigurationRoot
from .source import ConfigSource


class SourceRegistrationMixin:
    """
    ``add_*`` shortcuts shared by the builder and the manager.

    Each shortcut wraps its arguments in the matching source and passes it
    to ``add``; the return value is whatever ``add`` returns.
    """

    def add(self, source: ConfigSource):
        raise NotImplementedError("Subclasses must implement add()")

    def add_in_memory(self, initial_data: Optional[Mapping[str, Optional[str]]] = None):
        """Add flat ``path -> value`` pairs, e.g. ``{'database:host': 'localhost'}``."""
        from iconfig.providers.memory import MemoryConfigSource
        return self.add(MemoryConfigSource(initial_data))

    def add_map(self, mapping: Mapping[str, Any]):
        """Add a nested mapping, flattened into colon-separated keys."""
        from iconfig.providers.mapping import MapConfigSource
        return self.add(MapConfigSource(mapping))

    def add_json_string(self, json_content: str):
        from iconfig.providers.json_provider import JsonStringConfigSource
        return self.add(JsonStringConfigSource(json_content))

    def add_json_file(self, path, optional: bool = False, reload_on_change: bool = False):
        """
        Add a JSON file.

        A missing file fails the load unless ``optional`` is set, in which
        case the source contributes nothing.
        """
        from iconfig.providers.json_provider import JsonFileConfigSource
        return self.add(JsonFileConfigSource(path, optional, reload_on_change))

    def add_yaml_file(self, path, optional: bool = False, reload_on_change: bool = False):
        from iconfig.providers.yaml_provider import YamlFileConfigSource
        return self.add(YamlFileConfigSource(path, optional, reload_on_change))

    def add_environment_variables(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None):
        """
        Add environment variables, optionally filtered by ``prefix``.

        ``environ`` replaces ``os.environ`` as the variable snapshot.
        """
        from iconfig.providers.environment import EnvironmentConfigSource
        return self.add(EnvironmentConfigSource(prefix, environ))


class ConfigurationBuilder(SourceRegistrationMixin):
    """
    Collects configuration sources in order and builds a ``ConfigurationRoot``.

    The last source added wins when several define the same key::

        config = (ConfigurationBuilder()
                  .add_in_memory({'app:name': 'Orders'})
                  .add_json_file('settings.json')
                  .add_json_file('settings.production.json', optional=True)
                  .add_environment_variables(prefix='APP_')
                  .build())
    """

    def __init__(self):
        self.logger = get_iconfig_logger().bind(component="ConfigurationBuilder")
        self._sources: List[ConfigSource] = []

    @property
    def sources(self) -> Tuple[ConfigSource, ...]:
        return tuple(self._sources)

    def add(self, source: ConfigSource) -> "ConfigurationBuilder":
        self._sources.append(source)
        return self

    def build(self) -> ConfigurationRoot:
        """
        Build every source in registration order and load the resulting providers.

        Raises
        ------
        ProviderLoadError
            If any provider fails to load.
        """
        providers = [source.build() for source in self._sources]
        self.logger.debug("Building configuration", sources=len(providers))
        return ConfigurationRoot(providers)
