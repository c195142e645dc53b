"""
Layered configuration with precedence merging and reload notification.

Values from several sources (in-memory data, nested mappings, JSON and YAML
files, environment variables) are merged into one case-insensitive,
colon-separated key space. The source registered last wins.
"""

from .core import (
    ConfigurationPath, KeyNormalizer, SEPARATOR,
    ConfigurationError, MissingRequiredKeyError, ProviderLoadError, MalformedConfigError,
    Configuration, ConfigProvider, ConfigSource, ProviderSource,
    ConfigurationSection, ConfigurationRoot, ConfigurationBuilder, ConfigurationManager
)

from .reload import (
    ChangeToken, TokenRegistration, NeverChangeToken, ReloadToken, ChangeNotifier
)

from .providers import (
    MemoryConfigProvider, MemoryConfigSource,
    MapConfigProvider, MapConfigSource,
    FileConfigProvider,
    JsonStringConfigProvider, JsonStringConfigSource,
    JsonFileConfigProvider, JsonFileConfigSource,
    YamlFileConfigProvider, YamlFileConfigSource,
    EnvironmentConfigProvider, EnvironmentConfigSource
)

from .settings import LoggingSettings
from .logger import get_iconfig_logger, init_logger, setup_logging

__version__ = "0.1.0"


# Convenience functions
def configuration_from_mapping(mapping) -> ConfigurationRoot:
    """Build a root over one nested mapping."""
    return ConfigurationBuilder().add_map(mapping).build()


def on_change(config, callback) -> TokenRegistration:
    """
    Call ``callback`` after every reload of ``config``, not just the next one.

    Reload tokens fire once; this re-registers on the fresh token each time.
    Disposing the returned registration stops further calls.
    """
    state = {'registration': None, 'active': True}

    def fire():
        if not state['active']:
            return
        state['registration'] = config.get_reload_token().register_callback(fire)
        callback()

    def dispose():
        state['active'] = False
        state['registration'].dispose()

    state['registration'] = config.get_reload_token().register_callback(fire)
    return TokenRegistration(dispose)


__all__ = [
    # Core
    'ConfigurationPath',
    'KeyNormalizer',
    'SEPARATOR',
    'ConfigurationError',
    'MissingRequiredKeyError',
    'ProviderLoadError',
    'MalformedConfigError',
    'Configuration',
    'ConfigProvider',
    'ConfigSource',
    'ProviderSource',
    'ConfigurationSection',
    'ConfigurationRoot',
    'ConfigurationBuilder',
    'ConfigurationManager',

    # Reload
    'ChangeToken',
    'TokenRegistration',
    'NeverChangeToken',
    'ReloadToken',
    'ChangeNotifier',

    # Providers
    'MemoryConfigProvider',
    'MemoryConfigSource',
    'MapConfigProvider',
    'MapConfigSource',
    'FileConfigProvider',
    'JsonStringConfigProvider',
    'JsonStringConfigSource',
    'JsonFileConfigProvider',
    'JsonFileConfigSource',
    'YamlFileConfigProvider',
    'YamlFileConfigSource',
    'EnvironmentConfigProvider',
    'EnvironmentConfigSource',

    # Settings and logging
    'LoggingSettings',
    'get_iconfig_logger',
    'init_logger',
    'setup_logging',

    # Convenience functions
    'configuration_from_mapping',
    'on_change'
]
