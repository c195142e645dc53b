"""
Core configuration components.

This module provides the merge engine for configuration management:
- ConfigurationPath / KeyNormalizer: colon path helpers
- ConfigProvider / ConfigSource: provider contract and factory
- ConfigurationRoot: precedence merge over providers
- ConfigurationManager: root that accepts sources after construction
- ConfigurationSection: path-scoped view
- ConfigurationBuilder: fluent assembly of a root
"""

from .path import ConfigurationPath, KeyNormalizer, SEPARATOR
from .exceptions import (
    ConfigurationError, MissingRequiredKeyError, ProviderLoadError, MalformedConfigError
)
from .configuration import Configuration
from .provider import ConfigProvider
from .source import ConfigSource, ProviderSource
from .section import ConfigurationSection
from .root import ConfigurationRoot
from .builder import ConfigurationBuilder
from .manager import ConfigurationManager

__all__ = [
    # Paths
    'ConfigurationPath',
    'KeyNormalizer',
    'SEPARATOR',

    # Errors
    'ConfigurationError',
    'MissingRequiredKeyError',
    'ProviderLoadError',
    'MalformedConfigError',

    # Providers
    'ConfigProvider',
    'ConfigSource',
    'ProviderSource',

    # Configuration objects
    'Configuration',
    'ConfigurationSection',
    'ConfigurationRoot',
    'ConfigurationBuilder',
    'ConfigurationManager'
]
