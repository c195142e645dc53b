"""
Configuration specific exceptions.
"""

from typing import Optional


class ConfigurationError(Exception):
    """Base exception for configuration errors."""
    pass


class MissingRequiredKeyError(ConfigurationError, KeyError):
    """Raised when a required configuration value resolves to nothing."""

    def __init__(self, key: str):
        self.key = key
        self.message = f'Configuration value for key "{key}" is required but was not found.'
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ProviderLoadError(ConfigurationError):
    """Raised when a provider cannot populate its store from its source."""

    def __init__(self, provider: str, reason: str, source: Optional[str] = None):
        self.provider = provider
        self.reason = reason
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(f"{provider} failed to load{where}: {reason}")


class MalformedConfigError(ProviderLoadError):
    """Raised when source content cannot be parsed or has the wrong shape."""
    pass
