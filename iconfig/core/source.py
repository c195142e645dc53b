from abc import ABC, abstractmethod

from .provider import ConfigProvider


class ConfigSource(ABC):
    """
    Factory for a configuration provider.

    A builder or manager calls ``build`` once per registration; the returned
    provider is loaded by the root that receives it.
    """

    @abstractmethod
    def build(self) -> ConfigProvider:
        pass


class ProviderSource(ConfigSource):
    """Source that hands back an already existing provider instance."""

    def __init__(self, provider: ConfigProvider):
        self.provider = provider

    def build(self) -> ConfigProvider:
        return self.provider
