"""
Configuration root: precedence merge over an ordered list of providers.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from iconfig.logger import get_iconfig_logger
from iconfig.reload.change_token import ChangeToken, TokenRegistration
from iconfig.reload.notifier import ChangeNotifier
from .configuration import Configuration
from .path import ConfigurationPath, KeyNormalizer
from .provider import ConfigProvider
from .section import ConfigurationSection


class ConfigurationRoot(Configuration):
    """
    Merged view over an ordered sequence of providers.

    Providers are kept in registration order and the last one registered
    has the highest precedence. A read returns the value of the
    highest-precedence provider whose store contains the key, even when that
    value is an explicit null. A write goes to the highest-precedence
    provider that already owns the key, otherwise to the last provider.

    Every provider is loaded before the constructor returns. The root
    listens on each provider's reload token and re-subscribes after every
    firing, so a provider reloading itself surfaces through
    ``get_reload_token``.

    Parameters
    ----------
    providers : Iterable[ConfigProvider]
        Providers in registration order.
    load_providers : bool, optional
        Set to False to compose providers that are already loaded, keeping
        values written into them at runtime (default: True).

    Raises
    ------
    ProviderLoadError
        If any provider fails to load. No root is produced in that case.
    """

    def __init__(self, providers: Iterable[ConfigProvider], load_providers: bool = True):
        self.logger = get_iconfig_logger().bind(component="ConfigurationRoot")
        self._providers: Tuple[ConfigProvider, ...] = tuple(providers)
        self._notifier = ChangeNotifier()
        self._registrations: Dict[int, TokenRegistration] = {}
        self._disposed = False

        if load_providers:
            for provider in self._providers:
                self._load_provider(provider)

        for index, provider in enumerate(self._providers):
            self._wire_reload_callback(index, provider)

        self.logger.info("Configuration root built", providers=len(self._providers))

    @property
    def providers(self) -> Tuple[ConfigProvider, ...]:
        return self._providers

    def __getitem__(self, key: str) -> Optional[str]:
        normalized = KeyNormalizer.normalize(key)
        for provider in reversed(self._providers):
            found, value = provider.try_get(normalized)
            if found:
                return value
        return None

    def __setitem__(self, key: str, value: Optional[str]) -> None:
        normalized = KeyNormalizer.normalize(key)
        for provider in reversed(self._providers):
            if provider.contains(normalized):
                provider.set(normalized, value)
                return

        if not self._providers:
            self.logger.warning("No providers registered, write dropped", key=normalized)
            return
        self._providers[-1].set(normalized, value)

    def __contains__(self, key: str) -> bool:
        normalized = KeyNormalizer.normalize(key)
        return any(provider.contains(normalized) for provider in self._providers)

    def get_section(self, key: str) -> ConfigurationSection:
        return ConfigurationSection(self, KeyNormalizer.normalize(key))

    def get_children(self, parent_path: str = "") -> List[ConfigurationSection]:
        """
        Child sections of ``parent_path`` (top-level sections by default).

        Providers are asked from highest to lowest precedence so each child
        name is reported once, in the order it was first claimed.
        """
        parent_path = KeyNormalizer.normalize(parent_path)
        keys: List[str] = []
        for provider in reversed(self._providers):
            for child in provider.get_child_keys(keys, parent_path or None):
                if child not in keys:
                    keys.append(child)

        self.logger.debug("Children enumerated", parent=parent_path, count=len(keys))
        return [
            ConfigurationSection(self, ConfigurationPath.combine(parent_path, child))
            for child in keys
        ]

    def get_reload_token(self) -> ChangeToken:
        """Token that fires on the next reload of this root or any of its providers."""
        return self._notifier.get_change_token()

    def reload(self) -> None:
        """
        Reload every provider in registration order, then notify listeners once.

        Raises
        ------
        ProviderLoadError
            If any provider fails; listeners are not notified in that case.
        """
        for provider in self._providers:
            self._load_provider(provider)
        self._notifier.on_reload()
        self.logger.info("Configuration reloaded", providers=len(self._providers))

    def _attach(self, provider: ConfigProvider) -> None:
        """Load ``provider`` and add it with the highest precedence."""
        self._load_provider(provider)
        self._providers = self._providers + (provider,)
        self._wire_reload_callback(len(self._providers) - 1, provider)

    def _load_provider(self, provider: ConfigProvider) -> None:
        try:
            provider.load()
        except Exception as e:
            self.logger.error("Provider failed to load",
                              provider=type(provider).__name__, error=str(e))
            raise

    def dispose(self) -> None:
        """
        Stop listening to provider reload tokens.

        Providers are left untouched and stay usable by other roots. The
        root still answers reads, but provider changes no longer fire its
        reload token. Use it to release snapshots that are no longer needed.
        """
        self._disposed = True
        registrations = list(self._registrations.values())
        self._registrations.clear()
        for registration in registrations:
            registration.dispose()

    def __enter__(self) -> "ConfigurationRoot":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def _wire_reload_callback(self, index: int, provider: ConfigProvider) -> None:
        if self._disposed:
            return

        def on_provider_reload():
            if self._disposed:
                return
            # Tokens are one-shot, re-arm on the provider's fresh token first
            self._wire_reload_callback(index, provider)
            self._notifier.on_reload()

        self._registrations[index] = provider.get_reload_token().register_callback(on_provider_reload)

    def __repr__(self) -> str:
        return f"ConfigurationRoot(providers={list(self._providers)!r})"
