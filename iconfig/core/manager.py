"""
Live configuration that accepts new sources after construction.
"""

from typing import List, Optional, Tuple

from iconfig.logger import get_iconfig_logger
from iconfig.reload.change_token import ChangeToken
from .builder import SourceRegistrationMixin
from .configuration import Configuration
from .provider import ConfigProvider
from .root import ConfigurationRoot
from .section import ConfigurationSection
from .source import ConfigSource


class ConfigurationManager(Configuration, SourceRegistrationMixin):
    """
    Mutable configuration: sources can be added at any time and take effect
    before ``add`` returns.

    Reads, writes, sections, children and reload behave exactly as on
    ``ConfigurationRoot``. Adding a source loads only the new provider;
    values already written into earlier providers are kept.

    Example::

        manager = ConfigurationManager()
        manager.add_in_memory({'database:host': 'localhost'})
        manager.add_environment_variables(prefix='APP_')
        host = manager['database:host']
    """

    def __init__(self):
        self.logger = get_iconfig_logger().bind(component="ConfigurationManager")
        self._root = ConfigurationRoot([])

    def add(self, source: ConfigSource) -> "ConfigurationManager":
        """
        Build ``source`` into a provider, load it and give it the highest precedence.

        Raises
        ------
        ProviderLoadError
            If the new provider fails to load; the manager is left unchanged.
        """
        provider = source.build()
        self._root._attach(provider)
        self.logger.info("Configuration source added",
                         source=type(source).__name__, providers=len(self._root.providers))
        return self

    @property
    def providers(self) -> Tuple[ConfigProvider, ...]:
        return self._root.providers

    def __getitem__(self, key: str) -> Optional[str]:
        return self._root[key]

    def __setitem__(self, key: str, value: Optional[str]) -> None:
        self._root[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._root

    def get_section(self, key: str) -> ConfigurationSection:
        section = self._root.get_section(key)
        return ConfigurationSection(self, section.path)

    def get_children(self, parent_path: str = "") -> List[ConfigurationSection]:
        return [
            ConfigurationSection(self, child.path)
            for child in self._root.get_children(parent_path)
        ]

    def get_reload_token(self) -> ChangeToken:
        return self._root.get_reload_token()

    def reload(self) -> None:
        self._root.reload()

    def build_snapshot(self) -> ConfigurationRoot:
        """
        Root over the providers registered so far.

        The snapshot shares provider instances with the manager, so values
        written into them stay visible, but sources added to the manager
        later are not. Providers are not reloaded. Call ``dispose`` on a
        snapshot that is no longer needed so it stops listening to the
        shared providers.
        """
        return ConfigurationRoot(self._root.providers, load_providers=False)

    def __repr__(self) -> str:
        return f"ConfigurationManager(providers={list(self._root.providers)!r})"
