"""
Shared pytest configuration and fixtures for the configuration tests.
"""

import pytest

from iconfig import ConfigurationBuilder, ConfigurationRoot
from iconfig.core.provider import ConfigProvider
from iconfig.core.source import ConfigSource


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests touching the file system or several components")


def pytest_collection_modifyitems(config, items):
    # Anything not marked integration is a unit test
    for item in items:
        if item.get_closest_marker("integration") is None:
            item.add_marker(pytest.mark.unit)


class StubProvider(ConfigProvider):
    """
    Provider over a replaceable mapping that counts its loads.

    ``simulate_change`` mimics a provider that noticed its source changed:
    it swaps the source data, reloads, then fires its reload token.
    """

    def __init__(self, initial=None):
        super().__init__()
        self.source_data = dict(initial or {})
        self.load_count = 0

    def load(self):
        self.load_count += 1
        self._replace_data({self.normalize_key(k): v for k, v in self.source_data.items()})

    def simulate_change(self, new_data):
        self.source_data = dict(new_data)
        self.load()
        self.on_reload()


class FailingProvider(ConfigProvider):
    """Provider whose load always fails."""

    def __init__(self, error=None):
        super().__init__()
        self.error = error or RuntimeError("source unavailable")

    def load(self):
        raise self.error


class StubSource(ConfigSource):

    def __init__(self, provider):
        self.provider = provider
        self.build_count = 0

    def build(self):
        self.build_count += 1
        return self.provider


@pytest.fixture
def failing_provider_factory():
    """Create FailingProvider instances."""
    return FailingProvider


@pytest.fixture
def stub_source_factory():
    """Create StubSource instances."""
    return StubSource
@pytest.fixture
def stub_provider_factory():
    """Create StubProvider instances."""
    return StubProvider


@pytest.fixture
def layered_root():
    """Three in-memory layers with overlapping keys."""
    return (ConfigurationBuilder()
            .add_in_memory({'database:host': 'localhost', 'database:port': '5432', 'app:name': 'Orders'})
            .add_in_memory({'database:host': 'staging', 'logging:level': 'debug'})
            .add_in_memory({'Database:Host': 'prod'})
            .build())


@pytest.fixture
def empty_root():
    return ConfigurationRoot([])

