"""
Test suite for ConfigurationManager.
"""

import pytest

from iconfig import ConfigurationManager, ConfigurationRoot, ConfigurationSection
from iconfig.providers import MemoryConfigSource


class TestManagerAdd:

    def setup_method(self):
        self.manager = ConfigurationManager()

    def test_empty_manager(self):
        assert self.manager['anything'] is None
        assert self.manager.get_children() == []
        self.manager['dropped'] = 'value'
        assert self.manager['dropped'] is None

    def test_added_values_are_visible_immediately(self):
        self.manager.add_in_memory({'database:host': 'localhost'})
        assert self.manager['database:host'] == 'localhost'

    def test_last_added_wins(self):
        self.manager.add_in_memory({'database:host': 'localhost'})
        self.manager.add_in_memory({'database:host': 'prod'})
        assert self.manager['DATABASE:HOST'] == 'prod'

    def test_add_is_fluent(self):
        result = self.manager.add(MemoryConfigSource({'a': '1'}))
        assert result is self.manager

    def test_add_builds_source_once(self, stub_provider_factory, stub_source_factory):
        source = stub_source_factory(stub_provider_factory({'a': '1'}))
        self.manager.add(source)
        assert source.build_count == 1
        assert source.provider.load_count == 1

    def test_add_keeps_earlier_runtime_writes(self):
        self.manager.add_in_memory({'a': '1'})
        self.manager['a'] = 'changed'

        self.manager.add_in_memory({'b': '2'})

        assert self.manager['a'] == 'changed'

    def test_children_aggregate_all_providers(self):
        self.manager.add_in_memory({'s:a': '1'})
        self.manager.add_map({'s': {'b': '2'}})

        children = self.manager.get_children('s')

        assert sorted(child.key for child in children) == ['a', 'b']
        assert all(isinstance(child, ConfigurationSection) for child in children)

    def test_sections_route_through_manager(self):
        self.manager.add_in_memory({'db:host': 'a'})
        section = self.manager.get_section('db')
        self.manager.add_in_memory({'db:host': 'b'})

        assert section['host'] == 'b'
        assert [child.key for child in self.manager.get_section('db').get_children()] == ['host']

    def test_failed_add_leaves_manager_unchanged(self, failing_provider_factory, stub_source_factory):
        self.manager.add_in_memory({'a': '1'})

        with pytest.raises(RuntimeError):
            self.manager.add(stub_source_factory(failing_provider_factory()))

        assert len(self.manager.providers) == 1
        self.manager['new'] = 'x'
        assert self.manager.providers[0].get('new') == 'x'

    def test_get_required(self):
        self.manager.add_in_memory({'a': '1'})
        assert self.manager.get_required('A') == '1'


class TestManagerReload:

    def test_reload_fires_callbacks(self):
        manager = ConfigurationManager().add_in_memory({'x': '1'})
        calls = []
        manager.get_reload_token().register_callback(lambda: calls.append(1))

        manager.reload()

        assert calls == [1]

    def test_provider_added_later_surfaces_changes(self, stub_provider_factory, stub_source_factory):
        manager = ConfigurationManager().add_in_memory({'x': '1'})
        provider = stub_provider_factory({'mode': 'a'})
        manager.add(stub_source_factory(provider))
        calls = []
        manager.get_reload_token().register_callback(lambda: calls.append(manager['mode']))

        provider.simulate_change({'mode': 'b'})

        assert calls == ['b']


class TestSnapshot:

    def test_snapshot_shares_providers(self):
        manager = ConfigurationManager().add_in_memory({'a': '1'})
        snapshot = manager.build_snapshot()

        manager['a'] = 'changed'

        assert isinstance(snapshot, ConfigurationRoot)
        assert snapshot['a'] == 'changed'
        assert snapshot.providers[0] is manager.providers[0]

    def test_snapshot_ignores_later_adds(self):
        manager = ConfigurationManager().add_in_memory({'a': '1'})
        snapshot = manager.build_snapshot()

        manager.add_in_memory({'a': '2', 'b': '3'})

        assert snapshot['a'] == '1'
        assert snapshot['b'] is None
        assert manager['a'] == '2'

    def test_snapshot_keeps_runtime_writes_made_before(self):
        manager = ConfigurationManager().add_in_memory({'a': '1'})
        manager['a'] = 'runtime'

        assert manager.build_snapshot()['a'] == 'runtime'

    def test_disposed_snapshots_release_provider_callbacks(self, stub_provider_factory, stub_source_factory):
        provider = stub_provider_factory({'mode': 'a'})
        manager = ConfigurationManager().add(stub_source_factory(provider))

        for _ in range(20):
            manager.build_snapshot().dispose()

        # Only the manager's own root is still listening
        assert len(provider.get_reload_token()._callbacks) == 1

    def test_disposed_snapshot_stops_notifying(self, stub_provider_factory, stub_source_factory):
        provider = stub_provider_factory({'mode': 'a'})
        manager = ConfigurationManager().add(stub_source_factory(provider))
        snapshot = manager.build_snapshot()
        snapshot_calls, manager_calls = [], []
        snapshot.get_reload_token().register_callback(lambda: snapshot_calls.append(1))
        manager.get_reload_token().register_callback(lambda: manager_calls.append(1))

        snapshot.dispose()
        provider.simulate_change({'mode': 'b'})

        assert snapshot_calls == []
        assert manager_calls == [1]
        assert snapshot['mode'] == 'b'

    def test_snapshot_as_context_manager(self, stub_provider_factory, stub_source_factory):
        provider = stub_provider_factory({'mode': 'a'})
        manager = ConfigurationManager().add(stub_source_factory(provider))

        with manager.build_snapshot() as snapshot:
            assert snapshot['mode'] == 'a'
            assert len(provider.get_reload_token()._callbacks) == 2

        assert len(provider.get_reload_token()._callbacks) == 1
