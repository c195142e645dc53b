"""
Tests for the YAML file provider.
"""

import pytest
import yaml

from iconfig import ConfigurationBuilder, MalformedConfigError, ProviderLoadError
from iconfig.providers import YamlFileConfigProvider

pytestmark = pytest.mark.integration


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    return path


class TestYamlFileProvider:

    def test_flattens_document(self, tmp_path):
        path = write(tmp_path, 'settings.yaml', (
            "database:\n"
            "  host: localhost\n"
            "  port: 5432\n"
            "  replicas:\n"
            "    - r1\n"
            "    - r2\n"
            "feature: ~\n"
        ))
        provider = YamlFileConfigProvider(path)
        provider.load()

        assert provider.get('database:host') == 'localhost'
        assert provider.get('database:port') == '5432'
        assert provider.get('database:replicas:1') == 'r2'
        assert provider.try_get('feature') == (True, None)

    def test_booleans_use_python_spelling(self, tmp_path):
        provider = YamlFileConfigProvider(write(tmp_path, 'flags.yaml', "enabled: true\n"))
        provider.load()
        assert provider.get('enabled') == 'True'

    def test_empty_document_is_empty_store(self, tmp_path):
        provider = YamlFileConfigProvider(write(tmp_path, 'empty.yaml', ""))
        provider.load()
        assert provider.data == {}

    def test_root_must_be_mapping(self, tmp_path):
        provider = YamlFileConfigProvider(write(tmp_path, 'list.yaml', "- a\n- b\n"))
        with pytest.raises(MalformedConfigError, match="root must be an object"):
            provider.load()

    def test_invalid_yaml(self, tmp_path):
        provider = YamlFileConfigProvider(write(tmp_path, 'broken.yaml', "a: [unclosed\n"))
        with pytest.raises(MalformedConfigError) as exc_info:
            provider.load()
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)

    def test_invalid_utf8_is_malformed(self, tmp_path):
        path = tmp_path / 'latin1.yaml'
        path.write_bytes(b'a: "\xff\xfe"\n')
        with pytest.raises(ProviderLoadError, match="invalid UTF-8") as exc_info:
            YamlFileConfigProvider(path).load()
        assert isinstance(exc_info.value, MalformedConfigError)

    def test_missing_required_file(self, tmp_path):
        with pytest.raises(ProviderLoadError):
            ConfigurationBuilder().add_yaml_file(tmp_path / 'nope.yaml').build()

    def test_missing_optional_file(self, tmp_path):
        root = ConfigurationBuilder().add_yaml_file(tmp_path / 'nope.yaml', optional=True).build()
        assert root['anything'] is None

    def test_yaml_layered_under_environment(self, tmp_path):
        path = write(tmp_path, 'settings.yaml', "logging:\n  level: info\n  format: text\n")
        root = (ConfigurationBuilder()
                .add_yaml_file(path)
                .add_environment_variables(prefix='SVC_', environ={'SVC_LOGGING__LEVEL': 'debug'})
                .build())

        assert root['logging:level'] == 'debug'
        assert root['logging:format'] == 'text'
