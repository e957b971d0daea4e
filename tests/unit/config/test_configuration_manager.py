"""Tests for configuration loading."""

import json
import os
from unittest.mock import patch

import pytest

from pattern_catalog.config.manager import ConfigurationManager, expand_env_vars
from pattern_catalog.config.schemas import AppConfig, LoggingConfig
from pattern_catalog.domain.base.exceptions import ConfigurationError


@pytest.fixture
def clean_env():
    """Run without any PATTERN_CATALOG_* variables."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("PATTERN_CATALOG_")}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture
def write_config(tmp_path):
    def _write(data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data) if not isinstance(data, str) else data)
        return str(path)
    return _write


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        assert expand_env_vars("$NONEXISTENT_VAR_FOR_TEST") == "$NONEXISTENT_VAR_FOR_TEST"

    def test_expand_nested_values(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {"logging": {"file_path": "$TEST_VAR/app.log"}, "items": ["$TEST_VAR", 3]}
            assert expand_env_vars(config) == {
                "logging": {"file_path": "/test/path/app.log"},
                "items": ["/test/path", 3],
            }

    def test_expand_non_string_values(self):
        config = {"number": 42, "boolean": True, "none": None}
        assert expand_env_vars(config) == config


class TestConfigurationManager:
    """Test configuration sources and validation."""

    def test_defaults_without_file(self, clean_env):
        config = ConfigurationManager().app_config

        assert isinstance(config, AppConfig)
        assert config.logging.level == "INFO"
        assert config.logging.destination == "stdout"
        assert config.repository.id_start == 1

    def test_loads_json_file(self, clean_env, write_config):
        path = write_config({"logging": {"level": "debug"}, "repository": {"id_start": 10}})

        config = ConfigurationManager(path).app_config

        assert config.logging.level == "DEBUG"
        assert config.repository.id_start == 10

    def test_file_values_are_expanded(self, clean_env, write_config):
        path = write_config({"logging": {"destination": "file", "file_path": "$LOG_ROOT/app.log"}})

        with patch.dict(os.environ, {"LOG_ROOT": "/var/log/catalog"}):
            config = ConfigurationManager(path).app_config

        assert config.logging.file_path == "/var/log/catalog/app.log"

    def test_environment_overrides_file(self, clean_env, write_config):
        path = write_config({"logging": {"level": "INFO"}, "repository": {"id_start": 10}})

        with patch.dict(os.environ, {"PATTERN_CATALOG_LOG_LEVEL": "ERROR",
                                     "PATTERN_CATALOG_ID_START": "7"}):
            config = ConfigurationManager(path).app_config

        assert config.logging.level == "ERROR"
        assert config.repository.id_start == 7

    def test_config_is_cached_until_reload(self, clean_env):
        manager = ConfigurationManager()
        first = manager.app_config

        assert manager.app_config is first
        with patch.dict(os.environ, {"PATTERN_CATALOG_LOG_LEVEL": "WARNING"}):
            assert manager.reload().logging.level == "WARNING"

    def test_missing_file_raises(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to load configuration"):
            ConfigurationManager(str(tmp_path / "absent.json")).app_config

    def test_invalid_json_raises(self, clean_env, write_config):
        path = write_config("{not json")

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path).app_config

    def test_non_object_json_raises(self, clean_env, write_config):
        path = write_config([1, 2, 3])

        with pytest.raises(ConfigurationError, match="must contain a JSON object"):
            ConfigurationManager(path).app_config

    def test_invalid_values_raise(self, clean_env, write_config):
        path = write_config({"logging": {"level": "LOUD"}})

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigurationManager(path).app_config

    def test_unknown_keys_raise(self, clean_env, write_config):
        path = write_config({"unknown": True})

        with pytest.raises(ConfigurationError):
            ConfigurationManager(path).app_config


class TestLoggingConfig:
    """Test logging schema validation."""

    def test_level_is_normalised(self):
        assert LoggingConfig(level="warning").level == "WARNING"

    def test_invalid_destination(self):
        with pytest.raises(ValueError):
            LoggingConfig(destination="syslog")

    def test_backup_count_must_be_positive(self):
        with pytest.raises(ValueError):
            LoggingConfig(backup_count=0)
