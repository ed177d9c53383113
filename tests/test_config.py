"""Tests for YAML config loading and logging setup."""

import logging

import pytest

from novaposhta.client.core import DEFAULT_BASE_URL
from novaposhta.config import ConfigError, configure_logging, load_config, resolve_env_vars


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the developer's environment and working directory."""
    for name in ("API_KEY", "BASE_URL", "LOG_LEVEL", "TIMEOUT", "CONFIG"):
        monkeypatch.delenv(f"NOVA_POSHTA_{name}", raising=False)
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path, text, name="novaposhta.yaml"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestLoadConfig:
    """Test load_config sources and precedence."""

    def test_defaults_without_file(self):
        """Test built-in defaults apply when no file is present."""
        config = load_config()

        assert config.api_key is None
        assert config.base_url == DEFAULT_BASE_URL
        assert config.log_level == "info"
        assert config.timeout == 30.0

    def test_explicit_path(self, tmp_path):
        path = write_config(tmp_path, "api_key: abc123\ntimeout: 5\n", name="custom.yaml")

        config = load_config(config_path=str(path))

        assert config.api_key == "abc123"
        assert config.timeout == 5.0

    def test_discovers_file_in_working_directory(self, tmp_path):
        write_config(tmp_path, "log_level: DEBUG\n", name="novaposhta.yml")

        assert load_config().log_level == "debug"

    def test_config_env_var_points_at_file(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "base_url: https://sandbox.example/v2.0/json/\n", name="other.yaml")
        monkeypatch.setenv("NOVA_POSHTA_CONFIG", str(path))

        assert load_config().base_url == "https://sandbox.example/v2.0/json/"

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        """Test NOVA_POSHTA_* env vars win over file values."""
        write_config(tmp_path, "api_key: from-file\ntimeout: 5\n")
        monkeypatch.setenv("NOVA_POSHTA_API_KEY", "from-env")
        monkeypatch.setenv("NOVA_POSHTA_TIMEOUT", "12.5")

        config = load_config()

        assert config.api_key == "from-env"
        assert config.timeout == 12.5

    def test_resolves_env_references(self, tmp_path, monkeypatch):
        write_config(tmp_path, "api_key: ${MY_NP_KEY}\n")
        monkeypatch.setenv("MY_NP_KEY", "resolved-key")

        assert load_config().api_key == "resolved-key"

    def test_unset_reference_means_no_key(self, tmp_path, monkeypatch):
        """Test an unresolved ${VAR} leaves the client unauthenticated."""
        monkeypatch.delenv("MY_NP_KEY", raising=False)
        write_config(tmp_path, "api_key: ${MY_NP_KEY}\n")

        assert load_config().api_key is None

    def test_empty_file(self, tmp_path):
        write_config(tmp_path, "")

        assert load_config().log_level == "info"


class TestLoadConfigErrors:
    """Test invalid configuration raises ConfigError E-4004."""

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_config(config_path=str(tmp_path / "nope.yaml"))

        assert exc_info.value.code == "E-4004"
        assert "config file not found" in exc_info.value.message

    def test_non_mapping(self, tmp_path):
        write_config(tmp_path, "- a\n- b\n")

        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_config()

    def test_invalid_yaml(self, tmp_path):
        write_config(tmp_path, "api_key: [unclosed\n")

        with pytest.raises(ConfigError, match="not valid YAML"):
            load_config()

    def test_bad_log_level(self, tmp_path):
        write_config(tmp_path, "log_level: verbose\n")

        with pytest.raises(ConfigError, match="log_level must be one of"):
            load_config()

    def test_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("NOVA_POSHTA_TIMEOUT", "0")

        with pytest.raises(ConfigError) as exc_info:
            load_config()

        assert exc_info.value.code == "E-4004"


class TestResolveEnvVars:
    def test_missing_var_is_empty(self, monkeypatch):
        monkeypatch.delenv("NP_UNSET_VAR", raising=False)
        assert resolve_env_vars("key-${NP_UNSET_VAR}") == "key-"

    def test_plain_string_unchanged(self):
        assert resolve_env_vars("plain") == "plain"


class TestConfigureLogging:
    def test_sets_level_and_single_handler(self):
        """Test repeated calls replace the handler instead of stacking."""
        configure_logging("debug")
        configure_logging("warning")

        package_logger = logging.getLogger("novaposhta")
        assert package_logger.level == logging.WARNING
        assert len(package_logger.handlers) == 1
