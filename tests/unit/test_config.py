"""
Unit tests for connector configuration.
"""
import pytest

from jira_connector.core.auth import BasicAuth
from jira_connector.core.config import DEFAULT_LOG_LEVEL, DEFAULT_TIMEOUT, ConnectorConfig

ENV_VARS = ["JIRA_HOST", "JIRA_USER", "JIRA_PASSWORD", "JIRA_TIMEOUT", "JIRA_LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Empty JIRA_* variables and a working directory without a .env file."""
    for name in ENV_VARS:
        # setenv first so values loaded by dotenv are undone after the test
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestConnectorConfig:
    """Test ConnectorConfig dataclass."""

    def test_defaults(self):
        config = ConnectorConfig(host="https://jira", user="bob", password="secret")

        assert config.timeout == DEFAULT_TIMEOUT
        assert config.log_level == DEFAULT_LOG_LEVEL

    def test_password_hidden_in_repr(self):
        config = ConnectorConfig(host="https://jira", user="bob", password="secret")

        assert "secret" not in repr(config)

    def test_to_auth(self):
        config = ConnectorConfig(host="https://jira", user="bob", password="secret")

        assert config.to_auth() == BasicAuth(user="bob", password="secret", host="https://jira")

    def test_validate_returns_self(self):
        config = ConnectorConfig(host="https://jira", user="bob", password="secret")

        assert config.validate() is config

    @pytest.mark.parametrize("field_name", ["host", "user", "password"])
    def test_validate_missing_field(self, field_name):
        values = {"host": "https://jira", "user": "bob", "password": "secret"}
        values[field_name] = ""

        with pytest.raises(ValueError):
            ConnectorConfig(**values).validate()

    def test_validate_timeout(self):
        with pytest.raises(ValueError, match="Timeout"):
            ConnectorConfig(host="https://jira", user="bob", password="secret", timeout=0).validate()


class TestConnectorConfigFromEnv:
    """Test loading configuration from the environment."""

    def test_reads_variables(self, clean_env):
        clean_env.setenv("JIRA_HOST", "https://jira.example.com")
        clean_env.setenv("JIRA_USER", "bob")
        clean_env.setenv("JIRA_PASSWORD", "secret")
        clean_env.setenv("JIRA_TIMEOUT", "12.5")
        clean_env.setenv("JIRA_LOG_LEVEL", "DEBUG")

        config = ConnectorConfig.from_env()

        assert config.host == "https://jira.example.com"
        assert config.user == "bob"
        assert config.password == "secret"
        assert config.timeout == 12.5
        assert config.log_level == "DEBUG"

    def test_missing_variables_fail_validation(self, clean_env):
        with pytest.raises(ValueError, match="JIRA_HOST"):
            ConnectorConfig.from_env().validate()

    def test_invalid_timeout(self, clean_env):
        clean_env.setenv("JIRA_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="JIRA_TIMEOUT"):
            ConnectorConfig.from_env()

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / "jira.env"
        env_file.write_text("JIRA_HOST=https://from-file\nJIRA_USER=alice\nJIRA_PASSWORD=pw\n")

        config = ConnectorConfig.from_env(env_file)

        assert config.host == "https://from-file"
        assert config.user == "alice"
