"""
Integration tests for JiraServerConnector wiring and lifecycle.
"""
from unittest.mock import AsyncMock, Mock

import pytest

from jira_connector import BasicAuth, ConnectorConfig, HttpxTransport, ITransport, JiraServerConnector
from jira_connector.infrastructure.endpoints import IssuesEndpoint, SearchEndpoint, WorkflowSchemesEndpoint

RESOURCE_FAMILIES = [
    "application_properties", "application_roles", "attachments", "avatar", "components",
    "configuration", "custom_fields", "dashboards", "email_templates", "fields", "filters",
    "groups", "issue_links", "issue_security_schemes", "issue_types", "issue_type_schemes",
    "issues", "jql", "license", "my_preferences", "myself", "notification_schemes", "password",
    "permission_schemes", "permissions", "priorities", "project_categories", "projects",
    "reindex", "resolutions", "roles", "screens", "search", "security_levels", "server_info",
    "settings", "status_categories", "statuses", "universal_avatar", "upgrade", "users",
    "versions", "workflows", "workflow_schemes",
]


def make_transport():
    transport = Mock(spec=ITransport)
    transport.name = "mock"
    transport.aclose = AsyncMock()
    return transport


class TestConnectorWiring:
    """Test that every resource family is exposed."""

    def setup_method(self):
        self.transport = make_transport()
        self.connector = JiraServerConnector(
            BasicAuth(user="bob", password="secret", host="https://jira.example.com/"),
            transport=self.transport
        )

    @pytest.mark.parametrize("name", RESOURCE_FAMILIES)
    def test_resource_family_exposed(self, name):
        assert getattr(self.connector, name) is not None

    def test_endpoint_types(self):
        assert isinstance(self.connector.issues, IssuesEndpoint)
        assert isinstance(self.connector.search, SearchEndpoint)
        assert isinstance(self.connector.workflow_schemes, WorkflowSchemesEndpoint)

    def test_credentials_at_api_root(self):
        assert self.connector.credentials.api_endpoint == "https://jira.example.com/rest/api/latest"
        assert self.connector.transport is self.transport

    def test_repr_hides_password(self):
        text = repr(self.connector)

        assert "bob" in text
        assert "jira.example.com" in text
        assert "secret" not in text

    def test_default_transport_is_httpx(self):
        connector = JiraServerConnector(BasicAuth(user="bob", password="secret", host="https://jira.example.com"))

        assert isinstance(connector.transport, HttpxTransport)


class TestConnectorLifecycle:
    """Test construction from configuration and closing."""

    async def test_context_manager_closes_transport(self):
        transport = make_transport()

        async with JiraServerConnector(
            BasicAuth(user="bob", password="secret", host="https://jira.example.com"),
            transport=transport
        ) as jira:
            assert jira.transport is transport

        transport.aclose.assert_awaited_once()

    def test_from_config_uses_given_transport(self):
        transport = make_transport()
        config = ConnectorConfig(host="https://jira.example.com", user="bob", password="secret")

        connector = JiraServerConnector.from_config(config, transport=transport)

        assert connector.transport is transport
        assert connector.credentials.user == "bob"

    def test_from_config_validates(self):
        config = ConnectorConfig(host="", user="bob", password="secret")

        with pytest.raises(ValueError, match="JIRA_HOST"):
            JiraServerConnector.from_config(config, transport=make_transport())

    async def test_from_env_file(self, tmp_path, monkeypatch):
        for name in ("JIRA_HOST", "JIRA_USER", "JIRA_PASSWORD", "JIRA_TIMEOUT", "JIRA_LOG_LEVEL"):
            monkeypatch.setenv(name, "")
            monkeypatch.delenv(name)
        env_file = tmp_path / ".env"
        env_file.write_text("JIRA_HOST=https://jira.example.com\nJIRA_USER=bob\nJIRA_PASSWORD=secret\nJIRA_TIMEOUT=5\n")

        connector = JiraServerConnector.from_env(env_file)

        assert connector.credentials.host == "https://jira.example.com"
        assert isinstance(connector.transport, HttpxTransport)
        await connector.aclose()
