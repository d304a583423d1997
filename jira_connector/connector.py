"""
JiraServerConnector: single entry point to the Jira Server REST API.
"""
from pathlib import Path
from typing import Optional, Union

from .core.auth import Basic, BasicAuth
from .core.config import ConnectorConfig
from .core.interfaces import ITransport
from .core.logger import configure_logging, get_logger
from .infrastructure.endpoints import (
    ApplicationPropertiesEndpoint, ApplicationRolesEndpoint, AttachmentsEndpoint, AvatarEndpoint,
    ComponentsEndpoint, ConfigurationEndpoint, CustomFieldsEndpoint, DashboardsEndpoint,
    EmailTemplatesEndpoint, FieldsEndpoint, FiltersEndpoint, GroupsEndpoint, IssueLinksEndpoint,
    IssueSecuritySchemesEndpoint, IssuesEndpoint, IssueTypesEndpoint, IssueTypeSchemesEndpoint,
    JqlEndpoint, LicenseEndpoint, MyPreferencesEndpoint, MyselfEndpoint, NotificationSchemesEndpoint,
    PasswordEndpoint, PermissionSchemesEndpoint, PermissionsEndpoint, PrioritiesEndpoint,
    ProjectCategoriesEndpoint, ProjectsEndpoint, ReindexEndpoint, ResolutionsEndpoint, RolesEndpoint,
    ScreensEndpoint, SearchEndpoint, SecurityLevelsEndpoint, ServerInfoEndpoint, SettingsEndpoint,
    StatusCategoriesEndpoint, StatusesEndpoint, UniversalAvatarEndpoint, UpgradeEndpoint,
    UsersEndpoint, VersionsEndpoint, WorkflowsEndpoint, WorkflowSchemesEndpoint,
)
from .infrastructure.http import HttpxTransport
from .infrastructure.resource import ResourceClient


class JiraServerConnector:
    """Typed async client for one Jira Server instance.

    Every resource family is an attribute, e.g.::

        async with JiraServerConnector(BasicAuth('bob', 'secret', 'https://jira.example.com')) as jira:
            issue = await jira.issues.get('PRJ-1')
            page = await jira.search.list(SearchOptions(jql='project = PRJ'))

    Endpoints share one credential context and one transport. The connector
    holds no other state, so it may be used from concurrent tasks.
    """

    def __init__(self, auth: BasicAuth, transport: Optional[ITransport] = None):
        """Initialize the connector.

        Args:
            auth: User, password and host of the Jira instance
            transport: Transport executing requests; an HttpxTransport
                owned by the connector when omitted
        """
        self._credentials = Basic.from_auth(auth)
        self._transport = transport or HttpxTransport()
        self._logger = get_logger('connector')

        root = ResourceClient(self._credentials, '', self._transport)

        self.application_properties = ApplicationPropertiesEndpoint(root)
        self.application_roles = ApplicationRolesEndpoint(root)
        self.attachments = AttachmentsEndpoint(root)
        self.avatar = AvatarEndpoint(root)
        self.components = ComponentsEndpoint(root)
        self.configuration = ConfigurationEndpoint(root)
        self.custom_fields = CustomFieldsEndpoint(root)
        self.dashboards = DashboardsEndpoint(root)
        self.email_templates = EmailTemplatesEndpoint(root)
        self.fields = FieldsEndpoint(root)
        self.filters = FiltersEndpoint(root)
        self.groups = GroupsEndpoint(root)
        self.issue_links = IssueLinksEndpoint(root)
        self.issue_security_schemes = IssueSecuritySchemesEndpoint(root)
        self.issue_types = IssueTypesEndpoint(root)
        self.issue_type_schemes = IssueTypeSchemesEndpoint(root)
        self.issues = IssuesEndpoint(root)
        self.jql = JqlEndpoint(root)
        self.license = LicenseEndpoint(root)
        self.my_preferences = MyPreferencesEndpoint(root)
        self.myself = MyselfEndpoint(root)
        self.notification_schemes = NotificationSchemesEndpoint(root)
        self.password = PasswordEndpoint(root)
        self.permission_schemes = PermissionSchemesEndpoint(root)
        self.permissions = PermissionsEndpoint(root)
        self.priorities = PrioritiesEndpoint(root)
        self.project_categories = ProjectCategoriesEndpoint(root)
        self.projects = ProjectsEndpoint(root)
        self.reindex = ReindexEndpoint(root)
        self.resolutions = ResolutionsEndpoint(root)
        self.roles = RolesEndpoint(root)
        self.screens = ScreensEndpoint(root)
        self.search = SearchEndpoint(root)
        self.security_levels = SecurityLevelsEndpoint(root)
        self.server_info = ServerInfoEndpoint(root)
        self.settings = SettingsEndpoint(root)
        self.status_categories = StatusCategoriesEndpoint(root)
        self.statuses = StatusesEndpoint(root)
        self.universal_avatar = UniversalAvatarEndpoint(root)
        self.upgrade = UpgradeEndpoint(root)
        self.users = UsersEndpoint(root)
        self.versions = VersionsEndpoint(root)
        self.workflows = WorkflowsEndpoint(root)
        self.workflow_schemes = WorkflowSchemesEndpoint(root)

        self._logger.debug(
            "connector_created",
            host=self._credentials.host,
            user=self._credentials.user,
            transport=self._transport.name
        )

    @classmethod
    def from_config(
        cls,
        config: ConnectorConfig,
        transport: Optional[ITransport] = None
    ) -> 'JiraServerConnector':
        """Create a connector from a validated configuration.

        Also sets the library log level from ``config.log_level``.
        """
        config.validate()
        configure_logging(config.log_level)
        return cls(config.to_auth(), transport or HttpxTransport(timeout=config.timeout))

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> 'JiraServerConnector':
        """Create a connector from JIRA_* environment variables.

        Raises:
            ValueError: If a required variable is missing
        """
        return cls.from_config(ConnectorConfig.from_env(env_file))

    @property
    def credentials(self) -> Basic:
        """Credential context at the API root."""
        return self._credentials

    @property
    def transport(self) -> ITransport:
        return self._transport

    async def aclose(self) -> None:
        """Close the transport's network resources."""
        await self._transport.aclose()

    async def __aenter__(self) -> 'JiraServerConnector':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"JiraServerConnector(host={self._credentials.host!r}, user={self._credentials.user!r})"
