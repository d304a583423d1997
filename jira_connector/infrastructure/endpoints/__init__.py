"""
Endpoint classes, one per REST resource family.

Top-level endpoints are attached to JiraServerConnector; the remaining
classes are returned by accessor methods for child resources.
"""
from .application import (
    ApplicationPropertiesEndpoint,
    ApplicationRolesEndpoint,
    ConfigurationEndpoint,
    EmailTemplatesEndpoint,
    LicenseEndpoint,
    PermissionsEndpoint,
    ReindexEndpoint,
    ServerInfoEndpoint,
    SettingsEndpoint,
    UpgradeEndpoint,
)
from .avatar import AttachmentsEndpoint, AvatarEndpoint, OwnedAvatarsEndpoint, UniversalAvatarEndpoint
from .field import CustomFieldsEndpoint, DashboardsEndpoint, FieldsEndpoint, FiltersEndpoint, ScreensEndpoint
from .issue import IssueLinksEndpoint, IssuesEndpoint, IssueTypesEndpoint, IssueTypeSchemesEndpoint
from .lookup import PrioritiesEndpoint, ResolutionsEndpoint, StatusCategoriesEndpoint, StatusesEndpoint
from .myself import MyPreferencesEndpoint, MyselfEndpoint, PasswordEndpoint
from .project import ComponentsEndpoint, ProjectCategoriesEndpoint, ProjectsEndpoint, RolesEndpoint, VersionsEndpoint
from .scheme import (
    IssueSecuritySchemesEndpoint,
    NotificationSchemesEndpoint,
    PermissionSchemesEndpoint,
    SecurityLevelsEndpoint,
)
from .search import JqlEndpoint, SearchEndpoint
from .user import GroupsEndpoint, UsersEndpoint
from .workflow import WorkflowsEndpoint, WorkflowSchemesEndpoint

__all__ = [
    # Instance administration
    'ApplicationPropertiesEndpoint',
    'ApplicationRolesEndpoint',
    'ConfigurationEndpoint',
    'EmailTemplatesEndpoint',
    'LicenseEndpoint',
    'PermissionsEndpoint',
    'ReindexEndpoint',
    'ServerInfoEndpoint',
    'SettingsEndpoint',
    'UpgradeEndpoint',
    # Attachments and avatars
    'AttachmentsEndpoint',
    'AvatarEndpoint',
    'OwnedAvatarsEndpoint',
    'UniversalAvatarEndpoint',
    # Fields, screens, filters, dashboards
    'CustomFieldsEndpoint',
    'DashboardsEndpoint',
    'FieldsEndpoint',
    'FiltersEndpoint',
    'ScreensEndpoint',
    # Issues
    'IssueLinksEndpoint',
    'IssuesEndpoint',
    'IssueTypesEndpoint',
    'IssueTypeSchemesEndpoint',
    'JqlEndpoint',
    'SearchEndpoint',
    # Lookups
    'PrioritiesEndpoint',
    'ResolutionsEndpoint',
    'StatusCategoriesEndpoint',
    'StatusesEndpoint',
    # Users and groups
    'GroupsEndpoint',
    'MyPreferencesEndpoint',
    'MyselfEndpoint',
    'PasswordEndpoint',
    'UsersEndpoint',
    # Projects
    'ComponentsEndpoint',
    'ProjectCategoriesEndpoint',
    'ProjectsEndpoint',
    'RolesEndpoint',
    'VersionsEndpoint',
    # Schemes and workflows
    'IssueSecuritySchemesEndpoint',
    'NotificationSchemesEndpoint',
    'PermissionSchemesEndpoint',
    'SecurityLevelsEndpoint',
    'WorkflowsEndpoint',
    'WorkflowSchemesEndpoint',
]
