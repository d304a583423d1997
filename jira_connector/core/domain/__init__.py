"""
Typed records for the Jira Server REST API.
"""
from .base import UNSET, Record, from_wire, to_wire, wire
from .common import (
    SelfLink, EntityProperty, EntityPropertyKey, EntityPropertyKeys, ListWrapper,
    SimpleLink, LinkGroup, Avatar, SystemAvatars, AvatarCropping, ColumnItem,
    ErrorCollection, Property, Icon,
)
from .user import (
    ApplicationRole, User, UserInput, Group, GroupSuggestionLabel, GroupSuggestion,
    GroupSuggestions, UserSuggestion, UsersSuggestion, GroupsSuggestion, UserAndGroups,
    UserPickerUser, UserPickerResult, A11yPersonalSetting, AnonymizationValidation,
    AnonymizationProgress,
)
from .issue import (
    StatusCategory, IssueStatus, Status, JsonType, FieldMeta, EditMeta, IssueTransition,
    IssueTransitions, Participant, HistoryMetadata, ChangeItem, ChangeHistory, ChangeLog,
    Issue, IssueUpdate, IssueRef, IssueCreated, BulkOperationError, IssuesCreated,
    Visibility, Comment, NotificationPermission, NotificationRecipients,
    NotificationRestriction, IssueNotification, RemoteApplication, RemoteObjectStatus,
    RemoteObject, RemoteIssueLink, IssueVotes, IssueWatchers, Worklog, Attachment,
    AttachmentMeta, CreateMeta, IssuePickerIssue, IssuePickerSection, IssuePickerResult,
    IssueLinkType, IssueLinkTypes, IssueLinkTypeInput, LinkedIssue, IssueLink,
    LinkIssueRequest, Priority, Resolution, IssueType, IssueTypeCreate, IssueTypeUpdate,
)
from .project import (
    ProjectCategory, ProjectCategoryInput, Component, ComponentInput, ComponentIssuesCount,
    RemoteEntityLink, RemoteEntityLinks, Version, VersionInput, VersionIssueCounts,
    UnresolvedVersionIssueCount, RoleActor, ProjectRole, RoleActors, ActorInput,
    ProjectRoleActorsInput, Project, ProjectInput, ProjectIdentity, ProjectPickerItem,
    ProjectsSearchResult, IssueTypeStatuses,
)
from .field import (
    FieldSchema, Field, CustomField, CustomFieldDefinition, CustomFieldOption,
    DeletedFields, FilterSubscription, FilterPermission, Filter, FilterColumn,
    ShareScope, Screen, ScreenableTab, ScreenableField, Dashboard,
)
from .scheme import (
    PermissionHolder, PermissionGrant, PermissionGrantInput, PermissionScheme,
    PermissionSchemes, PermissionSchemeInput, NotificationEventType, NotificationTarget,
    NotificationSchemeEvent, NotificationScheme, SecurityLevel, SecurityLevels,
    SecurityScheme, IssueSecuritySchemes, IssueTypeScheme, IssueTypeSchemeInput,
    IssueTypeSchemes, Workflow, WorkflowPropertyInput, WorkflowScheme,
    WorkflowSchemeInput, WorkflowDefault, IssueTypeMapping, WorkflowMapping,
)
from .system import (
    Permission, UserPermission, Permissions, MyPermissions, ApplicationProperty,
    TimeTrackingConfiguration, Configuration, HealthCheckResult, ServerInfo, Reindex,
    ReindexRequest, UpgradeResult, AutoCompleteField, AutoComplete,
    AutoCompleteSuggestion, AutoCompleteSuggestions, PasswordPolicyCreateUser,
    PasswordPolicyUpdateUser,
)

__all__ = [
    # Record machinery
    'UNSET', 'Record', 'from_wire', 'to_wire', 'wire',
    # Shared
    'SelfLink', 'EntityProperty', 'EntityPropertyKey', 'EntityPropertyKeys',
    'ListWrapper', 'SimpleLink', 'LinkGroup', 'Avatar', 'SystemAvatars',
    'AvatarCropping', 'ColumnItem', 'ErrorCollection', 'Property', 'Icon',
    # Users and groups
    'ApplicationRole', 'User', 'UserInput', 'Group', 'GroupSuggestionLabel',
    'GroupSuggestion', 'GroupSuggestions', 'UserSuggestion', 'UsersSuggestion',
    'GroupsSuggestion', 'UserAndGroups', 'UserPickerUser', 'UserPickerResult',
    'A11yPersonalSetting', 'AnonymizationValidation', 'AnonymizationProgress',
    # Issues
    'StatusCategory', 'IssueStatus', 'Status', 'JsonType', 'FieldMeta', 'EditMeta',
    'IssueTransition', 'IssueTransitions', 'Participant', 'HistoryMetadata',
    'ChangeItem', 'ChangeHistory', 'ChangeLog', 'Issue', 'IssueUpdate', 'IssueRef',
    'IssueCreated', 'BulkOperationError', 'IssuesCreated', 'Visibility', 'Comment',
    'NotificationPermission', 'NotificationRecipients', 'NotificationRestriction',
    'IssueNotification', 'RemoteApplication', 'RemoteObjectStatus', 'RemoteObject',
    'RemoteIssueLink', 'IssueVotes', 'IssueWatchers', 'Worklog', 'Attachment',
    'AttachmentMeta', 'CreateMeta', 'IssuePickerIssue', 'IssuePickerSection',
    'IssuePickerResult', 'IssueLinkType', 'IssueLinkTypes', 'IssueLinkTypeInput',
    'LinkedIssue', 'IssueLink', 'LinkIssueRequest', 'Priority', 'Resolution',
    'IssueType', 'IssueTypeCreate', 'IssueTypeUpdate',
    # Projects
    'ProjectCategory', 'ProjectCategoryInput', 'Component', 'ComponentInput',
    'ComponentIssuesCount', 'RemoteEntityLink', 'RemoteEntityLinks', 'Version',
    'VersionInput', 'VersionIssueCounts', 'UnresolvedVersionIssueCount', 'RoleActor',
    'ProjectRole', 'RoleActors', 'ActorInput', 'ProjectRoleActorsInput', 'Project',
    'ProjectInput', 'ProjectIdentity', 'ProjectPickerItem', 'ProjectsSearchResult',
    'IssueTypeStatuses',
    # Fields, filters, screens
    'FieldSchema', 'Field', 'CustomField', 'CustomFieldDefinition', 'CustomFieldOption',
    'DeletedFields', 'FilterSubscription', 'FilterPermission', 'Filter', 'FilterColumn',
    'ShareScope', 'Screen', 'ScreenableTab', 'ScreenableField', 'Dashboard',
    # Schemes and workflows
    'PermissionHolder', 'PermissionGrant', 'PermissionGrantInput', 'PermissionScheme',
    'PermissionSchemes', 'PermissionSchemeInput', 'NotificationEventType',
    'NotificationTarget', 'NotificationSchemeEvent', 'NotificationScheme',
    'SecurityLevel', 'SecurityLevels', 'SecurityScheme', 'IssueSecuritySchemes',
    'IssueTypeScheme', 'IssueTypeSchemeInput', 'IssueTypeSchemes', 'Workflow',
    'WorkflowPropertyInput', 'WorkflowScheme', 'WorkflowSchemeInput', 'WorkflowDefault',
    'IssueTypeMapping', 'WorkflowMapping',
    # System
    'Permission', 'UserPermission', 'Permissions', 'MyPermissions', 'ApplicationProperty',
    'TimeTrackingConfiguration', 'Configuration', 'HealthCheckResult', 'ServerInfo',
    'Reindex', 'ReindexRequest', 'UpgradeResult', 'AutoCompleteField', 'AutoComplete',
    'AutoCompleteSuggestion', 'AutoCompleteSuggestions', 'PasswordPolicyCreateUser',
    'PasswordPolicyUpdateUser',
]
