"""
Scheme and workflow records: permission, notification, issue security,
issue type and workflow schemes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import UNSET, Record
from .field import Field
from .project import ProjectRole
from .user import Group, User


@dataclass
class PermissionHolder(Record):
    type: Optional[str] = UNSET
    parameter: Optional[str] = UNSET
    expand: Optional[str] = UNSET
    user: Optional[User] = UNSET
    group: Optional[Group] = UNSET
    field: Optional[Field] = UNSET
    project_role: Optional[ProjectRole] = UNSET


@dataclass
class PermissionGrant(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    holder: Optional[PermissionHolder] = UNSET
    permission: Optional[str] = UNSET


@dataclass
class PermissionGrantInput(Record):
    holder: Optional[PermissionHolder] = UNSET
    permission: Optional[str] = UNSET


@dataclass
class PermissionScheme(Record):
    expand: Optional[str] = UNSET
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    permissions: Optional[List[PermissionGrant]] = UNSET


@dataclass
class PermissionSchemes(Record):
    permission_schemes: Optional[List[PermissionScheme]] = UNSET


@dataclass
class PermissionSchemeInput(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    permissions: Optional[List[PermissionGrantInput]] = UNSET


@dataclass
class NotificationEventType(Record):
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET


@dataclass
class NotificationTarget(Record):
    id: Optional[int] = UNSET
    notification_type: Optional[str] = UNSET
    parameter: Optional[str] = UNSET
    user: Optional[User] = UNSET
    group: Optional[Group] = UNSET
    field: Optional[Field] = UNSET
    email_address: Optional[str] = UNSET
    project_role: Optional[ProjectRole] = UNSET


@dataclass
class NotificationSchemeEvent(Record):
    event: Optional[NotificationEventType] = UNSET
    notifications: Optional[List[NotificationTarget]] = UNSET


@dataclass
class NotificationScheme(Record):
    expand: Optional[str] = UNSET
    id: Optional[int] = UNSET
    self_: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    notification_scheme_events: Optional[List[NotificationSchemeEvent]] = UNSET


@dataclass
class SecurityLevel(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    description: Optional[str] = UNSET
    name: Optional[str] = UNSET


@dataclass
class SecurityLevels(Record):
    levels: Optional[List[SecurityLevel]] = UNSET


@dataclass
class SecurityScheme(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    default_security_level_id: Optional[int] = UNSET
    levels: Optional[List[SecurityLevel]] = UNSET


@dataclass
class IssueSecuritySchemes(Record):
    issue_security_schemes: Optional[List[SecurityScheme]] = UNSET


@dataclass
class IssueTypeScheme(Record):
    expand: Optional[str] = UNSET
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    default_issue_type_id: Optional[str] = UNSET
    issue_type_ids: Optional[List[str]] = UNSET


@dataclass
class IssueTypeSchemeInput(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    default_issue_type_id: Optional[str] = UNSET
    issue_type_ids: Optional[List[str]] = UNSET


@dataclass
class IssueTypeSchemes(Record):
    expand: Optional[str] = UNSET
    schemes: Optional[List[IssueTypeScheme]] = UNSET


@dataclass
class Workflow(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    last_modified_date: Optional[str] = UNSET
    last_modified_user: Optional[str] = UNSET
    last_modified_user_name: Optional[str] = UNSET
    steps: Optional[int] = UNSET
    scheme: Optional[bool] = UNSET
    default: Optional[bool] = UNSET


@dataclass
class WorkflowPropertyInput(Record):
    """A workflow transition property to create or update."""
    key: Optional[str] = UNSET
    value: Optional[str] = UNSET
    workflow_name: Optional[str] = UNSET
    workflow_mode: Optional[str] = UNSET


@dataclass
class WorkflowScheme(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    default_workflow: Optional[str] = UNSET
    issue_type_mappings: Optional[Dict[str, str]] = UNSET
    original_default_workflow: Optional[str] = UNSET
    original_issue_type_mappings: Optional[Dict[str, str]] = UNSET
    draft: Optional[bool] = UNSET
    last_modified_user: Optional[User] = UNSET
    last_modified: Optional[str] = UNSET
    update_draft_if_needed: Optional[bool] = UNSET
    issue_types: Optional[Dict[str, Any]] = UNSET


@dataclass
class WorkflowSchemeInput(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    default_workflow: Optional[str] = UNSET
    issue_type_mappings: Optional[Dict[str, str]] = UNSET
    update_draft_if_needed: Optional[bool] = UNSET


@dataclass
class WorkflowDefault(Record):
    workflow: Optional[str] = UNSET
    update_draft_if_needed: Optional[bool] = UNSET


@dataclass
class IssueTypeMapping(Record):
    issue_type: Optional[str] = UNSET
    workflow: Optional[str] = UNSET
    update_draft_if_needed: Optional[bool] = UNSET


@dataclass
class WorkflowMapping(Record):
    workflow: Optional[str] = UNSET
    issue_types: Optional[List[str]] = UNSET
    default_mapping: Optional[bool] = UNSET
    update_draft_if_needed: Optional[bool] = UNSET
