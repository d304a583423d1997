"""
Field, filter, screen and dashboard records.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .base import UNSET, Record
from .common import ListWrapper
from .project import Project, ProjectRole
from .user import Group, User


@dataclass
class FieldSchema(Record):
    type: Optional[str] = UNSET
    items: Optional[str] = UNSET
    system: Optional[str] = UNSET
    custom: Optional[str] = UNSET
    custom_id: Optional[int] = UNSET


@dataclass
class Field(Record):
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    custom: Optional[bool] = UNSET
    orderable: Optional[bool] = UNSET
    navigable: Optional[bool] = UNSET
    searchable: Optional[bool] = UNSET
    clause_names: Optional[List[str]] = UNSET
    schema: Optional[FieldSchema] = UNSET


@dataclass
class CustomField(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    type: Optional[str] = UNSET
    search_key: Optional[str] = UNSET
    project_ids: Optional[List[int]] = UNSET
    issue_type_ids: Optional[List[str]] = UNSET
    numeric_id: Optional[int] = UNSET
    is_locked: Optional[bool] = UNSET
    is_managed: Optional[bool] = UNSET
    is_all_projects: Optional[bool] = UNSET
    is_trusted: Optional[bool] = UNSET
    projects_count: Optional[int] = UNSET
    screens_count: Optional[int] = UNSET
    last_value_update: Optional[str] = UNSET
    issues_with_value: Optional[int] = UNSET


@dataclass
class CustomFieldDefinition(Record):
    """Body of POST /field."""
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    type: Optional[str] = UNSET
    search_key: Optional[str] = UNSET
    project_ids: Optional[List[int]] = UNSET
    issue_type_ids: Optional[List[str]] = UNSET


@dataclass
class CustomFieldOption(Record):
    self_: Optional[str] = UNSET
    value: Optional[str] = UNSET
    disabled: Optional[bool] = UNSET


@dataclass
class DeletedFields(Record):
    message: Optional[str] = UNSET
    deleted_custom_fields: Optional[List[str]] = UNSET
    not_deleted_custom_fields: Optional[List[str]] = UNSET


@dataclass
class FilterSubscription(Record):
    id: Optional[int] = UNSET
    user: Optional[User] = UNSET
    group: Optional[Group] = UNSET


@dataclass
class FilterPermission(Record):
    id: Optional[int] = UNSET
    type: Optional[str] = UNSET
    project: Optional[Project] = UNSET
    role: Optional[ProjectRole] = UNSET
    group: Optional[Group] = UNSET
    user: Optional[User] = UNSET
    view: Optional[bool] = UNSET
    edit: Optional[bool] = UNSET


@dataclass
class Filter(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    owner: Optional[User] = UNSET
    jql: Optional[str] = UNSET
    view_url: Optional[str] = UNSET
    search_url: Optional[str] = UNSET
    favourite: Optional[bool] = UNSET
    share_permissions: Optional[List[FilterPermission]] = UNSET
    shared_users: Optional[ListWrapper] = UNSET
    subscriptions: Optional[ListWrapper] = UNSET
    editable: Optional[bool] = UNSET


@dataclass
class FilterColumn(Record):
    label: Optional[str] = UNSET
    value: Optional[str] = UNSET


@dataclass
class ShareScope(Record):
    scope: Optional[str] = UNSET


@dataclass
class Screen(Record):
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    expand: Optional[str] = UNSET


@dataclass
class ScreenableTab(Record):
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET


@dataclass
class ScreenableField(Record):
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    type: Optional[str] = UNSET


@dataclass
class Dashboard(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    view: Optional[str] = UNSET
