"""
Project records: projects, categories, roles, components and versions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import UNSET, Record
from .common import SimpleLink
from .issue import IssueStatus, IssueType
from .user import User


@dataclass
class ProjectCategory(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET


@dataclass
class ProjectCategoryInput(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET


@dataclass
class Component(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    lead: Optional[User] = UNSET
    lead_user_name: Optional[str] = UNSET
    assignee_type: Optional[str] = UNSET
    assignee: Optional[User] = UNSET
    real_assignee_type: Optional[str] = UNSET
    real_assignee: Optional[User] = UNSET
    is_assignee_type_valid: Optional[bool] = UNSET
    project: Optional[str] = UNSET
    project_id: Optional[int] = UNSET
    archived: Optional[bool] = UNSET
    deleted: Optional[bool] = UNSET


@dataclass
class ComponentInput(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    lead_user_name: Optional[str] = UNSET
    assignee_type: Optional[str] = UNSET
    project: Optional[str] = UNSET
    project_id: Optional[int] = UNSET


@dataclass
class ComponentIssuesCount(Record):
    self_: Optional[str] = UNSET
    issue_count: Optional[int] = UNSET


@dataclass
class RemoteEntityLink(Record):
    self_: Optional[str] = UNSET
    name: Optional[str] = UNSET
    link: Any = UNSET


@dataclass
class RemoteEntityLinks(Record):
    links: Optional[List[RemoteEntityLink]] = UNSET


@dataclass
class Version(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    description: Optional[str] = UNSET
    name: Optional[str] = UNSET
    archived: Optional[bool] = UNSET
    released: Optional[bool] = UNSET
    overdue: Optional[bool] = UNSET
    start_date: Optional[str] = UNSET
    release_date: Optional[str] = UNSET
    user_start_date: Optional[str] = UNSET
    user_release_date: Optional[str] = UNSET
    project: Optional[str] = UNSET
    project_id: Optional[int] = UNSET
    move_unfixed_issues_to: Optional[str] = UNSET
    operations: Optional[List[SimpleLink]] = UNSET
    remotelinks: Optional[List[RemoteEntityLink]] = UNSET


@dataclass
class VersionInput(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    project: Optional[str] = UNSET
    project_id: Optional[int] = UNSET
    archived: Optional[bool] = UNSET
    released: Optional[bool] = UNSET
    start_date: Optional[str] = UNSET
    release_date: Optional[str] = UNSET
    user_start_date: Optional[str] = UNSET
    user_release_date: Optional[str] = UNSET
    move_unfixed_issues_to: Optional[str] = UNSET


@dataclass
class VersionIssueCounts(Record):
    self_: Optional[str] = UNSET
    issues_fixed_count: Optional[int] = UNSET
    issues_affected_count: Optional[int] = UNSET
    issue_count_with_custom_fields_showing_version: Optional[int] = UNSET


@dataclass
class UnresolvedVersionIssueCount(Record):
    self_: Optional[str] = UNSET
    issues_unresolved_count: Optional[int] = UNSET


@dataclass
class RoleActor(Record):
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    type: Optional[str] = UNSET
    avatar_url: Optional[str] = UNSET


@dataclass
class ProjectRole(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    actors: Optional[List[RoleActor]] = UNSET


@dataclass
class RoleActors(Record):
    actors: Optional[List[RoleActor]] = UNSET


@dataclass
class ActorInput(Record):
    """Actors to add to a global role: user names and group names."""
    user: Optional[List[str]] = UNSET
    group: Optional[List[str]] = UNSET


@dataclass
class ProjectRoleActorsInput(Record):
    """Body of PUT /project/{id}/role/{roleId}: actor type to names."""
    id: Optional[int] = UNSET
    category_actors: Optional[Dict[str, List[str]]] = UNSET


@dataclass
class Project(Record):
    expand: Optional[str] = UNSET
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    key: Optional[str] = UNSET
    description: Optional[str] = UNSET
    lead: Optional[User] = UNSET
    components: Optional[List[Component]] = UNSET
    issue_types: Optional[List[IssueType]] = UNSET
    url: Optional[str] = UNSET
    email: Optional[str] = UNSET
    assignee_type: Optional[str] = UNSET
    versions: Optional[List[Version]] = UNSET
    name: Optional[str] = UNSET
    roles: Optional[Dict[str, str]] = UNSET
    avatar_urls: Optional[Dict[str, str]] = UNSET
    project_keys: Optional[List[str]] = UNSET
    project_category: Optional[ProjectCategory] = UNSET
    project_type_key: Optional[str] = UNSET
    archived: Optional[bool] = UNSET


@dataclass
class ProjectInput(Record):
    """Body for creating or updating a project."""
    key: Optional[str] = UNSET
    name: Optional[str] = UNSET
    project_type_key: Optional[str] = UNSET
    project_template_key: Optional[str] = UNSET
    description: Optional[str] = UNSET
    lead: Optional[str] = UNSET
    url: Optional[str] = UNSET
    assignee_type: Optional[str] = UNSET
    avatar_id: Optional[int] = UNSET
    issue_security_scheme: Optional[int] = UNSET
    permission_scheme: Optional[int] = UNSET
    notification_scheme: Optional[int] = UNSET
    workflow_scheme_id: Optional[int] = UNSET
    category_id: Optional[int] = UNSET


@dataclass
class ProjectIdentity(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    key: Optional[str] = UNSET


@dataclass
class ProjectPickerItem(Record):
    key: Optional[str] = UNSET
    name: Optional[str] = UNSET
    html: Optional[str] = UNSET
    avatar: Optional[str] = UNSET


@dataclass
class ProjectsSearchResult(Record):
    projects: Optional[List[ProjectPickerItem]] = UNSET
    total: Optional[int] = UNSET


@dataclass
class IssueTypeStatuses(Record):
    """Statuses valid for one issue type of a project."""
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    subtask: Optional[bool] = UNSET
    statuses: Optional[List[IssueStatus]] = UNSET
