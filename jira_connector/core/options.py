"""
Option records for endpoint calls.

Each option record maps one-to-one onto the query parameters (or, for
SearchOptions, the JSON body) of a Jira call. Unset fields are not sent.
"""
from dataclasses import dataclass
from typing import List, Optional, Union

from .domain.base import UNSET, Record, wire
from .pagination import PageOptions


@dataclass
class UserPermissionsOptions(Record):
    project_key: Optional[str] = UNSET
    project_id: Optional[str] = UNSET
    issue_key: Optional[str] = UNSET
    issue_id: Optional[str] = UNSET


@dataclass
class ApplicationPropertiesOptions(Record):
    key: Optional[str] = UNSET
    permission_level: Optional[str] = UNSET
    key_filter: Optional[str] = UNSET


@dataclass
class ComponentOptions(Record):
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    query: Optional[str] = UNSET
    project_ids: Optional[List[str]] = UNSET


@dataclass
class ListFieldOptions(Record):
    """Filters for the custom field listing.

    ``page_options`` is sent as regular paging parameters, never as a key of
    its own.
    """
    search: Optional[str] = UNSET
    project_ids: Optional[List[str]] = UNSET
    screen_ids: Optional[List[str]] = UNSET
    types: Optional[List[str]] = UNSET
    last_value_update: Optional[int] = UNSET
    page_options: Optional[PageOptions] = UNSET


@dataclass
class GroupMemberOptions(Record):
    include_inactive_users: Optional[bool] = UNSET
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET


@dataclass
class PickGroupsOptions(Record):
    query: Optional[str] = UNSET
    exclude: Optional[str] = UNSET
    max_results: Optional[int] = UNSET
    user_name: Optional[str] = UNSET


@dataclass
class FindUserAndGroupsOptions(Record):
    query: Optional[str] = UNSET
    show_avatar: Optional[bool] = UNSET
    max_results: Optional[int] = UNSET
    field_id: Optional[str] = UNSET
    project_id: Optional[List[str]] = UNSET
    issue_type_id: Optional[List[str]] = UNSET


@dataclass
class IssueOptions(Record):
    fields: Optional[Union[str, List[str]]] = UNSET
    expand: Optional[Union[str, List[str]]] = UNSET
    properties: Optional[Union[str, List[str]]] = UNSET
    update_history: Optional[bool] = UNSET


@dataclass
class IssuePickerOptions(Record):
    query: Optional[str] = UNSET
    current_jql: Optional[str] = wire('currentJQL')
    current_issue_key: Optional[str] = UNSET
    current_project_id: Optional[str] = UNSET
    show_sub_tasks: Optional[bool] = UNSET
    show_sub_task_parent: Optional[bool] = UNSET


@dataclass
class WorklogCreateOptions(Record):
    adjust_estimate: Optional[str] = UNSET
    new_estimate: Optional[str] = UNSET
    reduce_by: Optional[str] = UNSET


@dataclass
class WorklogUpdateOptions(Record):
    adjust_estimate: Optional[str] = UNSET
    new_estimate: Optional[str] = UNSET


@dataclass
class WorklogDeleteOptions(Record):
    adjust_estimate: Optional[str] = UNSET
    new_estimate: Optional[str] = UNSET
    increase_by: Optional[str] = UNSET


@dataclass
class AutoCompleteInput(Record):
    field_name: Optional[str] = UNSET
    field_value: Optional[str] = UNSET
    predicate_name: Optional[str] = UNSET
    predicate_value: Optional[str] = UNSET


@dataclass
class ProjectOptions(Record):
    expand: Optional[str] = UNSET
    recent: Optional[int] = UNSET
    include_archived: Optional[bool] = UNSET
    browse_archive: Optional[bool] = UNSET


@dataclass
class ReindexOptions(Record):
    type: Optional[str] = UNSET
    index_comments: Optional[bool] = UNSET
    index_change_history: Optional[bool] = UNSET
    index_worklogs: Optional[bool] = UNSET


@dataclass
class ReindexIssuesOptions(Record):
    issue_id: Optional[List[str]] = UNSET
    index_comments: Optional[bool] = UNSET
    index_change_history: Optional[bool] = UNSET
    index_worklogs: Optional[bool] = UNSET


@dataclass
class SearchOptions(Record):
    """Body of POST /search."""
    jql: Optional[str] = UNSET
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    validate_query: Optional[bool] = UNSET
    fields: Optional[List[str]] = UNSET
    expand: Optional[List[str]] = UNSET
    properties: Optional[List[str]] = UNSET
    fields_by_keys: Optional[bool] = UNSET


@dataclass
class StatusOptions(Record):
    query: Optional[str] = UNSET
    project_ids: Optional[List[str]] = UNSET
    issue_type_ids: Optional[List[str]] = UNSET
    search_by: Optional[str] = UNSET


@dataclass
class AssignableUserOptions(Record):
    username: Optional[str] = UNSET
    project: Optional[str] = UNSET
    issue_key: Optional[str] = UNSET
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    action_descriptor_id: Optional[int] = UNSET


@dataclass
class AssignableMultiProjectOptions(Record):
    username: Optional[str] = UNSET
    project_keys: Optional[List[str]] = UNSET
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET


@dataclass
class UserPickerOptions(Record):
    query: Optional[str] = UNSET
    max_results: Optional[int] = UNSET
    show_avatar: Optional[bool] = UNSET
    exclude: Optional[List[str]] = UNSET


@dataclass
class UserSearchOptions(Record):
    username: Optional[str] = UNSET
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    include_active: Optional[bool] = UNSET
    include_inactive: Optional[bool] = UNSET


@dataclass
class VersionOptions(Record):
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    order_by: Optional[str] = UNSET
    query: Optional[str] = UNSET
    project_ids: Optional[List[str]] = UNSET
    expand: Optional[str] = UNSET


@dataclass
class WorkflowPropertyOptions(Record):
    key: Optional[str] = UNSET
    workflow_name: Optional[str] = UNSET
    include_reserved_keys: Optional[bool] = UNSET
    workflow_mode: Optional[str] = UNSET
