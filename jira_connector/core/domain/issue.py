"""
Issue records: issues, their metadata, comments, worklogs, links and the
small lookup types (priority, resolution, status, issue type).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import UNSET, Record
from .common import EntityProperty, Icon
from .user import Group, User


@dataclass
class StatusCategory(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    key: Optional[str] = UNSET
    color_name: Optional[str] = UNSET
    name: Optional[str] = UNSET


@dataclass
class IssueStatus(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    status_color: Optional[str] = UNSET
    description: Optional[str] = UNSET
    icon_url: Optional[str] = UNSET
    name: Optional[str] = UNSET
    status_category: Optional[StatusCategory] = UNSET


# /status returns the same shape as the status embedded in an issue
Status = IssueStatus


@dataclass
class JsonType(Record):
    type: Optional[str] = UNSET
    items: Optional[str] = UNSET
    system: Optional[str] = UNSET
    custom: Optional[str] = UNSET
    custom_id: Optional[int] = UNSET


@dataclass
class FieldMeta(Record):
    self_: Optional[str] = UNSET
    required: Optional[bool] = UNSET
    schema: Optional[JsonType] = UNSET
    name: Optional[str] = UNSET
    field_id: Optional[str] = UNSET
    auto_complete_url: Optional[str] = UNSET
    has_default_value: Optional[bool] = UNSET
    operations: Optional[List[str]] = UNSET
    allowed_values: Optional[List[Any]] = UNSET
    default_value: Any = UNSET


@dataclass
class EditMeta(Record):
    fields: Optional[Dict[str, FieldMeta]] = UNSET


@dataclass
class IssueTransition(Record):
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    opsbar_sequence: Optional[int] = UNSET
    to: Optional[IssueStatus] = UNSET
    fields: Optional[Dict[str, FieldMeta]] = UNSET
    expand: Optional[str] = UNSET


@dataclass
class IssueTransitions(Record):
    expand: Optional[str] = UNSET
    transitions: Optional[List[IssueTransition]] = UNSET


@dataclass
class Participant(Record):
    id: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    display_name_key: Optional[str] = UNSET
    type: Optional[str] = UNSET
    avatar_url: Optional[str] = UNSET
    url: Optional[str] = UNSET


@dataclass
class HistoryMetadata(Record):
    type: Optional[str] = UNSET
    description: Optional[str] = UNSET
    description_key: Optional[str] = UNSET
    activity_description: Optional[str] = UNSET
    activity_description_key: Optional[str] = UNSET
    email_description: Optional[str] = UNSET
    email_description_key: Optional[str] = UNSET
    actor: Optional[Participant] = UNSET
    generator: Optional[Participant] = UNSET
    cause: Optional[Participant] = UNSET
    extra_data: Optional[Dict[str, str]] = UNSET


@dataclass
class ChangeItem(Record):
    field: Optional[str] = UNSET
    fieldtype: Optional[str] = UNSET
    from_: Optional[str] = UNSET
    from_string: Optional[str] = UNSET
    to: Optional[str] = UNSET
    to_string: Optional[str] = UNSET


@dataclass
class ChangeHistory(Record):
    id: Optional[str] = UNSET
    author: Optional[User] = UNSET
    created: Optional[str] = UNSET
    items: Optional[List[ChangeItem]] = UNSET
    history_metadata: Optional[HistoryMetadata] = UNSET


@dataclass
class ChangeLog(Record):
    start_at: Optional[int] = UNSET
    max_results: Optional[int] = UNSET
    total: Optional[int] = UNSET
    histories: Optional[List[ChangeHistory]] = UNSET


@dataclass
class Issue(Record):
    """A Jira issue as returned by GET /issue/{id} or a search."""
    expand: Optional[str] = UNSET
    id: Optional[str] = UNSET
    self_: Optional[str] = UNSET
    key: Optional[str] = UNSET
    fields: Optional[Dict[str, Any]] = UNSET
    rendered_fields: Optional[Dict[str, Any]] = UNSET
    properties: Optional[Dict[str, Any]] = UNSET
    names: Optional[Dict[str, str]] = UNSET
    schema: Optional[Dict[str, JsonType]] = UNSET
    transitions: Optional[List[IssueTransition]] = UNSET
    operations: Optional[Any] = UNSET
    editmeta: Optional[EditMeta] = UNSET
    changelog: Optional[ChangeLog] = UNSET
    versioned_representations: Any = UNSET
    fields_to_include: Any = UNSET


@dataclass
class IssueUpdate(Record):
    """Body for creating, editing or transitioning an issue."""
    transition: Optional[IssueTransition] = UNSET
    fields: Optional[Dict[str, Any]] = UNSET
    update: Optional[Dict[str, List[Any]]] = UNSET
    history_metadata: Optional[HistoryMetadata] = UNSET
    properties: Optional[List[EntityProperty]] = UNSET


@dataclass
class IssueRef(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    key: Optional[str] = UNSET


# POST /issue answers with {id, key, self}
IssueCreated = IssueRef


@dataclass
class BulkOperationError(Record):
    status: Optional[int] = UNSET
    element_errors: Optional[Dict[str, Any]] = UNSET
    failed_element_number: Optional[int] = UNSET


@dataclass
class IssuesCreated(Record):
    issues: Optional[List[IssueRef]] = UNSET
    errors: Optional[List[BulkOperationError]] = UNSET


@dataclass
class Visibility(Record):
    type: Optional[str] = UNSET
    value: Optional[str] = UNSET


@dataclass
class Comment(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    author: Optional[User] = UNSET
    body: Optional[str] = UNSET
    rendered_body: Optional[str] = UNSET
    update_author: Optional[User] = UNSET
    created: Optional[str] = UNSET
    updated: Optional[str] = UNSET
    visibility: Optional[Visibility] = UNSET
    properties: Optional[List[EntityProperty]] = UNSET


@dataclass
class NotificationPermission(Record):
    id: Optional[str] = UNSET
    key: Optional[str] = UNSET


@dataclass
class NotificationRecipients(Record):
    reporter: Optional[bool] = UNSET
    assignee: Optional[bool] = UNSET
    watchers: Optional[bool] = UNSET
    voters: Optional[bool] = UNSET
    users: Optional[List[User]] = UNSET
    groups: Optional[List[Group]] = UNSET


@dataclass
class NotificationRestriction(Record):
    groups: Optional[List[Group]] = UNSET
    permissions: Optional[List[NotificationPermission]] = UNSET


@dataclass
class IssueNotification(Record):
    subject: Optional[str] = UNSET
    text_body: Optional[str] = UNSET
    html_body: Optional[str] = UNSET
    to: Optional[NotificationRecipients] = UNSET
    restrict: Optional[NotificationRestriction] = UNSET


@dataclass
class RemoteApplication(Record):
    type: Optional[str] = UNSET
    name: Optional[str] = UNSET


@dataclass
class RemoteObjectStatus(Record):
    resolved: Optional[bool] = UNSET
    icon: Optional[Icon] = UNSET


@dataclass
class RemoteObject(Record):
    url: Optional[str] = UNSET
    title: Optional[str] = UNSET
    summary: Optional[str] = UNSET
    icon: Optional[Icon] = UNSET
    status: Optional[RemoteObjectStatus] = UNSET


@dataclass
class RemoteIssueLink(Record):
    self_: Optional[str] = UNSET
    id: Optional[int] = UNSET
    global_id: Optional[str] = UNSET
    application: Optional[RemoteApplication] = UNSET
    relationship: Optional[str] = UNSET
    object: Optional[RemoteObject] = UNSET


@dataclass
class IssueVotes(Record):
    self_: Optional[str] = UNSET
    votes: Optional[int] = UNSET
    has_voted: Optional[bool] = UNSET
    voters: Optional[List[User]] = UNSET


@dataclass
class IssueWatchers(Record):
    self_: Optional[str] = UNSET
    is_watching: Optional[bool] = UNSET
    watch_count: Optional[int] = UNSET
    watchers: Optional[List[User]] = UNSET


@dataclass
class Worklog(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    author: Optional[User] = UNSET
    update_author: Optional[User] = UNSET
    comment: Optional[str] = UNSET
    created: Optional[str] = UNSET
    updated: Optional[str] = UNSET
    visibility: Optional[Visibility] = UNSET
    started: Optional[str] = UNSET
    time_spent: Optional[str] = UNSET
    time_spent_seconds: Optional[int] = UNSET
    issue_id: Optional[str] = UNSET


@dataclass
class Attachment(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    filename: Optional[str] = UNSET
    author: Optional[User] = UNSET
    created: Optional[str] = UNSET
    size: Optional[int] = UNSET
    mime_type: Optional[str] = UNSET
    properties: Any = UNSET
    content: Optional[str] = UNSET
    thumbnail: Optional[str] = UNSET


@dataclass
class AttachmentMeta(Record):
    enabled: Optional[bool] = UNSET
    upload_limit: Optional[int] = UNSET


@dataclass
class CreateMeta(Record):
    """Issue type entry of the create-meta listing, optionally with its fields."""
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    description: Optional[str] = UNSET
    icon_url: Optional[str] = UNSET
    name: Optional[str] = UNSET
    subtask: Optional[bool] = UNSET
    avatar_id: Optional[int] = UNSET
    expand: Optional[str] = UNSET
    fields: Optional[Dict[str, FieldMeta]] = UNSET


@dataclass
class IssuePickerIssue(Record):
    key: Optional[str] = UNSET
    key_html: Optional[str] = UNSET
    img: Optional[str] = UNSET
    summary: Optional[str] = UNSET
    summary_text: Optional[str] = UNSET


@dataclass
class IssuePickerSection(Record):
    label: Optional[str] = UNSET
    sub: Optional[str] = UNSET
    id: Optional[str] = UNSET
    msg: Optional[str] = UNSET
    issues: Optional[List[IssuePickerIssue]] = UNSET


@dataclass
class IssuePickerResult(Record):
    sections: Optional[List[IssuePickerSection]] = UNSET


@dataclass
class IssueLinkType(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    name: Optional[str] = UNSET
    inward: Optional[str] = UNSET
    outward: Optional[str] = UNSET


@dataclass
class IssueLinkTypes(Record):
    issue_link_types: Optional[List[IssueLinkType]] = UNSET


@dataclass
class IssueLinkTypeInput(Record):
    name: Optional[str] = UNSET
    inward: Optional[str] = UNSET
    outward: Optional[str] = UNSET


@dataclass
class LinkedIssue(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    key: Optional[str] = UNSET
    fields: Optional[Dict[str, Any]] = UNSET


@dataclass
class IssueLink(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    type: Optional[IssueLinkType] = UNSET
    inward_issue: Optional[LinkedIssue] = UNSET
    outward_issue: Optional[LinkedIssue] = UNSET


@dataclass
class LinkIssueRequest(Record):
    """Body of POST /issueLink."""
    type: Optional[IssueLinkType] = UNSET
    inward_issue: Optional[LinkedIssue] = UNSET
    outward_issue: Optional[LinkedIssue] = UNSET
    comment: Optional[Comment] = UNSET


@dataclass
class Priority(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    status_color: Optional[str] = UNSET
    description: Optional[str] = UNSET
    icon_url: Optional[str] = UNSET
    name: Optional[str] = UNSET


@dataclass
class Resolution(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    description: Optional[str] = UNSET
    icon_url: Optional[str] = UNSET
    name: Optional[str] = UNSET


@dataclass
class IssueType(Record):
    self_: Optional[str] = UNSET
    id: Optional[str] = UNSET
    description: Optional[str] = UNSET
    icon_url: Optional[str] = UNSET
    name: Optional[str] = UNSET
    subtask: Optional[bool] = UNSET
    avatar_id: Optional[int] = UNSET


@dataclass
class IssueTypeCreate(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    type: Optional[str] = UNSET


@dataclass
class IssueTypeUpdate(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    avatar_id: Optional[int] = UNSET
