"""
Instance-level records: permissions, application properties, configuration,
server info, reindex and upgrade state, JQL autocomplete and password policy.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import UNSET, Record


@dataclass
class Permission(Record):
    key: Optional[str] = UNSET
    name: Optional[str] = UNSET
    type: Optional[str] = UNSET
    description: Optional[str] = UNSET


@dataclass
class UserPermission(Record):
    id: Optional[str] = UNSET
    key: Optional[str] = UNSET
    name: Optional[str] = UNSET
    type: Optional[str] = UNSET
    description: Optional[str] = UNSET
    have_permission: Optional[bool] = UNSET
    deprecated_key: Optional[bool] = UNSET


@dataclass
class Permissions(Record):
    """GET /permissions: every permission known to the instance."""
    permissions: Optional[Dict[str, Permission]] = UNSET


@dataclass
class MyPermissions(Record):
    """GET /mypermissions: permissions of the current user in a context."""
    permissions: Optional[Dict[str, UserPermission]] = UNSET


@dataclass
class ApplicationProperty(Record):
    id: Optional[str] = UNSET
    key: Optional[str] = UNSET
    value: Optional[str] = UNSET
    name: Optional[str] = UNSET
    desc: Optional[str] = UNSET
    type: Optional[str] = UNSET
    default_value: Optional[str] = UNSET
    example: Optional[str] = UNSET
    allowed_values: Optional[List[str]] = UNSET


@dataclass
class TimeTrackingConfiguration(Record):
    working_hours_per_day: Optional[float] = UNSET
    working_days_per_week: Optional[float] = UNSET
    time_format: Optional[str] = UNSET
    default_unit: Optional[str] = UNSET


@dataclass
class Configuration(Record):
    voting_enabled: Optional[bool] = UNSET
    watching_enabled: Optional[bool] = UNSET
    unassigned_issues_allowed: Optional[bool] = UNSET
    sub_tasks_enabled: Optional[bool] = UNSET
    issue_linking_enabled: Optional[bool] = UNSET
    time_tracking_enabled: Optional[bool] = UNSET
    attachments_enabled: Optional[bool] = UNSET
    time_tracking_configuration: Optional[TimeTrackingConfiguration] = UNSET


@dataclass
class HealthCheckResult(Record):
    name: Optional[str] = UNSET
    description: Optional[str] = UNSET
    passed: Optional[bool] = UNSET


@dataclass
class ServerInfo(Record):
    base_url: Optional[str] = UNSET
    version: Optional[str] = UNSET
    version_numbers: Optional[List[int]] = UNSET
    deployment_type: Optional[str] = UNSET
    build_number: Optional[int] = UNSET
    build_date: Optional[str] = UNSET
    database_build_number: Optional[int] = UNSET
    server_time: Optional[str] = UNSET
    scm_info: Optional[str] = UNSET
    build_partner_name: Optional[str] = UNSET
    server_title: Optional[str] = UNSET
    health_checks: Optional[List[HealthCheckResult]] = UNSET


@dataclass
class Reindex(Record):
    progress_url: Optional[str] = UNSET
    current_progress: Optional[int] = UNSET
    current_sub_task: Optional[str] = UNSET
    type: Optional[str] = UNSET
    submitted_time: Optional[str] = UNSET
    start_time: Optional[str] = UNSET
    finish_time: Optional[str] = UNSET
    success: Optional[bool] = UNSET


@dataclass
class ReindexRequest(Record):
    id: Optional[int] = UNSET
    status: Optional[str] = UNSET
    type: Optional[str] = UNSET
    request_time: Optional[str] = UNSET
    start_time: Optional[str] = UNSET
    completion_time: Optional[str] = UNSET


@dataclass
class UpgradeResult(Record):
    duration: Optional[int] = UNSET
    outcome: Optional[str] = UNSET
    message: Optional[str] = UNSET


@dataclass
class AutoCompleteField(Record):
    value: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    orderable: Optional[str] = UNSET
    searchable: Optional[str] = UNSET
    cfid: Optional[str] = UNSET
    operators: Optional[List[str]] = UNSET
    types: Optional[List[str]] = UNSET


@dataclass
class AutoComplete(Record):
    visible_field_names: Optional[List[AutoCompleteField]] = UNSET
    visible_function_names: Optional[List[AutoCompleteField]] = UNSET
    jql_reserved_words: Optional[List[str]] = UNSET


@dataclass
class AutoCompleteSuggestion(Record):
    value: Optional[str] = UNSET
    display_name: Optional[str] = UNSET


@dataclass
class AutoCompleteSuggestions(Record):
    results: Optional[List[AutoCompleteSuggestion]] = UNSET


@dataclass
class PasswordPolicyCreateUser(Record):
    username: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    email_address: Optional[str] = UNSET
    password: Optional[str] = UNSET


@dataclass
class PasswordPolicyUpdateUser(Record):
    username: Optional[str] = UNSET
    old_password: Optional[str] = UNSET
    new_password: Optional[str] = UNSET
