"""
User, group and application-role records.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import UNSET, Record
from .common import ListWrapper


@dataclass
class ApplicationRole(Record):
    key: Optional[str] = UNSET
    groups: Optional[List[str]] = UNSET
    name: Optional[str] = UNSET
    default_groups: Optional[List[str]] = UNSET
    selected_by_default: Optional[bool] = UNSET
    defined: Optional[bool] = UNSET
    number_of_seats: Optional[int] = UNSET
    remaining_seats: Optional[int] = UNSET
    user_count: Optional[int] = UNSET
    user_count_description: Optional[str] = UNSET
    has_unlimited_seats: Optional[bool] = UNSET
    platform: Optional[bool] = UNSET


@dataclass
class User(Record):
    self_: Optional[str] = UNSET
    key: Optional[str] = UNSET
    name: Optional[str] = UNSET
    email_address: Optional[str] = UNSET
    avatar_urls: Optional[Dict[str, str]] = UNSET
    display_name: Optional[str] = UNSET
    active: Optional[bool] = UNSET
    deleted: Optional[bool] = UNSET
    time_zone: Optional[str] = UNSET
    locale: Optional[str] = UNSET
    groups: Optional[ListWrapper] = UNSET
    application_roles: Optional[ListWrapper] = UNSET
    expand: Optional[str] = UNSET


@dataclass
class UserInput(Record):
    """Body for creating or updating a user."""
    name: Optional[str] = UNSET
    password: Optional[str] = UNSET
    email_address: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    notification: Optional[bool] = UNSET
    application_keys: Optional[List[str]] = UNSET
    active: Optional[bool] = UNSET


@dataclass
class Group(Record):
    self_: Optional[str] = UNSET
    name: Optional[str] = UNSET
    users: Optional[ListWrapper] = UNSET
    expand: Optional[str] = UNSET


@dataclass
class GroupSuggestionLabel(Record):
    text: Optional[str] = UNSET
    title: Optional[str] = UNSET
    type: Optional[str] = UNSET


@dataclass
class GroupSuggestion(Record):
    name: Optional[str] = UNSET
    html: Optional[str] = UNSET
    labels: Optional[List[GroupSuggestionLabel]] = UNSET


@dataclass
class GroupSuggestions(Record):
    header: Optional[str] = UNSET
    total: Optional[int] = UNSET
    groups: Optional[List[GroupSuggestion]] = UNSET


@dataclass
class UserSuggestion(Record):
    name: Optional[str] = UNSET
    key: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    avatar_url: Optional[str] = UNSET
    html: Optional[str] = UNSET


@dataclass
class UsersSuggestion(Record):
    users: Optional[List[UserSuggestion]] = UNSET
    total: Optional[int] = UNSET
    header: Optional[str] = UNSET


@dataclass
class GroupsSuggestion(Record):
    groups: Optional[List[GroupSuggestion]] = UNSET
    total: Optional[int] = UNSET
    header: Optional[str] = UNSET


@dataclass
class UserAndGroups(Record):
    users: Optional[UsersSuggestion] = UNSET
    groups: Optional[GroupsSuggestion] = UNSET


@dataclass
class UserPickerUser(Record):
    name: Optional[str] = UNSET
    key: Optional[str] = UNSET
    html: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    avatar_url: Optional[str] = UNSET


@dataclass
class UserPickerResult(Record):
    users: Optional[List[UserPickerUser]] = UNSET
    total: Optional[int] = UNSET
    header: Optional[str] = UNSET


@dataclass
class A11yPersonalSetting(Record):
    key: Optional[str] = UNSET
    label: Optional[str] = UNSET
    description: Optional[str] = UNSET
    enabled: Optional[bool] = UNSET


@dataclass
class AnonymizationValidation(Record):
    """Result of an anonymization dry run; returned with HTTP 400 when it has findings."""
    errors: Optional[Dict[str, Any]] = UNSET
    warnings: Optional[Dict[str, Any]] = UNSET
    expand: Optional[str] = UNSET
    deleted: Optional[bool] = UNSET
    email: Optional[str] = UNSET
    success: Optional[bool] = UNSET
    user_key: Optional[str] = UNSET
    user_name: Optional[str] = UNSET
    display_name: Optional[str] = UNSET
    affected_entities: Optional[Dict[str, Any]] = UNSET
    operations: Optional[List[str]] = UNSET
    business_logic_validation_failed: Optional[bool] = UNSET


@dataclass
class AnonymizationProgress(Record):
    status: Optional[str] = UNSET
    errors: Optional[Dict[str, Any]] = UNSET
    warnings: Optional[Dict[str, Any]] = UNSET
    operations: Optional[List[str]] = UNSET
    user_key: Optional[str] = UNSET
    user_name: Optional[str] = UNSET
    full_name: Optional[str] = UNSET
    progress_url: Optional[str] = UNSET
    current_progress: Optional[int] = UNSET
    current_sub_task: Optional[str] = UNSET
    submitted_time: Optional[str] = UNSET
    start_time: Optional[str] = UNSET
    finish_time: Optional[str] = UNSET
    execution_async: Optional[bool] = UNSET
    is_rerun: Optional[bool] = UNSET
    rerun_planned: Optional[bool] = UNSET
