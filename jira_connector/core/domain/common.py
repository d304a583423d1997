"""
Shared wire records used across several resource families.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .base import UNSET, Record, wire


@dataclass
class SelfLink(Record):
    """Any resource that only carries its REST URL."""
    self_: Optional[str] = UNSET


@dataclass
class EntityProperty(Record):
    """Arbitrary JSON value stored against an entity under a key."""
    key: Optional[str] = UNSET
    value: Any = UNSET


@dataclass
class EntityPropertyKey(Record):
    self_: Optional[str] = UNSET
    key: Optional[str] = UNSET


@dataclass
class EntityPropertyKeys(Record):
    keys: Optional[List[EntityPropertyKey]] = UNSET


@dataclass
class ListWrapper(Record):
    """Jira's legacy expandable list shape ({size, items, max-results, ...})."""
    size: Optional[int] = UNSET
    max_results: Optional[int] = wire('max-results')
    start_index: Optional[int] = wire('start-index')
    end_index: Optional[int] = wire('end-index')
    items: Optional[List[Any]] = UNSET


@dataclass
class SimpleLink(Record):
    id: Optional[str] = UNSET
    style_class: Optional[str] = UNSET
    icon_class: Optional[str] = UNSET
    label: Optional[str] = UNSET
    title: Optional[str] = UNSET
    href: Optional[str] = UNSET
    weight: Optional[int] = UNSET


@dataclass
class LinkGroup(Record):
    id: Optional[str] = UNSET
    style_class: Optional[str] = UNSET
    header: Optional[SimpleLink] = UNSET
    weight: Optional[int] = UNSET
    links: Optional[List[SimpleLink]] = UNSET
    groups: Optional[List[LinkGroup]] = UNSET


@dataclass
class Avatar(Record):
    id: Optional[str] = UNSET
    owner: Optional[str] = UNSET
    is_system_avatar: Optional[bool] = UNSET
    is_selected: Optional[bool] = UNSET
    is_deletable: Optional[bool] = UNSET
    urls: Optional[Dict[str, str]] = UNSET
    selected: Optional[bool] = UNSET


@dataclass
class SystemAvatars(Record):
    system: Optional[List[Avatar]] = UNSET


@dataclass
class AvatarCropping(Record):
    """Temporary avatar returned after an upload, sent back to confirm a crop."""
    cropper_width: Optional[int] = UNSET
    cropper_offset_x: Optional[int] = UNSET
    cropper_offset_y: Optional[int] = UNSET
    url: Optional[str] = UNSET
    needs_cropping: Optional[bool] = UNSET


@dataclass
class ColumnItem(Record):
    label: Optional[str] = UNSET
    value: Optional[str] = UNSET


@dataclass
class ErrorCollection(Record):
    error_messages: Optional[List[str]] = UNSET
    errors: Optional[Dict[str, str]] = UNSET
    status: Optional[int] = UNSET


@dataclass
class Property(Record):
    key: Optional[str] = UNSET
    value: Optional[str] = UNSET
    id: Optional[str] = UNSET


@dataclass
class Icon(Record):
    url16x16: Optional[str] = UNSET
    title: Optional[str] = UNSET
    link: Optional[str] = UNSET
