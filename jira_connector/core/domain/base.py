"""
Record base for Jira wire shapes.

Every record is a dataclass whose fields default to UNSET. Only keys that
were present on the wire are set by from_dict(), and only fields that are
not UNSET are written back by to_dict(), so a partially populated record
round-trips without invented values.
"""
from dataclasses import field, fields
from typing import (
    Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union,
    get_args, get_origin, get_type_hints
)

R = TypeVar('R', bound='Record')


class _Unset:
    """Marker for a field the server did not send."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return 'UNSET'


UNSET: Any = _Unset()


def wire(name: str) -> Any:
    """Declare a record field whose wire key is not the camelCase of its name.

    Args:
        name: Exact JSON key used by the server (e.g. "max-results")
    """
    return field(default=UNSET, metadata={'wire': name})


def camel_case(name: str) -> str:
    """Convert a snake_case attribute name to its camelCase wire key.

    A trailing underscore (used for keywords such as ``from_`` or ``self_``)
    is dropped.
    """
    head, *rest = name.rstrip('_').split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


_SPECS: Dict[type, List[Tuple[str, str, Any]]] = {}


def _field_specs(cls: type) -> List[Tuple[str, str, Any]]:
    """Return (attribute, wire key, type hint) for every field of a record."""
    specs = _SPECS.get(cls)
    if specs is None:
        hints = get_type_hints(cls)
        specs = [
            (f.name, f.metadata.get('wire') or camel_case(f.name), hints.get(f.name, Any))
            for f in fields(cls)
        ]
        _SPECS[cls] = specs
    return specs


def from_wire(hint: Any, value: Any) -> Any:
    """Convert decoded JSON into the shape described by a type hint.

    Records, lists of records and string-keyed dicts of records are
    converted recursively; anything else is returned untouched.
    """
    if value is None or value is UNSET:
        return value
    origin = get_origin(hint)
    if origin is Union:
        args = [arg for arg in get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            return from_wire(args[0], value)
        return value
    if origin is list:
        args = get_args(hint)
        if isinstance(value, list):
            return [from_wire(args[0] if args else Any, item) for item in value]
        return value
    if origin is dict:
        args = get_args(hint)
        if isinstance(value, dict):
            item_hint = args[1] if len(args) == 2 else Any
            return {key: from_wire(item_hint, item) for key, item in value.items()}
        return value
    if isinstance(hint, type) and issubclass(hint, Record) and isinstance(value, Mapping):
        return hint.from_dict(value)
    return value


def to_wire(value: Any) -> Any:
    """Convert records (and containers of records) into plain JSON data."""
    if isinstance(value, Record):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items() if item is not UNSET}
    return value


class Record:
    """Base class for wire records. Subclasses must be dataclasses."""

    @classmethod
    def from_dict(cls: Type[R], data: Mapping[str, Any]) -> R:
        """Build a record from a decoded JSON object.

        Keys that are not declared on the record are kept in ``extras``.
        """
        by_key = {key: (name, hint) for name, key, hint in _field_specs(cls)}
        values: Dict[str, Any] = {}
        extras: Dict[str, Any] = {}
        for key, value in data.items():
            if key in by_key:
                name, hint = by_key[key]
                values[name] = from_wire(hint, value)
            else:
                extras[key] = value
        record = cls(**values)
        if extras:
            record.__dict__['_extras'] = extras
        return record

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict, skipping UNSET fields."""
        data: Dict[str, Any] = {}
        for name, key, _ in _field_specs(type(self)):
            value = getattr(self, name)
            if value is UNSET:
                continue
            data[key] = to_wire(value)
        for key, value in self.extras.items():
            data.setdefault(key, value)
        return data

    @property
    def extras(self) -> Dict[str, Any]:
        """Wire keys that have no declared field on this record."""
        return self.__dict__.get('_extras', {})

    def is_set(self, name: str) -> bool:
        """Return True if the attribute was provided (even as None)."""
        return getattr(self, name) is not UNSET

    def get(self, name: str, default: Optional[Any] = None) -> Any:
        """Return an attribute, or ``default`` when it is UNSET."""
        value = getattr(self, name, UNSET)
        return default if value is UNSET else value
