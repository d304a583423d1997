"""
Immutable HTTP request and response values.

An HttpRequest is built step by step by endpoints; every step returns a new
value, so a partially built request can be shared or reused safely.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .domain.base import UNSET, Record, to_wire


class BodyType(Enum):
    """How the request body is encoded on the wire."""
    NONE = 'none'
    JSON = 'json'
    RAW = 'raw'
    FILE = 'file'


def format_param(value: Any) -> str:
    """Render a query parameter value the way Jira expects it.

    Booleans become ``true``/``false`` and sequences are comma separated.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (list, tuple, set, frozenset)):
        return ','.join(format_param(item) for item in value)
    return str(value)


@dataclass(frozen=True)
class HttpRequest:
    """A fully described HTTP call, ready for a transport."""
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    params: Tuple[Tuple[str, str], ...] = ()
    body: Any = None
    body_type: BodyType = BodyType.NONE

    def with_url(self, url: str) -> 'HttpRequest':
        return replace(self, url=url)

    def with_header(self, name: str, value: str) -> 'HttpRequest':
        headers: Dict[str, str] = dict(self.headers)
        headers[name] = value
        return replace(self, headers=headers)

    def with_query_param(self, name: str, value: Any) -> 'HttpRequest':
        """Add ``name=value``; a None or UNSET value adds nothing."""
        if value is None or value is UNSET:
            return self
        return replace(self, params=self.params + ((name, format_param(value)),))

    def with_query_params(self, values: Mapping[str, Any]) -> 'HttpRequest':
        request = self
        for name, value in values.items():
            request = request.with_query_param(name, value)
        return request

    def with_body(self, body: Any) -> 'HttpRequest':
        """Attach a body. Records are serialized to their wire form."""
        if isinstance(body, Record) or isinstance(body, (list, tuple, dict)):
            body = to_wire(body)
        return replace(self, body=body)

    def as_json(self) -> 'HttpRequest':
        return replace(self, body_type=BodyType.JSON).with_header('Content-Type', 'application/json')

    def as_raw(self) -> 'HttpRequest':
        return replace(self, body_type=BodyType.RAW).with_header('Content-Type', 'text/plain')

    def as_file(self) -> 'HttpRequest':
        """Send the body (a file path) as a multipart upload."""
        return replace(self, body_type=BodyType.FILE).with_header('X-Atlassian-Token', 'no-check')

    def param(self, name: str) -> Optional[str]:
        """Return the first value of a query parameter, if present."""
        for key, value in self.params:
            if key == name:
                return value
        return None

    @property
    def full_url(self) -> str:
        if not self.params:
            return self.url
        return self.url + '?' + urlencode(self.params)


@dataclass(frozen=True)
class HttpResponse:
    """A 2xx response with its body already parsed."""
    status_code: int
    data: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)
    reason: str = ''
