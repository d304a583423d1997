"""
Errors raised by the transport layer.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _as_messages(value: Any) -> List[str]:
    """Messages from a list, or from a lone string Jira sent in its place."""
    if isinstance(value, list):
        return [str(item) for item in value]
    return [str(value)] if value else []


@dataclass
class JiraErrorData:
    """Jira's standard error body: ``{errorMessages, errors, status}``."""
    error_messages: List[str] = field(default_factory=list)
    errors: Dict[str, str] = field(default_factory=dict)
    status: Optional[int] = None


class JiraError(Exception):
    """A request to Jira came back with a non-2xx status.

    Attributes:
        status_code: HTTP status, or None when no response was received
        status_text: HTTP reason phrase
        method: HTTP verb of the failed request
        url: Absolute URL of the failed request
        raw: Parsed response body (dict, text or None)
        error_messages: Jira's ``errorMessages`` list
        errors: Jira's ``errors`` map (field name to message)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_text: str = '',
        method: str = '',
        url: str = '',
        raw: Any = None,
        error_messages: Optional[List[str]] = None,
        errors: Optional[Dict[str, str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.method = method
        self.url = url
        self.raw = raw
        self.error_messages = list(error_messages or [])
        self.errors = dict(errors or {})

    @classmethod
    def from_response(
        cls,
        status_code: int,
        status_text: str,
        method: str,
        url: str,
        body: Any
    ) -> 'JiraError':
        """Build an error from a failed response, keeping the server messages.

        Args:
            status_code: HTTP status
            status_text: HTTP reason phrase
            method: HTTP verb
            url: Request URL
            body: Parsed response body

        Returns:
            JiraError whose message includes status and server messages
        """
        error_messages: List[str] = []
        errors: Dict[str, str] = {}
        if isinstance(body, dict):
            error_messages = _as_messages(body.get('errorMessages'))
            field_errors = body.get('errors')
            if isinstance(field_errors, dict):
                errors = {str(k): str(v) for k, v in field_errors.items()}
            else:
                error_messages += _as_messages(field_errors)
            if not error_messages and body.get('message'):
                error_messages = [str(body['message'])]
        elif isinstance(body, str) and body.strip():
            error_messages = [body.strip()]

        details = error_messages + [f"{k}: {v}" for k, v in errors.items()]
        message = f"{method} {url} failed with {status_code} {status_text}".rstrip()
        if details:
            message += ": " + "; ".join(details)

        return cls(
            message,
            status_code=status_code,
            status_text=status_text,
            method=method,
            url=url,
            raw=body,
            error_messages=error_messages,
            errors=errors
        )

    @property
    def data(self) -> JiraErrorData:
        """Server error payload in Jira's standard shape."""
        return JiraErrorData(
            error_messages=list(self.error_messages),
            errors=dict(self.errors),
            status=self.status_code
        )

    def __str__(self) -> str:
        return self.message


class JiraConnectionError(JiraError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""

    def __init__(self, message: str, method: str = '', url: str = ''):
        super().__init__(message, status_code=None, method=method, url=url)
