"""
HTTP transports for the Jira REST API.
"""
from .codec import parse_body
from .httpx_transport import HttpxTransport
from .requests_transport import RequestsTransport

__all__ = ['HttpxTransport', 'RequestsTransport', 'parse_body']
