"""
Infrastructure layer - implementations of the core interfaces.

Contains:
- http: Transports (httpx, requests) executing HttpRequest values
- resource: ResourceClient, the request builder endpoints are composed of
- endpoints: One class per Jira REST resource family
"""
from .http import HttpxTransport, RequestsTransport
from .resource import ResourceClient

__all__ = [
    'HttpxTransport',
    'RequestsTransport',
    'ResourceClient',
]
