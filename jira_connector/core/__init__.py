"""
Core layer: credentials, request values, pagination, records and errors.
"""
from .auth import API_ENDPOINT, Basic, BasicAuth
from .errors import JiraConnectionError, JiraError, JiraErrorData
from .pagination import Page, PageOptions
from .request import BodyType, HttpRequest, HttpResponse, format_param

__all__ = [
    # Credentials
    'API_ENDPOINT',
    'Basic',
    'BasicAuth',
    # Errors
    'JiraError',
    'JiraConnectionError',
    'JiraErrorData',
    # Pagination
    'Page',
    'PageOptions',
    # Requests
    'BodyType',
    'HttpRequest',
    'HttpResponse',
    'format_param',
]
