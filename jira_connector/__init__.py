"""
jira_connector - typed async client for the Jira Server REST API.

Usage:
    from jira_connector import BasicAuth, JiraServerConnector

    async with JiraServerConnector(BasicAuth('bob', 'secret', 'https://jira.example.com')) as jira:
        me = await jira.myself.get()
"""
from .connector import JiraServerConnector
from .core import (
    API_ENDPOINT,
    Basic,
    BasicAuth,
    HttpRequest,
    HttpResponse,
    JiraConnectionError,
    JiraError,
    JiraErrorData,
    Page,
    PageOptions,
)
from .core.config import ConnectorConfig
from .core.domain import UNSET, Record
from .core.interfaces import ITransport
from .core.logger import configure_logging, get_logger
from .core.options import SearchOptions
from .infrastructure import HttpxTransport, RequestsTransport

__version__ = "0.1.0"

__all__ = [
    # Facade
    'JiraServerConnector',
    # Credentials and configuration
    'API_ENDPOINT',
    'Basic',
    'BasicAuth',
    'ConnectorConfig',
    # Errors
    'JiraError',
    'JiraConnectionError',
    'JiraErrorData',
    # Records and paging
    'Record',
    'UNSET',
    'Page',
    'PageOptions',
    'SearchOptions',
    # Transports
    'ITransport',
    'HttpRequest',
    'HttpResponse',
    'HttpxTransport',
    'RequestsTransport',
    # Logging
    'configure_logging',
    'get_logger',
]
