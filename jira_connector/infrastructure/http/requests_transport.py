"""
Jira HTTP transport on a requests.Session.

Blocking calls run in a worker thread so the transport can be awaited like
HttpxTransport.
"""
import asyncio
import time
from typing import Any, Dict, Optional

import requests

from ...core.config import DEFAULT_TIMEOUT
from ...core.errors import JiraConnectionError, JiraError
from ...core.interfaces import ITransport
from ...core.logger import get_logger
from ...core.request import BodyType, HttpRequest, HttpResponse
from .codec import encode_text, parse_body, prepare_headers, read_upload


class RequestsTransport(ITransport):
    """Transport backed by requests, for code bases standardized on it."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True
    ):
        """Initialize the transport.

        Args:
            session: Existing Session to use; the transport will not close it
            timeout: Request timeout in seconds
            verify: Verify TLS certificates
        """
        self._owns_session = session is None
        self._session = requests.Session() if session is None else session
        self._timeout = timeout
        self._verify = verify
        self._logger = get_logger('transport')

    @property
    def name(self) -> str:
        return 'requests'

    @property
    def session(self) -> requests.Session:
        return self._session

    async def _body_kwargs(self, request: HttpRequest) -> Dict[str, Any]:
        if request.body_type is BodyType.JSON:
            return {} if request.body is None else {'json': request.body}
        if request.body_type is BodyType.RAW:
            return {'data': encode_text(request.body)}
        if request.body_type is BodyType.FILE:
            filename, content = await read_upload(request.body)
            return {'files': {'file': (filename, content)}}
        return {}

    def _send(self, request: HttpRequest, body_kwargs: Dict[str, Any]) -> requests.Response:
        return self.session.request(
            request.method,
            request.url,
            params=list(request.params) or None,
            headers=prepare_headers(request),
            timeout=self._timeout,
            verify=self._verify,
            **body_kwargs
        )

    async def execute(self, request: HttpRequest) -> HttpResponse:
        """Send a request to Jira.

        Args:
            request: Request to send

        Returns:
            Parsed 2xx response

        Raises:
            JiraError: If Jira answers with a non-2xx status
            JiraConnectionError: If the request could not be completed
        """
        body_kwargs = await self._body_kwargs(request)
        started = time.perf_counter()
        try:
            response = await asyncio.to_thread(self._send, request, body_kwargs)
        except requests.RequestException as exc:
            self._logger.log_request(
                request.method, request.full_url,
                (time.perf_counter() - started) * 1000,
                transport=self.name, error=str(exc) or type(exc).__name__
            )
            raise JiraConnectionError(
                f"{request.method} {request.full_url} failed: {exc!r}",
                method=request.method,
                url=request.full_url
            ) from exc

        duration_ms = (time.perf_counter() - started) * 1000
        data = parse_body(response.content, response.headers.get('Content-Type', ''))

        if not response.ok:
            self._logger.log_request(
                request.method, request.full_url, duration_ms,
                status_code=response.status_code, transport=self.name,
                error=response.reason
            )
            raise JiraError.from_response(
                response.status_code,
                response.reason or '',
                request.method,
                request.full_url,
                data
            )

        self._logger.log_request(
            request.method, request.full_url, duration_ms,
            status_code=response.status_code, transport=self.name
        )
        return HttpResponse(
            status_code=response.status_code,
            data=data,
            headers=dict(response.headers),
            reason=response.reason or ''
        )

    async def aclose(self) -> None:
        if self._owns_session:
            await asyncio.to_thread(self._session.close)
