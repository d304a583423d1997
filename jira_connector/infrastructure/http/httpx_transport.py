"""
Jira HTTP transport on httpx.AsyncClient.

This class handles only HTTP concerns: sending requests, decoding bodies and
turning failed calls into JiraError.
"""
import time
from typing import Any, Dict, Optional

import httpx

from ...core.config import DEFAULT_TIMEOUT
from ...core.errors import JiraConnectionError, JiraError
from ...core.interfaces import ITransport
from ...core.logger import get_logger
from ...core.request import BodyType, HttpRequest, HttpResponse
from .codec import encode_text, parse_body, prepare_headers, read_upload


class HttpxTransport(ITransport):
    """Async transport backed by httpx."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True
    ):
        """Initialize the transport.

        Args:
            client: Existing AsyncClient to use; the transport will not close it
            timeout: Request timeout in seconds for a client created here
            verify: Verify TLS certificates for a client created here
        """
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._verify = verify
        self._logger = get_logger('transport')

    @property
    def name(self) -> str:
        return 'httpx'

    @property
    def client(self) -> httpx.AsyncClient:
        """The underlying client, created on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, verify=self._verify)
        return self._client

    async def _body_kwargs(self, request: HttpRequest) -> Dict[str, Any]:
        if request.body_type is BodyType.JSON:
            return {} if request.body is None else {'json': request.body}
        if request.body_type is BodyType.RAW:
            return {'content': encode_text(request.body)}
        if request.body_type is BodyType.FILE:
            filename, content = await read_upload(request.body)
            return {'files': {'file': (filename, content)}}
        return {}

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
            response = await self.client.request(
                request.method,
                request.url,
                params=list(request.params) or None,
                headers=prepare_headers(request),
                **body_kwargs
            )
        except httpx.HTTPError as exc:
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
        data = parse_body(response.content, response.headers.get('content-type', ''))

        if not response.is_success:
            self._logger.log_request(
                request.method, request.full_url, duration_ms,
                status_code=response.status_code, transport=self.name,
                error=response.reason_phrase
            )
            raise JiraError.from_response(
                response.status_code,
                response.reason_phrase,
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
            reason=response.reason_phrase
        )

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
