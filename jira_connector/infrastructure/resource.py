"""
Resource client: the request-building core every endpoint is composed of.
"""
from typing import Any, Mapping, Optional, Type, Union

from ..core.auth import Basic
from ..core.domain.base import Record, from_wire
from ..core.interfaces import ITransport
from ..core.pagination import Page, PageOptions
from ..core.request import HttpRequest

Options = Union[Record, Mapping[str, Any], None]

# Paging envelope carried by some option records; never sent as a parameter
PAGE_OPTIONS_KEY = 'pageOptions'


class ResourceClient:
    """Builds and executes requests below one REST path.

    A ResourceClient is bound to a credential context whose endpoint is the
    parent's endpoint plus a suffix. Child clients extend that context; the
    parent is left unchanged.
    """

    def __init__(self, parent: Basic, suffix: str, transport: ITransport):
        """Initialize a resource client.

        Args:
            parent: Credential context of the parent resource
            suffix: Path appended to the parent's endpoint (may be "")
            transport: Transport used to execute requests
        """
        self._auth = parent.extend(suffix)
        self._transport = transport

    @property
    def auth(self) -> Basic:
        return self._auth

    @property
    def path(self) -> str:
        """Absolute endpoint URL of this resource."""
        return self._auth.api_endpoint

    @property
    def transport(self) -> ITransport:
        return self._transport

    def child(self, suffix: str) -> 'ResourceClient':
        """Client for a sub-resource: ``path + suffix``."""
        return ResourceClient(self._auth, suffix, self._transport)

    def at_root(self, suffix: str = '') -> 'ResourceClient':
        """Client for a path directly below the API root of the same host."""
        return ResourceClient(self._auth.root(), suffix, self._transport)

    def endpoint(self, param: Optional[Any] = None) -> str:
        """URL of this resource, or of ``param`` below it."""
        if param is None or param == '':
            return self.path
        return f"{self.path}/{param}"

    def build_request(
        self,
        method: str,
        param: Optional[Any] = None,
        page_options: Optional[PageOptions] = None
    ) -> HttpRequest:
        """Create an authenticated request.

        Args:
            method: HTTP verb
            param: Optional path segment(s) below this resource
            page_options: Paging parameters to add to the query string

        Returns:
            HttpRequest carrying the Authorization and Accept headers
        """
        request = HttpRequest(method=method, url=self.endpoint(param)) \
            .with_header('Authorization', self._auth.header()) \
            .with_header('Accept', 'application/json')
        if page_options is not None:
            request = self.apply_options(request, page_options)
        return request

    def get(self, param: Optional[Any] = None, page_options: Optional[PageOptions] = None) -> HttpRequest:
        return self.build_request('GET', param, page_options)

    def post(self, param: Optional[Any] = None, page_options: Optional[PageOptions] = None) -> HttpRequest:
        return self.build_request('POST', param, page_options)

    def put(self, param: Optional[Any] = None, page_options: Optional[PageOptions] = None) -> HttpRequest:
        return self.build_request('PUT', param, page_options)

    def delete(self, param: Optional[Any] = None, page_options: Optional[PageOptions] = None) -> HttpRequest:
        return self.build_request('DELETE', param, page_options)

    @staticmethod
    def apply_options(request: HttpRequest, options: Options) -> HttpRequest:
        """Add one query parameter per option that has a value.

        Args:
            request: Request to extend
            options: Option record (wire names are used) or a plain mapping
                (keys are used verbatim)

        Returns:
            New request with the parameters appended
        """
        if options is None:
            return request
        values = options.to_dict() if isinstance(options, Record) else options
        for key, value in values.items():
            if key == PAGE_OPTIONS_KEY:
                continue
            request = request.with_query_param(key, value)
        return request

    async def execute(self, request: HttpRequest) -> Any:
        """Send a request and return the parsed response body."""
        response = await self._transport.execute(request)
        return response.data

    async def fetch(self, request: HttpRequest, shape: Any) -> Any:
        """Send a request and convert the body to ``shape``.

        Args:
            request: Request to send
            shape: Record class or typing hint such as ``List[User]``

        Returns:
            Converted response body
        """
        data = await self.execute(request)
        return from_wire(shape, data)

    async def fetch_page(
        self,
        request: HttpRequest,
        items_key: str,
        item_type: Optional[Type[Any]] = None
    ) -> Page:
        """Send a request and normalize the paged body into a Page."""
        data = await self.execute(request)
        return Page.from_envelope(data, items_key, request.full_url, item_type)

    def __repr__(self) -> str:
        return f"ResourceClient({self.path!r})"
