"""
Shared fixtures: a routed httpx.MockTransport and a connector wired to it.
"""
import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from jira_connector import BasicAuth, HttpxTransport, JiraServerConnector

HOST = "https://jira.example.com"
API = "/rest/api/latest"


class FakeJira:
    """Records every request and answers from a table of canned routes.

    Routes are keyed by (method, path below /rest/api/latest). Unrouted
    requests get a 204 with an empty body.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], httpx.Response] = {}

    def route(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
        content_type: Optional[str] = None
    ) -> None:
        if content is not None:
            headers = {"Content-Type": content_type or "application/octet-stream"}
            response = httpx.Response(status, content=content, headers=headers)
        elif text is not None:
            response = httpx.Response(status, text=text)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body)
        else:
            response = httpx.Response(status)
        self._routes[(method.upper(), API + path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(204)
        return httpx.Response(
            response.status_code,
            headers=response.headers,
            content=response.content
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def last_path(self) -> str:
        """Path of the last request relative to the API root."""
        return self.last.url.path[len(API):]


@pytest.fixture
def auth():
    return BasicAuth(user="bob", password="secret", host=HOST + "/")


@pytest.fixture
def fake_jira():
    return FakeJira()


@pytest.fixture
async def jira(auth, fake_jira):
    """JiraServerConnector sending every request to fake_jira."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_jira.handler))
    connector = JiraServerConnector(auth, transport=HttpxTransport(client=client))
    yield connector
    await connector.aclose()
    await client.aclose()
