"""
Integration tests for the httpx and requests transports.
"""
from unittest.mock import Mock, patch

import httpx
import pytest
import requests

from jira_connector import (
    HttpRequest, HttpxTransport, JiraConnectionError, JiraError, JiraServerConnector, RequestsTransport,
)

URL = "https://jira.example.com/rest/api/latest/issue/PRJ-1"


def make_request(method="GET"):
    return HttpRequest(method=method, url=URL).with_header("Accept", "application/json")


class TestHttpxTransport:
    """Test HttpxTransport against httpx.MockTransport."""

    async def test_success_parses_json(self):
        def handler(request):
            return httpx.Response(200, json={"key": "PRJ-1"})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            response = await HttpxTransport(client=client).execute(make_request())

        assert response.status_code == 200
        assert response.data == {"key": "PRJ-1"}

    async def test_query_params_keep_order_and_repeats(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(204)

        request = make_request().with_query_param("requestId", 1).with_query_param("requestId", 2)
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            response = await HttpxTransport(client=client).execute(request)

        assert response.data is None
        assert seen[0].url.params.get_list("requestId") == ["1", "2"]

    async def test_error_status_raises_jira_error(self):
        def handler(request):
            return httpx.Response(400, json={"errorMessages": [], "errors": {"summary": "required"}})

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(JiraError) as excinfo:
                await HttpxTransport(client=client).execute(make_request("POST"))

        assert excinfo.value.status_code == 400
        assert excinfo.value.errors == {"summary": "required"}
        assert str(excinfo.value) == f"POST {URL} failed with 400 Bad Request: summary: required"

    async def test_network_failure_raises_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(JiraConnectionError) as excinfo:
                await HttpxTransport(client=client).execute(make_request())

        assert excinfo.value.url == URL
        assert isinstance(excinfo.value.__cause__, httpx.ConnectError)

    async def test_given_client_is_not_closed(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(204)))
        transport = HttpxTransport(client=client)

        await transport.aclose()

        assert client.is_closed is False
        await client.aclose()

    async def test_owned_client_is_closed(self):
        transport = HttpxTransport(timeout=5)
        client = transport.client

        await transport.aclose()

        assert client.is_closed is True
        assert transport.name == "httpx"


class TestRequestsTransport:
    """Test RequestsTransport with a mocked Session."""

    def make_session(self, status_code=200, content=b'{"key": "PRJ-1"}', reason="OK"):
        response = Mock()
        response.ok = status_code < 400
        response.status_code = status_code
        response.content = content
        response.reason = reason
        response.headers = {"Content-Type": "application/json"}
        session = Mock(spec=requests.Session)
        session.request.return_value = response
        return session

    async def test_success(self):
        session = self.make_session()
        transport = RequestsTransport(session=session, timeout=7)

        response = await transport.execute(make_request().with_query_param("expand", "names"))

        assert response.data == {"key": "PRJ-1"}
        args, kwargs = session.request.call_args
        assert args == ("GET", URL)
        assert kwargs["params"] == [("expand", "names")]
        assert kwargs["timeout"] == 7
        assert kwargs["headers"]["Accept"] == "application/json"

    async def test_json_body(self):
        session = self.make_session()
        request = make_request("PUT").as_json().with_body({"name": "alice"})

        await RequestsTransport(session=session).execute(request)

        assert session.request.call_args.kwargs["json"] == {"name": "alice"}

    async def test_file_body_is_multipart(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        session = self.make_session(content=b"[]")
        request = make_request("POST").as_file().with_body(str(path))

        await RequestsTransport(session=session).execute(request)

        kwargs = session.request.call_args.kwargs
        assert kwargs["files"] == {"file": ("notes.txt", b"hello")}
        assert kwargs["headers"]["X-Atlassian-Token"] == "no-check"

    async def test_error_status_raises_jira_error(self):
        session = self.make_session(404, b'{"errorMessages": ["Issue does not exist"]}', "Not Found")

        with pytest.raises(JiraError) as excinfo:
            await RequestsTransport(session=session).execute(make_request())

        assert excinfo.value.status_code == 404
        assert excinfo.value.status_text == "Not Found"
        assert excinfo.value.error_messages == ["Issue does not exist"]

    async def test_network_failure_raises_connection_error(self):
        session = Mock(spec=requests.Session)
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(JiraConnectionError):
            await RequestsTransport(session=session).execute(make_request())

    async def test_given_session_is_not_closed(self):
        session = self.make_session()

        await RequestsTransport(session=session).aclose()

        session.close.assert_not_called()

    async def test_owned_session_is_closed(self):
        with patch.object(requests, "Session") as session_cls:
            transport = RequestsTransport()

        await transport.aclose()

        assert transport.name == "requests"
        session_cls.return_value.close.assert_called_once_with()

    async def test_owned_session_created_before_any_request(self):
        with patch.object(requests, "Session") as session_cls:
            transport = RequestsTransport()

        session_cls.assert_called_once_with()
        assert transport.session is session_cls.return_value


class TestConnectorOverRequests:
    """Test the connector end to end over RequestsTransport."""

    async def test_issue_get(self, auth):
        session = Mock(spec=requests.Session)
        response = Mock(ok=True, status_code=200, content=b'{"key": "PRJ-1"}', reason="OK",
                        headers={"Content-Type": "application/json"})
        session.request.return_value = response

        async with JiraServerConnector(auth, transport=RequestsTransport(session=session)) as jira:
            issue = await jira.issues.get("PRJ-1")

        assert issue.key == "PRJ-1"
        assert session.request.call_args.args == ("GET", URL)
        assert session.request.call_args.kwargs["headers"]["Authorization"] == "Basic Ym9iOnNlY3JldA=="
