"""
Unit tests for the credential context.
"""
import pytest

from jira_connector.core.auth import API_ENDPOINT, Basic, BasicAuth


class TestBasicFromAuth:
    """Test building the credential context from user input."""

    def test_endpoint_is_host_plus_api_path(self):
        basic = Basic.from_auth(BasicAuth("bob", "secret", "https://jira.example.com"))

        assert basic.api_endpoint == "https://jira.example.com" + API_ENDPOINT
        assert API_ENDPOINT == "/rest/api/latest"

    def test_single_trailing_slash_is_stripped(self):
        """Exactly one trailing slash is removed from the host."""
        basic = Basic.from_auth(BasicAuth("bob", "secret", "https://jira.example.com/"))

        assert basic.host == "https://jira.example.com"
        assert basic.api_endpoint == "https://jira.example.com/rest/api/latest"

    def test_only_one_slash_is_stripped(self):
        basic = Basic.from_auth(BasicAuth("bob", "secret", "https://jira.example.com//"))

        assert basic.host == "https://jira.example.com/"

    def test_host_with_context_path(self):
        basic = Basic.from_auth(BasicAuth("bob", "secret", "https://example.com/jira"))

        assert basic.api_endpoint == "https://example.com/jira/rest/api/latest"


class TestBasicHeader:
    """Test the Authorization header value."""

    def test_encode(self):
        basic = Basic.from_auth(BasicAuth("bob", "secret", "https://jira.example.com"))

        assert basic.encode() == "Ym9iOnNlY3JldA=="
        assert basic.header() == "Basic Ym9iOnNlY3JldA=="

    def test_encode_utf8(self):
        basic = Basic.from_auth(BasicAuth("jürgen", "pässword", "https://jira.example.com"))

        assert basic.header() == "Basic asO8cmdlbjpww6Rzc3dvcmQ="


class TestBasicExtend:
    """Test deriving child contexts."""

    def setup_method(self):
        self.basic = Basic.from_auth(BasicAuth("bob", "secret", "https://jira.example.com"))

    def test_extend_appends_suffix(self):
        child = self.basic.extend("/issue")

        assert child.api_endpoint == "https://jira.example.com/rest/api/latest/issue"

    def test_extend_leaves_parent_unchanged(self):
        self.basic.extend("/issue")

        assert self.basic.api_endpoint == "https://jira.example.com/rest/api/latest"

    def test_extend_keeps_credentials(self):
        child = self.basic.extend("/issue").extend("/PRJ-1/comment")

        assert child.user == "bob"
        assert child.password == "secret"
        assert child.header() == self.basic.header()

    def test_root_returns_api_endpoint(self):
        child = self.basic.extend("/project").extend("/PRJ")

        assert child.root().api_endpoint == "https://jira.example.com/rest/api/latest"

    def test_context_is_frozen(self):
        with pytest.raises(Exception):
            self.basic.user = "alice"


class TestBasicRepr:
    """Test that secrets stay out of reprs."""

    def test_password_not_in_repr(self):
        basic = Basic.from_auth(BasicAuth("bob", "s3cr3t-value", "https://jira.example.com"))

        assert "s3cr3t-value" not in repr(basic)
        assert "s3cr3t-value" not in repr(BasicAuth("bob", "s3cr3t-value", "https://jira.example.com"))
