"""
HTTP Basic credentials and the per-endpoint credential context.
"""
import base64
from dataclasses import dataclass, field, replace

API_ENDPOINT = '/rest/api/latest'


@dataclass(frozen=True)
class BasicAuth:
    """User supplied connection settings."""
    user: str
    password: str = field(repr=False)
    host: str


@dataclass(frozen=True)
class Basic:
    """Credentials plus the absolute endpoint URL a request is built against.

    Every endpoint owns its own ``Basic``. Descending into a child resource
    produces a new value through :meth:`extend`; the parent is never touched.
    """
    user: str
    password: str
    host: str
    api_endpoint: str

    @classmethod
    def from_auth(cls, auth: BasicAuth) -> 'Basic':
        """Build the root context for an instance.

        Args:
            auth: User, password and host (e.g. "https://jira.example.com/")

        Returns:
            Context whose endpoint is ``host + /rest/api/latest``
        """
        host = auth.host[:-1] if auth.host.endswith('/') else auth.host
        return cls(
            user=auth.user,
            password=auth.password,
            host=host,
            api_endpoint=host + API_ENDPOINT
        )

    def encode(self) -> str:
        """Base64 of ``user:password``."""
        return base64.b64encode(f"{self.user}:{self.password}".encode('utf-8')).decode('ascii')

    def header(self) -> str:
        """Value for the Authorization header."""
        return 'Basic ' + self.encode()

    def extend(self, suffix: str) -> 'Basic':
        """Return a new context whose endpoint has ``suffix`` appended."""
        return replace(self, api_endpoint=self.api_endpoint + suffix)

    def root(self) -> 'Basic':
        """Return the context for the bare API endpoint of this host."""
        return replace(self, api_endpoint=self.host + API_ENDPOINT)

    def __repr__(self) -> str:
        return f"Basic(user={self.user!r}, api_endpoint={self.api_endpoint!r})"
