"""
Configuration management - connection settings from the environment.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from ..auth import BasicAuth

DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class ConnectorConfig:
    """Jira Server connection configuration."""
    host: str
    user: str
    password: str = field(repr=False)
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env_file: Optional[Union[str, Path]] = None) -> 'ConnectorConfig':
        """Create config from environment variables.

        Reads JIRA_HOST, JIRA_USER, JIRA_PASSWORD, JIRA_TIMEOUT and
        JIRA_LOG_LEVEL. A .env file (the given one, or one found from the
        working directory upwards) is loaded first without overriding
        variables that are already set.

        Args:
            env_file: Explicit path of a .env file

        Returns:
            ConnectorConfig (not yet validated)
        """
        if env_file is not None:
            if Path(env_file).exists():
                load_dotenv(dotenv_path=env_file)
        else:
            load_dotenv()

        timeout_raw = os.getenv("JIRA_TIMEOUT", "")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"JIRA_TIMEOUT must be a number of seconds, got {timeout_raw!r}")

        return cls(
            host=os.getenv("JIRA_HOST", ""),
            user=os.getenv("JIRA_USER", ""),
            password=os.getenv("JIRA_PASSWORD", ""),
            timeout=timeout,
            log_level=os.getenv("JIRA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        )

    def validate(self) -> 'ConnectorConfig':
        """Check that every required setting is present.

        Returns:
            self, for chaining

        Raises:
            ValueError: If a required setting is missing or invalid
        """
        if not self.host:
            raise ValueError("Jira host is required (JIRA_HOST)")
        if not self.user:
            raise ValueError("Jira user is required (JIRA_USER)")
        if not self.password:
            raise ValueError("Jira password is required (JIRA_PASSWORD)")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive (JIRA_TIMEOUT)")
        return self

    def to_auth(self) -> BasicAuth:
        """Credentials for JiraServerConnector."""
        return BasicAuth(user=self.user, password=self.password, host=self.host)


__all__ = ['ConnectorConfig', 'DEFAULT_TIMEOUT', 'DEFAULT_LOG_LEVEL']
