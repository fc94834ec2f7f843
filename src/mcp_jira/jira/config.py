"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass

from .constants import DEFAULT_TIMEOUT

REQUIRED_ENV_VARS = ("JIRA_BASE_URL", "JIRA_USERNAME", "JIRA_API_TOKEN")


@dataclass
class JiraConfig:
    """Jira API configuration.

    Connects with Basic authentication: a username (or e-mail on Cloud)
    paired with an API token.
    """

    url: str  # Base URL for Jira, without the REST path
    username: str  # Basic-auth user name or e-mail
    api_token: str  # API token used as the Basic-auth password
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: int = DEFAULT_TIMEOUT  # Per-request timeout in seconds

    @property
    def base_url(self) -> str:
        """The configured URL without a trailing slash."""
        return self.url.rstrip("/")

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        missing = [name for name in REQUIRED_ENV_VARS if not os.getenv(name)]
        if missing:
            error_msg = (
                f"Missing required environment variables: {', '.join(missing)}. "
                f"Required: {', '.join(REQUIRED_ENV_VARS)}"
            )
            raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("JIRA_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_env:
            try:
                timeout = int(timeout_env)
            except ValueError:
                error_msg = f"JIRA_TIMEOUT must be an integer number of seconds, got '{timeout_env}'"
                raise ValueError(error_msg) from None
            if timeout <= 0:
                raise ValueError("JIRA_TIMEOUT must be greater than zero")

        return cls(
            url=os.environ["JIRA_BASE_URL"],
            username=os.environ["JIRA_USERNAME"],
            api_token=os.environ["JIRA_API_TOKEN"],
            ssl_verify=ssl_verify,
            timeout=timeout,
        )
