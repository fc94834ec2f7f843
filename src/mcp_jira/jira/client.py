"""Base client module for Jira API interactions."""

import logging
from typing import Any, Literal

from atlassian import Jira
from requests import Response
from requests.exceptions import HTTPError, RequestException

from ..exceptions import JiraApiError
from .config import JiraConfig
from .constants import API_VERSION

# Configure logging
logger = logging.getLogger("mcp-jira")


def _error_messages(response: Response) -> list[str]:
    """Collect the human-readable messages from a Jira error body.

    Jira reports failures as ``{"errorMessages": [...], "errors": {field: msg}}``.
    Field errors are rendered as ``"field: msg"`` after the general messages.
    """
    try:
        body = response.json()
    except ValueError:
        text = (response.text or "").strip()
        return [text] if text else []

    if not isinstance(body, dict):
        return [str(body)]

    messages = [str(message) for message in body.get("errorMessages") or []]
    errors = body.get("errors") or {}
    if isinstance(errors, dict):
        messages.extend(f"{field}: {message}" for field, message in errors.items())
    return messages


class JiraClient:
    """Base client for Jira API interactions.

    Every request goes to ``<base-url>/rest/api/3`` with Basic authentication
    and a fixed timeout. Failures are never retried; they surface as a single
    JiraApiError.
    """

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        self.jira = Jira(
            url=self.config.base_url,
            username=self.config.username,
            password=self.config.api_token,
            api_version=API_VERSION,
            timeout=self.config.timeout,
            verify_ssl=self.config.ssl_verify,
        )

    def _request(
        self,
        method: Literal["get", "post", "put"],
        resource: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        """
        Issue one request against the REST API and return the decoded body.

        Args:
            method: The HTTP method to use
            resource: Path below the REST root, e.g. 'issue/PROJ-1'
            params: Optional query parameters
            data: Optional JSON body

        Returns:
            The decoded JSON response, or None for empty responses

        Raises:
            JiraApiError: On a transport failure, a non-2xx response or a
                2xx response whose body is not JSON
        """
        path = self.jira.resource_url(resource)
        logger.debug(f"Jira {method.upper()} {path} params={params}")

        try:
            if method == "get":
                result = self.jira.get(path, params=params)
            elif method == "post":
                result = self.jira.post(path, data=data, params=params)
            else:
                result = self.jira.put(path, data=data, params=params)
        except HTTPError as http_err:
            error = self._api_error(http_err)
            logger.error(f"{method.upper()} {path} failed: {error}")
            raise error from http_err
        except RequestException as req_err:
            logger.error(f"{method.upper()} {path} failed: {req_err}")
            raise JiraApiError(f"Jira API Error: {req_err}") from req_err

        # The atlassian client hands back the raw text when a 2xx body is not JSON
        if result is not None and not isinstance(result, (dict, list)):
            logger.error(f"{method.upper()} {path} returned a non-JSON body")
            raise JiraApiError(f"Jira API Error: unexpected non-JSON response from {path}")
        return result

    @staticmethod
    def _api_error(http_err: HTTPError) -> JiraApiError:
        """Convert an HTTP error into a JiraApiError with the server's messages."""
        response = http_err.response
        if response is None:
            return JiraApiError(f"Jira API Error: {http_err}")

        messages = _error_messages(response)
        detail = ", ".join(messages) if messages else (response.reason or str(http_err))
        return JiraApiError(
            f"Jira API Error ({response.status_code}): {detail}",
            status_code=response.status_code,
            messages=messages,
        )
