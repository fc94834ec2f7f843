"""Module for Jira issue operations."""

import logging
from typing import Any

from ..exceptions import JiraApiError
from ..models.jira import JiraIssue
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(self, issue_key: str, fields: list[str] | None = None) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123') or id
            fields: Optional list of fields to return; all fields when omitted

        Returns:
            JiraIssue model with the issue data

        Raises:
            JiraApiError: If the issue cannot be fetched
        """
        params = {"fields": ",".join(fields)} if fields else None
        issue = self._request("get", f"issue/{issue_key}", params=params)
        return JiraIssue.from_api_response(issue or {})

    def create_issue(self, request: dict[str, Any]) -> JiraIssue:
        """
        Create a new Jira issue and fetch it back.

        Creation and the follow-up fetch are separate requests; if the fetch
        fails the issue still exists.

        Args:
            request: Create payload, ``{"fields": {...}}``

        Returns:
            JiraIssue model of the created issue

        Raises:
            JiraApiError: If creation or the follow-up fetch fails
        """
        created = self._request("post", "issue", data=request) or {}
        issue_key = created.get("key")
        if not issue_key:
            msg = "Jira API Error: create response did not include an issue key"
            logger.error(f"{msg}: {created}")
            raise JiraApiError(msg)

        logger.info(f"Created issue {issue_key}")
        return self.get_issue(issue_key)

    def update_issue(self, issue_key: str, request: dict[str, Any]) -> None:
        """
        Update the fields of an existing issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            request: Update payload, ``{"fields": {...}}``

        Raises:
            JiraApiError: If the update is rejected
        """
        self._request("put", f"issue/{issue_key}", data=request)
        logger.info(f"Updated issue {issue_key}")
