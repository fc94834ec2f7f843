"""Module for Jira comment operations."""

import logging
from typing import Any

from ..models.jira import JiraComment
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_comments(self, issue_key: str) -> list[JiraComment]:
        """
        Get the comments of an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of comments in the order Jira returns them

        Raises:
            JiraApiError: If the comments cannot be fetched
        """
        response = self._request("get", f"issue/{issue_key}/comment") or {}
        comments = response.get("comments", [])
        if not isinstance(comments, list):
            logger.warning(f"Unexpected comments format for {issue_key}")
            return []

        return [
            JiraComment.from_api_response(comment)
            for comment in comments
            if isinstance(comment, dict)
        ]

    def add_comment(self, issue_key: str, request: dict[str, Any]) -> JiraComment:
        """
        Add a comment to an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            request: Comment payload with an ADF ``body`` and optional
                ``visibility``

        Returns:
            The created comment

        Raises:
            JiraApiError: If the comment is rejected
        """
        comment = self._request("post", f"issue/{issue_key}/comment", data=request)
        logger.info(f"Added comment to issue {issue_key}")
        return JiraComment.from_api_response(comment or {})
