"""
Jira comment models.

This module provides Pydantic models for Jira comments and their
visibility restrictions.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
)
from .adf import adf_to_text
from .common import JiraUser

logger = logging.getLogger(__name__)


class JiraCommentVisibility(ApiModel):
    """
    Restriction of a comment to a group or a project role.
    """

    type: str = EMPTY_STRING
    value: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCommentVisibility":
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            type=str(data.get("type", EMPTY_STRING)),
            value=str(data.get("value", EMPTY_STRING)),
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value}


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    id: str = JIRA_DEFAULT_ID
    body: str = EMPTY_STRING
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    author: JiraUser | None = None
    visibility: JiraCommentVisibility | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data:
            return cls()

        # Handle non-dictionary data by returning a default instance
        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        author = None
        author_data = data.get("author")
        if author_data:
            author = JiraUser.from_api_response(author_data)

        visibility = None
        visibility_data = data.get("visibility")
        if visibility_data:
            visibility = JiraCommentVisibility.from_api_response(visibility_data)

        # Ensure ID is a string
        comment_id = data.get("id", JIRA_DEFAULT_ID)
        if comment_id is not None:
            comment_id = str(comment_id)

        return cls(
            id=comment_id,
            body=adf_to_text(data.get("body")) or EMPTY_STRING,
            created=str(data.get("created", EMPTY_STRING)),
            updated=str(data.get("updated", EMPTY_STRING)),
            author=author,
            visibility=visibility,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "id": self.id,
            "author": self.author.to_simplified_dict() if self.author else None,
            "body": self.body,
            "created": self.created,
            "updated": self.updated,
        }

        if self.visibility:
            result["visibility"] = self.visibility.to_simplified_dict()

        return result
