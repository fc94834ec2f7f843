"""
Jira workflow models.

This module provides the Pydantic model for the status transitions
available on an issue.
"""

import logging
from typing import Any

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
)
from .common import JiraStatus

logger = logging.getLogger(__name__)


class JiraTransition(ApiModel):
    """
    Model representing a Jira issue transition and its target status.
    """

    id: str = JIRA_DEFAULT_ID
    name: str = EMPTY_STRING
    to_status: JiraStatus | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraTransition":
        """
        Create a JiraTransition from a Jira API response.

        Args:
            data: The transition data from the Jira API

        Returns:
            A JiraTransition instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        to_status = None
        if to := data.get("to"):
            if isinstance(to, dict):
                to_status = JiraStatus.from_api_response(to)

        # Transition ids are strings on the wire but sent back verbatim
        transition_id = data.get("id", JIRA_DEFAULT_ID)
        if transition_id is not None:
            transition_id = str(transition_id)

        return cls(
            id=transition_id,
            name=str(data.get("name", EMPTY_STRING)),
            to_status=to_status,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        to: dict[str, Any] | None = None
        if self.to_status:
            to = {
                "name": self.to_status.name,
                "id": self.to_status.id,
                "category": self.to_status.category_name,
            }

        return {"id": self.id, "name": self.name, "to": to}
