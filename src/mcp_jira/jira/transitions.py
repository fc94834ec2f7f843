"""Module for Jira transition operations."""

import logging
from typing import Any

from ..models.jira import JiraTransition
from .client import JiraClient

logger = logging.getLogger("mcp-jira")


class TransitionsMixin(JiraClient):
    """Mixin for Jira transition operations."""

    def get_transitions(self, issue_key: str) -> list[JiraTransition]:
        """
        Get the available status transitions for an issue.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')

        Returns:
            List of transitions with their target status

        Raises:
            JiraApiError: If the transitions cannot be fetched
        """
        response = self._request("get", f"issue/{issue_key}/transitions") or {}
        transitions = response.get("transitions", [])
        if not isinstance(transitions, list):
            logger.warning(f"Unexpected transitions format for {issue_key}")
            return []

        return [
            JiraTransition.from_api_response(transition)
            for transition in transitions
            if isinstance(transition, dict)
        ]

    def transition_issue(self, issue_key: str, request: dict[str, Any]) -> None:
        """
        Move an issue through a workflow transition.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            request: Transition payload, ``{"transition": {"id": ...}}`` with
                optional ``fields``

        Raises:
            JiraApiError: If the transition is rejected
        """
        self._request("post", f"issue/{issue_key}/transitions", data=request)
        transition_id = request.get("transition", {}).get("id")
        logger.info(f"Transitioned issue {issue_key} with transition {transition_id}")
