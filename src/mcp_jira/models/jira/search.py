"""
Jira search result models.

This module provides the Pydantic model for one page of an enhanced JQL
search (``/search/jql``), which pages with continuation tokens rather than
offsets.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing one page of a Jira search (JQL) result.
    """

    issues: list[JiraIssue] = Field(default_factory=list)
    total: int | None = None
    next_page_token: str | None = None
    is_last: bool | None = None

    @property
    def has_more_results(self) -> bool | None:
        """Whether another page may exist, or None when the server said nothing.

        A continuation token always means more results may follow; otherwise
        the ``isLast`` flag decides.
        """
        if self.next_page_token:
            return True
        if self.is_last is not None:
            return not self.is_last
        return None

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API

        Returns:
            A JiraSearchResult instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issues = []
        issues_data = data.get("issues", [])
        if isinstance(issues_data, list):
            for issue_data in issues_data:
                if issue_data:
                    issues.append(JiraIssue.from_api_response(issue_data))

        raw_total = data.get("total")
        try:
            total = int(raw_total) if raw_total is not None else None
        except (ValueError, TypeError):
            total = None

        raw_is_last = data.get("isLast")
        is_last = bool(raw_is_last) if raw_is_last is not None else None

        return cls(
            issues=issues,
            total=total,
            next_page_token=data.get("nextPageToken") or None,
            is_last=is_last,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        result: dict[str, Any] = {
            "issueCount": len(self.issues),
            "issues": [issue.to_search_dict() for issue in self.issues],
        }

        if self.total is not None:
            result["total"] = self.total

        has_more_results = self.has_more_results
        if has_more_results is not None:
            if self.next_page_token:
                result["nextPageToken"] = self.next_page_token
            else:
                result["isLast"] = self.is_last
            result["hasMoreResults"] = has_more_results

        return result
