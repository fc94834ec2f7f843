"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_MAX_RESULTS, DEFAULT_SEARCH_FIELDS

logger = logging.getLogger("mcp-jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        max_results: int = DEFAULT_MAX_RESULTS,
        next_page_token: str | None = None,
        fields: list[str] | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Pages are fetched one at a time; pass the returned continuation token
        back in to get the next one.

        Args:
            jql: JQL query string
            max_results: Maximum number of issues on the page
            next_page_token: Continuation token from a previous page
            fields: Fields to return (defaults to the summary field set)

        Returns:
            JiraSearchResult for the requested page

        Raises:
            JiraApiError: If the Jira API rejects the query or is unreachable
        """
        params: dict[str, str | int] = {
            "jql": jql,
            "maxResults": max_results,
            "fields": ",".join(fields or DEFAULT_SEARCH_FIELDS),
        }
        if next_page_token:
            params["nextPageToken"] = next_page_token

        response = self._request("get", "search/jql", params=params)
        result = JiraSearchResult.from_api_response(response or {})
        logger.debug(
            f"JQL '{jql}' returned {len(result.issues)} issues "
            f"(next page: {bool(result.next_page_token)})"
        )
        return result
