"""Jira API module for mcp_jira.

This module provides the Jira REST client and its operations.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin
from .search import SearchMixin
from .transitions import TransitionsMixin


class JiraFetcher(
    TransitionsMixin,
    CommentsMixin,
    SearchMixin,
    IssuesMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from mixins that provide specific functionality:
    - TransitionsMixin: Issue transition operations
    - CommentsMixin: Comment operations
    - SearchMixin: Search operations
    - IssuesMixin: Issue operations
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
