"""
Jira data models for the MCP Jira server.

Models are organized by entity type: shared building blocks in ``common``,
then issues, comments, workflow transitions and search results.
"""

from .adf import adf_to_text, text_to_adf
from .comment import JiraComment, JiraCommentVisibility
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
)
from .issue import JiraIssue
from .search import JiraSearchResult
from .workflow import JiraTransition

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatusCategory",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    # Entity-specific models
    "JiraComment",
    "JiraCommentVisibility",
    "JiraTransition",
    "JiraIssue",
    "JiraSearchResult",
    # ADF helpers
    "adf_to_text",
    "text_to_adf",
]
