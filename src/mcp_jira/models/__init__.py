"""
Pydantic models for Jira REST API responses.

Each model converts a raw REST v3 payload into a typed object and back into
the reduced dictionary a tool returns to the caller.
"""

from .base import ApiModel
from .jira import (
    JiraComment,
    JiraCommentVisibility,
    JiraIssue,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraSearchResult,
    JiraStatus,
    JiraStatusCategory,
    JiraTransition,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "JiraComment",
    "JiraCommentVisibility",
    "JiraIssue",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraSearchResult",
    "JiraStatus",
    "JiraStatusCategory",
    "JiraTransition",
    "JiraUser",
]
