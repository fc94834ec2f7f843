"""
Jira issue models.

This module provides the Pydantic model for Jira issues and its two
projections: the detailed view returned by jira_get_issue and the compact
row used in search results.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import (
    EMPTY_STRING,
    JIRA_DEFAULT_ID,
    JIRA_DEFAULT_KEY,
)
from .adf import adf_to_text
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraUser,
)

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Only the fields surfaced by the tools are kept; everything else in the
    REST payload is dropped.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    self_url: str | None = None
    summary: str = EMPTY_STRING
    description: str | None = None
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    project: JiraProject | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    created: str | None = None
    updated: str | None = None
    resolutiondate: str | None = None
    labels: list[str] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)
    fix_versions: list[str] = Field(default_factory=list)

    @property
    def status_name(self) -> str | None:
        return self.status.name if self.status else None

    @property
    def issue_type_name(self) -> str | None:
        return self.issue_type.name if self.issue_type else None

    @property
    def project_key(self) -> str | None:
        return self.project.key if self.project else None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields") or {}
        if not isinstance(fields, dict):
            logger.debug(f"Unexpected fields format for issue {data.get('key')}")
            fields = {}

        def _model(model_cls: type[ApiModel], name: str) -> Any:
            value = fields.get(name)
            return model_cls.from_api_response(value) if value else None

        components = [
            str(component.get("name", EMPTY_STRING))
            for component in fields.get("components") or []
            if isinstance(component, dict)
        ]
        fix_versions = [
            str(version.get("name", EMPTY_STRING))
            for version in fields.get("fixVersions") or []
            if isinstance(version, dict)
        ]

        issue_id = data.get("id", JIRA_DEFAULT_ID)
        if issue_id is not None:
            issue_id = str(issue_id)

        return cls(
            id=issue_id,
            key=str(data.get("key", JIRA_DEFAULT_KEY)),
            self_url=data.get("self"),
            summary=str(fields.get("summary") or EMPTY_STRING),
            description=adf_to_text(fields.get("description")),
            status=_model(JiraStatus, "status"),
            issue_type=_model(JiraIssueType, "issuetype"),
            project=_model(JiraProject, "project"),
            priority=_model(JiraPriority, "priority"),
            assignee=_model(JiraUser, "assignee"),
            reporter=_model(JiraUser, "reporter"),
            created=fields.get("created"),
            updated=fields.get("updated"),
            resolutiondate=fields.get("resolutiondate"),
            labels=[str(label) for label in fields.get("labels") or []],
            components=components,
            fix_versions=fix_versions,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to the detailed dictionary returned for a single issue."""
        return {
            "key": self.key,
            "id": self.id,
            "self": self.self_url,
            "fields": {
                "summary": self.summary,
                "description": self.description,
                "status": self.status.to_simplified_dict() if self.status else None,
                "issueType": self.issue_type.to_simplified_dict()
                if self.issue_type
                else None,
                "project": self.project.to_simplified_dict() if self.project else None,
                "priority": self.priority.to_simplified_dict()
                if self.priority
                else None,
                "assignee": self.assignee.to_simplified_dict()
                if self.assignee
                else None,
                "reporter": self.reporter.to_simplified_dict()
                if self.reporter
                else None,
                "created": self.created,
                "updated": self.updated,
                "resolutiondate": self.resolutiondate,
                "labels": self.labels,
                "components": self.components,
                "fixVersions": self.fix_versions,
            },
        }

    def to_search_dict(self) -> dict[str, Any]:
        """Convert to the compact row used in search results.

        Priority and assignee are left out when the issue has none.
        """
        result: dict[str, Any] = {
            "key": self.key,
            "summary": self.summary,
            "status": self.status_name,
            "issueType": self.issue_type_name,
        }
        if self.priority:
            result["priority"] = self.priority.name
        if self.assignee:
            result["assignee"] = self.assignee.display_name
        result["created"] = self.created
        result["updated"] = self.updated
        return result
