from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_jira.jira.config import JiraConfig


@dataclass(frozen=True)
class JiraAppContext:
    """
    Context holding the Jira configuration loaded from the environment at
    server startup, together with the tool filtering switches.
    """

    jira_config: JiraConfig | None = None
    read_only: bool = False
    enabled_tools: list[str] | None = None
