"""Environment-driven switches for the server: read-only mode and tool filtering."""

import logging
import os

logger = logging.getLogger("mcp-jira.utils.env")

TRUTHY_VALUES = ("true", "1", "yes", "y", "on")


def is_env_truthy(name: str, default: str = "false") -> bool:
    """Check whether an environment variable holds a truthy value."""
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode hides and rejects every tool that modifies Jira while
    leaving the read tools available.

    Returns:
        True if READ_ONLY_MODE is enabled, False otherwise
    """
    return is_env_truthy("READ_ONLY_MODE")


def get_enabled_tools() -> list[str] | None:
    """Get the list of enabled tools from the ENABLED_TOOLS variable.

    The variable holds a comma-separated list of tool names; whitespace
    around names is stripped and empty entries are dropped.

    Returns:
        List of enabled tool names, or None when the variable is unset or
        holds no names (all tools enabled).

    Examples:
        ENABLED_TOOLS="jira_search,jira_get_issue" -> ["jira_search", "jira_get_issue"]
        ENABLED_TOOLS=" , " -> None
    """
    enabled_tools_str = os.getenv("ENABLED_TOOLS")
    if not enabled_tools_str:
        return None

    tools = [tool.strip() for tool in enabled_tools_str.split(",") if tool.strip()]
    logger.debug(f"Parsed enabled tools from environment: {tools}")
    return tools or None


def should_include_tool(tool_name: str, enabled_tools: list[str] | None) -> bool:
    """Check if a tool passes the enabled-tools filter.

    Args:
        tool_name: The full (prefixed) name of the tool.
        enabled_tools: Allowed tool names, or None to include all tools.

    Returns:
        True if the tool should be included, False otherwise.
    """
    if enabled_tools is None:
        return True
    return tool_name in enabled_tools
