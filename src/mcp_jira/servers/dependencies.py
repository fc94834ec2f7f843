"""Dependency providers for tool functions.

Provides get_app_context and get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_jira.jira import JiraFetcher
from mcp_jira.servers.context import JiraAppContext

logger = logging.getLogger("mcp-jira.servers.dependencies")


def get_app_context(ctx: Context) -> JiraAppContext | None:
    """Return the application context stored by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context
    if isinstance(lifespan_ctx_dict, dict):
        return lifespan_ctx_dict.get("app_lifespan_context")
    return None


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher built from the server's Jira configuration.

    A new fetcher is created for every call; the configuration itself is
    immutable and shared.

    Args:
        ctx: The FastMCP context.

    Returns:
        JiraFetcher instance for the configured Jira site.

    Raises:
        ValueError: If the Jira configuration is not available.
    """
    app_lifespan_ctx = get_app_context(ctx)
    if app_lifespan_ctx and app_lifespan_ctx.jira_config:
        return JiraFetcher(config=app_lifespan_ctx.jira_config)

    logger.error("Jira configuration could not be resolved.")
    raise ValueError(
        "Jira client (fetcher) not available. Ensure server is configured correctly."
    )
