"""Main FastMCP server setup for the Jira integration."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from fastmcp.exceptions import NotFoundError, ToolError
from fastmcp.tools import Tool as FastMCPTool
from mcp.types import EmbeddedResource, ImageContent, TextContent
from mcp.types import Tool as MCPTool
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.jira.config import JiraConfig
from mcp_jira.utils.env import (
    get_enabled_tools,
    is_read_only_mode,
    should_include_tool,
)

from .context import JiraAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-jira.server.main")


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def error_message(error: BaseException) -> str:
    """Return the message of the exception that caused a tool failure.

    FastMCP wraps handler exceptions in ToolError, sometimes more than once;
    the innermost cause carries the useful message.
    """
    while isinstance(error, ToolError) and error.__cause__ is not None:
        error = error.__cause__
    return str(error)


@asynccontextmanager
async def main_lifespan(app: FastMCP[JiraAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira MCP server lifespan starting...")
    read_only = is_read_only_mode()
    enabled_tools = get_enabled_tools()

    loaded_jira_config: JiraConfig | None = None
    try:
        loaded_jira_config = JiraConfig.from_env()
        logger.info("Jira configuration loaded.")
    except ValueError as e:
        logger.error(f"Failed to load Jira configuration: {e}")

    app_context = JiraAppContext(
        jira_config=loaded_jira_config,
        read_only=read_only,
        enabled_tools=enabled_tools,
    )
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")
    logger.info(f"Enabled tools filter: {enabled_tools or 'All tools enabled'}")
    yield {"app_lifespan_context": app_context}
    logger.info("Main Jira MCP server lifespan shutting down.")


class JiraMCP(FastMCP[JiraAppContext]):
    """Custom FastMCP server class for Jira with tool filtering and error envelopes."""

    def _app_context(self) -> JiraAppContext | None:
        try:
            req_context = self._mcp_server.request_context
        except LookupError:
            return None
        if req_context is None or req_context.lifespan_context is None:
            return None

        lifespan_ctx_dict = req_context.lifespan_context
        return (
            lifespan_ctx_dict.get("app_lifespan_context")
            if isinstance(lifespan_ctx_dict, dict)
            else None
        )

    async def _mcp_list_tools(self) -> list[MCPTool]:
        # Filter tools based on enabled_tools, read_only mode and Jira configuration.
        app_lifespan_state = self._app_context()
        if app_lifespan_state is None:
            logger.warning("Lifespan context not available during _mcp_list_tools call.")
            return []

        read_only = app_lifespan_state.read_only
        enabled_tools_filter = app_lifespan_state.enabled_tools
        logger.debug(
            f"_mcp_list_tools: read_only={read_only}, enabled_tools_filter={enabled_tools_filter}"
        )

        all_tools: dict[str, FastMCPTool] = await self.get_tools()

        filtered_tools: list[MCPTool] = []
        for registered_name, tool_obj in all_tools.items():
            tool_tags = tool_obj.tags

            if not should_include_tool(registered_name, enabled_tools_filter):
                logger.debug(f"Excluding tool '{registered_name}' (not enabled)")
                continue

            if read_only and "write" in tool_tags:
                logger.debug(
                    f"Excluding tool '{registered_name}' due to read-only mode and 'write' tag"
                )
                continue

            if "jira" in tool_tags and not app_lifespan_state.jira_config:
                logger.debug(
                    f"Excluding Jira tool '{registered_name}' as Jira configuration is incomplete."
                )
                continue

            filtered_tools.append(tool_obj.to_mcp_tool(name=registered_name))

        logger.debug(f"_mcp_list_tools: Total tools after filtering: {len(filtered_tools)}")
        return filtered_tools

    async def _mcp_call_tool(
        self, key: str, arguments: dict[str, Any]
    ) -> list[TextContent | ImageContent | EmbeddedResource]:
        """Run a tool and turn any failure into a JSON error envelope.

        The low-level server reports a raised exception as a result with
        ``isError`` set and the exception text as its content, so the
        envelope travels as the ToolError message.
        """
        try:
            app_lifespan_state = self._app_context()
            enabled_tools_filter = (
                app_lifespan_state.enabled_tools if app_lifespan_state else None
            )
            all_tools = await self.get_tools()
            if key not in all_tools or not should_include_tool(
                key, enabled_tools_filter
            ):
                raise NotFoundError(f"Unknown tool: {key}")

            return await super()._mcp_call_tool(key, arguments)
        except Exception as e:
            message = error_message(e)
            logger.error(f"Tool '{key}' failed: {message}")
            envelope = {"error": True, "message": message}
            raise ToolError(json.dumps(envelope, indent=2, ensure_ascii=False)) from e


main_mcp = JiraMCP(name="Jira MCP", lifespan=main_lifespan)
main_mcp.mount("jira", jira_mcp)


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)
