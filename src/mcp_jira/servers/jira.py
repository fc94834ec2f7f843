"""Jira FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated, Any, Literal

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.jira.constants import DEFAULT_MAX_RESULTS, LEGACY_USERNAME_MAX_LENGTH
from mcp_jira.models.jira import text_to_adf
from mcp_jira.servers.dependencies import get_jira_fetcher
from mcp_jira.utils.decorators import check_write_access

logger = logging.getLogger(__name__)

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides tools for searching, reading and editing Jira issues.",
)

AssigneeType = Literal["auto", "account_id", "username"]


def _split_fields(fields: str | None) -> list[str] | None:
    """Turn a comma-separated field list into a list, or None when empty."""
    if not fields:
        return None
    fields_list = [field.strip() for field in fields.split(",") if field.strip()]
    return fields_list or None


def _assignee_field(assignee: str, assignee_type: AssigneeType) -> dict[str, str]:
    """Build the assignee reference for a create request.

    With ``auto`` an identifier containing '@' or longer than a legacy
    username is sent as a Cloud account id; anything else as a username.
    """
    if assignee_type == "account_id":
        return {"accountId": assignee}
    if assignee_type == "username":
        return {"name": assignee}
    if "@" in assignee or len(assignee) > LEGACY_USERNAME_MAX_LENGTH:
        return {"accountId": assignee}
    return {"name": assignee}


def _dumps(result: dict[str, Any]) -> str:
    return json.dumps(result, indent=2, ensure_ascii=False)


@jira_mcp.tool(tags={"jira", "read"})
async def search(
    ctx: Context,
    jql: Annotated[
        str,
        Field(
            description=(
                "JQL query string (Jira Query Language). Examples:\n"
                '- Find by project: "project = PROJ"\n'
                "- Find by status: \"status = 'In Progress' AND project = PROJ\"\n"
                '- Find by assignee: "assignee = currentUser()"\n'
                '- Find recently updated: "updated >= -7d AND project = PROJ"'
            )
        ),
    ],
    max_results: Annotated[
        int,
        Field(
            description="Maximum number of issues to return on this page",
            default=DEFAULT_MAX_RESULTS,
            ge=1,
        ),
    ] = DEFAULT_MAX_RESULTS,
    next_page_token: Annotated[
        str | None,
        Field(
            description=(
                "Token for the next page of results, as returned in "
                "'nextPageToken' by a previous search"
            ),
            default=None,
        ),
    ] = None,
    fields: Annotated[
        str | None,
        Field(
            description=(
                "Comma-separated fields to return (e.g. 'summary,status,assignee'). "
                "Omit for the default summary fields."
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Search Jira issues using JQL (Jira Query Language).

    Args:
        ctx: The FastMCP context.
        jql: JQL query string.
        max_results: Maximum number of issues on the page.
        next_page_token: Continuation token from a previous page.
        fields: Comma-separated fields to return.

    Returns:
        JSON string with the page of issues and pagination signals.
    """
    jira = await get_jira_fetcher(ctx)
    search_result = jira.search_issues(
        jql=jql,
        max_results=max_results,
        next_page_token=next_page_token,
        fields=_split_fields(fields),
    )
    return _dumps(search_result.to_simplified_dict())


@jira_mcp.tool(tags={"jira", "read"})
async def get_issue(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="Jira issue key (e.g., 'PROJ-123') or id")
    ],
    fields: Annotated[
        str | None,
        Field(
            description=(
                "Comma-separated fields to return (e.g. 'summary,status'). "
                "Omit to fetch all fields."
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Get details of a specific Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        fields: Comma-separated fields to return.

    Returns:
        JSON string representing the Jira issue.
    """
    jira = await get_jira_fetcher(ctx)
    issue = jira.get_issue(issue_key=issue_key, fields=_split_fields(fields))
    return _dumps(issue.to_simplified_dict())


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
async def create_issue(
    ctx: Context,
    project_key: Annotated[
        str,
        Field(
            description=(
                "The Jira project key (e.g. 'PROJ', 'DEV'). "
                "This is the prefix of issue keys in the project."
            )
        ),
    ],
    issue_type: Annotated[
        str,
        Field(
            description=(
                "Issue type name (e.g. 'Task', 'Bug', 'Story'). "
                "The available types depend on the project configuration."
            )
        ),
    ],
    summary: Annotated[str, Field(description="Summary/title of the issue")],
    description: Annotated[
        str | None,
        Field(description="Plain-text issue description", default=None),
    ] = None,
    priority: Annotated[
        str | None,
        Field(description="Priority name (e.g. 'High', 'Medium')", default=None),
    ] = None,
    assignee: Annotated[
        str | None,
        Field(description="Assignee account id or username", default=None),
    ] = None,
    assignee_type: Annotated[
        AssigneeType,
        Field(
            description=(
                "How to interpret 'assignee': 'account_id' (Cloud), 'username' "
                "(Server/Data Center), or 'auto' to guess from the value"
            ),
            default="auto",
        ),
    ] = "auto",
    labels: Annotated[
        list[str] | None,
        Field(description="Labels to set on the issue", default=None),
    ] = None,
    components: Annotated[
        list[str] | None,
        Field(description="Component names to assign", default=None),
    ] = None,
    custom_fields: Annotated[
        dict[str, Any] | None,
        Field(
            description=(
                "Additional fields as key-value pairs, merged last. "
                "Example: {'customfield_10010': 'value'}"
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Create a new Jira issue.

    Args:
        ctx: The FastMCP context.
        project_key: The Jira project key.
        issue_type: Issue type name.
        summary: Summary/title of the issue.
        description: Plain-text description.
        priority: Priority name.
        assignee: Assignee identifier.
        assignee_type: How to interpret the assignee identifier.
        labels: Labels to set.
        components: Component names.
        custom_fields: Additional fields merged into the request.

    Returns:
        JSON string describing the created issue.

    Raises:
        ValueError: If in read-only mode or Jira client is unavailable.
    """
    jira = await get_jira_fetcher(ctx)

    fields: dict[str, Any] = {
        "project": {"key": project_key},
        "summary": summary,
        "issuetype": {"name": issue_type},
    }
    if description:
        fields["description"] = text_to_adf(description)
    if priority:
        fields["priority"] = {"name": priority}
    if assignee:
        fields["assignee"] = _assignee_field(assignee, assignee_type)
    if labels:
        fields["labels"] = labels
    if components:
        fields["components"] = [{"name": name} for name in components]
    if custom_fields:
        fields.update(custom_fields)

    issue = jira.create_issue({"fields": fields})
    result = {
        "success": True,
        "issue": {
            "key": issue.key,
            "id": issue.id,
            "self": issue.self_url,
            "summary": issue.summary,
            "status": issue.status_name,
            "issueType": issue.issue_type_name,
        },
    }
    return _dumps(result)


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
async def update_issue(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="Jira issue key (e.g., 'PROJ-123') or id")
    ],
    fields: Annotated[
        dict[str, Any],
        Field(
            description=(
                "Fields to update as key-value pairs. Example: "
                "{'summary': 'New title', 'description': 'New description', "
                "'priority': {'name': 'High'}}"
            )
        ),
    ],
) -> str:
    """Update fields of an existing Jira issue.

    A plain-text 'description' is converted to Atlassian Document Format;
    every other field is sent as given.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        fields: Fields to update.

    Returns:
        JSON string summarizing the updated issue.

    Raises:
        ValueError: If fields is empty, in read-only mode, or Jira client unavailable.
    """
    if not fields:
        raise ValueError("fields must contain at least one field to update.")

    jira = await get_jira_fetcher(ctx)

    update_fields = dict(fields)
    if isinstance(update_fields.get("description"), str):
        update_fields["description"] = text_to_adf(update_fields["description"])

    jira.update_issue(issue_key, {"fields": update_fields})
    issue = jira.get_issue(issue_key)

    result = {
        "success": True,
        "message": f"Issue {issue_key} updated successfully",
        "issue": {
            "key": issue.key,
            "summary": issue.summary,
            "status": issue.status_name,
            "updated": issue.updated,
        },
    }
    return _dumps(result)


@jira_mcp.tool(tags={"jira", "read"})
async def get_transitions(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="Jira issue key (e.g., 'PROJ-123') or id")
    ],
) -> str:
    """Get available status transitions for a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        JSON string with the transitions and their target statuses.
    """
    jira = await get_jira_fetcher(ctx)
    transitions = jira.get_transitions(issue_key)
    result = {
        "issueKey": issue_key,
        "transitions": [transition.to_simplified_dict() for transition in transitions],
    }
    return _dumps(result)


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
async def transition_issue(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="Jira issue key (e.g., 'PROJ-123') or id")
    ],
    transition_id: Annotated[
        str,
        Field(
            description=(
                "ID of the transition to perform. Use the jira_get_transitions tool "
                "first to get the available transition IDs. Example values: '11', '21'"
            )
        ),
    ],
    fields: Annotated[
        dict[str, Any] | None,
        Field(
            description=(
                "Optional fields to set during the transition. "
                "Example: {'resolution': {'name': 'Fixed'}}"
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Transition a Jira issue to a new status.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        transition_id: ID of the transition.
        fields: Optional fields to set during the transition.

    Returns:
        JSON string with the issue's resulting status.

    Raises:
        ValueError: If in read-only mode or Jira client unavailable.
    """
    jira = await get_jira_fetcher(ctx)

    request: dict[str, Any] = {"transition": {"id": transition_id}}
    if fields:
        request["fields"] = fields

    jira.transition_issue(issue_key, request)
    issue = jira.get_issue(issue_key)

    result = {
        "success": True,
        "message": f"Issue {issue_key} transitioned successfully",
        "issue": {
            "key": issue.key,
            "summary": issue.summary,
            "status": issue.status.to_simplified_dict() if issue.status else None,
        },
    }
    return _dumps(result)


@jira_mcp.tool(tags={"jira", "read"})
async def get_comments(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="Jira issue key (e.g., 'PROJ-123') or id")
    ],
) -> str:
    """Get all comments for a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.

    Returns:
        JSON string with the issue's comments.
    """
    jira = await get_jira_fetcher(ctx)
    comments = jira.get_comments(issue_key)
    result = {
        "issueKey": issue_key,
        "total": len(comments),
        "comments": [comment.to_simplified_dict() for comment in comments],
    }
    return _dumps(result)


@jira_mcp.tool(tags={"jira", "write"})
@check_write_access
async def add_comment(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="Jira issue key (e.g., 'PROJ-123') or id")
    ],
    body: Annotated[str, Field(description="Comment text")],
    visibility_type: Annotated[
        Literal["group", "role"] | None,
        Field(
            description=(
                "Restrict the comment to a 'group' or a project 'role'. "
                "Must be given together with visibility_value"
            ),
            default=None,
        ),
    ] = None,
    visibility_value: Annotated[
        str | None,
        Field(
            description=(
                "Group or role name the comment is restricted to. "
                "Required when visibility_type is set, and only allowed with it."
            ),
            default=None,
        ),
    ] = None,
) -> str:
    """Add a comment to a Jira issue.

    Args:
        ctx: The FastMCP context.
        issue_key: Jira issue key.
        body: Comment text.
        visibility_type: Visibility restriction type.
        visibility_value: Group or role name.

    Returns:
        JSON string describing the added comment.

    Raises:
        ValueError: If only one visibility argument is given, in read-only
            mode, or Jira client unavailable.
    """
    if bool(visibility_type) != bool(visibility_value):
        raise ValueError(
            "visibility_type and visibility_value must be provided together."
        )

    jira = await get_jira_fetcher(ctx)

    request: dict[str, Any] = {"body": text_to_adf(body)}
    if visibility_type and visibility_value:
        request["visibility"] = {"type": visibility_type, "value": visibility_value}

    comment = jira.add_comment(issue_key, request)
    result = {
        "success": True,
        "message": f"Comment added to {issue_key}",
        "comment": {
            "id": comment.id,
            "author": {
                "displayName": comment.author.display_name if comment.author else None
            },
            "body": comment.body,
            "created": comment.created,
        },
    }
    return _dumps(result)
