class MCPJiraError(Exception):
    """Base exception for MCP Jira errors."""

    pass


class JiraApiError(MCPJiraError):
    """Raised when a Jira REST call fails in transport or with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        messages: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.messages = messages or []
