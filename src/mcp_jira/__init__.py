import asyncio
import logging
import os
import sys

import click
from dotenv import load_dotenv

from mcp_jira.utils.env import is_env_truthy
from mcp_jira.utils.logging import log_config_param, setup_logging

__version__ = "0.1.0"

# Initialize logging with appropriate level
logging_level = logging.WARNING
if is_env_truthy("MCP_VERBOSE"):
    logging_level = logging.DEBUG

logger = setup_logging(logging_level)


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse, or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for SSE or Streamable HTTP transport",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for SSE or Streamable HTTP transport (default: 0.0.0.0)",
)
@click.option(
    "--jira-url",
    help="Jira base URL (e.g., https://your-domain.atlassian.net)",
)
@click.option("--jira-username", help="Jira username/email")
@click.option("--jira-token", help="Jira API token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for Jira (default: verify)",
)
@click.option(
    "--read-only",
    is_flag=True,
    help="Run in read-only mode (disables all write operations)",
)
@click.option(
    "--enabled-tools",
    help="Comma-separated list of tools to enable (enables all if not specified)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool,
    read_only: bool,
    enabled_tools: str | None,
) -> None:
    """MCP Jira Server - Jira issue search and editing for MCP

    Connects to Jira Cloud or Server/Data Center with a username and API
    token over the REST API v3.
    """
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    elif is_env_truthy("MCP_VERY_VERBOSE"):
        current_logging_level = logging.DEBUG
    elif is_env_truthy("MCP_VERBOSE"):
        current_logging_level = logging.INFO
    else:
        current_logging_level = logging.WARNING

    global logger
    logger = setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    def was_option_provided(ctx: click.Context, param_name: str) -> bool:
        return ctx.get_parameter_source(param_name) not in (
            click.core.ParameterSource.DEFAULT_MAP,
            click.core.ParameterSource.DEFAULT,
        )

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)

    click_ctx = click.get_current_context(silent=True)

    # Transport precedence
    final_transport = os.getenv("TRANSPORT", "stdio").lower()
    if click_ctx and was_option_provided(click_ctx, "transport"):
        final_transport = transport
    if final_transport not in ["stdio", "sse", "streamable-http"]:
        logger.warning(
            f"Invalid transport '{final_transport}' from env/default, using 'stdio'."
        )
        final_transport = "stdio"

    # Port precedence
    final_port = 8000
    port_env = os.getenv("PORT")
    if port_env and port_env.isdigit():
        final_port = int(port_env)
    if click_ctx and was_option_provided(click_ctx, "port"):
        final_port = port

    # Host precedence
    final_host = os.getenv("HOST", "0.0.0.0")  # noqa: S104
    if click_ctx and was_option_provided(click_ctx, "host"):
        final_host = host

    # Set env vars for downstream config
    option_env_vars = {
        "jira_url": ("JIRA_BASE_URL", jira_url),
        "jira_username": ("JIRA_USERNAME", jira_username),
        "jira_token": ("JIRA_API_TOKEN", jira_token),
        "jira_ssl_verify": ("JIRA_SSL_VERIFY", str(jira_ssl_verify).lower()),
        "read_only": ("READ_ONLY_MODE", str(read_only).lower()),
        "enabled_tools": ("ENABLED_TOOLS", enabled_tools),
    }
    for param_name, (env_name, value) in option_env_vars.items():
        if click_ctx and was_option_provided(click_ctx, param_name) and value:
            os.environ[env_name] = value

    from mcp_jira.jira.config import JiraConfig

    try:
        jira_config = JiraConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid Jira configuration: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_config_param(logger, "URL", jira_config.base_url)
    log_config_param(logger, "Username", jira_config.username)
    log_config_param(logger, "API Token", jira_config.api_token, sensitive=True)
    log_config_param(logger, "SSL Verify", str(jira_config.ssl_verify))

    from mcp_jira.servers import main_mcp

    run_kwargs: dict[str, str | int] = {
        "transport": final_transport,
    }

    if final_transport == "stdio":
        logger.info("Starting server with STDIO transport.")
    else:
        run_kwargs["host"] = final_host
        run_kwargs["port"] = final_port
        run_kwargs["log_level"] = logging.getLevelName(current_logging_level).lower()
        logger.info(
            f"Starting server with {final_transport.upper()} transport on http://{final_host}:{final_port}"
        )

    asyncio.run(main_mcp.run_async(**run_kwargs))


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
