"""Logging utilities for MCP Jira.

All output goes to stderr so the stdio transport's stdout stays reserved
for protocol messages.
"""

import logging
import sys

# Loggers whose level follows the command-line verbosity
APP_LOGGERS = ("mcp-jira", "mcp.server", "mcp.server.lowlevel.server")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure MCP-Jira logging on the root logger.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The application logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    root_logger.addHandler(handler)

    for logger_name in APP_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger("mcp-jira")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a secret for logging, keeping a few characters at each end.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string, or "Not Provided" for empty values
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    hidden = "*" * (len(value) - keep_chars * 2)
    return f"{value[:keep_chars]}{hidden}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one configuration parameter at INFO, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Jira {param}: {display_value}")
