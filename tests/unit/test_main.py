"""Unit tests for the command-line entry point."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira import main
from mcp_jira.servers import main_mcp

REQUIRED_ENV = {
    "JIRA_BASE_URL": "https://test.atlassian.net",
    "JIRA_USERNAME": "user@example.com",
    "JIRA_API_TOKEN": "token",
}


class TestMain:
    """Test configuration handling and transport selection in main."""

    @pytest.fixture
    def mock_run(self):
        """Capture run_async arguments without starting a server."""
        with (
            patch("mcp_jira.load_dotenv"),
            patch("asyncio.run") as mock_asyncio_run,
            patch.object(main_mcp, "run_async", MagicMock()) as mock_run_async,
        ):
            yield mock_asyncio_run, mock_run_async

    def _invoke(self, args: list[str]) -> int:
        with pytest.raises(SystemExit) as excinfo:
            main.main(args=args, prog_name="mcp-jira")
        return excinfo.value.code

    def test_missing_configuration_exits(self, mock_run):
        mock_asyncio_run, mock_run_async = mock_run
        with patch.dict(os.environ, {}, clear=True):
            assert self._invoke([]) == 1

        mock_asyncio_run.assert_not_called()
        mock_run_async.assert_not_called()

    def test_stdio_from_environment(self, mock_run):
        mock_asyncio_run, mock_run_async = mock_run
        with patch.dict(os.environ, REQUIRED_ENV, clear=True):
            assert self._invoke([]) == 0

        mock_run_async.assert_called_once_with(transport="stdio")
        mock_asyncio_run.assert_called_once()

    def test_options_override_environment(self, mock_run):
        _, mock_run_async = mock_run
        with patch.dict(os.environ, {"TRANSPORT": "sse"}, clear=True):
            assert (
                self._invoke(
                    [
                        "--jira-url",
                        "https://other.atlassian.net",
                        "--jira-username",
                        "other@example.com",
                        "--jira-token",
                        "other-token",
                        "--no-jira-ssl-verify",
                        "--read-only",
                        "--enabled-tools",
                        "jira_search",
                        "--transport",
                        "streamable-http",
                        "--port",
                        "9000",
                        "--host",
                        "127.0.0.1",
                    ]
                )
                == 0
            )

            assert os.environ["JIRA_BASE_URL"] == "https://other.atlassian.net"
            assert os.environ["JIRA_USERNAME"] == "other@example.com"
            assert os.environ["JIRA_API_TOKEN"] == "other-token"
            assert os.environ["JIRA_SSL_VERIFY"] == "false"
            assert os.environ["READ_ONLY_MODE"] == "true"
            assert os.environ["ENABLED_TOOLS"] == "jira_search"

        mock_run_async.assert_called_once_with(
            transport="streamable-http",
            host="127.0.0.1",
            port=9000,
            log_level="warning",
        )

    def test_invalid_transport_env_falls_back_to_stdio(self, mock_run):
        _, mock_run_async = mock_run
        with patch.dict(os.environ, {**REQUIRED_ENV, "TRANSPORT": "carrier-pigeon"}, clear=True):
            assert self._invoke([]) == 0

        mock_run_async.assert_called_once_with(transport="stdio")

    def test_http_settings_from_environment(self, mock_run):
        _, mock_run_async = mock_run
        env = {**REQUIRED_ENV, "TRANSPORT": "sse", "HOST": "localhost", "PORT": "8123"}
        with patch.dict(os.environ, env, clear=True):
            assert self._invoke(["-v"]) == 0

        mock_run_async.assert_called_once_with(
            transport="sse", host="localhost", port=8123, log_level="info"
        )
