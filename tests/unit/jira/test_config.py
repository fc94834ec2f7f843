"""Unit tests for the JiraConfig class."""

import os
from unittest.mock import patch

import pytest

from mcp_jira.jira.config import JiraConfig


def test_from_env_success(mock_env_vars):
    """Test that from_env successfully creates a config from environment variables."""
    config = JiraConfig.from_env()
    assert config.url == "https://test.atlassian.net"
    assert config.username == "test_username"
    assert config.api_token == "test_token"
    assert config.ssl_verify is True
    assert config.timeout == 30


def test_from_env_missing_all():
    """Test that from_env names every missing variable."""
    with patch.dict(os.environ, {}, clear=True):
        with pytest.raises(ValueError) as excinfo:
            JiraConfig.from_env()
    message = str(excinfo.value)
    assert message.startswith(
        "Missing required environment variables: "
        "JIRA_BASE_URL, JIRA_USERNAME, JIRA_API_TOKEN."
    )
    assert "Required: JIRA_BASE_URL, JIRA_USERNAME, JIRA_API_TOKEN" in message


def test_from_env_missing_token():
    """Test that from_env fails when only the token is missing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
        },
        clear=True,
    ):
        with pytest.raises(
            ValueError, match="Missing required environment variables: JIRA_API_TOKEN\\."
        ):
            JiraConfig.from_env()


def test_from_env_empty_value_counts_as_missing():
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,
    ):
        with pytest.raises(ValueError, match="JIRA_BASE_URL"):
            JiraConfig.from_env()


@pytest.mark.parametrize("value", ["false", "0", "no", "FALSE"])
def test_from_env_ssl_verify_disabled(mock_env_vars, value):
    with patch.dict(os.environ, {"JIRA_SSL_VERIFY": value}):
        config = JiraConfig.from_env()
    assert config.ssl_verify is False


def test_from_env_timeout(mock_env_vars):
    with patch.dict(os.environ, {"JIRA_TIMEOUT": "45"}):
        config = JiraConfig.from_env()
    assert config.timeout == 45


@pytest.mark.parametrize("value", ["abc", "0", "-5"])
def test_from_env_invalid_timeout(mock_env_vars, value):
    with patch.dict(os.environ, {"JIRA_TIMEOUT": value}):
        with pytest.raises(ValueError, match="JIRA_TIMEOUT"):
            JiraConfig.from_env()


def test_base_url_strips_trailing_slash():
    config = JiraConfig(
        url="https://test.atlassian.net/",
        username="user",
        api_token="token",
    )
    assert config.base_url == "https://test.atlassian.net"
