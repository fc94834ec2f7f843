"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_jira.jira.client import JiraClient
from mcp_jira.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_BASE_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client.

    resource_url mirrors the real client so tests can assert on REST paths.
    """
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = lambda resource: f"rest/api/3/{resource}"
    # The real client returns None for empty (e.g. 204) write responses
    mock_jira.post.return_value = None
    mock_jira.put.return_value = None
    yield mock_jira


@pytest.fixture
def jira_client(mock_config, mock_atlassian_jira):
    """Create a JiraClient instance with mocked dependencies."""
    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        client = JiraClient(config=mock_config)
        yield client


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher instance with mocked dependencies."""
    from mcp_jira.jira import JiraFetcher

    with patch("mcp_jira.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=mock_config)
        yield fetcher
