"""Constants specific to Jira operations."""

# REST API generation used for every request (<base-url>/rest/api/3)
API_VERSION = "3"

# Seconds before an outgoing request is abandoned by the transport
DEFAULT_TIMEOUT = 30

# Page size used by search when the caller does not bound it
DEFAULT_MAX_RESULTS = 50

# Fields requested by search when the caller does not name any.
# Order is kept so the query string is stable.
DEFAULT_SEARCH_FIELDS: list[str] = [
    "key",
    "summary",
    "status",
    "issuetype",
    "assignee",
    "reporter",
    "created",
    "updated",
    "priority",
    "project",
]

# Identifiers longer than this are treated as Cloud account ids when the
# assignee type is left on "auto".
LEGACY_USERNAME_MAX_LENGTH = 20
