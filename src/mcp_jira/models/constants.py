"""
Constants and default values for model conversions.

Fallbacks used when an API response omits a field, so the projections
never contain ad-hoc magic strings.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"
NONE_VALUE = "None"

JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"
