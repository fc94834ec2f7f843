MOCK_JIRA_ISSUE_RESPONSE = {
    "expand": "renderedFields,names,schema,operations,editmeta,changelog",
    "id": "12345",
    "self": "https://example.atlassian.net/rest/api/3/issue/12345",
    "key": "PROJ-123",
    "fields": {
        "summary": "Test Issue Summary",
        "description": {
            "type": "doc",
            "version": 1,
            "content": [
                {
                    "type": "paragraph",
                    "content": [
                        {"type": "text", "text": "This is a test issue description"}
                    ],
                },
                {
                    "type": "paragraph",
                    "content": [
                        {"type": "text", "text": "Second line"},
                        {"type": "hardBreak"},
                        {"type": "text", "text": "after a break"},
                    ],
                },
            ],
        },
        "created": "2024-01-01T10:00:00.000+0000",
        "updated": "2024-01-02T15:30:00.000+0000",
        "resolutiondate": None,
        "status": {
            "self": "https://example.atlassian.net/rest/api/3/status/3",
            "description": "This issue is currently being worked on.",
            "name": "In Progress",
            "id": "3",
            "statusCategory": {
                "self": "https://example.atlassian.net/rest/api/3/statuscategory/4",
                "id": 4,
                "key": "indeterminate",
                "colorName": "yellow",
                "name": "In Progress",
            },
        },
        "issuetype": {
            "self": "https://example.atlassian.net/rest/api/3/issuetype/10001",
            "id": "10001",
            "description": "A task that needs to be done.",
            "name": "Task",
            "subtask": False,
        },
        "project": {
            "self": "https://example.atlassian.net/rest/api/3/project/10000",
            "id": "10000",
            "key": "PROJ",
            "name": "Test Project",
        },
        "priority": {
            "self": "https://example.atlassian.net/rest/api/3/priority/3",
            "name": "Medium",
            "id": "3",
        },
        "assignee": {
            "self": "https://example.atlassian.net/rest/api/3/user?accountId=123",
            "accountId": "5b10a2844c20165700ede21g",
            "emailAddress": "test@example.com",
            "displayName": "Test User",
            "active": True,
            "timeZone": "UTC",
        },
        "reporter": {
            "self": "https://example.atlassian.net/rest/api/3/user?accountId=456",
            "accountId": "5b10a2844c20165700ede21h",
            "emailAddress": "reporter@example.com",
            "displayName": "Reporter User",
            "active": True,
        },
        "labels": ["backend", "urgent"],
        "components": [{"id": "10100", "name": "API"}],
        "fixVersions": [{"id": "10200", "name": "1.0"}],
    },
}

MOCK_JIRA_SEARCH_RESPONSE = {
    "issues": [
        {
            "id": "12345",
            "key": "PROJ-123",
            "fields": {
                "summary": "Test Issue Summary",
                "status": {
                    "name": "In Progress",
                    "id": "3",
                    "statusCategory": {"id": 4, "name": "In Progress"},
                },
                "issuetype": {"name": "Task", "subtask": False},
                "priority": {"name": "Medium", "id": "3"},
                "assignee": {"displayName": "Test User", "accountId": "123"},
                "created": "2024-01-01T10:00:00.000+0000",
                "updated": "2024-01-02T15:30:00.000+0000",
            },
        },
        {
            "id": "12346",
            "key": "PROJ-124",
            "fields": {
                "summary": "Unassigned issue",
                "status": {
                    "name": "To Do",
                    "id": "1",
                    "statusCategory": {"id": 2, "name": "To Do"},
                },
                "issuetype": {"name": "Bug", "subtask": False},
                "priority": None,
                "assignee": None,
                "created": "2024-01-03T10:00:00.000+0000",
                "updated": "2024-01-03T10:00:00.000+0000",
            },
        },
    ],
    "nextPageToken": "CAEaAggD",
    "isLast": False,
}

MOCK_JIRA_TRANSITIONS_RESPONSE = {
    "expand": "transitions",
    "transitions": [
        {
            "id": "11",
            "name": "To Do",
            "hasScreen": False,
            "to": {
                "id": "1",
                "name": "To Do",
                "statusCategory": {"id": 2, "key": "new", "name": "To Do"},
            },
        },
        {
            "id": "31",
            "name": "Done",
            "hasScreen": False,
            "to": {
                "id": "10001",
                "name": "Done",
                "statusCategory": {"id": 3, "key": "done", "name": "Done"},
            },
        },
    ],
}

MOCK_JIRA_COMMENTS_RESPONSE = {
    "startAt": 0,
    "maxResults": 50,
    "total": 2,
    "comments": [
        {
            "id": "10001",
            "author": {
                "accountId": "123",
                "displayName": "Test User",
                "emailAddress": "test@example.com",
            },
            "body": {
                "type": "doc",
                "version": 1,
                "content": [
                    {
                        "type": "paragraph",
                        "content": [{"type": "text", "text": "First comment"}],
                    }
                ],
            },
            "created": "2024-01-01T12:00:00.000+0000",
            "updated": "2024-01-01T12:00:00.000+0000",
        },
        {
            "id": "10002",
            "author": {
                "accountId": "456",
                "displayName": "Reporter User",
                "emailAddress": "reporter@example.com",
            },
            "body": {
                "type": "doc",
                "version": 1,
                "content": [
                    {
                        "type": "paragraph",
                        "content": [{"type": "text", "text": "Internal note"}],
                    }
                ],
            },
            "created": "2024-01-02T09:00:00.000+0000",
            "updated": "2024-01-02T09:30:00.000+0000",
            "visibility": {"type": "role", "value": "Developers"},
        },
    ],
}

MOCK_JIRA_ADD_COMMENT_RESPONSE = {
    "id": "10003",
    "author": {"accountId": "123", "displayName": "Test User"},
    "body": {
        "type": "doc",
        "version": 1,
        "content": [
            {
                "type": "paragraph",
                "content": [{"type": "text", "text": "A new comment"}],
            }
        ],
    },
    "created": "2024-01-05T08:00:00.000+0000",
    "updated": "2024-01-05T08:00:00.000+0000",
}

MOCK_JIRA_CREATE_RESPONSE = {
    "id": "12400",
    "key": "PROJ-200",
    "self": "https://example.atlassian.net/rest/api/3/issue/12400",
}
