"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from linear_relay.app import app
from linear_relay.linear.models import LinearIssue, LinearUser

ISSUE_URL = "https://linear.app/acme/issue/ENG-123/fix-login-redirect"
COMMENT_URL = "https://linear.app/acme/issue/ENG-123/fix-login-redirect#comment-9f2c1a"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def creator() -> LinearUser:
    return LinearUser(
        id="user-creator",
        name="Kong Lee",
        display_name="kong",
        url="https://linear.app/acme/profiles/kong",
        avatar_url="https://avatars.example.com/kong.png",
    )


@pytest.fixture
def assignee() -> LinearUser:
    return LinearUser(
        id="user-assignee",
        name="James Lee",
        display_name="james.lee",
        url="https://linear.app/acme/profiles/james.lee",
        avatar_url="https://avatars.example.com/james.png",
    )


@pytest.fixture
def parent_issue(assignee: LinearUser) -> LinearIssue:
    return LinearIssue(
        id="issue-1",
        identifier="ENG-123",
        title="Fix login redirect",
        url=ISSUE_URL,
        assignee=assignee,
    )


@pytest.fixture
def issue_create_payload() -> dict:
    """Linear Issue/create webhook body with an assignee and description."""
    return {
        "action": "create",
        "type": "Issue",
        "createdAt": "2024-05-01T10:00:00.000Z",
        "url": ISSUE_URL,
        "organizationId": "org-1",
        "data": {
            "id": "issue-1",
            "title": "Fix login redirect",
            "creatorId": "user-creator",
            "number": 123,
            "team": {"id": "team-1", "key": "ENG", "name": "Engineering"},
            "state": {"id": "state-1", "name": "Todo", "color": "#e2e2e2", "type": "unstarted"},
            "assignee": {"id": "user-assignee", "name": "James Lee"},
            "description": "Users land on a blank page after SSO.",
        },
    }


@pytest.fixture
def issue_update_payload(issue_create_payload: dict) -> dict:
    """Linear Issue/update webhook body for a status change."""
    payload = dict(issue_create_payload)
    payload["action"] = "update"
    payload["data"] = {
        **issue_create_payload["data"],
        "state": {"id": "state-2", "name": "In Progress", "color": "#f2c94c", "type": "started"},
    }
    payload["updatedFrom"] = {"stateId": "state-1", "updatedAt": "2024-05-01T09:00:00.000Z"}
    return payload


@pytest.fixture
def comment_create_payload() -> dict:
    """Linear Comment/create webhook body."""
    return {
        "action": "create",
        "type": "Comment",
        "createdAt": "2024-05-01T11:30:00.000Z",
        "url": COMMENT_URL,
        "data": {
            "id": "comment-1",
            "body": "Reproduced on staging.",
            "userId": "user-creator",
            "issueId": "issue-1",
            "issue": {"id": "issue-1", "title": "Fix login redirect"},
        },
    }
