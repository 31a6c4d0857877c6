"""Linear webhook payload schema.

Only the (type, action) combinations the relay knows how to present are
modelled. Anything else fails validation and is acknowledged as skipped, so
Linear does not keep retrying deliveries we will never handle.

Payload shape (Issue create):
{
  "action": "create",
  "type": "Issue",
  "createdAt": "2024-05-01T10:00:00.000Z",
  "url": "https://linear.app/acme/issue/ENG-123/fix-login",
  "data": {
    "id": "...", "title": "Fix login", "creatorId": "...",
    "team": {"key": "ENG", "name": "Engineering"},
    "state": {"name": "Todo", "color": "#e2e2e2"},
    "assignee": {"id": "...", "name": "Jane"},
    "description": "..."
  }
}
"""

from datetime import datetime
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class LinearPayload(BaseModel):
    """Base for payload models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Team(LinearPayload):
    key: str
    name: str
    id: str | None = None


class WorkflowState(LinearPayload):
    name: str
    color: str
    id: str | None = None
    type: str | None = None


class UserRef(LinearPayload):
    id: str
    name: str | None = None


class IssueData(LinearPayload):
    id: str
    title: str
    creator_id: str
    team: Team
    state: WorkflowState
    assignee: UserRef | None = None
    description: str | None = None
    number: int | None = None
    identifier: str | None = None


class IssueRef(LinearPayload):
    id: str
    title: str


class CommentData(LinearPayload):
    id: str
    body: str
    user_id: str
    issue: IssueRef


class IssueCreateEvent(LinearPayload):
    type: Literal["Issue"]
    action: Literal["create"]
    created_at: datetime
    url: str
    data: IssueData


class IssueUpdateEvent(LinearPayload):
    type: Literal["Issue"]
    action: Literal["update"]
    created_at: datetime
    url: str
    data: IssueData
    updated_from: dict[str, Any]

    @property
    def status_changed(self) -> bool:
        """True when the update touched the workflow state."""
        return bool(self.updated_from.get("stateId"))


class CommentCreateEvent(LinearPayload):
    type: Literal["Comment"]
    action: Literal["create"]
    created_at: datetime
    url: str
    data: CommentData


IncomingEvent = Union[IssueCreateEvent, IssueUpdateEvent, CommentCreateEvent]

# Tried in order; the first structural match wins.
EVENT_MODELS: tuple[type[LinearPayload], ...] = (
    IssueCreateEvent,
    IssueUpdateEvent,
    CommentCreateEvent,
)


def parse_event(body: Any) -> IncomingEvent | None:
    """Validate a decoded request body against the supported event shapes.

    Returns the first matching event model, or None when the body matches
    none of them (including bodies that are not JSON objects at all).
    """
    for model in EVENT_MODELS:
        try:
            return model.model_validate(body)
        except ValidationError:
            continue
    return None
