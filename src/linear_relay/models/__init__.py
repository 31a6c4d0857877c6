"""Data models for inbound Linear webhooks, query credentials, and responses."""

from linear_relay.models.events import (
    CommentCreateEvent,
    IncomingEvent,
    IssueCreateEvent,
    IssueUpdateEvent,
    parse_event,
)
from linear_relay.models.query import WebhookQuery
from linear_relay.models.responses import RelayResponse

__all__ = [
    "IncomingEvent",
    "IssueCreateEvent",
    "IssueUpdateEvent",
    "CommentCreateEvent",
    "parse_event",
    "WebhookQuery",
    "RelayResponse",
]
