"""Linear event classification, enrichment, and relay orchestration."""

import logging
from dataclasses import dataclass, field

import discord
from fastapi import Request

from linear_relay.config import get_settings
from linear_relay.linear.client import LinearClient
from linear_relay.linear.models import LinearUser
from linear_relay.models.events import (
    CommentCreateEvent,
    IncomingEvent,
    IssueCreateEvent,
    IssueUpdateEvent,
    parse_event,
)
from linear_relay.models.query import WebhookQuery
from linear_relay.models.responses import RelayResponse
from linear_relay.notifications.embeds import (
    base_embed,
    comment_created_embed,
    issue_created_embed,
    status_changed_embed,
)
from linear_relay.notifications.mentions import resolve_mention
from linear_relay.notifications.webhook import build_payload, send_notification
from linear_relay.webhook.gate import check_caller_ip, check_method

logger = logging.getLogger(__name__)

SKIPPED_MESSAGE = "Event skipped"


@dataclass
class Notification:
    """Embed for one event plus the users it was enriched with.

    ``handled`` is False when the event passed validation but has no
    presentation recipe; the embed then carries only color and timestamp.
    """

    embed: discord.Embed
    actor: LinearUser | None = None
    assignee: LinearUser | None = None
    handled: bool = True
    mention_user_id: str | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.mention_user_id = resolve_mention(self.actor, self.assignee)


async def build_notification(event: IncomingEvent, linear: LinearClient) -> Notification:
    """Enrich an event via the Linear API and build its Discord embed.

    Lookups run one after another; the first failure propagates and nothing
    is sent.

    - Issue create: creator, then assignee if set
    - Issue update: only when the workflow state changed; creator, then assignee if set
    - Comment create: comment author, then the parent issue (and its assignee)
    """
    if isinstance(event, IssueCreateEvent):
        actor = await linear.user(event.data.creator_id)
        assignee = None
        if event.data.assignee is not None:
            assignee = await linear.user(event.data.assignee.id)
        embed = issue_created_embed(event, actor, assignee)
        return Notification(embed=embed, actor=actor, assignee=assignee)

    if isinstance(event, IssueUpdateEvent) and event.status_changed:
        actor = await linear.user(event.data.creator_id)
        assignee = None
        if event.data.assignee is not None:
            assignee = await linear.user(event.data.assignee.id)
        embed = status_changed_embed(event, actor)
        return Notification(embed=embed, actor=actor, assignee=assignee)

    if isinstance(event, CommentCreateEvent):
        actor = await linear.user(event.data.user_id)
        issue = await linear.issue(event.data.issue.id)
        embed = comment_created_embed(event, actor)
        return Notification(embed=embed, actor=actor, assignee=issue.assignee)

    return Notification(embed=base_embed(event.created_at), handled=False)


async def _read_body(request: Request) -> object:
    """Decode the JSON body; undecodable bodies are treated as unrecognized events."""
    try:
        return await request.json()
    except ValueError:
        return None


async def handle_webhook(request: Request) -> RelayResponse:
    """Run one request through gate, validation, enrichment, and dispatch.

    Raises RelayError subclasses for gate failures, pydantic ValidationError
    for bad query parameters, and any enrichment or dispatch failure as-is.
    """
    settings = get_settings()

    check_method(request.method)
    check_caller_ip(request.headers.get(settings.forwarded_for_header, ""), settings)

    query = WebhookQuery.model_validate(dict(request.query_params))

    event = parse_event(await _read_body(request))
    # Acknowledge unsupported resources; a failure status makes Linear redeliver
    if event is None:
        logger.info("Skipping unsupported Linear event")
        return RelayResponse.ok(SKIPPED_MESSAGE)

    async with LinearClient(query.linear_token) as linear:
        notification = await build_notification(event, linear)

    if not notification.handled:
        if settings.skip_unhandled_events:
            logger.info("Skipping %s %s event with no notification", event.type, event.action)
            return RelayResponse.ok(SKIPPED_MESSAGE)
        logger.info("No notification recipe for %s %s, sending bare embed", event.type, event.action)

    mention_user_id = notification.mention_user_id
    payload = build_payload(notification.embed, mention_user_id)
    await send_notification(query.webhook_id, query.webhook_token, payload)

    logger.info(
        "Relayed %s %s event (mention=%s)",
        event.type,
        event.action,
        mention_user_id is not None,
    )
    return RelayResponse.ok()
