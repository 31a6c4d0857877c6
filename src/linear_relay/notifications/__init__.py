"""Discord notification building and delivery."""

from linear_relay.notifications.embeds import (
    base_embed,
    comment_created_embed,
    issue_created_embed,
    status_changed_embed,
)
from linear_relay.notifications.mentions import mention_content, resolve_mention
from linear_relay.notifications.webhook import build_payload, send_notification, webhook_url

__all__ = [
    "base_embed",
    "build_payload",
    "comment_created_embed",
    "issue_created_embed",
    "mention_content",
    "resolve_mention",
    "send_notification",
    "status_changed_embed",
    "webhook_url",
]
