"""Discord webhook delivery.

One POST per relayed event, never retried. Transport failures raise
DiscordDispatchError. A response Discord rejects (e.g. an oversized embed) is
logged and dropped: redelivery would be rejected the same way.
"""

import logging
from typing import Any

import discord
import httpx

from linear_relay.constants import DISCORD_WEBHOOKS_URL, WEBHOOK_AVATAR_URL, WEBHOOK_USERNAME
from linear_relay.errors import DiscordDispatchError
from linear_relay.notifications.mentions import mention_content

logger = logging.getLogger(__name__)


def webhook_url(webhook_id: str, webhook_token: str) -> str:
    return f"{DISCORD_WEBHOOKS_URL}/{webhook_id}/{webhook_token}"


def build_payload(embed: discord.Embed, mention_user_id: str | None = None) -> dict[str, Any]:
    """Build the Discord execute-webhook body.

    ``content`` is omitted entirely when there is nobody to mention.
    """
    payload: dict[str, Any] = {}
    if mention_user_id:
        payload["content"] = mention_content(mention_user_id)
    payload["username"] = WEBHOOK_USERNAME
    payload["avatar_url"] = WEBHOOK_AVATAR_URL
    payload["embeds"] = [embed.to_dict()]
    return payload


async def send_notification(webhook_id: str, webhook_token: str, payload: dict[str, Any]) -> None:
    """POST the payload to the Discord webhook.

    Raises DiscordDispatchError on transport failure. Non-2xx responses are
    logged as warnings and do not raise.
    """
    try:
        async with httpx.AsyncClient() as client:
            response = await client.post(webhook_url(webhook_id, webhook_token), json=payload)
    except httpx.HTTPError as exc:
        # exc may embed the URL, which contains the webhook token
        raise DiscordDispatchError(f"Discord webhook {webhook_id} delivery failed") from exc

    if response.is_error:
        logger.warning(
            "Discord webhook %s rejected notification (%d): %s",
            webhook_id,
            response.status_code,
            response.text[:500],
        )
        return

    logger.info("Delivered notification to Discord webhook %s", webhook_id)
