"""Tests for Discord webhook payload building and delivery (httpx mocked)."""

import logging
from datetime import datetime, timezone
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from linear_relay.errors import DiscordDispatchError
from linear_relay.notifications.embeds import base_embed
from linear_relay.notifications.webhook import build_payload, send_notification, webhook_url

CREATED_AT = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def _mock_http_client(response=None, side_effect=None) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.post = AsyncMock(return_value=response, side_effect=side_effect)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def test_webhook_url():
    assert webhook_url("123", "abc") == "https://discord.com/api/webhooks/123/abc"


def test_build_payload_without_mention():
    """content key is omitted when nobody is mentioned."""
    payload = build_payload(base_embed(CREATED_AT))

    assert "content" not in payload
    assert payload["username"] == "Linear"
    assert payload["avatar_url"] == "https://ldw.screfy.com/static/linear.png"
    assert len(payload["embeds"]) == 1
    assert payload["embeds"][0]["color"] == 0x5E6AD2


def test_build_payload_with_mention():
    payload = build_payload(base_embed(CREATED_AT), "289070271523061761")

    assert payload["content"] == "\N{WAVING HAND SIGN} <@289070271523061761>"


def _discord_response(status_code: int, body: str = "") -> httpx.Response:
    request = httpx.Request("POST", "https://discord.com/api/webhooks/123/abc")
    return httpx.Response(status_code, text=body, request=request)


async def test_send_notification_posts_json():
    """send_notification POSTs the payload to the webhook URL once."""
    mock_client = _mock_http_client(_discord_response(204))
    payload = {"username": "Linear", "embeds": []}

    with patch("linear_relay.notifications.webhook.httpx.AsyncClient", return_value=mock_client):
        await send_notification("123", "abc", payload)

    mock_client.post.assert_called_once_with(
        "https://discord.com/api/webhooks/123/abc", json=payload
    )


async def test_send_notification_rejected_logs_warning(caplog):
    """A Discord 4xx (e.g. embed title over 256 chars) is logged, not raised."""
    body = '{"embeds": ["0"], "message": "Invalid Form Body"}'
    mock_client = _mock_http_client(_discord_response(400, body))

    with (
        patch("linear_relay.notifications.webhook.httpx.AsyncClient", return_value=mock_client),
        caplog.at_level(logging.WARNING, logger="linear_relay.notifications.webhook"),
    ):
        await send_notification("123", "abc", {"embeds": [{"title": "x" * 300}]})

    mock_client.post.assert_called_once()
    assert any(
        record.levelno == logging.WARNING and "rejected notification (400)" in record.getMessage()
        for record in caplog.records
    )


async def test_send_notification_server_error_does_not_raise():
    mock_client = _mock_http_client(_discord_response(500))

    with patch("linear_relay.notifications.webhook.httpx.AsyncClient", return_value=mock_client):
        await send_notification("123", "abc", {})


async def test_send_notification_transport_error_raises():
    """Transport failures raise DiscordDispatchError without leaking the token."""
    mock_client = _mock_http_client(side_effect=httpx.ConnectError("connection refused"))

    with patch("linear_relay.notifications.webhook.httpx.AsyncClient", return_value=mock_client):
        with pytest.raises(DiscordDispatchError) as exc_info:
            await send_notification("123", "secret-token", {})

    assert "secret-token" not in str(exc_info.value)
