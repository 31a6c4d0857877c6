"""Compiled-in relay configuration: branding, endpoints, trusted callers, mentions."""

from types import MappingProxyType

DISCORD_WEBHOOKS_URL = "https://discord.com/api/webhooks"

WEBHOOK_USERNAME = "Linear"
WEBHOOK_AVATAR_URL = "https://ldw.screfy.com/static/linear.png"

LINEAR_BASE_URL = "https://linear.app"
LINEAR_API_URL = "https://api.linear.app/graphql"
LINEAR_COLOR = "#5E6AD2"

# Addresses Linear sends webhooks from
LINEAR_TRUSTED_IPS = frozenset({"35.231.147.226", "35.243.134.228"})

# Linear display name -> Discord user id
LINEAR_DISPLAY_NAME_TO_DISCORD_ID = MappingProxyType(
    {
        "kong": "152805815097491456",
        "kyo.production99": "946380955088732160",
        "james.lee": "289070271523061761",
        "aki": "181394763683987457",
        "junxiong.low": "611578492026486808",
    }
)
