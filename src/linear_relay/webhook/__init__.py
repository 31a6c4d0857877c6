"""Linear webhook ingress: request gate, event relay, and HTTP router."""

from linear_relay.webhook.handlers import Notification, build_notification, handle_webhook
from linear_relay.webhook.router import router

__all__ = [
    "Notification",
    "build_notification",
    "handle_webhook",
    "router",
]
