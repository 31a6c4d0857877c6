"""Request gate: allowed HTTP method and trusted caller IP."""

from linear_relay.config import Settings
from linear_relay.constants import LINEAR_TRUSTED_IPS
from linear_relay.errors import Forbidden, MethodNotAllowed


def check_method(method: str) -> None:
    """Only POST is accepted."""
    if method != "POST":
        raise MethodNotAllowed(f"Method {method} is not allowed.")


def check_caller_ip(forwarded_for: str, settings: Settings) -> None:
    """Make sure the request truly comes from Linear.

    The forwarded-for value must equal one of Linear's webhook IPs exactly.
    Skipped entirely in development so the relay can be exercised locally.
    """
    if settings.is_development:
        return
    if forwarded_for not in LINEAR_TRUSTED_IPS:
        raise Forbidden(f"Request from IP address {forwarded_for} is not allowed.")
