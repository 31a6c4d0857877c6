"""Exceptions raised while relaying a webhook.

``RelayError`` subclasses carry the HTTP status the router answers with.
Failures talking to Linear or Discord are plain exceptions: the router maps
them to a generic 500 so no upstream detail leaks into the response.
"""


class RelayError(Exception):
    """A request failure with a client-facing message and HTTP status."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MethodNotAllowed(RelayError):
    status_code = 405


class Forbidden(RelayError):
    status_code = 403


class LinearApiError(Exception):
    """Linear API request failed (transport, HTTP status, or GraphQL errors)."""


class DiscordDispatchError(Exception):
    """Posting the notification to the Discord webhook failed."""
