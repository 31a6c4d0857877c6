"""Helpers for Linear URLs."""

from linear_relay.constants import LINEAR_BASE_URL


def parse_identifier(url: str) -> str:
    """Extract the human-readable issue identifier from a Linear URL.

    ``https://linear.app/acme/issue/ENG-123/title#comment-1`` -> ``ENG-123``.
    Relies on the identifier being the sixth path segment; raises ValueError
    for URLs that are too short.
    """
    parts = url.split("/")
    if len(parts) < 6:
        raise ValueError(f"Cannot parse issue identifier from URL: {url}")
    return parts[5].split("#")[0]


def team_url(team_key: str) -> str:
    return f"{LINEAR_BASE_URL}/team/{team_key}"
