"""Linear API access: GraphQL client, result models, and URL helpers."""

from linear_relay.linear.client import LinearClient
from linear_relay.linear.identifiers import parse_identifier, team_url
from linear_relay.linear.models import LinearIssue, LinearUser

__all__ = [
    "LinearClient",
    "LinearIssue",
    "LinearUser",
    "parse_identifier",
    "team_url",
]
