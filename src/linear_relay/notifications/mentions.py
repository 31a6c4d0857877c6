"""Map Linear assignees to Discord @-mentions."""

from collections.abc import Mapping

from linear_relay.constants import LINEAR_DISPLAY_NAME_TO_DISCORD_ID
from linear_relay.linear.models import LinearUser


def resolve_mention(
    actor: LinearUser | None,
    assignee: LinearUser | None,
    table: Mapping[str, str] = LINEAR_DISPLAY_NAME_TO_DISCORD_ID,
) -> str | None:
    """Return the Discord user id to ping, or None.

    Only pings when someone other than the assignee triggered the event and
    the assignee's display name has a Discord mapping.
    """
    if actor is None or assignee is None:
        return None
    if actor.id == assignee.id:
        return None
    return table.get(assignee.display_name)


def mention_content(discord_user_id: str) -> str:
    return f"\N{WAVING HAND SIGN} <@{discord_user_id}>"
