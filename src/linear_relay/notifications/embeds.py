"""Discord embed builders, one per supported Linear event."""

from datetime import datetime

import discord

from linear_relay.constants import LINEAR_COLOR
from linear_relay.linear.identifiers import parse_identifier, team_url
from linear_relay.linear.models import LinearUser
from linear_relay.models.events import CommentCreateEvent, IssueCreateEvent, IssueUpdateEvent


def base_embed(created_at: datetime) -> discord.Embed:
    """Embed with brand color and event timestamp; the starting point for every notification."""
    return discord.Embed(colour=discord.Colour.from_str(LINEAR_COLOR), timestamp=created_at)


def _with_header(embed: discord.Embed, title: str, url: str, label: str, actor: LinearUser) -> discord.Embed:
    embed.title = title
    embed.url = url
    embed.set_author(name=label)
    embed.set_footer(text=actor.name, icon_url=actor.avatar_url)
    return embed


def issue_created_embed(
    event: IssueCreateEvent,
    actor: LinearUser,
    assignee: LinearUser | None = None,
) -> discord.Embed:
    """New issue: team, status and optional assignee as inline fields, description as body."""
    data = event.data
    identifier = parse_identifier(event.url)
    embed = _with_header(
        base_embed(event.created_at),
        f"{identifier} {data.title}",
        event.url,
        "New issue added",
        actor,
    )
    embed.add_field(name="Team", value=f"[{data.team.name}]({team_url(data.team.key)})", inline=True)
    embed.add_field(name="Status", value=data.state.name, inline=True)

    if assignee is not None:
        embed.add_field(
            name="Assignee",
            value=f"[{assignee.display_name}]({assignee.url})",
            inline=True,
        )

    if data.description:
        embed.description = data.description

    return embed


def status_changed_embed(event: IssueUpdateEvent, actor: LinearUser) -> discord.Embed:
    """Status change: colored with the new workflow state's color."""
    data = event.data
    identifier = parse_identifier(event.url)
    embed = _with_header(
        base_embed(event.created_at),
        f"{identifier} {data.title}",
        event.url,
        "Status changed",
        actor,
    )
    embed.colour = discord.Colour.from_str(data.state.color)
    embed.description = f"Status: **{data.state.name}**"
    return embed


def comment_created_embed(event: CommentCreateEvent, actor: LinearUser) -> discord.Embed:
    data = event.data
    identifier = parse_identifier(event.url)
    embed = _with_header(
        base_embed(event.created_at),
        f"{identifier} {data.issue.title}",
        event.url,
        "New comment",
        actor,
    )
    embed.description = data.body
    return embed
