"""Records returned by Linear API lookups."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LinearUser(BaseModel):
    """A Linear workspace member."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    display_name: str
    url: str
    avatar_url: str | None = None


class LinearIssue(BaseModel):
    """A Linear issue with its (optional) assignee expanded."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    identifier: str
    title: str
    url: str
    assignee: LinearUser | None = None
