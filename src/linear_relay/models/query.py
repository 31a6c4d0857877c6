"""Query-string credentials for a relay request."""

from pydantic import BaseModel, ConfigDict, Field


class WebhookQuery(BaseModel):
    """Discord webhook credentials and Linear API token from the query string.

    Used once per request to build the Discord webhook URL and the Linear
    client; never stored or logged.
    """

    model_config = ConfigDict(populate_by_name=True)

    webhook_id: str = Field(alias="webhookId")
    webhook_token: str = Field(alias="webhookToken")
    linear_token: str = Field(alias="linearToken")
