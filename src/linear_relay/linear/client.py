"""Async Linear GraphQL client.

A client is created per request from the API token supplied in the query
string, so unlike the settings object it is never cached. Each lookup is a
single POST; failures surface as LinearApiError and are not retried.
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from linear_relay.constants import LINEAR_API_URL
from linear_relay.errors import LinearApiError
from linear_relay.linear.models import LinearIssue, LinearUser

logger = logging.getLogger(__name__)

USER_FIELDS = "id name displayName url avatarUrl"

USER_QUERY = f"""
query User($id: String!) {{
  user(id: $id) {{ {USER_FIELDS} }}
}}
"""

ISSUE_QUERY = f"""
query Issue($id: String!) {{
  issue(id: $id) {{
    id identifier title url
    assignee {{ {USER_FIELDS} }}
  }}
}}
"""


class LinearClient:
    """Minimal Linear API client covering the lookups the relay needs.

    Use as an async context manager::

        async with LinearClient(api_key) as linear:
            user = await linear.user(user_id)
    """

    def __init__(self, api_key: str, http_client: httpx.AsyncClient | None = None) -> None:
        self._api_key = api_key
        self._http = http_client
        self._owns_http = http_client is None

    async def __aenter__(self) -> "LinearClient":
        if self._http is None:
            self._http = httpx.AsyncClient()
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._owns_http and self._http is not None:
            await self._http.aclose()
            self._http = None

    async def user(self, user_id: str) -> LinearUser:
        """Fetch a user by id."""
        node = await self._query(USER_QUERY, {"id": user_id}, "user")
        try:
            return LinearUser.model_validate(node)
        except ValidationError as exc:
            raise LinearApiError(f"Malformed user {user_id} in Linear response") from exc

    async def issue(self, issue_id: str) -> LinearIssue:
        """Fetch an issue by id, including its assignee."""
        node = await self._query(ISSUE_QUERY, {"id": issue_id}, "issue")
        try:
            return LinearIssue.model_validate(node)
        except ValidationError as exc:
            raise LinearApiError(f"Malformed issue {issue_id} in Linear response") from exc

    async def _query(self, query: str, variables: dict[str, Any], field: str) -> dict:
        if self._http is None:
            raise RuntimeError("LinearClient must be used as an async context manager")

        try:
            response = await self._http.post(
                LINEAR_API_URL,
                json={"query": query, "variables": variables},
                headers={"Authorization": self._api_key},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise LinearApiError(f"Linear {field} lookup failed: {exc}") from exc
        except ValueError as exc:
            raise LinearApiError(f"Linear {field} lookup returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise LinearApiError(f"Linear {field} lookup returned unexpected payload")

        if payload.get("errors"):
            messages = "; ".join(e.get("message", "unknown error") for e in payload["errors"])
            raise LinearApiError(f"Linear {field} lookup failed: {messages}")

        node = (payload.get("data") or {}).get(field)
        if node is None:
            raise LinearApiError(f"Linear {field} {variables.get('id')} not found")

        logger.debug("Linear %s lookup succeeded for %s", field, variables.get("id"))
        return node
