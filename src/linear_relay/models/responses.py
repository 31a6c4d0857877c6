"""JSON envelope returned for every relay request."""

from typing import Any

from pydantic import BaseModel


class RelayResponse(BaseModel):
    """``{success, message, error}`` envelope."""

    success: bool
    message: str | None = None
    error: str | list[dict[str, Any]] | None = None

    @classmethod
    def ok(cls, message: str = "OK") -> "RelayResponse":
        return cls(success=True, message=message, error=None)

    @classmethod
    def failure(cls, error: str | list[dict[str, Any]]) -> "RelayResponse":
        return cls(success=False, message=None, error=error)
