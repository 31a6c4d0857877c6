"""Linear webhook router with the single top-level error boundary."""

import logging

from fastapi import APIRouter, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from linear_relay.errors import RelayError
from linear_relay.models.responses import RelayResponse
from linear_relay.webhook.handlers import handle_webhook

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["linear"])

WEBHOOK_PATH = "/api/webhook"
GENERIC_ERROR = "Something went wrong"

# Common verbs reach the handler's own method check; anything else is
# answered by webhook_http_exception_handler
ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _respond(
    body: RelayResponse, status_code: int = 200, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(body.model_dump(), status_code=status_code, headers=headers)


def validation_issues(exc: ValidationError) -> list[dict]:
    """Flatten pydantic errors into JSON-safe issue records, one per field."""
    return [
        {"path": list(err["loc"]), "message": err["msg"], "type": err["type"]}
        for err in exc.errors(include_url=False)
    ]


async def webhook_http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Keep the JSON envelope for verbs the webhook route is not registered for.

    Other paths and statuses fall through to FastAPI's default handler.
    """
    if exc.status_code == 405 and request.url.path == WEBHOOK_PATH:
        message = f"Method {request.method} is not allowed."
        logger.warning("Rejected webhook request (405): %s", message)
        return _respond(RelayResponse.failure(message), 405, headers=exc.headers)
    return await http_exception_handler(request, exc)


@router.api_route(WEBHOOK_PATH, methods=ALL_METHODS)
async def linear_webhook(request: Request) -> JSONResponse:
    """Receive a Linear webhook and relay it to Discord.

    Every outcome is answered with the ``{success, message, error}`` envelope.
    """
    try:
        result = await handle_webhook(request)
    except RelayError as exc:
        logger.warning("Rejected webhook request (%d): %s", exc.status_code, exc.message)
        return _respond(RelayResponse.failure(exc.message), exc.status_code)
    except ValidationError as exc:
        issues = validation_issues(exc)
        logger.warning("Invalid webhook query: %d issue(s)", len(issues))
        return _respond(RelayResponse.failure(issues), 400)
    except Exception:
        logger.error("Webhook relay failed", exc_info=True)
        return _respond(RelayResponse.failure(GENERIC_ERROR), 500)

    return _respond(result)
