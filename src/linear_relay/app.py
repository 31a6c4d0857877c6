"""FastAPI application with lifespan and health endpoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from linear_relay.config import get_settings
from linear_relay.logging_config import configure_logging
from linear_relay.webhook.router import router as webhook_router
from linear_relay.webhook.router import webhook_http_exception_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: load config and configure logging on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Linear Relay",
    lifespan=lifespan,
)
app.include_router(webhook_router)
app.add_exception_handler(StarletteHTTPException, webhook_http_exception_handler)


@app.get("/health")
async def health():
    """Health check endpoint for the hosting platform and local development."""
    return {
        "status": "ok",
        "service": "linear-relay",
        "version": "0.1.0",
    }
