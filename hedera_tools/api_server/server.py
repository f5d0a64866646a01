"""
FastAPI server — account and token operations over the Hedera SDK.

One routing table (API_VERSIONS) mounts the same account and token routers
under every version prefix, so /api and /api/v1 serve identical shapes.
Errors from every handler are rendered by errors.send_error.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.middleware.sessions import SessionMiddleware

from hedera_tools import __version__
from hedera_tools.api_server.accounts import router as accounts_router
from hedera_tools.api_server.errors import api_error_handler, request_validation_handler
from hedera_tools.api_server.middleware import RequestContextMiddleware
from hedera_tools.api_server.tokens import router as tokens_router
from hedera_tools.config import Settings, get_settings
from hedera_tools.core.exceptions import ApiError
from hedera_tools.hedera_logging import get_logger

logger = get_logger(__name__)

# version name -> mount prefix
API_VERSIONS: dict[str, str] = {
    "unversioned": "/api",
    "v1": "/api/v1",
}

# resource path -> (router, OpenAPI tag)
RESOURCES = {
    "/accounts": (accounts_router, "Accounts"),
    "/tokens": (tokens_router, "Tokens"),
}

GREETING = "Hello World! This is the Hedera Tools project."


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    if settings.uses_default_secret:
        logger.warning("default_secret_key_in_use", hint="set SECRET_KEY outside local development")
    logger.info(
        "api_started",
        version=__version__,
        api_prefixes=list(API_VERSIONS.values()),
        strict_network=settings.strict_network,
    )
    yield
    logger.info("api_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI app: middleware, error handlers, versioned routers."""
    settings = settings or get_settings()
    application = FastAPI(
        title="Hedera Tools API",
        description="Account and token operations on Hedera mainnet/testnet.",
        version=__version__,
        lifespan=lifespan,
    )

    application.add_middleware(RequestContextMiddleware)
    # added last so it wraps RequestContextMiddleware and the session is available there
    application.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        max_age=settings.session_max_age_sec,
    )

    application.add_exception_handler(ApiError, api_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_handler)

    for version, prefix in API_VERSIONS.items():
        for path, (resource_router, tag) in RESOURCES.items():
            application.include_router(
                resource_router,
                prefix=f"{prefix}{path}",
                tags=[f"{tag} ({version})"],
            )

    @application.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return GREETING

    @application.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    return application


app = create_app()
