"""FastAPI app factory and base setup."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from ..config import get_settings
from ..exceptions import (
    APIKeyError,
    ActionExecutionError,
    ChainkitError,
    ModelInvocationError,
    UnsupportedChainTypeError,
)
from ..logging_config import configure_logging

logger = logging.getLogger(__name__)


def error_status_code(exc: ChainkitError) -> int:
    """HTTP status for a chainkit error: unknown chain kind 404, upstream failure 502,
    missing server credentials 500, otherwise 400."""
    if isinstance(exc, UnsupportedChainTypeError):
        return 404
    if isinstance(exc, (ActionExecutionError, ModelInvocationError)):
        return 502
    if isinstance(exc, APIKeyError):
        return 500
    return 400


async def chainkit_error_handler(request: Request, exc: ChainkitError) -> JSONResponse:
    status_code = error_status_code(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": type(exc).__name__})


def create_app(
    title: str = "Chainkit",
    description: str = "Declarative LLM chains over SQL databases and HTTP APIs",
    version: str | None = None,
    **kwargs,
) -> FastAPI:
    """Create a FastAPI application with chainkit defaults."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    version = version or settings.APP_VERSION

    app = FastAPI(
        title=title,
        description=description,
        version=version,
        debug=settings.DEBUG,
        **kwargs,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ChainkitError, chainkit_error_handler)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/")
    def root():
        """Redirect root to API docs."""
        return RedirectResponse(url="/docs", status_code=302)

    @app.get("/info")
    def info():
        """Service info (for health checks or discovery)."""
        return {"service": title, "version": version, "docs": "/docs"}

    return app
