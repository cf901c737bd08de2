"""FastAPI MCP Server for cardano governance documents and data.

The app is built on demand: run `cgov-mcp`, or
`uvicorn --factory cgov_mcp.server:create_app`.
"""

import json
import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from . import __version__
from .config import Settings, get_settings
from .db import DatabasePool
from .engine.dispatch import create_dispatcher
from .mcp import INTERNAL_ERROR, PARSE_ERROR, SERVER_ERROR, handle_jsonrpc, jsonrpc_error
from .middleware import RequestLogMiddleware
from .models import HealthResponse

logger = logging.getLogger(__name__)


# ============ SENTRY INITIALIZATION ============


def _filter_sentry_event(event: dict) -> dict:
    """Drop SQL text from events; statements are caller-supplied."""
    for breadcrumb in event.get("breadcrumbs", {}).get("values", []):
        if breadcrumb.get("category") == "query":
            breadcrumb["message"] = "[REDACTED]"
    return event


def init_error_tracking(settings: Settings) -> bool:
    """Initialize Sentry if a DSN is configured."""
    if not settings.sentry_dsn:
        logger.debug("Sentry DSN not configured - error tracking disabled")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
        integrations=[FastApiIntegration(), StarletteIntegration()],
        before_send=lambda event, hint: _filter_sentry_event(event),
    )
    logger.info("Sentry error tracking initialized")
    return True


def create_app(settings: Settings | None = None, pool: DatabasePool | None = None) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Configuration (defaults to the environment)
        pool: Database pool; the app closes it on shutdown
    """
    settings = settings or get_settings()
    pool = pool or DatabasePool.from_settings(settings)
    dispatcher = create_dispatcher(settings, pool)
    init_error_tracking(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        logger.info(f"cgov-mcp HTTP server v{__version__} starting")
        logger.info(f"  - MCP endpoint: http://{settings.host}:{settings.port}/mcp")
        logger.info(f"  - Health check: http://{settings.host}:{settings.port}/health")
        if not settings.debug and settings.cors_allowed_origins == "*":
            logger.warning(
                "CORS is configured to allow all origins ('*'). "
                "Set CORS_ALLOWED_ORIGINS to specific domains in production."
            )
        yield
        await pool.close()

    app = FastAPI(
        title="cgov MCP Server",
        description="MCP endpoint for the Cardano Constitution, Vision 2030 and Voting Principles",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.pool = pool
    app.state.dispatcher = dispatcher

    app.add_middleware(RequestLogMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # ============ EXCEPTION HANDLERS ============

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Report unexpected failures as a JSON-RPC internal error."""
        logger.error(f"Error handling MCP request: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=jsonrpc_error(None, INTERNAL_ERROR, "Internal server error"),
        )

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(version=__version__)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with server info."""
        return {
            "name": "cgov-mcp",
            "version": __version__,
            "mcp": "/mcp",
            "health": "/health",
        }

    # ============ MCP ENDPOINTS ============

    @app.post("/mcp", tags=["MCP"])
    async def mcp_endpoint(request: Request):
        """Stateless MCP Streamable HTTP endpoint (JSON responses only)."""
        try:
            body = json.loads(await request.body())
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JSONResponse(jsonrpc_error(None, PARSE_ERROR, "Parse error"), status_code=400)

        response = await handle_jsonrpc(body, request.app.state.dispatcher)
        if response is None:
            return Response(status_code=202)
        return JSONResponse(response)

    @app.get("/mcp", tags=["MCP"])
    async def mcp_get():
        return JSONResponse(
            jsonrpc_error(None, SERVER_ERROR, "Method not allowed. Use POST."), status_code=405
        )

    @app.delete("/mcp", tags=["MCP"])
    async def mcp_delete():
        return JSONResponse(jsonrpc_error(None, SERVER_ERROR, "Method not allowed."), status_code=405)

    return app
