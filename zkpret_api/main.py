"""
ZK-PRET API - single-entry HTTP dispatcher for compliance proofs.

Every request enters through one catch-all route and is resolved by
`resolve_route`:
- OPTIONS (any path) -> 200, empty body
- /api/health, /health -> service metadata
- POST /api/<proof type>... -> proof handler
- other methods on a proof route -> 404
- any other GET -> endpoint catalog
- anything else -> 404

All responses carry the configured CORS headers.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Awaitable, Callable

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import Settings, get_settings
from .dispatcher import RouteKind, resolve_route
from .engine import ProofEngine, SimulatedProofEngine
from .errors import RouteNotFoundError, ZkPretError
from .handler import handle_proof, utc_timestamp
from .models import CatalogResponse, HealthResponse
from .proof_types import PROOF_TYPES


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging with the configured renderer."""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


configure_logging(get_settings())

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_settings()

    logger.info(
        "API started",
        version=__version__,
        service=settings.service_name,
        host=settings.host,
        port=settings.port,
        default_network=settings.default_network,
        proof_types=[d.key for d in PROOF_TYPES],
    )

    yield

    logger.info("API stopped")


# Docs routes are disabled: every GET outside the proof routes is the catalog.
app = FastAPI(
    title="ZK-PRET Core Engine API",
    description="Compliance proof generation endpoints",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


def get_engine(settings: Settings = Depends(get_settings)) -> ProofEngine:
    """Proof engine used by the proof routes."""
    return SimulatedProofEngine(latency_scale=settings.latency_scale)


# ============================================================================
# CORS
# ============================================================================


@app.middleware("http")
async def apply_cors_headers(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Attach CORS headers to every response."""
    response = await call_next(request)
    response.headers.update(get_settings().cors_headers())
    return response


# ============================================================================
# Error Handlers
# ============================================================================


@app.exception_handler(ZkPretError)
async def zkpret_error_handler(request: Request, exc: ZkPretError) -> JSONResponse:
    """Map routing/domain errors onto their HTTP status."""
    logger.warning(
        "Request failed",
        method=request.method,
        path=request.url.path,
        status=exc.http_status,
        error=str(exc),
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Methods outside the entry route are unmatched routes, not 405s."""
    if exc.status_code == 405:
        return await zkpret_error_handler(
            request, RouteNotFoundError(request.method, request.url.path)
        )
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: never leak internal details."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
        headers=get_settings().cors_headers(),
    )


# ============================================================================
# Health / Catalog
# ============================================================================


def build_health(settings: Settings) -> HealthResponse:
    """Fixed service metadata."""
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        timestamp=utc_timestamp(),
        version=__version__,
        features=[d.feature for d in PROOF_TYPES],
    )


def build_catalog(settings: Settings) -> CatalogResponse:
    """Listing of every endpoint the dispatcher serves."""
    endpoints = [f"POST {d.route} - {d.description}" for d in PROOF_TYPES]
    endpoints.append("GET /api/health - Service health check")
    return CatalogResponse(
        message="ZK-PRET Core Engine API",
        version=__version__,
        service=settings.catalog_service,
        timestamp=utc_timestamp(),
        endpoints=endpoints,
        note="Core ZK proof generation engine",
    )


# ============================================================================
# Dispatcher
# ============================================================================


@app.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"],
)
async def dispatch(
    request: Request,
    settings: Settings = Depends(get_settings),
    engine: ProofEngine = Depends(get_engine),
) -> Response:
    """Single entry point: resolve the route, then delegate."""
    method = request.method
    path = request.url.path

    logger.info("Request received", method=method, path=path)

    route = resolve_route(method, path)

    if route.kind is RouteKind.PREFLIGHT:
        return Response(status_code=200)

    if route.kind is RouteKind.HEALTH:
        return JSONResponse(content=build_health(settings).to_wire())

    if route.kind is RouteKind.PROOF:
        outcome = await handle_proof(
            route.proof_type,
            await request.body(),
            engine,
            default_network=settings.default_network,
        )
        return JSONResponse(status_code=outcome.status_code, content=outcome.body)

    return JSONResponse(content=build_catalog(settings).to_wire())


# ============================================================================
# Entry Point
# ============================================================================


def run() -> None:
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "zkpret_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
