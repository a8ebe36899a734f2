"""HTTP application: health, metrics and the versioned API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route

from ettu.database import Database, DatabaseError

logger = logging.getLogger(__name__)

VERSION = "0.1.0"
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH"]


@dataclass
class AppState:
    """Shared state available to every request handler."""

    db: Database | None = None
    config: Mapping[str, Any] = field(default_factory=dict)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _state(request: Request) -> AppState:
    return request.app.state.app_state


async def health_check(request: Request) -> JSONResponse:
    """Report service health, including the database when one is configured."""
    db = _state(request).db
    if db is None:
        return JSONResponse(
            {"status": "healthy", "timestamp": _now(), "version": VERSION, "database": "not_configured"}
        )
    try:
        await run_in_threadpool(db.health_check)
    except DatabaseError as exc:
        return JSONResponse(
            {
                "status": "unhealthy",
                "timestamp": _now(),
                "version": VERSION,
                "database": "disconnected",
                "error": str(exc),
            },
            status_code=503,
        )
    return JSONResponse(
        {"status": "healthy", "timestamp": _now(), "version": VERSION, "database": "connected"}
    )


async def metrics(request: Request) -> Response:
    """Plain-text metrics endpoint; no metrics are collected yet."""
    return PlainTextResponse("# No metrics collected\n", media_type="text/plain")


async def api_status(request: Request) -> Response:
    return PlainTextResponse("API is running")


def build_router(state: AppState) -> Starlette:
    """Assemble the application with its routes and CORS policy."""
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=ALLOWED_METHODS,
            allow_headers=["*"],
        )
    ]
    routes = [
        Route("/health", health_check, methods=["GET"]),
        Route("/metrics", metrics, methods=["GET"]),
        Mount("/api/v1", routes=[Route("/status", api_status, methods=["GET"])]),
    ]
    app = Starlette(routes=routes, middleware=middleware)
    app.state.app_state = state
    return app