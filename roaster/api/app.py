"""FastAPI application factory.

Lifespan
--------
On startup the app selects the text-generation backend once (from
``settings.llm_provider``) and stores it on ``app.state.generator``; every
request reads it from there.  No other state is kept between requests.

Routers
-------
All endpoints are mounted under ``/api``:

    POST /api/analyze            — fetch, extract, grade a website
    POST /api/generate-landing   — render a landing page from business info
    GET  /api/health             — liveness + active generation mode

Errors
------
:class:`~roaster.errors.RoasterError` subclasses and malformed request bodies
are rendered as ``{"error": message}`` with the matching status code.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roaster.config import settings
from roaster.errors import RoasterError
from roaster.generation.providers import TextGenerator, build_generator
from roaster.log import setup_logging

from roaster.api.routers import analyze as analyze_router
from roaster.api.routers import health as health_router
from roaster.api.routers import landing as landing_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Pick the text generator on startup unless one was injected."""
    if getattr(app.state, "generator", None) is None:
        app.state.generator = build_generator()
    yield


async def _roaster_error_handler(request: Request, exc: RoasterError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


def create_app(generator: TextGenerator | None = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    Args:
        generator: Backend to use instead of the one named by
            ``settings.llm_provider``.
    """
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Website Roaster API",
        description=(
            "Grades a website from its markup and writes a roast and a "
            "professional review, and turns a business questionnaire into "
            "a landing page."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.generator = generator

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RoasterError, _roaster_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    app.include_router(analyze_router.router, prefix="/api", tags=["analyze"])
    app.include_router(landing_router.router, prefix="/api", tags=["landing"])
    app.include_router(health_router.router, prefix="/api", tags=["health"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn roaster.api.app:app --reload
app = create_app()
