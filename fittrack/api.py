# -*- coding: utf-8 -*-
"""
FitTrack API

Registration/login, workout logging, dashboard statistics and the canned
diet/exercise planners.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .auth.api import router as auth_router
from .config import Settings, settings as default_settings
from .dashboard.api import router as dashboard_router
from .errors import FitTrackError
from .planner.api import router as planner_router
from .profile.api import router as profile_router
from .store import JsonFileStore, RecordStore
from .users.storage import UserRepository
from .workouts.api import router as workouts_router

logger = logging.getLogger(__name__)


async def _fittrack_error(request: Request, exc: FitTrackError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={"message": "Server error"})
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Server error"})


def create_app(settings: Optional[Settings] = None, store: Optional[RecordStore] = None) -> FastAPI:
    settings = settings or default_settings
    if not settings.jwt_secret:
        raise RuntimeError("FITTRACK_JWT_SECRET must be set")

    app = FastAPI(
        title="FitTrack",
        description="Workout logging, calorie statistics and templated diet/exercise plans",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    app.state.settings = settings
    app.state.repository = UserRepository(store or JsonFileStore(settings.users_file))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_origins != ["*"],
        allow_methods=["GET", "POST", "PATCH"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FitTrackError, _fittrack_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unhandled_error)

    app.include_router(auth_router)
    app.include_router(dashboard_router)
    app.include_router(workouts_router)
    app.include_router(profile_router)
    app.include_router(planner_router)

    @app.get("/", include_in_schema=False, response_class=PlainTextResponse)
    def root() -> str:
        return "Backend is working!"

    @app.get("/api/health")
    def health() -> dict:
        return {"ok": True}

    return app


def run() -> None:
    """Console entry point (used by pyproject [project.scripts])."""
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving FitTrack on %s:%s (users file: %s)", default_settings.host, default_settings.port, default_settings.users_file)
    uvicorn.run("fittrack.api:create_app", factory=True, host=default_settings.host, port=default_settings.port, reload=False)
