from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Response
from fastapi.responses import RedirectResponse
from starlette.requests import Request

from fittrack.core.config import Settings, get_settings
from fittrack.core.errors import register_exception_handlers
from fittrack.core.logging import configure_logging
from fittrack.routers import (
    activity_logs,
    auth,
    exercises,
    goals,
    health,
    nutrition,
    summary,
    users,
    workouts,
)
from fittrack.storage import Storage, build_storage

logger = logging.getLogger(__name__)


CORE_ROUTERS = (
    (health.router, {"tags": ["health"]}),
    (auth.router, {}),
    (users.router, {}),
    (workouts.router, {}),
    (exercises.router, {}),
    (goals.router, {}),
    (nutrition.router, {}),
    (activity_logs.router, {}),
    (summary.router, {}),
)


def create_app(settings: Optional[Settings] = None, storage: Optional[Storage] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    storage = storage if storage is not None else build_storage(settings)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        storage.init_schema()
        if settings.seed_demo_data:
            storage.seed_default_data()
        logger.info("%s started with %s storage", settings.app_name, storage.backend)
        yield
        storage.close()

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.docs_url,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.storage = storage
    register_exception_handlers(application)

    @application.middleware("http")
    async def enforce_utf8_json(request: Request, call_next):
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["content-type"] = "application/json; charset=utf-8"
        return response

    @application.get("/favicon.ico", include_in_schema=False)
    def favicon():
        return Response(status_code=204)

    for router, include_kwargs in CORE_ROUTERS:
        application.include_router(router, **include_kwargs)

    @application.get("/", include_in_schema=False)
    def root():
        target = settings.docs_url or "/docs"
        return RedirectResponse(target)

    @application.get("/__routes", include_in_schema=False)
    def routes_snapshot():
        return sorted(f"{route.path}  [{','.join(route.methods)}]" for route in application.router.routes)

    return application


app = create_app()
