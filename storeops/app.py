from __future__ import annotations

import uuid
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storeops.core.config import DEV_ORIGINS, Settings, get_settings
from storeops.core.logger import configure_logging, get_logger
from storeops.domain.resources import RESOURCES
from storeops.repositories.json_storage import JsonFileStore
from storeops.routers.resources import build_resource_router
from storeops.services.resource_service import ResourceService

log = get_logger("app")


def _allowed_origins(settings: Settings) -> list[str]:
    allowed = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed.update(DEV_ORIGINS)
    return sorted(origin for origin in allowed if origin)


def _build_services(settings: Settings) -> dict[str, ResourceService]:
    services = {}
    for spec in RESOURCES:
        store = JsonFileStore(settings.data_dir / spec.filename)
        if settings.serialize_writes:
            services[spec.name] = ResourceService(spec, store)
        else:
            services[spec.name] = ResourceService.unlocked(spec, store)
    return services


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory compatible with uvicorn --factory."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Storeops Dashboard API")
    app.state.settings = settings
    app.state.resource_services = _build_services(settings)

    # Registered before CORS: CORSMiddleware must stay the outer layer.
    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        rid = uuid.uuid4().hex[:8]
        request.state.rid = rid
        log.info("-> %s %s rid=%s", request.method, request.url.path, rid)
        try:
            resp = await call_next(request)
        except Exception:
            log.exception("Unhandled error rid=%s", rid)
            resp = JSONResponse({"message": "Internal server error"}, status_code=500)
        log.info("<- %s status=%s rid=%s", request.url.path, resp.status_code, rid)
        resp.headers["X-Request-ID"] = rid
        return resp

    origins = _allowed_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID"],
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        return JSONResponse({"message": "Invalid request payload"}, status_code=400)

    @app.get("/api/health")
    def health():
        return {"status": "ok", "resources": [spec.name for spec in RESOURCES]}

    for spec in RESOURCES:
        app.include_router(build_resource_router(spec))

    log.info("Serving %d resources from %s", len(RESOURCES), settings.data_dir)
    return app


app = create_app()
