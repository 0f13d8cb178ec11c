from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse, Response

from storeops.core.logger import get_logger
from storeops.domain.resources import Operation, ResourceSpec
from storeops.repositories.json_storage import StorageError
from storeops.services.resource_service import (
    DuplicateRecordError,
    InvalidPayloadError,
    RecordNotFoundError,
    ResourceService,
)

log = get_logger("routers")


def _message(text: str, status_code: int) -> JSONResponse:
    return JSONResponse({"message": text}, status_code=status_code)


def _storage_failure(spec: ResourceSpec, operation: Operation, exc: StorageError) -> JSONResponse:
    log.error("Error on %s %s (%s)", operation.value, spec.filename, exc.reason, exc_info=exc)
    return _message(spec.failure_message(operation), 500)


def build_resource_router(spec: ResourceSpec) -> APIRouter:
    """Expose the operations ``spec`` supports under /api/<name>."""
    router = APIRouter(prefix=f"/api/{spec.name}", tags=[spec.name])

    def _get_service(request: Request) -> ResourceService:
        services = getattr(getattr(request.app, "state", None), "resource_services", None) or {}
        svc = services.get(spec.name)
        if not svc:
            raise RuntimeError(f"ResourceService for {spec.name} not configured")
        return svc

    if spec.supports(Operation.LIST):
        @router.get("")
        def list_records(request: Request):
            try:
                return _get_service(request).list()
            except StorageError as exc:
                return _storage_failure(spec, Operation.LIST, exc)

    if spec.supports(Operation.CREATE):
        @router.post("", status_code=201)
        def create_record(request: Request, payload: Any = Body(None)):
            try:
                created = _get_service(request).create(payload)
            except InvalidPayloadError:
                return _message(spec.invalid_payload_message(), 400)
            except DuplicateRecordError:
                return _message(spec.conflict_message(), 409)
            except StorageError as exc:
                return _storage_failure(spec, Operation.CREATE, exc)
            return JSONResponse(created, status_code=201)

    if spec.supports(Operation.UPDATE):
        @router.put("/{key}")
        def update_record(key: str, request: Request, payload: Any = Body(None)):
            try:
                updated = _get_service(request).update(key, payload)
            except InvalidPayloadError:
                return _message(spec.invalid_payload_message(), 400)
            except RecordNotFoundError:
                return _message(spec.not_found_message(), 404)
            except StorageError as exc:
                return _storage_failure(spec, Operation.UPDATE, exc)
            return updated

    if spec.supports(Operation.DELETE):
        @router.delete("/{key}", status_code=204)
        def delete_record(key: str, request: Request):
            try:
                _get_service(request).delete(key)
            except RecordNotFoundError:
                return _message(spec.not_found_message(), 404)
            except StorageError as exc:
                return _storage_failure(spec, Operation.DELETE, exc)
            return Response(status_code=204)

    return router
