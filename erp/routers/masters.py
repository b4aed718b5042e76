from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from erp.domain.listing import ListQuery
from erp.repositories.record_store import RecordNotFoundError, RecordStore, StorageFullError
from erp.repositories.registry import StoreRegistry
from erp.services.csv_service import csv_template, export_csv, import_csv

router = APIRouter(prefix="/masters", tags=["masters"])


def _get_registry(request: Request) -> StoreRegistry:
    registry = getattr(getattr(request.app, "state", None), "registry", None)
    if not registry:
        raise RuntimeError("StoreRegistry not configured")
    return registry


def _get_store(request: Request, entity: str) -> RecordStore:
    store = _get_registry(request).by_slug(entity)
    if store is None:
        raise HTTPException(404, f"Unknown entity {entity!r}")
    return store


def _storage_full(exc: StorageFullError) -> HTTPException:
    return HTTPException(507, str(exc))


def _invalid(exc: ValidationError) -> HTTPException:
    return HTTPException(422, exc.errors(include_url=False, include_context=False))


@router.get("")
def list_entities(request: Request):
    return {"entities": _get_registry(request).slugs()}


@router.get("/{entity}")
def list_records(
    entity: str,
    request: Request,
    q: str = "",
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
):
    store = _get_store(request, entity)
    settings = request.app.state.settings
    result = store.list(ListQuery(text=q, page=page, page_size=page_size or settings.default_page_size))
    return {"data": [item.to_record() for item in result.data], "total": result.total}


@router.get("/{entity}/export.csv", response_class=PlainTextResponse)
def export_records(entity: str, request: Request):
    store = _get_store(request, entity)
    return PlainTextResponse(
        export_csv(store),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{entity}.csv"'},
    )


@router.get("/{entity}/template.csv", response_class=PlainTextResponse)
def record_template(entity: str, request: Request):
    store = _get_store(request, entity)
    return PlainTextResponse(csv_template(store.model), media_type="text/csv")


@router.post("/{entity}/import")
async def import_records(entity: str, request: Request):
    store = _get_store(request, entity)
    body = (await request.body()).decode("utf-8-sig")
    try:
        result = await run_in_threadpool(import_csv, store, body)
    except StorageFullError as exc:
        raise _storage_full(exc)
    return {"imported": result.imported, "errors": result.errors}


@router.get("/{entity}/{record_id}")
def get_record(entity: str, record_id: str, request: Request):
    store = _get_store(request, entity)
    try:
        return store.get(record_id).to_record()
    except RecordNotFoundError as exc:
        raise HTTPException(404, str(exc))


@router.post("/{entity}", status_code=201)
def create_record(entity: str, payload: dict, request: Request):
    store = _get_store(request, entity)
    try:
        record_id = store.create(payload)
    except ValidationError as exc:
        raise _invalid(exc)
    except StorageFullError as exc:
        raise _storage_full(exc)
    return {"id": record_id}


@router.patch("/{entity}/{record_id}", status_code=204)
def update_record(entity: str, record_id: str, patch: dict, request: Request):
    store = _get_store(request, entity)
    try:
        store.update(record_id, patch)
    except RecordNotFoundError as exc:
        raise HTTPException(404, str(exc))
    except ValidationError as exc:
        raise _invalid(exc)
    except StorageFullError as exc:
        raise _storage_full(exc)
    return Response(status_code=204)


@router.post("/{entity}/{record_id}/deactivate", status_code=204)
def deactivate_record(entity: str, record_id: str, request: Request):
    store = _get_store(request, entity)
    try:
        store.deactivate(record_id)
    except RecordNotFoundError as exc:
        raise HTTPException(404, str(exc))
    except StorageFullError as exc:
        raise _storage_full(exc)
    return Response(status_code=204)
