"""JSON endpoints for behavior, rejoin and teammate score lookups."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from wowbehave.exceptions import StoreUnavailableError
from wowbehave.logging import get_logger
from wowbehave.service import TeammateService

log = get_logger(__name__)

router = APIRouter()

NOT_FOUND_MESSAGE = "No records found for the given name and realm."


def get_service(request: Request) -> TeammateService:
    """Build a TeammateService around the store held on app.state."""
    return TeammateService(request.app.state.store)


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(content={"success": False, "message": message}, status_code=404)


def _internal_error() -> JSONResponse:
    return JSONResponse(
        content={"success": False, "error": "Internal Server Error"}, status_code=500
    )


@router.get("/behaviors/{name}/{realm}")
async def get_behaviors(
    name: str, realm: str, service: TeammateService = Depends(get_service)
) -> JSONResponse:
    """Aggregated behavior totals as ``[{"name": category, "value": total}]``."""
    try:
        totals = await service.get_behaviors(name, realm)
    except StoreUnavailableError as e:
        log.error("behaviors_fetch_failed", name=name, realm=realm, error=str(e))
        return _internal_error()

    if totals is None:
        return _not_found(NOT_FOUND_MESSAGE)

    return JSONResponse(content={
        "success": True,
        "data": [{"name": category, "value": value} for category, value in totals.items()],
        "message": "Records retrieved and processed successfully.",
    })


@router.get("/rejoinRating/{name}/{realm}")
async def get_rejoin_rating(
    name: str, realm: str, service: TeammateService = Depends(get_service)
) -> JSONResponse:
    """Raw decoded rejoin answers as ``[{"key": answer}]``."""
    try:
        entries = await service.get_rejoin_entries(name, realm)
    except StoreUnavailableError as e:
        log.error("rejoin_fetch_failed", name=name, realm=realm, error=str(e))
        return _internal_error()

    if entries is None:
        return _not_found(NOT_FOUND_MESSAGE)

    return JSONResponse(content={
        "success": True,
        "data": [{"key": entry.answer} for entry in entries],
        "message": "Records retrieved successfully.",
    })


@router.get("/score/{name}/{realm}")
async def get_score(
    name: str, realm: str, service: TeammateService = Depends(get_service)
) -> JSONResponse:
    """Teammate score; 404 when either behavior or rejoin data is missing."""
    try:
        result = await service.get_score(name, realm)
    except StoreUnavailableError as e:
        log.error("score_calculation_failed", name=name, realm=realm, error=str(e))
        return _internal_error()

    if result is None:
        return _not_found("Behavior or rejoin data not found.")

    return JSONResponse(content={
        "success": True,
        "score": result.score,
        "message": "Teammate score calculated successfully.",
    })


@router.get("/health")
async def health() -> JSONResponse:
    """Liveness probe; does not touch the store."""
    return JSONResponse(content={"status": "ok"})
