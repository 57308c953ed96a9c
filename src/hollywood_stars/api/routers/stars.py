"""
hollywood_stars.api.routers.stars

Public REST endpoints for star records.

Responsibilities:
- Map the five `/hollywoodStars` routes onto `StarService` operations.
- Pick the success status codes; failures are rendered by `api.errors`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from hollywood_stars.api.deps import star_payload, star_service
from hollywood_stars.domain.schemas import MessageResponse, StarPage
from hollywood_stars.services.star_service import StarService

router = APIRouter(prefix="/hollywoodStars", tags=["stars"])


@router.post("", status_code=HTTP_201_CREATED)
async def create_star(
    payload: Any = Depends(star_payload),
    svc: StarService = Depends(star_service),
) -> dict[str, Any]:
    return await svc.create(payload)


@router.get("", response_model=StarPage)
async def list_stars(
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
    svc: StarService = Depends(star_service),
) -> StarPage:
    # Raw strings: the service applies the lenient paging defaults.
    return await svc.get_paginated(page=page, limit=limit, search=search)


@router.get("/{star_id}")
async def get_star(
    star_id: str,
    svc: StarService = Depends(star_service),
) -> dict[str, Any]:
    return await svc.get_one(star_id)


@router.put("/{star_id}", response_model=MessageResponse)
async def update_star(
    star_id: str,
    payload: Any = Depends(star_payload),
    svc: StarService = Depends(star_service),
) -> MessageResponse:
    return MessageResponse(message=await svc.update(star_id, payload))


@router.delete("/{star_id}", response_model=MessageResponse)
async def delete_star(
    star_id: str,
    svc: StarService = Depends(star_service),
) -> MessageResponse:
    return MessageResponse(message=await svc.delete(star_id))


# --- Module Notes -----------------------------------------------------------
# The collection route always answers with the paginated envelope, including
# when called without query parameters.
