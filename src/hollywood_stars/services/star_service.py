"""
hollywood_stars.services.star_service

Star CRUD service (transaction + error-translation owner).

Responsibilities:
- Validate payloads and paging inputs before they reach the store.
- Run each operation as one store round-trip (count + find for listings).
- Convert absences into `StarNotFound` and store exceptions into `StoreFailure`.
"""

from __future__ import annotations

import math
import re
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from hollywood_stars.db.models import ID_FIELD
from hollywood_stars.db.repositories.stars import StarFilter, StarRepo
from hollywood_stars.domain.schemas import StarCreate, StarPage, StarUpdate
from hollywood_stars.observability.logging import get_logger
from hollywood_stars.services.errors import StarNotFound, StarValidationError, StoreFailure
from hollywood_stars.settings import Settings

log = get_logger(__name__)

# Largest OFFSET/LIMIT the store accepts (signed 64-bit).
MAX_OFFSET = 2**63 - 1

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _coerce_paging(value: int | str | None, *, default: int, name: str) -> int:
    """
    Lenient paging parser reading the leading integer of a string, so "2abc" is 2
    and "1.5" is 1. Missing, non-numeric or zero values fall back to `default`;
    negative values are rejected.
    """

    if value is None:
        return default
    if isinstance(value, int):
        number = value
    else:
        match = _LEADING_INT.match(str(value))
        if match is None:
            return default
        try:
            number = int(match.group(1))
        except ValueError as exc:
            # Beyond the interpreter's int-from-str digit limit.
            raise StarValidationError(f"Invalid {name}", error=f"{name} is out of range") from exc
    if number == 0:
        return default
    if number < 0:
        raise StarValidationError(f"Invalid {name}", error=f"{name} must be a positive integer")
    return number


def _validation_error(exc: ValidationError) -> StarValidationError:
    return StarValidationError(
        "Invalid star payload",
        error=exc.errors(include_url=False, include_context=False),
    )


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise StarValidationError("Invalid star payload", error="payload must be a JSON object")
    # The identifier is store-assigned and immutable.
    return {k: v for k, v in payload.items() if k != ID_FIELD}


class StarService:
    def __init__(self, *, session: AsyncSession, settings: Settings) -> None:
        self._session = session
        self._settings = settings
        self._stars = StarRepo(session)

    @asynccontextmanager
    async def _store_call(self, operation: str, message: str) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            await self._session.rollback()
            log.exception("store_failure", operation=operation)
            raise StoreFailure(message, error=str(exc)) from exc

    async def create(self, payload: Any) -> dict[str, Any]:
        try:
            star_in = StarCreate.model_validate(_require_object(payload))
        except ValidationError as exc:
            raise _validation_error(exc) from exc

        async with self._store_call("create", "Error creating star"):
            star = await self._stars.insert(star_in.model_dump())
            await self._session.commit()

        log.info("star_created", star_id=star.id)
        return star.to_record()

    async def get_one(self, star_id: str) -> dict[str, Any]:
        async with self._store_call("get_one", "Error fetching star"):
            star = await self._stars.find_by_id(star_id)
        if star is None:
            raise StarNotFound(star_id)
        return star.to_record()

    async def get_all(self, page: int | None = None, limit: int | None = None) -> list[dict[str, Any]]:
        # No defaulting here: without both values the whole collection is returned.
        skip = (page - 1) * limit if page is not None and limit is not None else None
        if skip is not None and skip > MAX_OFFSET:
            return []
        if limit is not None:
            limit = min(limit, MAX_OFFSET)
        async with self._store_call("get_all", "Error fetching stars"):
            stars = await self._stars.find(skip=skip, limit=limit)
        return [s.to_record() for s in stars]

    async def get_paginated(
        self,
        page: int | str | None = None,
        limit: int | str | None = None,
        search: str | None = None,
    ) -> StarPage:
        page_no = _coerce_paging(page, default=self._settings.default_page, name="page")
        page_size = min(
            _coerce_paging(limit, default=self._settings.default_page_limit, name="limit"),
            self._settings.max_page_limit,
        )
        # Always filtered: an empty term matches every named record.
        star_filter = StarFilter(name_contains=(search or "").strip())

        skip = (page_no - 1) * page_size
        async with self._store_call("get_paginated", "Error while fetching paginated stars"):
            total = await self._stars.count(star_filter)
            # An offset past the store's integer range is past the last page.
            stars = (
                await self._stars.find(star_filter, skip=skip, limit=page_size)
                if skip <= MAX_OFFSET
                else []
            )

        return StarPage(
            data=[s.to_record() for s in stars],
            total=total,
            page=page_no,
            total_pages=math.ceil(total / page_size),
        )

    async def update(self, star_id: str, payload: Any) -> str:
        try:
            changes = StarUpdate.model_validate(_require_object(payload)).changes()
        except ValidationError as exc:
            raise _validation_error(exc) from exc
        if not changes:
            raise StarValidationError("Invalid star payload", error="no fields to update")

        async with self._store_call("update", "Error updating star"):
            result = await self._stars.update_by_id(star_id, changes)
            if result.matched_count == 0:
                await self._session.rollback()
                raise StarNotFound(star_id)
            await self._session.commit()

        log.info("star_updated", star_id=star_id, fields=sorted(changes))
        return "Star updated successfully"

    async def delete(self, star_id: str) -> str:
        async with self._store_call("delete", "Error deleting star"):
            result = await self._stars.delete_by_id(star_id)
            if result.deleted_count == 0:
                await self._session.rollback()
                raise StarNotFound(star_id)
            await self._session.commit()

        log.info("star_deleted", star_id=star_id)
        return "Star deleted successfully"


# --- Module Notes -----------------------------------------------------------
# Concurrent writes to the same id are last-write-wins; no version token is kept.
