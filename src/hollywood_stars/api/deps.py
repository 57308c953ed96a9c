"""
hollywood_stars.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions and the star service.
- Read create/update bodies sent as JSON or as urlencoded forms.
- Encapsulate app.state access patterns (settings/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from hollywood_stars.services.errors import StarValidationError
from hollywood_stars.services.star_service import StarService
from hollywood_stars.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The settings the app was built with, not a fresh environment read.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the lifespan of `hollywood_stars.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit/rollback is managed by the service layer.
    async with session_factory() as session:
        yield session


def star_service(
    session: AsyncSession = Depends(db_session),
    settings: Settings = Depends(settings_dep),
) -> StarService:
    return StarService(session=session, settings=settings)


async def star_payload(request: Request) -> Any:
    """
    Request body as submitted: a JSON value, or the fields of an
    `application/x-www-form-urlencoded` form. Shape checks belong to the service.
    """

    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/x-www-form-urlencoded"):
        form = await request.form()
        return {key: value for key, value in form.items()}
    try:
        return await request.json()
    except ValueError as exc:
        raise StarValidationError("Invalid request", error=f"malformed JSON body: {exc}") from exc
