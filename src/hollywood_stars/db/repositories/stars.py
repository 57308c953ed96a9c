from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from hollywood_stars.db.models import ID_FIELD, StarDocument


@dataclass(frozen=True, slots=True)
class StarFilter:
    # Case-insensitive substring match on `name`; None disables the filter.
    name_contains: str | None = None


@dataclass(frozen=True, slots=True)
class UpdateResult:
    matched_count: int


@dataclass(frozen=True, slots=True)
class DeleteResult:
    deleted_count: int


def _name_of(document: dict[str, Any]) -> str | None:
    name = document.get("name")
    return name if isinstance(name, str) else None


class StarRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def insert(self, payload: dict[str, Any]) -> StarDocument:
        document = {k: v for k, v in payload.items() if k != ID_FIELD}
        star = StarDocument(name=_name_of(document), document=document)
        self._session.add(star)
        await self._session.flush()
        return star

    async def find_by_id(self, star_id: str) -> StarDocument | None:
        stmt = select(StarDocument).where(StarDocument.id == star_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def find(
        self,
        star_filter: StarFilter | None = None,
        *,
        skip: int | None = None,
        limit: int | None = None,
    ) -> list[StarDocument]:
        stmt = self._apply_filter(select(StarDocument), star_filter).order_by(StarDocument.seq)
        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list((await self._session.execute(stmt)).scalars().all())

    async def count(self, star_filter: StarFilter | None = None) -> int:
        stmt = self._apply_filter(select(func.count()).select_from(StarDocument), star_filter)
        return int((await self._session.execute(stmt)).scalar_one())

    async def update_by_id(self, star_id: str, fields: dict[str, Any]) -> UpdateResult:
        star = await self.find_by_id(star_id)
        if star is None:
            return UpdateResult(matched_count=0)
        changes = {k: v for k, v in fields.items() if k != ID_FIELD}
        # Reassign so the JSON column is flagged dirty.
        star.document = {**(star.document or {}), **changes}
        if "name" in changes:
            star.name = _name_of(star.document)
        await self._session.flush()
        return UpdateResult(matched_count=1)

    async def delete_by_id(self, star_id: str) -> DeleteResult:
        stmt = delete(StarDocument).where(StarDocument.id == star_id)
        result = await self._session.execute(stmt)
        return DeleteResult(deleted_count=result.rowcount or 0)

    @staticmethod
    def _apply_filter(stmt: Select, star_filter: StarFilter | None) -> Select:
        if star_filter is None or star_filter.name_contains is None:
            return stmt
        # NULL names never match, even for an empty needle.
        return stmt.where(
            StarDocument.name.is_not(None),
            StarDocument.name.icontains(star_filter.name_contains, autoescape=True),
        )
