"""
hollywood_stars.db.models

Persistence schema for star records.

Responsibilities:
- Store each star as a schemaless JSON document addressed by an opaque id.
- Keep `name` in its own indexed column so listing can filter on it.
- Preserve insertion order through an autoincrement sequence.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hollywood_stars.db.base import Base

# Wire name of the identifier field.
ID_FIELD = "_id"


def _utcnow() -> datetime:
    return datetime.utcnow()


def new_star_id() -> str:
    return uuid.uuid4().hex


class StarDocument(Base):
    __tablename__ = "stars"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(
        String(32), nullable=False, unique=True, index=True, default=new_star_id
    )

    # Mirrors document["name"]; NULL when the document carries no string name.
    name: Mapped[str | None] = mapped_column(String(256), nullable=True, index=True)
    document: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    def to_record(self) -> dict[str, Any]:
        return {ID_FIELD: self.id, **(self.document or {})}


# --- Module Notes -----------------------------------------------------------
# `document` never contains the identifier; `to_record` adds it back for the wire.
