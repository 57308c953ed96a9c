"""
hollywood_stars.domain.schemas

Payload and response schemas for star records.

Responsibilities:
- Validate create/update payloads at the service boundary.
- Let unknown fields pass through to the document store untouched.
- Describe the paginated listing envelope.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints


def _not_blank(value: str) -> str:
    # Checked, never rewritten: accepted values are stored exactly as submitted.
    if not value.strip():
        raise ValueError("must not be blank")
    return value


NonEmptyText = Annotated[str, StringConstraints(max_length=256), AfterValidator(_not_blank)]


class StarCreate(BaseModel):
    model_config = ConfigDict(extra="allow", strict=True)

    name: NonEmptyText
    email: NonEmptyText
    major: NonEmptyText


class StarUpdate(BaseModel):
    model_config = ConfigDict(extra="allow", strict=True)

    # Omitted fields stay untouched; an explicit null is rejected.
    name: NonEmptyText = None  # type: ignore[assignment]
    email: NonEmptyText = None  # type: ignore[assignment]
    major: NonEmptyText = None  # type: ignore[assignment]

    def changes(self) -> dict[str, Any]:
        # Only fields present in the request are merged into the stored document.
        return self.model_dump(exclude_unset=True)


class StarPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: list[dict[str, Any]]
    total: int
    page: int
    total_pages: int = Field(alias="totalPages")


class MessageResponse(BaseModel):
    message: str


# --- Module Notes -----------------------------------------------------------
# Known fields are typed strictly (no int -> str coercion); everything else is
# stored as submitted, matching the schemaless store underneath.
