"""
hollywood_stars.services.errors

Error taxonomy raised by the star service.

Responsibilities:
- Carry the HTTP status, a human message and error detail for each failure kind.
- Keep the `{message, error}` response body in one place.
"""

from __future__ import annotations

from typing import Any


class StarServiceError(Exception):
    status_code: int = 500

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error

    def to_body(self) -> dict[str, Any]:
        return {"message": self.message, "error": self.error if self.error is not None else ""}


class StarNotFound(StarServiceError):
    status_code = 404

    def __init__(self, star_id: str) -> None:
        super().__init__("Star not found", error=f"no star with id {star_id!r}")
        self.star_id = star_id


class StarValidationError(StarServiceError):
    status_code = 422


class StoreFailure(StarServiceError):
    status_code = 500


# --- Module Notes -----------------------------------------------------------
# Rendered by `api.errors.register_error_handlers`; nothing here knows about FastAPI.
