"""
hollywood_stars.frontend.state

Explicit page state and the pure transitions that evolve it.

Responsibilities:
- Hold the listing, the edit modal and the visible error in one immutable value.
- Provide one function per UI event; each returns a new state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal

FORM_FIELDS: tuple[str, ...] = ("name", "email", "major")


@dataclass(frozen=True, slots=True)
class PageState:
    status: Literal["loading", "ready"] = "loading"
    stars: tuple[dict[str, Any], ...] = ()
    total: int = 0
    page: int = 1
    total_pages: int = 0
    search: str = ""

    editing: bool = False
    selected_id: str | None = None
    form: dict[str, str] = field(default_factory=lambda: dict.fromkeys(FORM_FIELDS, ""))

    # Last failure, shown to the user until dismissed or replaced.
    error: str | None = None

    def find(self, star_id: str) -> dict[str, Any] | None:
        return next((s for s in self.stars if s.get("_id") == star_id), None)


def fetch_started(state: PageState, *, page: int | None = None, search: str | None = None) -> PageState:
    return replace(
        state,
        status="loading",
        page=state.page if page is None else page,
        search=state.search if search is None else search,
    )


def fetch_completed(state: PageState, envelope: dict[str, Any]) -> PageState:
    stars = tuple(envelope.get("data") or ())
    return replace(
        state,
        status="ready",
        stars=stars,
        total=int(envelope.get("total", len(stars))),
        page=int(envelope.get("page", state.page)),
        total_pages=int(envelope.get("totalPages", 1 if stars else 0)),
        error=None,
    )


def fetch_failed(state: PageState, message: str) -> PageState:
    # Previous rows stay visible under the error.
    return replace(state, status="ready", error=message)


def edit_opened(state: PageState, star: dict[str, Any]) -> PageState:
    form = {name: str(star.get(name) or "") for name in FORM_FIELDS}
    return replace(state, editing=True, selected_id=star.get("_id"), form=form)


def field_changed(state: PageState, name: str, value: str) -> PageState:
    return replace(state, form={**state.form, name: value})


def edit_cancelled(state: PageState) -> PageState:
    return replace(state, editing=False, selected_id=None)


def save_succeeded(state: PageState) -> PageState:
    return replace(state, editing=False, selected_id=None, error=None)


def save_failed(state: PageState, message: str) -> PageState:
    # Modal stays open with the user's edits intact.
    return replace(state, error=message)


def delete_succeeded(state: PageState, star_id: str) -> PageState:
    remaining = tuple(s for s in state.stars if s.get("_id") != star_id)
    removed = len(state.stars) - len(remaining)
    return replace(state, stars=remaining, total=max(state.total - removed, 0), error=None)


def delete_failed(state: PageState, message: str) -> PageState:
    return replace(state, error=message)


def error_dismissed(state: PageState) -> PageState:
    return replace(state, error=None)


# --- Module Notes -----------------------------------------------------------
# Transitions never mutate their input; `form` and `stars` are always rebuilt.
