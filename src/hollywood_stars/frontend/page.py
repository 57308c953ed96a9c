"""
hollywood_stars.frontend.page

Page controller for the stars table.

Responsibilities:
- Run the API calls behind each user action.
- Feed every outcome (success or failure) through the pure transitions in `state`.
"""

from __future__ import annotations

from hollywood_stars.frontend import state as st
from hollywood_stars.frontend.client import StarsApiClient, StarsApiError
from hollywood_stars.observability.logging import get_logger

log = get_logger(__name__)


class StarsPage:
    def __init__(self, *, client: StarsApiClient, initial: st.PageState | None = None) -> None:
        self._client = client
        self._state = initial or st.PageState()

    @property
    def state(self) -> st.PageState:
        return self._state

    async def load(self, *, page: int | None = None, search: str | None = None) -> st.PageState:
        self._state = st.fetch_started(self._state, page=page, search=search)
        try:
            envelope = await self._client.list_stars(
                page=page,
                search=search if search else None,
            )
        except StarsApiError as e:
            log.warning("stars_fetch_failed", error=e.message, status_code=e.status_code)
            self._state = st.fetch_failed(self._state, e.message)
        else:
            self._state = st.fetch_completed(self._state, envelope)
        return self._state

    async def go_to_page(self, page: int) -> st.PageState:
        return await self.load(page=page, search=self._state.search or None)

    async def search(self, term: str) -> st.PageState:
        # A new search always starts from the first page.
        return await self.load(page=1, search=term.strip())

    def open_edit(self, star_id: str) -> st.PageState:
        star = self._state.find(star_id)
        if star is None:
            raise KeyError(star_id)
        self._state = st.edit_opened(self._state, star)
        return self._state

    def change_field(self, name: str, value: str) -> st.PageState:
        self._state = st.field_changed(self._state, name, value)
        return self._state

    def cancel_edit(self) -> st.PageState:
        self._state = st.edit_cancelled(self._state)
        return self._state

    def dismiss_error(self) -> st.PageState:
        self._state = st.error_dismissed(self._state)
        return self._state

    async def save(self) -> st.PageState:
        star_id = self._state.selected_id
        if not self._state.editing or star_id is None:
            return self._state
        try:
            await self._client.update_star(star_id, dict(self._state.form))
        except StarsApiError as e:
            log.warning("star_update_failed", star_id=star_id, error=e.message)
            self._state = st.save_failed(self._state, e.message)
            return self._state

        self._state = st.save_succeeded(self._state)
        return await self.load(page=self._state.page, search=self._state.search or None)

    async def delete(self, star_id: str) -> st.PageState:
        try:
            await self._client.delete_star(star_id)
        except StarsApiError as e:
            log.warning("star_delete_failed", star_id=star_id, error=e.message)
            self._state = st.delete_failed(self._state, e.message)
        else:
            self._state = st.delete_succeeded(self._state, star_id)
        return self._state


# --- Module Notes -----------------------------------------------------------
# Deletes update the local rows only; saves re-fetch the current page.
