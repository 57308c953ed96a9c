"""
hollywood_stars.frontend.client

HTTP client boundary used by the page to talk to the stars API.

Responsibilities:
- Wrap each `/hollywoodStars` call behind an async method.
- Turn non-2xx responses and transport errors into one `StarsApiError` type.
"""

from __future__ import annotations

from typing import Any

import httpx

from hollywood_stars.settings import Settings

STARS_PATH = "/hollywoodStars"


class StarsApiError(Exception):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=settings.frontend_api_base_url)


class StarsApiClient:
    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            r = await self._http.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise StarsApiError(f"{method} {url} failed: {e}") from e
        if r.is_error:
            raise StarsApiError(_error_message(r), status_code=r.status_code)
        return r.json()

    async def list_stars(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
    ) -> dict[str, Any]:
        # Parameters left as None are omitted so the server applies its defaults.
        params = {
            k: v for k, v in {"page": page, "limit": limit, "search": search}.items() if v is not None
        }
        return await self._request("GET", STARS_PATH, params=params)

    async def get_star(self, star_id: str) -> dict[str, Any]:
        return await self._request("GET", f"{STARS_PATH}/{star_id}")

    async def create_star(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", STARS_PATH, json=payload)

    async def update_star(self, star_id: str, payload: dict[str, Any]) -> str:
        body = await self._request("PUT", f"{STARS_PATH}/{star_id}", json=payload)
        return str(body.get("message", ""))

    async def delete_star(self, star_id: str) -> str:
        body = await self._request("DELETE", f"{STARS_PATH}/{star_id}")
        return str(body.get("message", ""))


def _error_message(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return f"HTTP {r.status_code}"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"HTTP {r.status_code}"


# --- Module Notes -----------------------------------------------------------
# No retries or timeouts beyond httpx defaults; callers surface failures in page state.
