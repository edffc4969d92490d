"""
Async HTTP client for the board API.

Every call either returns plain data or raises ``ApiError``. The error keeps
the HTTP status so callers can tell an expired session (401) apart from
everything else; network faults carry ``status=None``.
"""
import logging
from typing import Any, List, Optional
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int]):
        super().__init__(message)
        self.status = status

    @property
    def unauthorized(self) -> bool:
        return self.status == 401

    def __repr__(self):
        return f"ApiError({str(self)!r}, status={self.status})"


class BoardApiClient:
    """Thin wrapper over the board and auth endpoints.

    The underlying ``httpx.AsyncClient`` keeps the session cookie between
    calls. A client passed in by the caller is left open on ``aclose()``.
    """

    def __init__(
        self,
        base_url: str = "",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise ApiError(str(e) or "Network error", None) from e

    @staticmethod
    def _check(res: httpx.Response):
        if not res.is_success:
            raise ApiError(res.text or "Request failed", res.status_code)

    @staticmethod
    def _json(res: httpx.Response) -> dict:
        try:
            data = res.json()
        except ValueError as e:
            raise ApiError(f"Malformed response body: {e}", res.status_code) from e
        if not isinstance(data, dict):
            raise ApiError("Malformed response body: expected an object", res.status_code)
        return data

    @staticmethod
    def _board_url(project_id: str) -> str:
        return f"/api/boards/{quote(project_id, safe='')}"

    async def load_board(self, project_id: str) -> dict[str, List[Any]]:
        res = await self._request("GET", self._board_url(project_id))
        self._check(res)
        data = self._json(res)
        return {"cards": data.get("cards") or [], "steps": data.get("steps") or []}

    async def save_board(self, project_id: str, cards: List[Any], steps: List[Any]):
        res = await self._request(
            "PUT",
            self._board_url(project_id),
            json={"cards": cards, "steps": steps},
        )
        self._check(res)

    async def login(self, login: str, password: str):
        res = await self._request(
            "POST", "/api/auth/login", json={"login": login, "password": password}
        )
        self._check(res)

    async def logout(self):
        # A non-2xx answer means there is no session left to end
        await self._request("POST", "/api/auth/logout")

    async def check_session(self) -> bool:
        try:
            res = await self._request("GET", "/api/auth/me")
        except ApiError:
            return False
        return res.is_success
