"""
api_client.py — Async HTTP client for the notary backend REST API.

Responsibilities:
  - Attach `Authorization: Bearer <access token>` from the token store
  - On 401, refresh the tokens once via POST /auth/refresh and replay the
    request; if the refresh fails, clear the session and raise
    SessionExpiredError
  - Unwrap the {statusCode, message, data} envelope and return `data`
  - Raise NotaryApiError for any status >= 400
  - Serve GETs through the QueryCache (stale time, in-flight de-duplication)
    and retry them on transport errors and 5xx; mutations are sent once and
    invalidate cached reads of their resource

Usage:
    async with NotaryApiClient() as api:
        page = await api.get("/records", params={"status": "PENDING"})
        await api.post("/records/abc/approve", json={"reviewNotes": "ok"})
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

import httpx
import structlog

from notary_shared.config import settings
from notary_client.errors import NotaryApiError, SessionExpiredError
from notary_client.token_store import TokenStore
from notary_client.utils.cache import QueryCache, make_key
from notary_client.utils.retry import retry_read

log = structlog.get_logger(__name__)

REFRESH_PATH = "/auth/refresh"


def resource_prefix(path: str) -> str:
    """'/records/abc/approve' → '/records'."""
    head = path.lstrip("/").split("/", 1)[0].split("?", 1)[0]
    return f"/{head}"


def unwrap_envelope(body: Any) -> Any:
    if isinstance(body, dict) and "statusCode" in body and "data" in body:
        return body["data"]
    return body


class NotaryApiClient:
    """One client per process (or per test). Not thread-safe; share within one event loop."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        token_store: TokenStore | None = None,
        cache: QueryCache | None = None,
        retry_attempts: int | None = None,
        retry_base_delay: float | None = None,
    ) -> None:
        self._base_url = (base_url or settings.api_base_url).rstrip("/")
        self._tokens = token_store or TokenStore()
        self._cache = cache if cache is not None else QueryCache(settings.cache_stale_seconds)
        self._retry_attempts = retry_attempts or settings.read_retry_attempts
        self._retry_base_delay = (
            retry_base_delay if retry_base_delay is not None else settings.read_retry_base_delay
        )
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=timeout or settings.api_timeout,
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )
        self._refresh_lock = asyncio.Lock()
        self._log = log.bind(base_url=self._base_url)

    async def __aenter__(self) -> "NotaryApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def tokens(self) -> TokenStore:
        return self._tokens

    @property
    def cache(self) -> QueryCache:
        return self._cache

    # ------------------------------------------------------------------
    # Core request path
    # ------------------------------------------------------------------

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        token: str | None = None,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        self._log.debug("api_request", method=method, path=path, params=params)
        return await self._http.request(method, path, params=params, json=json, headers=headers)

    async def _refresh(self, stale_token: str | None) -> None:
        """
        Exchange the refresh token for a new pair.

        Concurrent 401s share one refresh: a caller that waited on the lock
        and finds a different access token in the store just replays.
        """
        async with self._refresh_lock:
            if stale_token is not None and self._tokens.access_token not in (None, stale_token):
                return

            refresh_token = self._tokens.refresh_token
            try:
                data = await self._request_refresh(refresh_token)
            except SessionExpiredError:
                self._tokens.clear()
                raise
            self._tokens.set_tokens(
                data["accessToken"], data.get("refreshToken", refresh_token), data.get("user")
            )

    async def _request_refresh(self, refresh_token: str | None) -> dict[str, Any]:
        """POST /auth/refresh; SessionExpiredError unless it yields an access token."""
        if not refresh_token:
            raise SessionExpiredError()

        self._log.info("token_refresh")
        try:
            response = await self._http.post(REFRESH_PATH, json={"refreshToken": refresh_token})
        except httpx.HTTPError as exc:
            self._log.warning("token_refresh_failed", error=str(exc))
            raise SessionExpiredError() from exc

        if response.status_code >= 400:
            self._log.warning("token_refresh_failed", status_code=response.status_code)
            raise SessionExpiredError()

        data = unwrap_envelope(response.json()) or {}
        if not data.get("accessToken"):
            raise SessionExpiredError()
        return data

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Send one request and return the unwrapped `data`.

        Raises:
            SessionExpiredError: 401 and the refresh failed.
            NotaryApiError:      Any other status >= 400.
            httpx.TransportError: Network failure.
        """
        token = self._tokens.access_token
        t0 = time.monotonic()
        response = await self._send(method, path, params=params, json=json, token=token)

        if response.status_code == 401 and not path.startswith("/auth/"):
            await self._refresh(token)
            response = await self._send(
                method, path, params=params, json=json, token=self._tokens.access_token
            )

        duration_ms = int((time.monotonic() - t0) * 1000)
        if response.status_code >= 400:
            error = NotaryApiError.from_response(response)
            self._log.warning(
                "api_error",
                method=method,
                path=path,
                status_code=response.status_code,
                message=error.message,
                duration_ms=duration_ms,
            )
            raise error

        self._log.debug(
            "api_response", method=method, path=path,
            status_code=response.status_code, duration_ms=duration_ms,
        )
        if response.status_code == 204 or not response.content:
            return None
        return unwrap_envelope(response.json())

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def _get_with_retry(self, path: str, params: dict[str, Any] | None) -> Any:
        return await retry_read(
            lambda: self.request("GET", path, params=params),
            attempts=self._retry_attempts,
            base_delay=self._retry_base_delay,
            label=path,
        )

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        *,
        cached: bool = True,
    ) -> Any:
        if not cached:
            return await self._get_with_retry(path, params)
        return await self._cache.fetch(
            make_key(path, params),
            lambda: self._get_with_retry(path, params),
        )

    # ------------------------------------------------------------------
    # Mutations (never retried)
    # ------------------------------------------------------------------

    async def _mutate(self, method: str, path: str, json: Any, invalidate: str | None) -> Any:
        result = await self.request(method, path, json=json)
        self._cache.invalidate(invalidate or resource_prefix(path))
        return result

    async def post(self, path: str, json: Any = None, *, invalidate: str | None = None) -> Any:
        return await self._mutate("POST", path, json, invalidate)

    async def put(self, path: str, json: Any = None, *, invalidate: str | None = None) -> Any:
        return await self._mutate("PUT", path, json, invalidate)

    async def patch(self, path: str, json: Any = None, *, invalidate: str | None = None) -> Any:
        return await self._mutate("PATCH", path, json, invalidate)

    async def delete(self, path: str, *, invalidate: str | None = None) -> Any:
        return await self._mutate("DELETE", path, None, invalidate)
