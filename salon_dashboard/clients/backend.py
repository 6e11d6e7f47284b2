from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from salon_dashboard.services.exceptions import DownstreamServiceError

logger = logging.getLogger(__name__)


class SalonBackendClient:
    """Async HTTP client for a remote instance of the salon API."""

    def __init__(
        self,
        base_url: str | None,
        *,
        timeout: float = 10.0,
        use_local_store: bool = True,
    ) -> None:
        self._base_url = str(base_url).rstrip("/") if base_url else None
        self._timeout = timeout
        self.use_local_store = use_local_store or not self._base_url
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        self._client: Optional[httpx.AsyncClient] = None
        if not self.use_local_store and self._base_url:
            self._client = self._build_client()

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._headers,
        )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()

    async def _ensure_client(self) -> httpx.AsyncClient:
        if self.use_local_store or not self._base_url:
            raise RuntimeError("HTTP client requested while running on the local store")
        if self._client is None:
            self._client = self._build_client()
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        payload: Dict[str, Any] | None = None,
        params: Dict[str, Any] | None = None,
    ) -> Any:
        if self.use_local_store:
            raise RuntimeError("Remote call requested while the local store is enabled")
        client = await self._ensure_client()
        try:
            response = await client.request(method, path, json=payload, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            logger.exception("Salon backend returned error %s", exc.response.status_code)
            raise DownstreamServiceError(
                "Salon backend returned an error response",
                status_code=exc.response.status_code,
                cause=exc,
            ) from exc
        except httpx.RequestError as exc:
            logger.exception("Unable to reach salon backend: %s", exc)
            raise DownstreamServiceError(
                "Unable to reach salon backend", status_code=None, cause=exc
            ) from exc

    async def get(self, path: str, params: Dict[str, Any] | None = None) -> Any:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", path, payload=payload)

    async def put(self, path: str, payload: Dict[str, Any]) -> Any:
        return await self._request("PUT", path, payload=payload)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def simulate_latency(self) -> None:
        """Allow services to await even when served from the local store."""

        await asyncio.sleep(0)
