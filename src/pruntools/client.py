"""Async HTTP client for the FIO REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pruntools.config import Settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Raised when the API returns a non-2xx response."""

    def __init__(self, message: str, code: int, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.data = data


class FIOClient:
    """Async HTTP client for the FIO REST API.

    One request per call: no retries, no caching. A non-2xx status is
    raised as ApiError carrying the upstream status code.
    """

    TRANSPORT_ERROR_CODE = 502

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")
        self._client = httpx.AsyncClient(base_url=self.base_url, transport=transport)

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> FIOClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(
        self,
        path: str,
        *,
        api_key: str | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET a path and return the decoded JSON body.

        FIO expects the raw API key in the Authorization header, no scheme.
        """
        headers = {"Authorization": api_key} if api_key else None
        logger.debug("GET %s params=%s auth=%s", path, params, bool(api_key))
        try:
            response = await self._client.get(path, params=params, headers=headers)
        except httpx.TransportError as exc:
            logger.warning("Transport error on GET %s: %s", path, exc)
            raise ApiError(str(exc), code=self.TRANSPORT_ERROR_CODE) from exc

        if not response.is_success:
            logger.warning("GET %s failed with %d", path, response.status_code)
            raise ApiError(
                message=response.reason_phrase or "Upstream error",
                code=response.status_code,
                data=response.text,
            )

        if response.status_code == 204 or not response.content:
            return None
        return response.json()
