"""Shared async HTTP plumbing for label backends."""

from typing import Any

import httpx


class HttpClientError(Exception):
    """Raised when a request fails at the transport or status level."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class BaseHttpClient:
    """Thin wrapper around ``httpx.AsyncClient`` with unified error handling."""

    def __init__(
        self,
        server_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            server_url: Base URL of the label server
            timeout: Per-request timeout in seconds
            transport: Optional transport override, used by tests
        """
        self.server_url = server_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.server_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        json_data: dict[str, Any] | None = None,
        raise_for_status: bool = True,
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(
                    method, path, headers=headers, json=json_data
                )
                if raise_for_status:
                    response.raise_for_status()
                return response
        except httpx.HTTPStatusError as e:
            raise HttpClientError(
                f"HTTP {e.response.status_code}: {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise HttpClientError(f"Request failed: {e}") from e

    async def get(
        self, path: str, headers: dict[str, str] | None = None
    ) -> httpx.Response:
        return await self._request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        json_data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        raise_for_status: bool = True,
    ) -> httpx.Response:
        return await self._request(
            "POST",
            path,
            headers=headers,
            json_data=json_data,
            raise_for_status=raise_for_status,
        )
