"""HTTP transport used by provider clients."""

from __future__ import annotations

from typing import Any, Protocol

import httpx
from pydantic import BaseModel


class TransportResponse(BaseModel):
    """Successful response: status code plus decoded body."""

    status_code: int
    data: Any = None


class TransportStatusError(Exception):
    """Raised when the remote service answered with a non-success status."""

    def __init__(self, status_code: int, data: Any = None) -> None:
        super().__init__(f"Request failed with status code {status_code}")
        self.status_code = status_code
        self.data = data


class Transport(Protocol):
    """GET-only capability consumed by provider clients."""

    def get(self, url: str, *, headers: dict[str, str] | None = None) -> TransportResponse: ...

    def close(self) -> None: ...


class HTTPTransport:
    """httpx-backed transport returning decoded JSON bodies."""

    def __init__(
        self,
        timeout_seconds: float = 15.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> HTTPTransport:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, *, headers: dict[str, str] | None = None) -> TransportResponse:
        """Issue a GET request.

        Raises ``TransportStatusError`` for 4xx/5xx responses. Network and
        protocol failures surface as the underlying ``httpx.HTTPError``; a
        success body that is not JSON raises ``ValueError``.
        """
        response = self._client.get(url, headers=headers)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TransportStatusError(
                exc.response.status_code,
                self._decode_body(exc.response),
            ) from exc
        return TransportResponse(status_code=response.status_code, data=response.json())

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text
