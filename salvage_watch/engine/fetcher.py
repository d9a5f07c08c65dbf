"""HTTP fetching for the inventory sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from ..errors import NetworkError


@dataclass(slots=True)
class FetchRequest:
    """Input for the fetcher."""

    url: str
    method: str = "GET"
    params: dict[str, Any] | None = None
    headers: dict[str, str] | None = None


@dataclass(slots=True)
class FetchResponse:
    """Standardised response wrapper."""

    url: str
    status_code: int
    text: str


class Fetcher:
    """Issue single-shot requests; anything but a 200 is fatal."""

    def __init__(
        self,
        timeout: float | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.timeout = timeout
        self.logger = logger or structlog.get_logger("salvage_watch.fetcher")
        self._client = httpx.Client(follow_redirects=True, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def fetch(self, request: FetchRequest, *, stage: str | None = None) -> FetchResponse:
        request_kwargs: dict[str, Any] = {
            "method": request.method,
            "url": request.url,
            "params": request.params,
            "headers": dict(request.headers or {}),
            "timeout": self.timeout,
        }
        try:
            response = self._client.request(**request_kwargs)
        except httpx.HTTPError as exc:
            raise NetworkError(f"request to {request.url} failed: {exc}", stage=stage) from exc

        if response.status_code != 200:
            raise NetworkError(
                f"invalid response status code: {response.status_code}",
                stage=stage,
                status_code=response.status_code,
            )
        self.logger.debug(
            "fetch_complete",
            url=str(response.url),
            status=response.status_code,
            size=len(response.content),
        )
        return FetchResponse(
            url=str(response.url),
            status_code=response.status_code,
            text=response.text,
        )


__all__ = ["Fetcher", "FetchRequest", "FetchResponse"]
