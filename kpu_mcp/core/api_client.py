"""Client for the KeywordsPeopleUse HTTP API.

`KeywordsApiClient.fetch` issues one authenticated GET and reports the outcome as a
`FetchResult` instead of raising, so tool handlers only have to branch on `ok`.
"""
from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class FailureReason(str, enum.Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    INVALID_JSON = "invalid_json"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one upstream request: either `data` or a `failure` reason."""

    data: Any = None
    failure: Optional[FailureReason] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, data: Any, status_code: Optional[int] = None) -> "FetchResult":
        return cls(data=data, status_code=status_code)

    @classmethod
    def failed(cls, reason: FailureReason, status_code: Optional[int] = None) -> "FetchResult":
        return cls(failure=reason, status_code=status_code)


class KeywordsApiClient:
    """Executes GET requests against the API with the key and JSON accept headers."""

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        self._headers = {
            "x-api-key": api_key,
            "Accept": "application/json",
        }
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> FetchResult:
        """GET `url` and return its parsed JSON body, or the reason it could not be obtained."""
        async with httpx.AsyncClient(transport=self._transport) as client:
            try:
                resp = await client.get(url, headers=self._headers, timeout=self._timeout)
                resp.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(f"API request to {url} failed with HTTP status {e.response.status_code}")
                return FetchResult.failed(FailureReason.HTTP_STATUS, e.response.status_code)
            except httpx.HTTPError as e:
                logger.error(f"API request to {url} failed: {e!r}")
                return FetchResult.failed(FailureReason.NETWORK)

            try:
                data = resp.json()
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to decode JSON from {url}: {e}")
                return FetchResult.failed(FailureReason.INVALID_JSON, resp.status_code)
            return FetchResult.success(data, resp.status_code)
