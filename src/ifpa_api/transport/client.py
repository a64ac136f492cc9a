from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import (
    IfpaMalformedResponseError,
    IfpaRateLimited,
    IfpaStatusError,
    IfpaTransportError,
)
from .types import ApiResponse

logger = logging.getLogger(__name__)

ACCEPTED_STATUS_CODES = frozenset({200, 201, 202, 204})

STATUS_REASONS: dict[int, str] = {
    400: "A parameter is missing or is invalid",
    401: "Authentication failed",
    404: "Resource cannot be found",
    405: "HTTP method not allowed",
    429: "Rate limit exceeded",
    500: "Server error",
}

UNKNOWN_ERROR = "Unknown error"


def status_reason(status_code: int) -> str:
    return STATUS_REASONS.get(status_code, UNKNOWN_ERROR)


@dataclass
class BaseHttpClient:
    """
    Blocking HTTP wrapper around a single httpx.Client.

    - Only GET is used by the IFPA API; `get_json` is the one entry point.
    - Every failure is logged before the matching IfpaRequestError is raised.
    """

    base_url: str
    timeout_s: float = 5.0
    connect_timeout_s: float = 5.0
    headers: Mapping[str, str] = field(default_factory=dict)
    verify: bool = True

    transport: httpx.BaseTransport | None = None
    log: logging.Logger = field(default=logger, repr=False)

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            verify=self.verify,
            transport=self.transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> ApiResponse:
        """
        GET `path` and return the decoded body.
        Raises IfpaTransportError, IfpaStatusError or IfpaMalformedResponseError.
        """
        extra: dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = httpx.Timeout(timeout, connect=min(timeout, self.connect_timeout_s))

        try:
            resp = self._client.get(path.lstrip("/"), params=params, headers=headers, **extra)
        except httpx.DecodingError as e:
            # Body arrived but its Content-Encoding could not be undone.
            self.log.error("IFPA GET %s returned a body that could not be decoded: %s", path, e)
            raise IfpaMalformedResponseError("Response body could not be decoded.") from e
        except httpx.RequestError as e:
            # The request URL carries the api key; log the path only.
            self.log.error("IFPA request to %s failed: %s", path, e)
            raise IfpaTransportError(str(e) or type(e).__name__) from e

        url_path = resp.request.url.path
        if resp.status_code not in ACCEPTED_STATUS_CODES:
            reason = status_reason(resp.status_code)
            self.log.error("IFPA GET %s returned HTTP %s: %s", url_path, resp.status_code, reason)
            error_cls = IfpaRateLimited if resp.status_code == 429 else IfpaStatusError
            raise error_cls(resp.status_code, reason)

        raw_text = resp.text
        if resp.status_code == 204 and not raw_text.strip():
            self.log.debug("IFPA GET %s -> %s (empty body)", url_path, resp.status_code)
            return ApiResponse(data=None, raw_text=raw_text, status_code=resp.status_code)

        try:
            data = json.loads(raw_text)
        except ValueError as e:
            self.log.error("IFPA GET %s returned a body that is not valid JSON", url_path)
            raise IfpaMalformedResponseError("Response was not valid JSON.") from e

        self.log.debug("IFPA GET %s -> %s", url_path, resp.status_code)
        return ApiResponse(data=data, raw_text=raw_text, status_code=resp.status_code)
