from __future__ import annotations


class IfpaError(RuntimeError):
    """Base exception for IFPA API failures."""


class IfpaRequestError(IfpaError):
    """HTTP/network/transport layer failures."""


class IfpaTransportError(IfpaRequestError):
    """No response was obtained (DNS, connect, timeout, protocol errors)."""


class IfpaStatusError(IfpaRequestError):
    """The API answered with a status outside the accepted set."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class IfpaRateLimited(IfpaStatusError):
    """The API throttled the request (HTTP 429)."""


class IfpaMalformedResponseError(IfpaRequestError):
    """Accepted status, but the body was not valid JSON."""


class IfpaNoResultsError(IfpaError):
    """A well-formed search response that matched nothing."""
