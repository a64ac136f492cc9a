"""Client for the IFPA pinball rankings API."""

from ifpa_api.calendar import CalendarResult, reshape_calendar
from ifpa_api.client import IfpaClient
from ifpa_api.search import SearchResult
from ifpa_api.transport import (
    ApiResponse,
    BaseHttpClient,
    IfpaError,
    IfpaMalformedResponseError,
    IfpaNoResultsError,
    IfpaRateLimited,
    IfpaRequestError,
    IfpaStatusError,
    IfpaTransportError,
)

__all__ = [
    "ApiResponse",
    "BaseHttpClient",
    "CalendarResult",
    "IfpaClient",
    "IfpaError",
    "IfpaMalformedResponseError",
    "IfpaNoResultsError",
    "IfpaRateLimited",
    "IfpaRequestError",
    "IfpaStatusError",
    "IfpaTransportError",
    "SearchResult",
    "reshape_calendar",
]
