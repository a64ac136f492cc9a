from ifpa_api.transport.client import (
    ACCEPTED_STATUS_CODES,
    STATUS_REASONS,
    BaseHttpClient,
    status_reason,
)
from ifpa_api.transport.errors import (
    IfpaError,
    IfpaMalformedResponseError,
    IfpaNoResultsError,
    IfpaRateLimited,
    IfpaRequestError,
    IfpaStatusError,
    IfpaTransportError,
)
from ifpa_api.transport.types import ApiResponse, Json

__all__ = [
    "ACCEPTED_STATUS_CODES",
    "STATUS_REASONS",
    "ApiResponse",
    "BaseHttpClient",
    "IfpaError",
    "IfpaMalformedResponseError",
    "IfpaNoResultsError",
    "IfpaRateLimited",
    "IfpaRequestError",
    "IfpaStatusError",
    "IfpaTransportError",
    "Json",
    "status_reason",
]
