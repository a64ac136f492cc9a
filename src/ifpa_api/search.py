from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ifpa_api.transport.errors import IfpaNoResultsError
from ifpa_api.transport.types import ApiResponse, Json


@dataclass(frozen=True)
class SearchResult:
    players: list[Json]
    data: Json
    raw_text: str


def normalize_search(response: ApiResponse) -> SearchResult:
    """
    The search endpoint swaps the `search` list for a message string when
    nothing matches. Only a list (empty included) counts as a result.
    """
    found: Any = response.get("search")
    if not isinstance(found, list):
        raise IfpaNoResultsError(f"No players found: {found!r}")

    return SearchResult(players=found, data=response.data, raw_text=response.raw_text)
