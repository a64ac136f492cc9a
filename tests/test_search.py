from __future__ import annotations

import pytest

from ifpa_api.search import normalize_search
from ifpa_api.transport.errors import IfpaError, IfpaNoResultsError
from ifpa_api.transport.types import ApiResponse


def test_sentinel_string_means_no_results() -> None:
    response = ApiResponse(
        data={"query": "zzz", "search": "No players found"},
        raw_text='{"query": "zzz", "search": "No players found"}',
    )

    with pytest.raises(IfpaNoResultsError) as exc_info:
        normalize_search(response)

    assert isinstance(exc_info.value, IfpaError)
    assert "No players found" in str(exc_info.value)


def test_missing_search_field_means_no_results() -> None:
    with pytest.raises(IfpaNoResultsError):
        normalize_search(ApiResponse(data={"query": "zzz"}, raw_text='{"query": "zzz"}'))


def test_empty_list_is_a_valid_result() -> None:
    response = ApiResponse(data={"search": []}, raw_text='{"search": []}')

    result = normalize_search(response)

    assert result.players == []
    assert result.raw_text == '{"search": []}'


def test_player_list_is_returned_unchanged() -> None:
    players = [{"player_id": "8202", "first_name": "Bob"}]
    response = ApiResponse(data={"search": players}, raw_text="{}")

    result = normalize_search(response)

    assert result.players == players
    assert result.data == {"search": players}
