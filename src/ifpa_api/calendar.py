from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ifpa_api.transport.errors import IfpaMalformedResponseError
from ifpa_api.transport.types import ApiResponse, Json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarResult:
    total_entries: int
    calendar: dict[Any, Json]
    data: Json
    raw_text: str


def _iter_events(calendar: Any) -> Iterable[Any]:
    # Wire format is a list; an already reshaped payload holds a mapping.
    if isinstance(calendar, list):
        return calendar
    if isinstance(calendar, Mapping):
        return calendar.values()
    return ()


def _json_key(value: Any) -> str:
    # The object key json.dumps would write for `value`.
    return value if isinstance(value, str) else json.dumps(value)


def reshape_calendar(payload: Mapping[str, Any], *, state: str | None = None) -> Json:
    """Key calendar events by `calendar_id`, keeping only events in `state` when given.

    Returns a new payload with `calendar` and `total_entries` replaced together;
    every other top-level field is copied as-is. A missing, empty or non-list
    `calendar` (the API sends a message string when nothing is scheduled)
    becomes an empty mapping with `total_entries` 0.

    Ids that serialize to the same JSON key (`10` and `"10"`) count as one
    event; the later one wins, so the mapping survives `json.dumps` intact.

    Reshaping an already reshaped payload with the same filter returns an equal payload.
    """

    events: dict[Any, Json] = {}
    keys_by_json: dict[str, Any] = {}
    if payload.get("total_entries") or payload.get("calendar"):
        for event in _iter_events(payload.get("calendar")):
            if not isinstance(event, Mapping) or "calendar_id" not in event:
                continue
            if state is not None and event.get("state") != state:
                continue
            calendar_id = event["calendar_id"]
            json_key = _json_key(calendar_id)
            if json_key in keys_by_json:
                del events[keys_by_json[json_key]]
            keys_by_json[json_key] = calendar_id
            events[calendar_id] = dict(event)

    reshaped: Json = dict(payload)
    reshaped["calendar"] = events
    reshaped["total_entries"] = len(events)
    return reshaped


def to_calendar_result(response: ApiResponse, *, state: str | None = None) -> CalendarResult:
    if response.data is None:
        payload: Mapping[str, Any] = {}
    elif isinstance(response.data, Mapping):
        payload = response.data
    else:
        logger.error(
            "IFPA calendar body is a JSON %s, expected an object", type(response.data).__name__
        )
        raise IfpaMalformedResponseError(
            f"Expected calendar JSON object, got {type(response.data).__name__}"
        )

    reshaped = reshape_calendar(payload, state=state)
    return CalendarResult(
        total_entries=reshaped["total_entries"],
        calendar=reshaped["calendar"],
        data=reshaped,
        raw_text=json.dumps(reshaped),
    )
