from __future__ import annotations

import logging
from typing import Any

from ifpa_api.calendar import CalendarResult, to_calendar_result
from ifpa_api.core.config import Settings, settings
from ifpa_api.search import SearchResult, normalize_search
from ifpa_api.transport.client import BaseHttpClient
from ifpa_api.transport.errors import IfpaNoResultsError
from ifpa_api.transport.types import ApiResponse

logger = logging.getLogger(__name__)

PlayerId = int | str

DEFAULT_CALENDAR_COUNTRY = "United States"


class IfpaClient:
    """Accessors for the IFPA API, one per endpoint."""

    def __init__(self, *, http: BaseHttpClient, api_key: str | None = None) -> None:
        self.http = http
        self.api_key = api_key or settings.require_ifpa_api_key()

    @classmethod
    def from_settings(cls, cfg: Settings | None = None, **http_kwargs: Any) -> IfpaClient:
        cfg = cfg or settings
        api_key = cfg.require_ifpa_api_key()
        http = BaseHttpClient(
            base_url=cfg.ifpa_base_url,
            timeout_s=cfg.ifpa_timeout_s,
            connect_timeout_s=cfg.ifpa_connect_timeout_s,
            headers={"User-Agent": cfg.ifpa_user_agent},
            verify=cfg.ifpa_verify_tls,
            **http_kwargs,
        )
        return cls(http=http, api_key=api_key)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> IfpaClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get(
        self,
        path: str,
        params: dict[str, str] | None = None,
        *,
        timeout: float | None = None,
    ) -> ApiResponse:
        query = dict(params or {})
        query["api_key"] = self.api_key
        return self.http.get_json(path, params=query, timeout=timeout)

    def get_player_information(
        self, player_id: PlayerId, *, timeout: float | None = None
    ) -> ApiResponse:
        return self._get(f"player/{player_id}", timeout=timeout)

    def get_player_history(
        self, player_id: PlayerId, *, timeout: float | None = None
    ) -> ApiResponse:
        return self._get(f"player/{player_id}/history", timeout=timeout)

    def get_player_vs_player(
        self, player_id: PlayerId, *, timeout: float | None = None
    ) -> ApiResponse:
        """Every player `player_id` has met in a tournament, with win/loss counts."""
        return self._get(f"player/{player_id}/pvp", timeout=timeout)

    def get_country_directors(self, *, timeout: float | None = None) -> ApiResponse:
        return self._get("player/country_directors", timeout=timeout)

    def get_calendar(
        self,
        *,
        country: str = DEFAULT_CALENDAR_COUNTRY,
        state: str | None = None,
        past: bool = False,
        timeout: float | None = None,
    ) -> CalendarResult:
        """Active (or, with `past`, historical) events for a country.

        The API only filters by country; `state` is matched exactly against each
        event's `state` field after the response arrives.
        """

        path = "calendar/history" if past else "calendar/active"
        response = self._get(path, {"country": country}, timeout=timeout)
        return to_calendar_result(response, state=state)

    def search(
        self,
        *,
        q: str | None = None,
        email: str | None = None,
        timeout: float | None = None,
    ) -> SearchResult:
        if (q is None) == (email is None):
            raise ValueError("Pass exactly one of q or email.")

        params = {"q": q} if q is not None else {"email": email}
        response = self._get("player/search", params, timeout=timeout)
        try:
            return normalize_search(response)
        except IfpaNoResultsError:
            logger.info("IFPA player search matched nothing (%s)", ", ".join(params))
            raise

    def search_players_by_name(self, name: str, *, timeout: float | None = None) -> SearchResult:
        return self.search(q=name, timeout=timeout)

    def search_players_by_email(self, email: str, *, timeout: float | None = None) -> SearchResult:
        return self.search(email=email, timeout=timeout)
