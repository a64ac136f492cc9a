from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager

import httpx
import pytest
from typer.testing import CliRunner

from ifpa_api.cli import common
from ifpa_api.cli.app import app
from ifpa_api.client import IfpaClient
from ifpa_api.transport.client import BaseHttpClient


def _use_transport(monkeypatch: pytest.MonkeyPatch, handler) -> None:
    @contextmanager
    def fake_scope() -> Iterator[IfpaClient]:
        http = BaseHttpClient(
            base_url="https://api.ifpapinball.com/v1/", transport=httpx.MockTransport(handler)
        )
        with IfpaClient(http=http, api_key="k") as client:
            yield client

    monkeypatch.setattr(common, "client_scope", fake_scope)


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("player", "history", "pvp", "country-directors", "calendar", "search"):
        assert command in result.stdout


def test_cli_player_prints_raw_body(monkeypatch: pytest.MonkeyPatch) -> None:
    body = '{"player": [{"player_id": "8202"}]}'
    _use_transport(monkeypatch, lambda request: httpx.Response(200, text=body))

    result = CliRunner().invoke(app, ["player", "8202"])

    assert result.exit_code == 0
    assert result.stdout.strip() == body


def test_cli_calendar_filters_by_state(monkeypatch: pytest.MonkeyPatch) -> None:
    payload = {
        "total_entries": 2,
        "calendar": [{"calendar_id": 1, "state": "WA"}, {"calendar_id": 2, "state": "OR"}],
    }
    _use_transport(monkeypatch, lambda request: httpx.Response(200, json=payload))

    result = CliRunner().invoke(app, ["calendar", "--state", "WA"])

    assert result.exit_code == 0
    decoded = json.loads(result.stdout)
    assert decoded["total_entries"] == 1
    assert list(decoded["calendar"]) == ["1"]


def test_cli_reports_api_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    _use_transport(monkeypatch, lambda request: httpx.Response(401))

    result = CliRunner().invoke(app, ["history", "1"])

    assert result.exit_code == 1
    assert "Authentication failed" in result.output


def test_cli_search_needs_one_option() -> None:
    result = CliRunner().invoke(app, ["search"])

    assert result.exit_code != 0


def test_cli_rejects_unknown_log_level() -> None:
    result = CliRunner().invoke(app, ["--log-level", "loud", "country-directors"])

    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
