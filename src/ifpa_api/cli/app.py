from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import typer

from ifpa_api.cli import common
from ifpa_api.client import DEFAULT_CALENDAR_COUNTRY, IfpaClient

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Query the IFPA pinball rankings API.")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="Python logging level."),
) -> None:
    common.configure_logging(log_level)


def _run(call: Callable[[IfpaClient], T]) -> T:
    try:
        with common.client_scope() as client:
            return call(client)
    except RuntimeError as e:  # IfpaError or a missing IFPA_API_KEY
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command("player")
def player_cmd(player_id: int = typer.Argument(..., help="IFPA player id.")) -> None:
    """Show a player's profile."""
    common.echo_raw(_run(lambda c: c.get_player_information(player_id)).raw_text)


@app.command("history")
def history_cmd(player_id: int = typer.Argument(..., help="IFPA player id.")) -> None:
    """Show a player's ranking and rating history."""
    common.echo_raw(_run(lambda c: c.get_player_history(player_id)).raw_text)


@app.command("pvp")
def pvp_cmd(player_id: int = typer.Argument(..., help="IFPA player id.")) -> None:
    """Show a player's head-to-head record."""
    common.echo_raw(_run(lambda c: c.get_player_vs_player(player_id)).raw_text)


@app.command("country-directors")
def country_directors_cmd() -> None:
    """List IFPA country directors."""
    common.echo_raw(_run(lambda c: c.get_country_directors()).raw_text)


@app.command("calendar")
def calendar_cmd(
    country: str = typer.Option(DEFAULT_CALENDAR_COUNTRY, "--country", help="Country name."),
    state: str | None = typer.Option(
        None, "--state", help="Only events in this state/region code (exact match)."
    ),
    past: bool = typer.Option(False, "--past", help="Past events instead of upcoming ones."),
) -> None:
    """List calendar events keyed by calendar id."""
    result = _run(lambda c: c.get_calendar(country=country, state=state, past=past))
    common.echo_raw(result.raw_text)


@app.command("search")
def search_cmd(
    name: str | None = typer.Option(None, "--name", help="Part of a player's name."),
    email: str | None = typer.Option(None, "--email", help="A player's email address."),
) -> None:
    """Search players by name or email."""
    if (name is None) == (email is None):
        raise typer.BadParameter("Pass exactly one of --name or --email.")
    common.echo_raw(_run(lambda c: c.search(q=name, email=email)).raw_text)
