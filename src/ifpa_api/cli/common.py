from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer

from ifpa_api.client import IfpaClient
from ifpa_api.core.config import settings


@contextmanager
def client_scope() -> Iterator[IfpaClient]:
    """
    Context-managed IFPA client for CLI commands.
    Ensures the underlying HTTP client is closed.
    """
    client = IfpaClient.from_settings(settings)
    try:
        yield client
    finally:
        client.close()


def configure_logging(level: str) -> None:
    if level.upper() not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"Unknown logging level: {level}", param_hint="--log-level")
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def echo_raw(raw_text: str) -> None:
    typer.echo(raw_text)
