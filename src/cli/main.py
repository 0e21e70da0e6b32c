"""CLI de api-manager (Typer + Rich).

Por qué una CLI:
- Permite probar un endpoint JSON desde la terminal con la misma clasificación
  de errores que usa la librería.
- `--json` imprime solo el payload (apto para pipelines, sin banner).
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_outcome_panel, print_banner
from core.config import AppSettings
from core.domain.models import Failure, Method
from core.logging_config import configure_logging
from core.services.request_executor import RequestExecutor

app = typer.Typer(no_args_is_help=True, help="Fetch JSON and get a typed value or a classified error.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _parse_params(raw: list[str] | None) -> dict[str, str] | None:
    if not raw:
        return None
    params: dict[str, str] = {}
    for item in raw:
        if "=" not in item:
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="--param")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"empty key in {item!r}", param_hint="--param")
        params[key] = value
    return params


@app.command()
def fetch(
    url: str = typer.Argument(..., help="Absolute http(s) URL returning JSON."),
    method: Method = typer.Option(Method.GET, "--method", "-X", case_sensitive=False, help="HTTP method."),
    param: list[str] = typer.Option(
        None,
        "--param",
        "-p",
        help="key=value pair; query string for GET, JSON body for POST. Repeatable.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print only the decoded JSON (or the error) and no banner."),
) -> None:
    """Fetch URL and print the decoded body or the classified error."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    params = _parse_params(param)

    executor = RequestExecutor(settings)
    outcome = asyncio.run(executor.execute_async(url, Any, method=method, params=params))

    if as_json:
        if isinstance(outcome, Failure):
            payload: dict[str, Any] = {"error": outcome.error.kind, "detail": str(outcome.error)}
        else:
            payload = {"data": outcome.value}
        typer.echo(json.dumps(payload, ensure_ascii=False, default=str))
    else:
        print_banner(_console)
        _console.print(build_outcome_panel(url, outcome))

    if isinstance(outcome, Failure):
        raise typer.Exit(code=1)


def run() -> None:
    app()
