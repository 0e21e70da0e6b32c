"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from typing import Any

import typer
from rich.console import Console

from cli.ui_components import build_checks_table
from core.config import AppSettings, get_user_env_file
from core.domain.models import Failure
from core.services.request_executor import RequestExecutor

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

DEFAULT_CHECK_URL = "https://api.github.com"


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    executor = RequestExecutor(settings)
    outcome = asyncio.run(executor.execute_async(url, Any))
    if isinstance(outcome, Failure):
        return False, f"{outcome.error.kind}: {outcome.error}"
    return True, "HTTP 200, JSON decoded"


@app.command()
def run(
    url: str = typer.Option(DEFAULT_CHECK_URL, "--url", help="JSON endpoint used for the connectivity check."),
) -> None:
    """Show the effective configuration and run a connectivity check."""

    settings = AppSettings()

    table = build_checks_table("api-manager doctor")

    # Config
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User-Agent", "OK", settings.user_agent)
    table.add_row("Redirects", "OK", "follow" if settings.follow_redirects else "do not follow")
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))

    # Connectivity (best-effort)
    ok_http, detail_http = _check_http(url, settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)
