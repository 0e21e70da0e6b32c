"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar paneles en `fetch` y `doctor`.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Failure, Outcome


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo)."""

    title = Text("api-manager", style="bold cyan")
    subtitle = Text("Fetch JSON • Typed outcome • Classified errors", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_outcome_panel(url: str, outcome: Outcome[Any]) -> Panel:
    """Panel verde con el JSON decodificado o rojo con el error clasificado."""

    if isinstance(outcome, Failure):
        body = Text()
        body.append(f"{outcome.error.kind}\n", style="bold red")
        body.append(str(outcome.error))
        return Panel(body, title=Text(url, style="bold"), border_style="red")

    rendered = JSON(json.dumps(outcome.value, ensure_ascii=False, default=str))
    return Panel(rendered, title=Text(url, style="bold"), border_style="green")


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
