"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en varios comandos.
"""

from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from messages_worker_sdk.core.domain.models import (
    MessageResponse,
    Priority,
    RemoveAllWorkersResponse,
    ScaleWorkersResponse,
    WorkerStatusResponse,
)


def build_messages_table(messages: Sequence[MessageResponse], *, title: str = "Messages") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Item", style="white")
    table.add_column("Priority", style="magenta")
    table.add_column("Topic", style="dim")
    table.add_column("Status", style="green")
    for msg in messages:
        table.add_row(msg.id, msg.item_id, str(msg.priority), str(msg.topic), msg.status)
    return table


def build_worker_status_table(status: WorkerStatusResponse) -> Table:
    """Tabla resumen por carril de prioridad, con fila de total."""

    table = Table(title="Workers")
    table.add_column("Priority", style="cyan", no_wrap=True)
    table.add_column("Workers", style="white", justify="right")
    table.add_column("Queue depth", style="yellow", justify="right")
    table.add_column("Running IDs", style="dim")

    for priority in Priority:
        bucket = status.bucket(priority)
        ids = ", ".join(w.id for w in bucket.workers) or "-"
        table.add_row(priority.value, str(bucket.count), str(bucket.queue_depth), ids)

    table.add_section()
    table.add_row("total", str(status.total_workers), "", "", style="bold")
    return table


def build_scale_panel(resp: ScaleWorkersResponse) -> Panel:
    body = Text()
    body.append(f"{resp.message}\n\n")
    body.append(f"Priority: {resp.priority}\n")
    body.append(f"Count: {resp.count}\n")
    body.append(f"Action: {resp.action}", style="bold")
    return Panel(body, title=Text(f"Scale: {resp.status}", style="bold cyan"), border_style="cyan")


def build_remove_all_panel(resp: RemoveAllWorkersResponse) -> Panel:
    body = Text()
    body.append(f"{resp.message}\n\n")
    body.append(f"Removed: {resp.total_removed}")
    if resp.errors:
        body.append("\n\nErrors:\n", style="bold red")
        for err in resp.errors:
            body.append(f"- {err}\n", style="red")

    border = "red" if resp.errors else "yellow"
    return Panel(body, title=Text(f"Remove all: {resp.status}", style="bold yellow"), border_style=border)
