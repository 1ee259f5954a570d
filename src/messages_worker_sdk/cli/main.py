"""CLI `messages-worker`.

Envoltorio fino sobre `MessagesWorkerClient` para operar el servicio desde
terminal. Las opciones globales (`--base-url`, `--timeout`) van antes del
subcomando; un `count` negativo en `scale` requiere `--` (p.ej. `scale -- high -2`).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import typer
from loguru import logger
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape

from messages_worker_sdk.cli.ui_components import (
    build_messages_table,
    build_remove_all_panel,
    build_scale_panel,
    build_worker_status_table,
)
from messages_worker_sdk.client import MessagesWorkerClient
from messages_worker_sdk.core.config import ClientSettings, write_user_env_vars
from messages_worker_sdk.core.domain.models import BulkMessageRequest, MessageRequest, Priority, Topic
from messages_worker_sdk.core.errors import MessagesWorkerError

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Client for the messages-worker service.")

_console = Console()
_err_console = Console(stderr=True)


def build_client(settings: ClientSettings) -> MessagesWorkerClient:
    return MessagesWorkerClient(settings)


def _execute(ctx: typer.Context, operation: Callable[[MessagesWorkerClient], Awaitable[T]]) -> T:
    """Ejecuta una operación con un cliente de vida corta y traduce errores del SDK a exit 1."""

    settings: ClientSettings = ctx.obj

    async def _runner() -> T:
        async with build_client(settings) as client:
            return await operation(client)

    try:
        return asyncio.run(_runner())
    except MessagesWorkerError as exc:
        _err_console.print(f"[red]{exc.kind.value} error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _load_json(text: str, *, param: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc}", param_hint=param) from exc


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Service base URL."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests to stderr."),
) -> None:
    overrides: dict[str, Any] = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if timeout is not None:
        overrides["timeout_seconds"] = timeout
    try:
        ctx.obj = ClientSettings(**overrides)
    except PydanticValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("messages_worker_sdk")


@app.command()
def health(ctx: typer.Context) -> None:
    """Check service health."""

    resp = _execute(ctx, lambda client: client.check_health())
    _console.print(f"[green]Service is healthy:[/green] {resp.status}")


@app.command()
def post(
    ctx: typer.Context,
    item_id: str = typer.Argument(..., help="Item identifier."),
    callback_url: str = typer.Argument(..., help="Callback URL notified by the worker."),
    priority: Priority = typer.Option(Priority.MEDIUM, "--priority", "-p", case_sensitive=False),
    body: Optional[str] = typer.Option(None, "--body", "-b", help="JSON object body."),
) -> None:
    """Submit a single message."""

    req = MessageRequest(
        item_id=item_id,
        priority=priority,
        topic=Topic.PULL_REQUESTS,
        callback_url=callback_url,
        object_body=_load_json(body, param="--body") if body is not None else None,
    )
    resp = _execute(ctx, lambda client: client.post_message(req))
    _console.print(build_messages_table([resp], title="Message posted"))


@app.command()
def bulk(
    ctx: typer.Context,
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="JSON file with messages."),
) -> None:
    """Submit messages from a JSON file (`{"messages": [...]}` or a bare list)."""

    data = _load_json(file.read_text(encoding="utf-8"), param="FILE")
    if isinstance(data, list):
        data = {"messages": data}
    try:
        req = BulkMessageRequest.model_validate(data)
    except PydanticValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="FILE") from exc

    resp = _execute(ctx, lambda client: client.post_bulk_messages(req))
    _console.print(build_messages_table(resp.messages, title=f"Bulk: {resp.status} ({resp.count})"))


@app.command()
def status(ctx: typer.Context) -> None:
    """Show worker status per priority."""

    resp = _execute(ctx, lambda client: client.get_worker_status())
    _console.print(build_worker_status_table(resp))


@app.command()
def scale(ctx: typer.Context, priority: str, count: int) -> None:
    """Scale a priority lane (positive COUNT adds, negative removes)."""

    resp = _execute(ctx, lambda client: client.scale_workers(priority, count))
    _console.print(build_scale_panel(resp))


@app.command()
def add(ctx: typer.Context, priority: str, count: int) -> None:
    """Add COUNT workers to a priority lane."""

    resp = _execute(ctx, lambda client: client.add_workers(priority, count))
    _console.print(build_scale_panel(resp))


@app.command()
def remove(ctx: typer.Context, priority: str, count: int) -> None:
    """Remove COUNT workers from a priority lane."""

    resp = _execute(ctx, lambda client: client.remove_workers(priority, count))
    _console.print(build_scale_panel(resp))


@app.command(name="remove-all")
def remove_all(
    ctx: typer.Context,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
) -> None:
    """Stop every worker across all priorities."""

    if not yes:
        typer.confirm("Remove ALL workers?", abort=True)
    resp = _execute(ctx, lambda client: client.remove_all_workers())
    _console.print(build_remove_all_panel(resp))


@app.command()
def count(ctx: typer.Context, priority: Optional[str] = typer.Argument(None)) -> None:
    """Print the worker count for PRIORITY, or the total."""

    if priority is None:
        total = _execute(ctx, lambda client: client.get_total_worker_count())
        _console.print(f"Total workers: {total}")
        return

    n = _execute(ctx, lambda client: client.get_worker_count(priority))
    _console.print(f"{priority} priority workers: {n}")


@app.command()
def configure() -> None:
    """Store base URL and timeout in the user config .env."""

    defaults = ClientSettings()
    base_url = typer.prompt("Service base URL", default=defaults.base_url, show_default=True).strip()
    timeout = typer.prompt("Timeout (seconds)", default=defaults.timeout_seconds, type=float)

    if not base_url:
        raise typer.BadParameter("base URL is required")

    env_path = write_user_env_vars(
        {
            "MESSAGES_WORKER_BASE_URL": base_url,
            "MESSAGES_WORKER_TIMEOUT_SECONDS": str(timeout),
        }
    )
    _console.print(f"[green]Saved config to:[/green] {env_path}")


def run() -> None:
    app()
