from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from getres_lens.config import Settings
from getres_lens.core.context import LensContext
from getres_lens.core.ports.host import HostSink
from getres_lens.errors import ConfigError, RefreshError
from getres_lens.host.sinks import ConsoleSink
from getres_lens.models import Document

console = Console()


def get_settings(ctx: typer.Context) -> Settings:
    settings = ctx.obj if isinstance(ctx.obj, Settings) else None
    return settings or Settings.from_env()


def get_context(settings: Settings, sink: HostSink | None = None) -> LensContext:
    try:
        return LensContext.from_settings(settings, sink or ConsoleSink(console))
    except ConfigError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc


async def load_resources(lens: LensContext) -> None:
    """Fill the store once, turning a failed fetch into a CLI error."""
    try:
        await lens.store.refresh()
    except RefreshError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc


def read_document(path: Path) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        console.print(f"[red]File not found: {escape(str(path))}[/red]")
        raise typer.Exit(1) from None
    return Document.from_text(text, uri=str(path))


def load_snapshot(lens: LensContext) -> None:
    """Fetch resources once for a single-shot command and release the source."""

    async def _run() -> None:
        try:
            await load_resources(lens)
        finally:
            await lens.dispose()

    asyncio.run(_run())
