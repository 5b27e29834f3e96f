"""Headless host: re-scan source files whenever they change on disk."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from pathlib import Path
from typing import Annotated

import typer

from getres_lens.cli.common import console, get_context, get_settings, load_resources
from getres_lens.core.context import LensContext
from getres_lens.core.languages import extensions_for
from getres_lens.host.sinks import ConsoleSink
from getres_lens.models import Document
from getres_lens.watcher.watchfiles_adapter import WatchfilesWatcher

logger = logging.getLogger(__name__)


def _scan_file(lens: LensContext, sink: ConsoleSink, path: Path) -> None:
    try:
        text = path.read_text(encoding="utf-8")
    except (FileNotFoundError, UnicodeDecodeError) as exc:
        logger.warning("Skipping %s: %s", path, exc)
        return
    sink.label = str(path)
    lens.handle_document_change(Document.from_text(text, uri=str(path)), cursor=None)


def _initial_files(directory: Path, lens: LensContext) -> list[Path]:
    extensions = extensions_for(lens.languages)
    return sorted(p for p in directory.rglob("*") if p.is_file() and p.suffix.lower() in extensions)


async def _periodic_refresh(lens: LensContext, interval: float) -> None:
    while True:
        await asyncio.sleep(interval)
        await lens.refresh()


def watch(
    ctx: typer.Context,
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")] = Path("."),
    refresh_every: Annotated[
        float | None, typer.Option(help="Re-fetch resources every N seconds (disabled by default).")
    ] = None,
) -> None:
    """Annotate getRes() references in changed files until interrupted."""
    sink = ConsoleSink(console)
    lens = get_context(get_settings(ctx), sink)

    async def _on_change(paths: set[Path]) -> None:
        for path in sorted(paths):
            _scan_file(lens, sink, path)

    async def _run() -> None:
        watcher = WatchfilesWatcher(directory, _on_change, lens.languages)
        refresher: asyncio.Task[None] | None = None
        try:
            await load_resources(lens)
            for path in _initial_files(directory, lens):
                _scan_file(lens, sink, path)
            await watcher.start()
            if refresh_every:
                refresher = asyncio.create_task(_periodic_refresh(lens, refresh_every))
            console.print(f"[green]Watching {directory}[/green] (Ctrl+C to stop)")
            await asyncio.Event().wait()
        finally:
            if refresher is not None:
                refresher.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await refresher
            await watcher.stop()
            await lens.dispose()

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(_run())
