from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Collection, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import Change, awatch

from getres_lens.config import DEFAULT_LANGUAGES
from getres_lens.core.languages import extensions_for

logger = logging.getLogger(__name__)


def _is_watched_file(path: Path, extensions: Collection[str]) -> bool:
    return path.suffix.lower() in extensions


class WatchfilesWatcher:
    """Watch a directory for source-file changes and trigger a callback.

    Deleted files are ignored; only added or modified files are reported.
    Implements the ``DocumentWatcherPort`` protocol.
    """

    def __init__(
        self,
        directory: str | Path,
        on_change: Callable[[set[Path]], Coroutine[Any, Any, None]],
        languages: Collection[str] = DEFAULT_LANGUAGES,
    ) -> None:
        self._directory = Path(directory)
        self._on_change = on_change
        self._extensions = extensions_for(languages)
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            paths = {
                Path(p)
                for change, p in changes
                if change != Change.deleted and _is_watched_file(Path(p), self._extensions)
            }
            if paths:
                logger.info("Detected changes in %d file(s)", len(paths))
                try:
                    await self._on_change(paths)
                except Exception:
                    logger.exception("Error in watcher callback")
