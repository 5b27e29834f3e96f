from __future__ import annotations

from collections.abc import AsyncIterator

from getres_lens.config import Settings
from getres_lens.core.context import LensContext
from getres_lens.host.sinks import RecordingSink

_settings: Settings | None = None
_lens: LensContext | None = None


def configure(settings: Settings | None) -> None:
    global _settings  # noqa: PLW0603
    _settings = settings


async def get_context() -> AsyncIterator[LensContext]:
    """Yield the process ``LensContext``, creating and filling it on first call."""
    global _lens  # noqa: PLW0603
    if _lens is None:
        _lens = LensContext.from_settings(_settings or Settings.from_env(), RecordingSink())
        await _lens.refresh()
    yield _lens


async def shutdown_context() -> None:
    global _lens  # noqa: PLW0603
    if _lens is not None:
        await _lens.dispose()
        _lens = None
