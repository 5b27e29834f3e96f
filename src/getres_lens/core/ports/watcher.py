from typing import Protocol


class DocumentWatcherPort(Protocol):
    """Emits document-change triggers for files on disk."""

    async def start(self) -> None: ...

    async def stop(self) -> None: ...

    @property
    def running(self) -> bool: ...
