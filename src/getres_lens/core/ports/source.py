from typing import Protocol

from getres_lens.models import Resource


class ResourceSource(Protocol):
    async def fetch_resources(self) -> list[Resource]: ...

    async def ping(self) -> bool: ...

    async def dispose(self) -> None: ...
