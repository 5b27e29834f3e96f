from collections.abc import Iterable

from getres_lens.models import Resource


class InMemoryResourceSource:
    """Serves a fixed list of records; can be switched to fail for tests and demos."""

    def __init__(self, records: Iterable[Resource] = ()) -> None:
        self.records: list[Resource] = list(records)
        self.fail_with: Exception | None = None
        self.fetch_count = 0
        self.disposed = False

    def set_records(self, records: Iterable[Resource]) -> None:
        self.records = list(records)

    async def fetch_resources(self) -> list[Resource]:
        self.fetch_count += 1
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.records)

    async def ping(self) -> bool:
        return self.fail_with is None

    async def dispose(self) -> None:
        self.disposed = True
