from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from getres_lens.core.paths import index_by_id
from getres_lens.core.ports.source import ResourceSource
from getres_lens.errors import RefreshError
from getres_lens.models import Resource, ResourceId, id_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """An immutable record set plus its id index, swapped as one object."""

    records: tuple[Resource, ...] = ()
    by_id: dict[str, Resource] = field(default_factory=dict)
    generation: int = 0

    @classmethod
    def build(cls, records: Iterable[Resource], generation: int) -> Snapshot:
        frozen = tuple(records)
        return cls(records=frozen, by_id=index_by_id(frozen), generation=generation)


class ResourceStore:
    """Holds the current resource snapshot and refreshes it from a source.

    Refreshes are serialized: each one fetches and swaps while holding a lock,
    so refreshes complete in the order they were called and the last call is
    the last completed write. Readers never wait on the lock and always see a
    whole snapshot.
    """

    def __init__(self, source: ResourceSource) -> None:
        self._source = source
        self._snapshot = Snapshot()
        self._lock = asyncio.Lock()

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    @property
    def generation(self) -> int:
        return self._snapshot.generation

    def __len__(self) -> int:
        return len(self._snapshot.records)

    def current_snapshot(self) -> tuple[Resource, ...]:
        return self._snapshot.records

    def lookup_by_id(self, resource_id: ResourceId) -> Resource | None:
        key = id_key(resource_id)
        if key is None:
            return None
        return self._snapshot.by_id.get(key)

    def replace(self, records: Iterable[Resource]) -> None:
        """Swap in a new snapshot without going through the source."""
        self._snapshot = Snapshot.build(records, self._snapshot.generation + 1)

    async def refresh(self) -> tuple[Resource, ...]:
        async with self._lock:
            try:
                records = await self._source.fetch_resources()
            except Exception as exc:
                logger.warning("Resource refresh failed, keeping %d cached records: %s", len(self), exc)
                raise RefreshError(f"Failed to fetch resources: {exc}") from exc
            self.replace(records)
            logger.info("Resource snapshot %d loaded with %d records", self.generation, len(self))
            return self._snapshot.records
