import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from getres_lens.models import Resource

logger = logging.getLogger(__name__)

_RESOURCES = TypeAdapter(list[Resource])


def _load(path: Path) -> list[Resource]:
    raw: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(raw, dict) and "resources" in raw:
        raw = raw["resources"]
    if isinstance(raw, list):
        for item in raw:
            if isinstance(item, dict) and item.get("code") is None:
                item["code"] = ""
    return _RESOURCES.validate_python(raw)


class JsonFileResourceSource:
    """Reads records from a JSON file holding an array (or ``{"resources": [...]}``)."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def fetch_resources(self) -> list[Resource]:
        records = await asyncio.to_thread(_load, self._path)
        logger.debug("Loaded %d records from %s", len(records), self._path)
        return records

    async def ping(self) -> bool:
        return self._path.is_file()

    async def dispose(self) -> None:
        return None
