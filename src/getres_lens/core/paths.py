from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from getres_lens.models import Resource

logger = logging.getLogger(__name__)

PATH_DELIMITER = "-"


def index_by_id(records: Iterable[Resource]) -> dict[str, Resource]:
    """Map ``str(id)`` to its record; the first record wins on duplicate ids."""
    index: dict[str, Resource] = {}
    for record in records:
        index.setdefault(record.key, record)
    return index


def resolve_path(resource: Resource, records: Mapping[str, Resource] | Iterable[Resource]) -> list[str]:
    """Return the names from the root ancestor down to ``resource``, inclusive.

    ``records`` is either the flat record sequence or an id index built by
    ``index_by_id``. The walk stops at the first missing parent or at the
    first id seen twice, so a parent cycle yields a finite path.
    """
    index = records if isinstance(records, Mapping) else index_by_id(records)

    names = [resource.name]
    visited = {resource.key}
    current = resource
    while True:
        parent_key = current.parent_key
        if parent_key is None:
            break
        parent = index.get(parent_key)
        if parent is None:
            break
        if parent.key in visited:
            logger.debug("Parent cycle at resource %s while resolving %s", parent.key, resource.key)
            break
        visited.add(parent.key)
        names.insert(0, parent.name)
        current = parent
    return names


def format_path(names: Iterable[str], delimiter: str = PATH_DELIMITER) -> str:
    return delimiter.join(names)


def resource_path(resource: Resource, records: Mapping[str, Resource] | Iterable[Resource]) -> str:
    return format_path(resolve_path(resource, records))
