from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence

from getres_lens.models import Resource, TreeNode

logger = logging.getLogger(__name__)


def build_forest(records: Iterable[Resource]) -> list[TreeNode]:
    """Arrange flat records into parent/child trees.

    A record is a root iff its ``pid`` is absent or matches no known id.
    Children keep the relative order of the input records.
    """
    ordered = list(records)
    nodes = [TreeNode(resource=record) for record in ordered]
    by_id: dict[str, TreeNode] = {}
    for node in nodes:
        by_id.setdefault(node.resource.key, node)

    roots: list[TreeNode] = []
    for node in nodes:
        parent_key = node.resource.parent_key
        parent = by_id.get(parent_key) if parent_key is not None else None
        if parent is None:
            roots.append(node)
        else:
            parent.children.append(node)

    reachable = sum(1 for _ in iter_forest(roots))
    if reachable < len(nodes):
        logger.warning("%d resource(s) sit in a parent cycle and are unreachable from any root", len(nodes) - reachable)
    return roots


def iter_forest(forest: Sequence[TreeNode]) -> Iterator[tuple[int, TreeNode]]:
    """Yield ``(depth, node)`` in pre-order."""
    stack = [(0, node) for node in reversed(forest)]
    while stack:
        depth, node = stack.pop()
        yield depth, node
        stack.extend((depth + 1, child) for child in reversed(node.children))


def unreachable_ids(records: Iterable[Resource], forest: Sequence[TreeNode]) -> list[str]:
    """Return ids of records that no root reaches, in input order."""
    seen = {id(node.resource) for _, node in iter_forest(forest)}
    return [record.key for record in records if id(record) not in seen]
