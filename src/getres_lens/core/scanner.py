"""Scan text for ``getRes(<id>)`` references and project them for a host.

All functions here are pure given their inputs and the store's current
snapshot; displaying the results is left to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from getres_lens.core.paths import resource_path
from getres_lens.core.store import ResourceStore
from getres_lens.core.tokens import ends_with_token_open, find_tokens
from getres_lens.models import (
    Annotation,
    CompletionItem,
    HoverBlock,
    HoverPayload,
    Match,
    Position,
    ScanResult,
    StatusPayload,
)

PATH_HOVER_LANGUAGE = "typescript"
CODE_HOVER_LANGUAGE = "css"


def _cursor_overlaps(cursor: Position | None, line: int, start: int, end: int) -> bool:
    return cursor is not None and cursor.line == line and start <= cursor.character <= end


def scan(lines: Sequence[str], cursor: Position | None, store: ResourceStore) -> ScanResult:
    snapshot = store.snapshot
    result = ScanResult()

    for line_no, text in enumerate(lines):
        for span in find_tokens(text):
            resource = snapshot.by_id.get(span.resource_id)
            if resource is None:
                continue

            path = resource_path(resource, snapshot.by_id)
            overlap = _cursor_overlaps(cursor, line_no, span.start, span.end)
            result.matches.append(
                Match(
                    line=line_no,
                    resource_id=span.resource_id,
                    start=span.start,
                    end=span.end,
                    token_start=span.token_start,
                    token_end=span.token_end,
                    path=path,
                    cursor_overlap=overlap,
                )
            )

            if overlap:
                result.status = StatusPayload(resource_id=span.resource_id, text=f"{span.resource_id}:{path}")
            else:
                result.annotations.append(Annotation(line=line_no, character=span.end, text=path))

    return result


def complete(line_prefix: str, store: ResourceStore) -> list[CompletionItem] | None:
    """Suggest every known resource when the prefix ends with ``getRes(``.

    Returns ``None`` when the prefix is not a completion trigger. Filtering
    by what the user types next is up to the host.
    """
    if not ends_with_token_open(line_prefix):
        return None

    snapshot = store.snapshot
    items: list[CompletionItem] = []
    for resource in snapshot.records:
        path = resource_path(resource, snapshot.by_id)
        items.append(
            CompletionItem(
                label=f"{resource.key}: {path}",
                detail=path,
                insert_text=resource.key,
                sort_text=resource.name.lower(),
            )
        )
    return items


def hover(lines: Sequence[str], position: Position, store: ResourceStore) -> HoverPayload | None:
    if not 0 <= position.line < len(lines):
        return None

    snapshot = store.snapshot
    for span in find_tokens(lines[position.line]):
        if not span.token_start <= position.character <= span.token_end:
            continue
        resource = snapshot.by_id.get(span.resource_id)
        if resource is None:
            return None
        return HoverPayload(
            resource_id=span.resource_id,
            blocks=[
                HoverBlock(text=resource_path(resource, snapshot.by_id), language=PATH_HOVER_LANGUAGE),
                HoverBlock(text=resource.code, language=CODE_HOVER_LANGUAGE),
            ],
        )
    return None
