"""FastMCP server exposing getres-lens tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from getres_lens.core.context import LensContext
from getres_lens.core.paths import format_path, resolve_path
from getres_lens.core.tree import build_forest
from getres_lens.models import Document, Position


def create_mcp_server(lens: LensContext) -> FastMCP:
    """Create a FastMCP server wired to the given context."""

    mcp = FastMCP("getres-lens", instructions="Resolve getRes(<id>) resource references to resource paths.")

    async def _ensure_loaded() -> None:
        if lens.store.generation == 0:
            await lens.refresh()

    @mcp.tool()
    async def refresh() -> str:
        """Re-fetch the resource snapshot from the source."""
        if await lens.refresh():
            return f"Loaded {len(lens.store)} resources (snapshot {lens.store.generation})."
        return f"Error: refresh failed; keeping {len(lens.store)} cached resources."

    @mcp.tool()
    async def list_resources() -> list[dict[str, Any]]:
        """List all resources in the current snapshot."""
        await _ensure_loaded()
        return [r.model_dump() for r in lens.store.current_snapshot()]

    @mcp.tool()
    async def resource_tree() -> list[dict[str, Any]]:
        """Return the resources arranged as parent/child trees."""
        await _ensure_loaded()
        return [node.model_dump() for node in build_forest(lens.store.current_snapshot())]

    @mcp.tool(name="resolve_path")
    async def resolve_resource_path(resource_id: str) -> str:
        """Return the dash-joined path of a resource."""
        await _ensure_loaded()
        resource = lens.store.lookup_by_id(resource_id)
        if resource is None:
            return f"Error: unknown resource id '{resource_id}'."
        return format_path(resolve_path(resource, lens.store.snapshot.by_id))

    @mcp.tool()
    async def scan(text: str, line: int | None = None, character: int = 0) -> dict[str, Any]:
        """Find resolved getRes(<id>) references in text; line/character give the cursor (0-based)."""
        await _ensure_loaded()
        cursor = Position(line=line, character=character) if line is not None else None
        result = lens.handle_document_change(Document.from_text(text), cursor)
        return result.model_dump() if result is not None else {}

    @mcp.tool()
    async def hover(text: str, line: int, character: int) -> dict[str, Any] | None:
        """Return path and code of the reference at a 0-based position."""
        await _ensure_loaded()
        payload = lens.hover(Document.from_text(text), Position(line=line, character=character))
        return payload.model_dump() if payload is not None else None

    @mcp.tool()
    async def complete(prefix: str) -> list[dict[str, Any]]:
        """Return completion items when the prefix ends with 'getRes('."""
        await _ensure_loaded()
        document = Document(lines=[prefix])
        items = lens.complete(document, Position(line=0, character=len(prefix)))
        return [item.model_dump() for item in items or []]

    return mcp
