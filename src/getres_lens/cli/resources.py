from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table
from rich.tree import Tree

from getres_lens.cli.common import console, get_context, get_settings, load_snapshot, read_document
from getres_lens.core.paths import resource_path
from getres_lens.core.scanner import complete as _complete
from getres_lens.core.scanner import hover as _hover
from getres_lens.core.scanner import scan as _scan
from getres_lens.core.tree import build_forest, iter_forest, unreachable_ids
from getres_lens.models import Position, TreeNode


def _render_table(headers: Sequence[str], rows: Sequence[tuple[Any, ...]]) -> None:
    table = Table(show_lines=False)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(escape(str(v)) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def _node_label(node: TreeNode) -> str:
    return f"{escape(node.resource.name)} [dim]({escape(node.resource.key)})[/dim]"


def tree(ctx: typer.Context) -> None:
    """Show the resource forest."""
    lens = get_context(get_settings(ctx))
    load_snapshot(lens)

    records = lens.store.current_snapshot()
    forest = build_forest(records)
    root = Tree(f"[bold]resources[/bold] ({len(records)})")
    branches: list[Tree] = [root]
    for depth, node in iter_forest(forest):
        del branches[depth + 1 :]
        branches.append(branches[depth].add(_node_label(node)))
    console.print(root)

    orphans = unreachable_ids(records, forest)
    if orphans:
        console.print(f"[yellow]Unreachable (parent cycle): {', '.join(orphans)}[/yellow]")


def path(
    ctx: typer.Context,
    resource_id: Annotated[str, typer.Argument(help="Resource id.")],
) -> None:
    """Print the path of a resource."""
    lens = get_context(get_settings(ctx))
    load_snapshot(lens)

    resource = lens.store.lookup_by_id(resource_id)
    if resource is None:
        console.print(f"[yellow]Unknown resource id: {escape(resource_id)}[/yellow]")
        raise typer.Exit(1)
    console.print(escape(resource_path(resource, lens.store.snapshot.by_id)))


def scan(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Source file to scan.")],
    line: Annotated[int | None, typer.Option(min=1, help="Cursor line (1-based).")] = None,
    column: Annotated[int, typer.Option(min=0, help="Cursor column (0-based).")] = 0,
) -> None:
    """List resolved getRes() references in a file."""
    document = read_document(file)
    lens = get_context(get_settings(ctx))
    load_snapshot(lens)

    cursor = Position(line=line - 1, character=column) if line is not None else None
    result = _scan(document.lines, cursor, lens.store)
    _render_table(
        ["line", "column", "id", "path", "cursor"],
        [(m.line + 1, m.end, m.resource_id, m.path, "*" if m.cursor_overlap else "") for m in result.matches],
    )
    if result.status is not None:
        console.print(f"[black on yellow] {escape(result.status.text)} [/black on yellow]")


def hover(
    ctx: typer.Context,
    file: Annotated[Path, typer.Argument(help="Source file.")],
    line: Annotated[int, typer.Argument(min=1, help="Line (1-based).")],
    column: Annotated[int, typer.Argument(min=0, help="Column (0-based).")],
) -> None:
    """Show path and code of the reference at a position."""
    document = read_document(file)
    lens = get_context(get_settings(ctx))
    load_snapshot(lens)

    payload = _hover(document.lines, Position(line=line - 1, character=column), lens.store)
    if payload is None:
        console.print("(no resource reference here)")
        return
    for block in payload.blocks:
        console.print(Syntax(block.text, block.language, word_wrap=True))


def complete(
    ctx: typer.Context,
    prefix: Annotated[str, typer.Argument(help="Line text up to the cursor, e.g. 'const x = getRes('.")],
) -> None:
    """List completion items for a line prefix."""
    lens = get_context(get_settings(ctx))
    load_snapshot(lens)

    items = _complete(prefix, lens.store)
    if items is None:
        console.print("(no completions: prefix does not end with 'getRes(')")
        return
    ordered = sorted(items, key=lambda item: item.sort_text)
    _render_table(["label", "insert"], [(item.label, item.insert_text) for item in ordered])
