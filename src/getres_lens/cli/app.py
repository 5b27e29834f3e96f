import logging
from typing import Annotated

import typer

from getres_lens.cli.resources import complete, hover, path, scan, tree
from getres_lens.cli.serve import serve_app
from getres_lens.cli.watch import watch
from getres_lens.config import SOURCE_KINDS, Settings

app = typer.Typer(
    name="getres-lens",
    help="getres-lens CLI: resolve getRes(<id>) references to resource paths.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    ctx: typer.Context,
    source: Annotated[
        str | None, typer.Option(help=f"Resource source: {', '.join(SOURCE_KINDS)} (env GETRES_SOURCE).")
    ] = None,
    json_path: Annotated[str | None, typer.Option(help="JSON file with resource records (env GETRES_JSON_PATH).")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = Settings.from_env().with_overrides(source=source, json_path=json_path)


app.command("tree")(tree)
app.command("path")(path)
app.command("scan")(scan)
app.command("hover")(hover)
app.command("complete")(complete)
app.command("watch")(watch)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
