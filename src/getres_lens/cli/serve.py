import typer

from getres_lens.cli.common import console, get_context, get_settings

serve_app = typer.Typer(help="Start servers.")


@serve_app.command("api")
def api(
    ctx: typer.Context,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from getres_lens.api.app import create_app

    app = create_app(get_settings(ctx))
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    ctx: typer.Context,
    transport: str = "stdio",
) -> None:
    """Start the MCP server."""
    from getres_lens.host.sinks import RecordingSink
    from getres_lens.mcp.server import create_mcp_server

    lens = get_context(get_settings(ctx), RecordingSink())
    server = create_mcp_server(lens)
    if transport != "stdio":
        console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]
