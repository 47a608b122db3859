"""
cim-modgraph CLI: render the CIM module dependency graph.

Commands
--------
- render : print the Mermaid flowchart (or write it with --output)
- edges  : print dependency edges as 'U -> V'
- list   : print nodes with their category and status

Global options
--------------
--graph PATH                Module graph file (default: registry/modules-graph.json,
                            env: CIM_MODULES_GRAPH)
--format {plain,rich,json}  Select output format (default: plain)
--verbose / --no-verbose    Log loader activity to stderr (default: --no-verbose)

Exit codes
----------
0 = success
1 = invalid graph document
2 = graph file not found
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys
from typing import Annotated

import click
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
import typer

from cim.modgraph.api import render as render_text
from cim.modgraph.loader import DEFAULT_GRAPH_PATH, InvalidDocument, load_document
from cim.modgraph.spec import GraphDocument
from cim.modgraph.styles import category_name
from cim.modgraph.types import Format

app = typer.Typer(help="cim-modgraph: CIM module dependency graph renderer")


def _load(ctx: typer.Context) -> GraphDocument:
    """
    Load the graph selected by the global --graph option, mapping loader
    failures to exit codes.
    """
    path: Path = ctx.obj["graph"]
    try:
        return load_document(path)
    except FileNotFoundError:
        typer.echo(f"Graph file not found: {path}", err=True)
        raise typer.Exit(code=2)  # noqa: B904
    except InvalidDocument as exc:
        typer.echo(f"Invalid graph document: {exc}", err=True)
        raise typer.Exit(code=1)  # noqa: B904


@app.callback()
def _main_options(  # pyright: ignore[reportUnusedFunction]
    ctx: typer.Context,
    graph: Annotated[
        Path,
        typer.Option(
            "--graph",
            "-g",
            envvar="CIM_MODULES_GRAPH",
            help="Path to modules-graph.json.",
        ),
    ] = DEFAULT_GRAPH_PATH,
    format: Annotated[
        Format,
        typer.Option(
            "--format",
            "-f",
            case_sensitive=False,
            help="Output format: plain, rich, or json (default: plain).",
        ),
    ] = "plain",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose/--no-verbose",
            help="Log loader activity at DEBUG level to stderr.",
        ),
    ] = False,
) -> None:
    """
    Capture global CLI options and stash in the Typer context.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            force=True,
        )
    ctx.obj = {"graph": graph, "format": format, "verbose": verbose}


@app.command("render")
def render(
    ctx: typer.Context,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the Mermaid text to this file instead of stdout.",
        ),
    ] = None,
) -> None:
    """
    Render the module graph as a Mermaid flowchart.
    - plain : raw Mermaid text
    - rich  : highlighted text inside a panel
    - json  : { "last_updated": ..., "mermaid": ... }
    """
    fmt: Format = ctx.obj["format"]
    document = _load(ctx)
    text = render_text(document, target="mermaid")

    if output is not None:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote Mermaid graph to {output}")
        return

    if fmt == "json":
        payload = {"last_updated": document.last_updated, "mermaid": text}
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return

    if fmt == "rich":
        console = Console()
        title = f"Mermaid: {Path(ctx.obj['graph']).name}"
        console.print(Panel(Syntax(text, "text"), title=title, border_style="cyan"))
        return

    # plain
    typer.echo(text, nl=False)


@app.command("edges")
def edges(ctx: typer.Context) -> None:
    """
    Print dependency edges in input order.
    - plain : newline-separated 'U -> V'
    - rich  : panel containing the same text
    - json  : { "edges": [{"from": "...", "to": "..."}] }
    """
    fmt: Format = ctx.obj["format"]
    document = _load(ctx)

    if fmt == "json":
        edges_json = [
            {"from": e.source, "to": e.target}
            for e in document.graph.dependency_edges()
        ]
        typer.echo(json.dumps({"edges": edges_json}, separators=(",", ":")))
        return

    text = render_text(document, target="edges")

    if fmt == "rich":
        console = Console()
        console.print(Panel.fit(text, title="Dependencies", border_style="cyan"))
        return

    # plain
    if text:
        typer.echo(text)


@app.command("list")
def list_nodes(ctx: typer.Context) -> None:
    """
    List graph nodes with their category and status.
    """
    fmt: Format = ctx.obj["format"]
    document = _load(ctx)
    nodes = list(document.graph.nodes.values())

    if fmt == "json":
        nodes_json = [
            {
                **n.extra,
                "id": n.id,
                "type": n.type,
                "status": n.status,
                "category": category_name(n.category_key),
            }
            for n in nodes
        ]
        typer.echo(json.dumps({"nodes": nodes_json}, separators=(",", ":")))
        return

    if fmt == "rich":
        console = Console()
        table = Table(title="Modules")
        table.add_column("Module", style="bold")
        table.add_column("Category")
        table.add_column("Status")
        for n in nodes:
            table.add_row(n.id, category_name(n.category_key), n.status or "unknown")
        console.print(table)
        return

    # plain
    for n in nodes:
        typer.echo(f"{n.id}\t{category_name(n.category_key)}\t{n.status or 'unknown'}")


def main(argv: list[str] | None = None) -> int:
    """
    Console-script entry point (``cim-modgraph``) that returns the exit code.

    Usage errors print their message and return 2, as click does standalone.
    """
    try:
        # With standalone_mode=False, click returns the code of typer.Exit.
        rv = app(args=argv, standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except typer.Exit as e:
        return e.exit_code
    except Exception as exc:  # Safety net
        typer.echo(f"Unexpected error: {exc}", err=True)
        return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
