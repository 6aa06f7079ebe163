from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_tree.cli.utils import load_gedcom
from gedcom_tree.graph import search_nodes, sex_label, truncate_label

console = Console()

NAME_WIDTH = 32
LIFESPAN_WIDTH = 30


def search_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    query: str = typer.Argument(..., help="Case-insensitive part of a name"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    List people whose display name contains QUERY.
    """
    result = load_gedcom(gedcom, verbose=verbose)
    matches = search_nodes(result.graph.nodes, query)

    if not matches:
        console.print(f"No individuals match {query!r}")
        raise typer.Exit(code=1)

    table = Table(title=f"Matches for {query!r}")
    table.add_column("ID")
    table.add_column("Name", style="bold")
    table.add_column("Sex")
    table.add_column("Lifespan")
    table.add_column("Generation", justify="right")

    for node in matches:
        table.add_row(
            node.id,
            truncate_label(node.name, NAME_WIDTH),
            sex_label(node.sex),
            truncate_label(node.lifespan, LIFESPAN_WIDTH),
            str(node.generation),
        )

    console.print(table)
