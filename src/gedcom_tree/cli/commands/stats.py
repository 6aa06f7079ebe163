
from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcom_tree.cli.utils import load_gedcom
from gedcom_tree.graph import MARRIAGE, PARENT_CHILD, graph_summary

console = Console()


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM file.
    """
    result = load_gedcom(gedcom, verbose=verbose)
    graph = result.graph

    table = Table(title="GEDCOM Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(result.document.individuals)))
    table.add_row("Families", str(len(result.document.families)))
    table.add_row("Marriage links", str(len(graph.links_of_type(MARRIAGE))))
    table.add_row("Parent-child links", str(len(graph.links_of_type(PARENT_CHILD))))
    table.add_row("Generations", str(len(set(result.generations.values()))))
    table.add_row("Dropped references", str(len(graph.dropped_references)))

    console.print(table)
    console.print(graph_summary(graph))
