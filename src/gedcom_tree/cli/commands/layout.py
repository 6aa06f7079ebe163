from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_tree.cli.utils import console, load_gedcom, write_text
from gedcom_tree.exporter import serialize_graph_to_json_string


def layout_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Lay out a GEDCOM family tree and print nodes/links as JSON.
    """
    result = load_gedcom(gedcom, verbose=verbose)

    if verbose:
        console.log("Exporting JSON")

    payload = serialize_graph_to_json_string(result, indent=2 if pretty else None)
    write_text(payload, out=out)

    if verbose:
        console.log("Export complete")
