
from __future__ import annotations

import typer

from gedcom_tree.cli.commands.layout import layout_command
from gedcom_tree.cli.commands.search import search_command
from gedcom_tree.cli.commands.stats import stats_command

app = typer.Typer(
    name="gedcom-tree",
    help="GEDCOM family tree parser and layout engine",
    add_completion=False,
)

app.command("layout")(layout_command)
app.command("stats")(stats_command)
app.command("search")(search_command)


def main():
    app()


if __name__ == "__main__":
    main()
