
"""
CLI command modules for gedcom_tree.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_tree.cli.commands.layout import layout_command
from gedcom_tree.cli.commands.search import search_command
from gedcom_tree.cli.commands.stats import stats_command

__all__ = [
    "layout_command",
    "search_command",
    "stats_command",
]
