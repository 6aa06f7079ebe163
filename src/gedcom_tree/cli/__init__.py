
"""
CLI package for gedcom_tree.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_tree.cli.app import app, main

__all__ = [
    "app",
    "main",
]
