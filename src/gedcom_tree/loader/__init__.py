# src/gedcom_tree/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from gedcom_tree.loader import (
        Token,
        GedcomSyntaxError,
        AncestorFrame,
        RecordBuilder,
        iter_lines,
        tokenize_line,
        tokenize_text,
        build_records,
        parse_gedcom,
    )
"""

from __future__ import annotations

from .tokenizer import GedcomSyntaxError, Token, iter_lines, tokenize_line, tokenize_text
from .record_builder import AncestorFrame, RecordBuilder, build_records, parse_gedcom

__all__ = [
    "Token",
    "GedcomSyntaxError",
    "AncestorFrame",
    "RecordBuilder",
    "iter_lines",
    "tokenize_line",
    "tokenize_text",
    "build_records",
    "parse_gedcom",
]
