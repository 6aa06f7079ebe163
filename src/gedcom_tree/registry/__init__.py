from __future__ import annotations

from .entities import (
    Event,
    Family,
    GedcomDocument,
    Header,
    HeaderEntry,
    Individual,
    Name,
)
from .interpreters import interpret_tag
from .names import parse_name

__all__ = [
    "Event",
    "Family",
    "GedcomDocument",
    "Header",
    "HeaderEntry",
    "Individual",
    "Name",
    "interpret_tag",
    "parse_name",
]
