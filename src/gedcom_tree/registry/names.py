"""
NAME value parser.

    "John /Doe/ Jr."   -> given="John", surname="Doe", suffix="Jr."
    "/Colleen/"        -> given="",     surname="Colleen"
    "John /Doe"        -> given="John", surname="Doe"      (no closing slash)
    "Madonna"          -> given="Madonna"
"""

from __future__ import annotations

from gedcom_tree.registry.entities import Name


def parse_name(value: str) -> Name:
    raw = value or ""
    full = raw.replace("/", "").strip()

    if "/" not in raw:
        return Name(full=full, given=full)

    given, _, rest = raw.partition("/")
    surname, _, suffix = rest.partition("/")

    return Name(
        full=full,
        given=given.strip(),
        surname=surname.strip(),
        suffix=suffix.strip(),
    )
