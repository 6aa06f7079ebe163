"""
Tag interpreters for INDI, FAM and HEAD records.

Each interpreter receives ``(record, tag, value, parent_tag)`` for one
subordinate line and mutates the record in place. Only a fixed subset of
tags is understood; anything else is ignored.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Union

from gedcom_tree.registry.entities import Event, Family, Header, HeaderEntry, Individual
from gedcom_tree.registry.names import parse_name

Record = Union[Individual, Family, Header]
TagHandler = Callable[..., None]

# parent tag -> event attribute receiving DATE / PLAC / TYPE
INDIVIDUAL_EVENT_SLOTS: Dict[str, str] = {"BIRT": "birth", "DEAT": "death"}
FAMILY_EVENT_SLOTS: Dict[str, str] = {"MARR": "marriage", "DIV": "divorce"}


def _open_event(attr: str) -> TagHandler:
    def handler(record, value: str, parent_tag: Optional[str]) -> None:
        setattr(record, attr, Event())
    return handler


def _event_field(slots: Dict[str, str], field_name: str) -> TagHandler:
    def handler(record, value: str, parent_tag: Optional[str]) -> None:
        attr = slots.get(parent_tag or "")
        if attr is None:
            return
        event = getattr(record, attr)
        if event is None:
            return
        setattr(event, field_name, value)
    return handler


def _overwrite(attr: str) -> TagHandler:
    def handler(record, value: str, parent_tag: Optional[str]) -> None:
        setattr(record, attr, value)
    return handler


def _append(attr: str) -> TagHandler:
    def handler(record, value: str, parent_tag: Optional[str]) -> None:
        getattr(record, attr).append(value)
    return handler


def _add_name(record: Individual, value: str, parent_tag: Optional[str]) -> None:
    record.names.append(parse_name(value))


# ----------------------------------------------------------------------
# Dispatch tables
# ----------------------------------------------------------------------

INDIVIDUAL_HANDLERS: Dict[str, TagHandler] = {
    "NAME": _add_name,
    "SEX": _overwrite("sex"),
    "BIRT": _open_event("birth"),
    "DEAT": _open_event("death"),
    "DATE": _event_field(INDIVIDUAL_EVENT_SLOTS, "date"),
    "PLAC": _event_field(INDIVIDUAL_EVENT_SLOTS, "place"),
    "TYPE": _event_field(INDIVIDUAL_EVENT_SLOTS, "type"),
    "OCCU": _overwrite("occupation"),
    "NATI": _overwrite("nationality"),
    "TITL": _append("titles"),
    "NOTE": _append("notes"),
    "FAMC": _overwrite("family_child"),
    "FAMS": _append("family_spouse"),
}

FAMILY_HANDLERS: Dict[str, TagHandler] = {
    "HUSB": _overwrite("husband"),
    "WIFE": _overwrite("wife"),
    "CHIL": _append("children"),
    "MARR": _open_event("marriage"),
    "DIV": _open_event("divorce"),
    "DATE": _event_field(FAMILY_EVENT_SLOTS, "date"),
    "PLAC": _event_field(FAMILY_EVENT_SLOTS, "place"),
}


def interpret_individual_tag(
    record: Individual, tag: str, value: str, parent_tag: Optional[str]
) -> None:
    handler = INDIVIDUAL_HANDLERS.get(tag)
    if handler is not None:
        handler(record, value, parent_tag)


def interpret_family_tag(
    record: Family, tag: str, value: str, parent_tag: Optional[str]
) -> None:
    handler = FAMILY_HANDLERS.get(tag)
    if handler is not None:
        handler(record, value, parent_tag)


def interpret_header_tag(
    record: Header, tag: str, value: str, parent_tag: Optional[str], level: int = 1
) -> None:
    record.entries.append(
        HeaderEntry(level=level, tag=tag, value=value, parent_tag=parent_tag)
    )


def interpret_tag(
    record: Record, tag: str, value: str, parent_tag: Optional[str], level: int = 1
) -> None:
    """Route one subordinate line to the interpreter for the record's kind."""
    if isinstance(record, Individual):
        interpret_individual_tag(record, tag, value, parent_tag)
    elif isinstance(record, Family):
        interpret_family_tag(record, tag, value, parent_tag)
    elif isinstance(record, Header):
        interpret_header_tag(record, tag, value, parent_tag, level=level)
