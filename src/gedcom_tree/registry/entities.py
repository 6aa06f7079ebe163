from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


# -----------------------------
# Base records (small atoms)
# -----------------------------

@dataclass(slots=True)
class Name:
    """
    GEDCOM NAME value split into its parts.

    ``full`` is the value with the surname slashes removed, e.g.
    "John /Doe/ Jr." -> full="John Doe Jr.".
    """
    full: str = ""
    given: str = ""
    surname: str = ""
    suffix: str = ""


@dataclass(slots=True)
class Event:
    """Birth, death, marriage or divorce. All fields are free text."""
    date: str = ""
    place: str = ""
    type: str = ""


@dataclass(slots=True)
class HeaderEntry:
    level: int
    tag: str
    value: str = ""
    parent_tag: Optional[str] = None


# -----------------------------
# Entities
# -----------------------------

@dataclass(slots=True)
class Individual:
    id: str

    names: List[Name] = field(default_factory=list)
    sex: str = ""
    birth: Optional[Event] = None
    death: Optional[Event] = None
    occupation: str = ""
    nationality: str = ""
    titles: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    # Raw family references (FAMC / FAMS values)
    family_child: Optional[str] = None
    family_spouse: List[str] = field(default_factory=list)

    @property
    def primary_name(self) -> Optional[Name]:
        return self.names[0] if self.names else None

    @property
    def alternate_names(self) -> List[str]:
        """Full strings of every name after the primary one."""
        return [n.full for n in self.names[1:]]


@dataclass(slots=True)
class Family:
    id: str

    # Raw references; a dangling one simply never resolves to a node.
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)

    marriage: Optional[Event] = None
    divorce: Optional[Event] = None


@dataclass(slots=True)
class Header:
    """
    Top-level HEAD metadata, captured line by line and not interpreted.
    """
    entries: List[HeaderEntry] = field(default_factory=list)

    def get(self, tag: str) -> Optional[str]:
        """Value of the first level-1 entry with ``tag``, if any."""
        for entry in self.entries:
            if entry.level == 1 and entry.tag == tag:
                return entry.value
        return None


# -----------------------------
# Document
# -----------------------------

@dataclass(slots=True)
class GedcomDocument:
    """
    In-memory collections produced by one parse, indexed by xref.
    """
    individuals: Dict[str, Individual] = field(default_factory=dict)
    families: Dict[str, Family] = field(default_factory=dict)
    header: Header = field(default_factory=Header)

    def register_individual(self, ind: Individual) -> None:
        self.individuals[ind.id] = ind

    def register_family(self, fam: Family) -> None:
        self.families[fam.id] = fam

    def register_header(self, header: Header) -> None:
        self.header = header

    def get_individual(self, xref: str) -> Optional[Individual]:
        return self.individuals.get(xref)

    def get_family(self, xref: str) -> Optional[Family]:
        return self.families.get(xref)
