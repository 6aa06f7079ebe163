# src/gedcom_tree/loader/record_builder.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from gedcom_tree.logging import get_logger
from gedcom_tree.registry.entities import Family, GedcomDocument, Header, Individual
from gedcom_tree.registry.interpreters import Record, interpret_tag

from .tokenizer import Token, tokenize_text

log = get_logger(__name__)


@dataclass(frozen=True)
class AncestorFrame:
    """One currently-open tag in the nesting chain."""
    level: int
    tag: str


class RecordBuilder:
    """
    Level-based nesting state machine turning tokens into records.

    Rules:
        - A level-0 token finalizes the open record and may open a new one
          (INDI and FAM need an xref; HEAD does not).
        - A deeper token's parent is the most recent prior token with a
          strictly smaller level: frames with level >= the new level are
          popped, so level gaps are tolerated.
        - Records only become visible in the document once finalized.
    """

    def __init__(self, document: Optional[GedcomDocument] = None):
        self.document = document if document is not None else GedcomDocument()
        self.current: Optional[Record] = None
        self.stack: List[AncestorFrame] = []

    # ------------------------------------------------------------------ #
    # Record lifecycle
    # ------------------------------------------------------------------ #

    def _open_record(self, token: Token) -> Optional[Record]:
        if token.xref and token.tag == "INDI":
            return Individual(id=token.xref)
        if token.xref and token.tag == "FAM":
            return Family(id=token.xref)
        if token.tag == "HEAD":
            return Header()
        if token.tag in ("INDI", "FAM"):
            log.debug("Line %d: %s record without xref ignored", token.lineno, token.tag)
        return None

    def _finalize(self) -> None:
        record = self.current
        self.current = None
        if isinstance(record, Individual):
            self.document.register_individual(record)
        elif isinstance(record, Family):
            self.document.register_family(record)
        elif isinstance(record, Header):
            self.document.register_header(record)

    # ------------------------------------------------------------------ #
    # Token handling
    # ------------------------------------------------------------------ #

    def feed(self, token: Token) -> None:
        if token.level == 0:
            self._finalize()
            self.current = self._open_record(token)
            self.stack = [AncestorFrame(0, token.tag)]
            return

        if self.current is None:
            return

        while self.stack and self.stack[-1].level >= token.level:
            self.stack.pop()

        parent_tag = self.stack[-1].tag if self.stack else None
        interpret_tag(self.current, token.tag, token.value, parent_tag, level=token.level)
        self.stack.append(AncestorFrame(token.level, token.tag))

    def close(self) -> GedcomDocument:
        """Finalize whatever record is still open and return the document."""
        self._finalize()
        self.stack = []
        return self.document


def build_records(tokens: Iterable[Token]) -> GedcomDocument:
    """
    Build a GedcomDocument from a token stream.

        tokens -> GedcomDocument(individuals, families, header)
    """
    builder = RecordBuilder()
    for token in tokens:
        builder.feed(token)
    return builder.close()


def parse_gedcom(content: Union[str, bytes]) -> GedcomDocument:
    """Parse raw GEDCOM text into a GedcomDocument. Never raises on bad input."""
    document = build_records(tokenize_text(content))
    log.debug(
        "Parsed document: INDI=%d FAM=%d",
        len(document.individuals),
        len(document.families),
    )
    return document
