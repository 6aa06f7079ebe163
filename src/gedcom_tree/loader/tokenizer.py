# src/gedcom_tree/loader/tokenizer.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from gedcom_tree.logging import get_logger

log = get_logger(__name__)

# <level> [<xref>] <tag> [<value>]
_LINE_RE = re.compile(r"^([0-9]+)\s+(?:(@[^@]+@)\s+)?(\S+)(?:\s+(.*))?$")
_NEWLINE_RE = re.compile(r"\r?\n")

# CPython's default cap for int() on digit strings
_MAX_LEVEL_DIGITS = 4300


@dataclass(frozen=True)
class Token:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        xref: Optional cross-reference identifier, e.g. "@I1@" or None.
        tag: GEDCOM tag, e.g. "INDI", "FAM", "HEAD", "NAME", "DATE".
        value: The line value (payload) as a string (may be empty).
        raw: The trimmed line the token was parsed from.
    """
    lineno: int
    level: int
    xref: Optional[str]
    tag: str
    value: str
    raw: str


class GedcomSyntaxError(ValueError):
    """Raised when a GEDCOM line does not match the level/xref/tag/value shape."""


def _decode(content: Union[str, bytes]) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return content


def iter_lines(content: Union[str, bytes]) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(lineno, line)`` for every non-blank line of ``content``.

    Lines are split on ``\\n`` or ``\\r\\n`` and trimmed, including a
    leading byte-order mark. Line numbers count blank lines too.
    """
    text = _decode(content)
    for lineno, raw_line in enumerate(_NEWLINE_RE.split(text), start=1):
        line = raw_line.strip().lstrip("\ufeff").strip()
        if not line:
            continue
        yield lineno, line


def tokenize_line(line: str, lineno: int = 0) -> Token:
    """
    Parse a single trimmed GEDCOM line into a Token.

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 DATE 1 JAN 1900"

    Raises:
        GedcomSyntaxError: if the line does not match the expected shape.
    """
    match = _LINE_RE.match(line)
    if match is None:
        raise GedcomSyntaxError(f"Line {lineno}: not a GEDCOM line -> {line!r}")

    level_str, xref, tag, value = match.groups()

    if len(level_str) > _MAX_LEVEL_DIGITS:
        raise GedcomSyntaxError(f"Line {lineno}: level too long -> {line[:40]!r}...")
    try:
        level = int(level_str)
    except ValueError as exc:
        raise GedcomSyntaxError(f"Line {lineno}: unreadable level -> {line[:40]!r}...") from exc

    return Token(
        lineno=lineno,
        level=level,
        xref=xref,
        tag=tag,
        value=value or "",
        raw=line,
    )


def tokenize_text(content: Union[str, bytes]) -> Iterator[Token]:
    """
    Yield Token objects for every well-formed line in ``content``.

    Malformed lines are skipped (logged at debug level); this never raises
    for any input.
    """
    for lineno, line in iter_lines(content):
        try:
            yield tokenize_line(line, lineno=lineno)
        except GedcomSyntaxError as exc:
            log.debug("Skipping malformed line: %s", exc)
