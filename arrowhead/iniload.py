"""Reading ini text into an :class:`IniDictionary`.

Sections are stored as ``"section"`` with a ``None`` value and entries as
``"section:key"``. Section names and keys are lower-cased; values are kept
as written.
"""

from __future__ import annotations

import enum
import logging
import os
import re
from collections.abc import Iterator
from typing import NamedTuple, Optional, Union

from arrowhead.inidict import IniDictionary

log = logging.getLogger(__name__)

_LINE_SIZE = 1024
_C_SPACE = " \t\n\v\f\r"
_COMMENT_START = re.compile(r"[;#]")


class LineStatus(enum.Enum):
    """What a single ini line turned out to be."""

    UNPROCESSED = enum.auto()
    ERROR = enum.auto()
    EMPTY = enum.auto()
    COMMENT = enum.auto()
    SECTION = enum.auto()
    VALUE = enum.auto()


class ParsedLine(NamedTuple):
    """The result of parsing one logical ini line."""

    status: LineStatus
    section: Optional[str] = None
    key: Optional[str] = None
    value: Optional[str] = None


class IniSyntaxError(ValueError):
    """Raised when ini text cannot be read."""

    def __init__(self, message: str, name: str, lineno: int, line: str) -> None:
        super().__init__(f"{message} in {name} ({lineno}): {line.rstrip()}")
        self.name = name
        self.lineno = lineno
        self.line = line


def _lower(text: str) -> str:
    return "".join(chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text)


def _clean_value(raw: str) -> str:
    value = raw.strip(_C_SPACE)
    if value in ('""', "''"):
        return ""
    return value


def _scan_value(rest: str) -> str:
    """Read the value part that follows ``=`` and any blanks after it."""
    for quote in ('"', "'"):
        if len(rest) > 1 and rest[0] == quote and rest[1] != quote:
            return _clean_value(rest[1:].split(quote, 1)[0])
    if rest and rest[0] not in ";#":
        return _clean_value(_COMMENT_START.split(rest, 1)[0])
    return ""


def parse_line(line: str) -> ParsedLine:
    """Classify one logical line and extract its section, key or value.

    For a ``[]`` line the section is ``None``, meaning the current section
    stays in effect.
    """
    text = line.strip(_C_SPACE)
    if not text:
        return ParsedLine(LineStatus.EMPTY)
    if text[0] in "#;":
        return ParsedLine(LineStatus.COMMENT)
    if text[0] == "[" and text[-1] == "]":
        inner = text[1:].split("]", 1)[0]
        section = _lower(inner.strip(_C_SPACE)) if inner else None
        return ParsedLine(LineStatus.SECTION, section=section)

    eq = text.find("=")
    if eq <= 0:
        return ParsedLine(LineStatus.ERROR)
    key = _lower(text[:eq].strip(_C_SPACE))
    rest = text[eq + 1 :].lstrip(_C_SPACE)
    return ParsedLine(LineStatus.VALUE, key=key, value=_scan_value(rest))


def _physical_lines(text: str) -> Iterator[str]:
    parts = text.split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def loads(text: str, name: str = "<string>") -> IniDictionary:
    """Parse ini ``text`` and return its entries.

    Lines ending in a backslash continue on the next line. Every physical
    line must end with a newline and fit in 1023 characters. A syntax error
    is fatal unless a later section or value line is read successfully.
    """
    entries = IniDictionary()
    section = ""
    prefix = ""
    pending: list[IniSyntaxError] = []

    for lineno, chunk in enumerate(_physical_lines(text), start=1):
        if len(chunk) > _LINE_SIZE - 1 - len(prefix):
            raise IniSyntaxError("input line too long", name, lineno, chunk)
        line = prefix + chunk
        if len(line) == 1:
            continue
        if not line.endswith("\n"):
            raise IniSyntaxError("input line too long", name, lineno, line)
        line = line.rstrip(_C_SPACE)
        if line.endswith("\\"):
            prefix = line[:-1]
            continue
        prefix = ""

        parsed = parse_line(line)
        if parsed.status is LineStatus.SECTION:
            if parsed.section is not None:
                section = parsed.section
            entries.set(section, None)
            pending.clear()
        elif parsed.status is LineStatus.VALUE:
            entries.set(f"{section}:{parsed.key}", parsed.value)
            pending.clear()
        elif parsed.status is LineStatus.ERROR:
            log.error("iniparser: syntax error in %s (%d): -> %s", name, lineno, line)
            pending.append(IniSyntaxError("syntax error", name, lineno, line))

    if pending:
        raise pending[0]
    return entries


def load(path: Union[str, os.PathLike]) -> IniDictionary:
    """Read and parse the ini file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return loads(handle.read(), os.fspath(path))