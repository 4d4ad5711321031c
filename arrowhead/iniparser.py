"""Queries over an :class:`IniDictionary` filled from an ini file.

Entries are stored as ``"section"`` (with a ``None`` value) for sections and
``"section:key"`` for values. Lookups lower-case the requested key, as the
loader stores every section and key in lower case.
"""

from __future__ import annotations

import re
from typing import IO, Optional

from arrowhead.inidict import IniDictionary

_LINE_SIZE = 1024
_MISSING = object()
_C_SPACE = " \t\n\v\f\r"

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r")",
    re.IGNORECASE,
)


def _lower(text: str) -> str:
    """Lower-case ASCII letters only, keeping at most one line's worth of text."""
    return "".join(
        chr(ord(c) + 32) if "A" <= c <= "Z" else c for c in text[:_LINE_SIZE]
    )


def _is_section(key: str) -> bool:
    return ":" not in key


def _sections(d: IniDictionary) -> list[str]:
    return [key for key in d if _is_section(key)]


def _keys_in(d: IniDictionary, section: str) -> list[str]:
    prefix = section + ":"
    return [key for key in d if key.startswith(prefix)]


def section_count(d: IniDictionary) -> int:
    """Return the number of sections in ``d``."""
    return len(_sections(d))


def section_name(d: IniDictionary, n: int) -> Optional[str]:
    """Return the name of the ``n``-th section, or ``None`` if there is none."""
    if n < 0:
        return None
    sections = _sections(d)
    return sections[n] if n < len(sections) else None


def dump(d: IniDictionary, out: IO[str]) -> None:
    """Write every entry as ``[key]=[value]``, or ``[key]=UNDEF`` for sections."""
    if out is None:
        return
    for key in d:
        value = d.get(key)
        if value is not None:
            out.write(f"[{key}]=[{value}]\n")
        else:
            out.write(f"[{key}]=UNDEF\n")


def dump_ini(d: IniDictionary, out: IO[str]) -> None:
    """Write ``d`` to ``out`` in a form that can be loaded again."""
    if out is None:
        return
    sections = _sections(d)
    if not sections:
        for key in d:
            value = d.get(key)
            out.write(f"{key} = {value if value is not None else ''}\n")
        return
    for name in sections:
        dump_section_ini(d, name, out)
    out.write("\n")


def dump_section_ini(d: IniDictionary, section: str, out: IO[str]) -> None:
    """Write one section of ``d`` to ``out`` in loadable ini form."""
    if out is None or not find_entry(d, section):
        return
    out.write(f"\n[{section}]\n")
    skip = len(section) + 1
    for key in _keys_in(d, section):
        value = d.get(key)
        out.write(f"{key[skip:]:<30} = {value if value is not None else ''}\n")
    out.write("\n")


def section_key_count(d: IniDictionary, section: str) -> int:
    """Return how many keys ``section`` holds; 0 if the section is absent."""
    if not find_entry(d, section):
        return 0
    return len(_keys_in(d, section))


def section_keys(d: IniDictionary, section: str) -> list[str]:
    """Return the full ``section:key`` names in ``section``; empty if absent."""
    if not find_entry(d, section):
        return []
    return _keys_in(d, section)


def get_string(d: IniDictionary, key: str, default=None):
    """Return the value for ``key`` (matched in lower case), else ``default``."""
    if d is None or key is None:
        return default
    return d.get(_lower(key), default)


def _parse_c_long(text: str) -> int:
    """Read a leading integer the way ``strtol(text, NULL, 0)`` does."""
    pos = 0
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        sign = -1 if text[pos] == "-" else 1
        pos += 1

    rest = text[pos:]
    if (
        len(rest) > 2
        and rest[0] == "0"
        and rest[1] in "xX"
        and rest[2] in "0123456789abcdefABCDEF"
    ):
        base, digits_from, allowed = 16, 2, "0123456789abcdefABCDEF"
    elif rest.startswith("0"):
        base, digits_from, allowed = 8, 0, "01234567"
    else:
        base, digits_from, allowed = 10, 0, "0123456789"

    digits = []
    for char in rest[digits_from:]:
        if char not in allowed:
            break
        digits.append(char)
    if not digits:
        return 0

    value = sign * int("".join(digits), base)
    value = max(-(2**63), min(2**63 - 1, value))
    value &= 0xFFFFFFFF
    return value - 2**32 if value >= 2**31 else value


def _parse_c_double(text: str) -> float:
    """Read a leading floating-point number the way ``atof`` does."""
    stripped = text.lstrip(_C_SPACE)
    match = _FLOAT_PREFIX.match(stripped)
    if not match:
        return 0.0
    literal = match.group(0)
    body = literal.lstrip("+-")
    negative = literal.startswith("-")
    if body[:2].lower() == "0x":
        mantissa = body[2:]
        if "p" not in mantissa.lower():
            mantissa += "p0"
        if mantissa.startswith("."):
            mantissa = "0" + mantissa
        value = float.fromhex("0x" + mantissa)
        return -value if negative else value
    return float(literal)


def get_int(d: IniDictionary, key: str, notfound: int) -> int:
    """Return the value for ``key`` read as a C integer literal.

    Decimal, octal (leading ``0``) and hexadecimal (leading ``0x``) forms are
    accepted. ``notfound`` is returned when the key is absent.
    """
    value = get_string(d, key, _MISSING)
    if value is _MISSING or value is None:
        return notfound
    return _parse_c_long(value)


def get_double(d: IniDictionary, key: str, notfound: float) -> float:
    """Return the value for ``key`` read as a floating-point number."""
    value = get_string(d, key, _MISSING)
    if value is _MISSING or value is None:
        return notfound
    return _parse_c_double(value)


def get_boolean(d: IniDictionary, key: str, notfound: int) -> int:
    """Return 1 for values starting with y/Y/t/T/1, 0 for n/N/f/F/0.

    ``notfound`` is returned when the key is absent or the value is neither.
    """
    value = get_string(d, key, _MISSING)
    if value is _MISSING or value is None or not value:
        return notfound
    first = value[0]
    if first in "yYtT1":
        return 1
    if first in "nNfF0":
        return 0
    return notfound


def find_entry(d: IniDictionary, entry: str) -> bool:
    """Return True if ``entry`` (a section or a ``section:key``) exists."""
    return get_string(d, entry, _MISSING) is not _MISSING


def set_entry(d: IniDictionary, entry: str, value: Optional[str]) -> None:
    """Set ``entry`` (lower-cased) to ``value``; ``None`` marks a section."""
    d.set(_lower(entry), value)


def unset_entry(d: IniDictionary, entry: str) -> None:
    """Remove ``entry`` (lower-cased) if it exists."""
    d.unset(_lower(entry))