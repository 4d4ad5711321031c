"""A string-to-string dictionary holding the entries read from an ini file."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Optional

_MASK = 0xFFFFFFFF


def dictionary_hash(key: str) -> int:
    """Return the 32-bit one-at-a-time hash of ``key``.

    Bytes above 0x7F are treated as signed chars, as on common platforms.
    """
    value = 0
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte > 0x7F else byte
        value = (value + char) & _MASK
        value = (value + (value << 10)) & _MASK
        value ^= value >> 6
    value = (value + (value << 3)) & _MASK
    value ^= value >> 11
    value = (value + (value << 15)) & _MASK
    return value


class IniDictionary:
    """Ordered mapping of string keys to string values or ``None``.

    A key whose value is ``None`` is still present; ini sections are stored
    this way.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Optional[str]] = {}

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value stored for ``key``, or ``default`` if it is absent."""
        return self._entries.get(key, default)

    def set(self, key: str, value: Optional[str]) -> None:
        """Add ``key`` or replace its value. ``value`` may be ``None``."""
        if key is None:
            raise TypeError("dictionary key must not be None")
        self._entries[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key``; nothing happens if it is absent."""
        if key is None:
            return
        self._entries.pop(key, None)

    def dump(self, out: IO[str]) -> None:
        """Write every entry to ``out`` as a right-aligned key and bracketed value."""
        if out is None:
            return
        if not self._entries:
            out.write("empty dictionary\n")
            return
        for key, value in self._entries.items():
            shown = value if value is not None else "UNDEF"
            out.write(f"{key:>20}\t[{shown}]\n")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)