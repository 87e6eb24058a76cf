"""Portable primitives of the saved-game format.

Every primitive is encrypted on its own, with the keystream restarted,
and multi-byte numbers are little-endian.
"""

from __future__ import annotations

from enum import IntEnum
from typing import BinaryIO, Iterable, Sequence

from roguelib.cipher import read_encrypted, write_encrypted

__all__ = ["SaveFormatError", "Marker", "StateWriter", "StateReader"]


class SaveFormatError(ValueError):
    """The saved data is truncated or does not have the expected layout."""


class Marker(IntEnum):
    """Record identifiers written ahead of structured sections."""

    STATS = 0xABCD0001
    THING = 0xABCD0002
    THING_NULL = 0xDEAD0002
    OBJECT = 0xABCD0003
    MAGICITEMS = 0xABCD0004
    KNOWS = 0xABCD0005
    GUESSES = 0xABCD0006
    OBJECTLIST = 0xABCD0007
    BAGOBJECT = 0xABCD0008
    MONSTERLIST = 0xABCD0009
    MONSTERSTATS = 0xABCD000A
    MONSTERS = 0xABCD000B
    TRAP = 0xABCD000C
    WINDOW = 0xABCD000D
    DAEMONS = 0xABCD000E
    IWEAPS = 0xABCD000F
    IARMOR = 0xABCD0010
    SPELLS = 0xABCD0011
    ILIST = 0xABCD0012
    HLIST = 0xABCD0013
    DEATHTYPE = 0xABCD0014
    CTYPES = 0xABCD0015
    COORDLIST = 0xABCD0016
    ROOMS = 0xABCD0017


def _to_bytes(data: str | bytes | bytearray) -> bytes:
    if isinstance(data, str):
        return data.encode("latin-1")
    return bytes(data)


def _char_byte(value: int | str | bytes) -> bytes:
    if isinstance(value, (str, bytes, bytearray)):
        raw = _to_bytes(value)
        if len(raw) != 1:
            raise ValueError("a char must be exactly one character")
        return raw
    return bytes([value & 0xFF])


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


class StateWriter:
    """Writes save-file primitives to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _put(self, data: bytes) -> None:
        if write_encrypted(self._stream, data) != len(data):
            raise OSError("short write to save file")

    def write_int(self, value: int) -> None:
        """Write a 32-bit integer; wider values are truncated."""
        self._put((value & 0xFFFFFFFF).to_bytes(4, "little"))

    def write_uint(self, value: int) -> None:
        self._put((value & 0xFFFFFFFF).to_bytes(4, "little"))

    def write_short(self, value: int) -> None:
        self._put((value & 0xFFFF).to_bytes(2, "little"))

    def write_ushort(self, value: int) -> None:
        self._put((value & 0xFFFF).to_bytes(2, "little"))

    def write_char(self, value: int | str | bytes) -> None:
        self._put(_char_byte(value))

    def write_chars(self, data: str | bytes, count: int) -> None:
        """Write a length and then exactly ``count`` bytes, NUL padded."""
        if count < 0:
            raise ValueError("count must not be negative")
        raw = _to_bytes(data)[:count].ljust(count, b"\0")
        self.write_int(count)
        self._put(raw)

    def write_boolean(self, value: object) -> None:
        self._put(b"\x01" if value else b"\x00")

    def write_booleans(self, values: Sequence[object]) -> None:
        self.write_int(len(values))
        for value in values:
            self.write_boolean(value)

    def write_ints(self, values: Sequence[int]) -> None:
        self.write_int(len(values))
        for value in values:
            self.write_int(value)

    def write_shorts(self, values: Sequence[int]) -> None:
        self.write_int(len(values))
        for value in values:
            self.write_short(value)

    def write_marker(self, marker: int) -> None:
        self.write_uint(int(marker))

    def write_string(self, text: str | bytes | None) -> None:
        """Write a NUL-terminated string, or an empty record for ``None``."""
        if text is None:
            self.write_int(0)
            self.write_chars(b"", 0)
            return
        raw = _to_bytes(text).split(b"\0", 1)[0] + b"\0"
        self.write_int(len(raw))
        self.write_chars(raw, len(raw))

    def write_strings(self, texts: Sequence[str | bytes | None]) -> None:
        self.write_int(len(texts))
        for text in texts:
            self.write_string(text)

    def write_string_index(self, master: Iterable[str], text: str | None) -> None:
        """Write the position of ``text`` in ``master``, or -1 if absent."""
        for index, candidate in enumerate(master):
            if text is not None and candidate == text:
                self.write_int(index)
                return
        self.write_int(-1)


class StateReader:
    """Reads save-file primitives from a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def _take(self, size: int) -> bytes:
        data = read_encrypted(self._stream, size)
        if len(data) != size:
            raise SaveFormatError("save data ends early")
        return data

    def _expect_count(self, count: int) -> None:
        value = self.read_int()
        if value != count:
            raise SaveFormatError(f"expected {count} entries, found {value}")

    def read_int(self) -> int:
        return int.from_bytes(self._take(4), "little", signed=True)

    def read_uint(self) -> int:
        return int.from_bytes(self._take(4), "little")

    def read_short(self) -> int:
        return int.from_bytes(self._take(2), "little", signed=True)

    def read_ushort(self) -> int:
        return int.from_bytes(self._take(2), "little")

    def read_char(self) -> int:
        return self._take(1)[0]

    def read_chars(self, count: int) -> bytes:
        self._expect_count(count)
        return self._take(count)

    def read_boolean(self) -> bool:
        return self._take(1)[0] != 0

    def read_booleans(self, count: int) -> list[bool]:
        self._expect_count(count)
        return [self.read_boolean() for _ in range(count)]

    def read_ints(self, count: int) -> list[int]:
        self._expect_count(count)
        return [self.read_int() for _ in range(count)]

    def read_shorts(self, count: int) -> list[int]:
        self._expect_count(count)
        return [self.read_short() for _ in range(count)]

    def read_marker(self, marker: int) -> None:
        """Read a marker and fail unless it is ``marker``."""
        found = self.read_uint()
        if found != int(marker) & 0xFFFFFFFF:
            raise SaveFormatError(f"expected marker {int(marker):#x}, found {found:#x}")

    def read_string(self, max_length: int) -> str:
        length = self.read_int()
        if length < 0 or length > max_length:
            raise SaveFormatError(f"string length {length} out of range")
        return _decode(self.read_chars(length))

    def read_new_string(self) -> str | None:
        length = self.read_int()
        if length < 0:
            raise SaveFormatError(f"string length {length} out of range")
        raw = self.read_chars(length)
        return None if length == 0 else _decode(raw)

    def read_strings(self, count: int, max_length: int) -> list[str]:
        self._expect_count(count)
        return [self.read_string(max_length) for _ in range(count)]

    def read_new_strings(self, count: int) -> list[str | None]:
        self._expect_count(count)
        return [self.read_new_string() for _ in range(count)]

    def read_string_index(self, master: Sequence[str]) -> str | None:
        """Read an index into ``master``; -1 and below give ``None``."""
        index = self.read_int()
        if index >= len(master):
            raise SaveFormatError(f"index {index} out of range")
        return master[index] if index >= 0 else None