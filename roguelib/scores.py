"""Reading and writing the encrypted top-scores file."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import BinaryIO, Sequence

from roguelib.cipher import read_encrypted, write_encrypted

__all__ = ["LINE_SIZE", "ScoreEntry", "read_scores", "write_scores"]

LINE_SIZE = 100

_U32 = 0xFFFFFFFF
_U16 = 0xFFFF

_DEC = re.compile(rb"[+-]?\d+")
_HEX = re.compile(rb"[+-]?(?:0[xX])?[0-9a-fA-F]+")


@dataclass
class ScoreEntry:
    """One line of the score table."""

    uid: int = 0
    score: int = 0
    flags: int = 0
    monster: int = 0
    name: str = ""
    level: int = 0
    time: int = 0


def _signed32(value: int) -> int:
    value &= _U32
    return value - (1 << 32) if value & 0x80000000 else value


# field name, pattern, base, converter
_FIELDS = (
    ("uid", _DEC, 10, lambda v: v & _U32),
    ("score", _DEC, 10, _signed32),
    ("flags", _DEC, 10, lambda v: v & _U32),
    ("monster", _DEC, 10, lambda v: v & _U16),
    ("level", _DEC, 10, _signed32),
    ("time", _HEX, 16, lambda v: v & _U32),
)


def _parse_line(raw: bytes) -> dict[str, int]:
    """Scan the numeric fields of a score line, stopping at the first mismatch."""
    text = raw.split(b"\0", 1)[0]
    values: dict[str, int] = {}
    pos = 0
    for field, pattern, base, convert in _FIELDS:
        while pos < len(text) and text[pos : pos + 1].isspace():
            pos += 1
        match = pattern.match(text, pos)
        if match is None:
            break
        values[field] = convert(int(match.group(), base))
        pos = match.end()
    return values


def _format_line(entry: ScoreEntry) -> bytes:
    line = (
        f" {entry.uid & _U32} {_signed32(entry.score)} {entry.flags & _U32}"
        f" {entry.monster & _U16} {_signed32(entry.level)} {entry.time & _U32:x} \n"
    ).encode("ascii")
    if len(line) > LINE_SIZE:
        raise ValueError("score line does not fit its record")
    return line.ljust(LINE_SIZE, b"\0")


def read_scores(
    stream: BinaryIO | None, count: int, name_size: int
) -> list[ScoreEntry]:
    """Read ``count`` entries from the start of the score file.

    Records missing from a short file come back as blank entries; with no
    file at all the result is empty.
    """
    if stream is None:
        return []
    if count < 0 or name_size <= 0:
        raise ValueError("count and name size must be positive")
    stream.seek(0)
    entries = []
    for _ in range(count):
        name_raw = read_encrypted(stream, name_size)
        line_raw = read_encrypted(stream, LINE_SIZE)
        name = name_raw.split(b"\0", 1)[0].decode("latin-1")
        entries.append(ScoreEntry(name=name, **_parse_line(line_raw)))
    stream.seek(0)
    return entries


def write_scores(
    stream: BinaryIO | None, entries: Sequence[ScoreEntry], name_size: int
) -> None:
    """Write ``entries`` over the start of the score file."""
    if stream is None:
        return
    if name_size <= 0:
        raise ValueError("name size must be positive")
    stream.seek(0)
    for entry in entries:
        name = entry.name.encode("latin-1")
        if len(name) >= name_size:
            raise ValueError(f"name longer than {name_size - 1} bytes")
        write_encrypted(stream, name.ljust(name_size, b"\0"))
        write_encrypted(stream, _format_line(entry))
    stream.seek(0)