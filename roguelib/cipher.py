"""The game's stream cipher for saved games and score files."""

from __future__ import annotations

from itertools import cycle
from typing import BinaryIO, Iterator

__all__ = [
    "ENCSTR",
    "STATLIST",
    "RELEASE",
    "VERSION",
    "transform",
    "write_encrypted",
    "read_encrypted",
]

RELEASE = "5.4.4"
VERSION = "rogue (rogueforge) 09/05/07"

ENCSTR = (
    b"\300k||`\251Y.'\305\321\201+\277~r\"]\240_\223=1\341)\222\212\241t;"
    b"\t$\270\314/<#\201\254"
)
STATLIST = (
    b"\355kl{+\204\255\313idJ\361\214=4:\311\271\341wK<\312\321\213,,7"
    b"\271/Rk%\b\312\f\246"
)


def _keystream() -> Iterator[int]:
    """Yield the key bytes that every encrypted record starts from."""
    feedback = 0
    for e1, e2 in zip(cycle(ENCSTR), cycle(STATLIST)):
        yield e1 ^ e2 ^ feedback
        feedback = (feedback + e1 * e2) & 0xFF


def transform(data: bytes) -> bytes:
    """Encrypt or decrypt ``data``; applying it twice gives the input back."""
    return bytes(byte ^ key for byte, key in zip(bytes(data), _keystream()))


def write_encrypted(stream: BinaryIO, data: bytes) -> int:
    """Write ``data`` encrypted to ``stream`` and return the bytes written."""
    written = stream.write(transform(data))
    return len(data) if written is None else written


def read_encrypted(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` bytes from ``stream`` and return them decrypted."""
    if size < 0:
        raise ValueError("size must not be negative")
    return transform(stream.read(size))