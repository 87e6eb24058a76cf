"""Save-file cipher and primitives, score file, records and item rules for the classic dungeon game."""

__version__ = "5.4.4"