# roguelib

Building blocks of the classic dungeon-crawling game, usable from Python.

## Modules

- `roguelib.cipher` — the keystream cipher used for saved games and the
  score file. `transform(data)` encrypts or decrypts (applying it twice gives
  the input back); `write_encrypted(stream, data)` and
  `read_encrypted(stream, size)` do the same on binary streams. The module
  also holds `RELEASE`, `VERSION`, `ENCSTR` and `STATLIST`.
- `roguelib.savestate` — `StateWriter` and `StateReader`, the save-file
  primitives: little-endian ints, uints, shorts and ushorts, chars, booleans,
  counted arrays of them, NUL-terminated strings, string indices into a
  master list, and section markers (`Marker`). Every primitive is encrypted
  on its own. Truncated or mismatched data raises `SaveFormatError`.
- `roguelib.scores` — `ScoreEntry`, `read_scores(stream, count, name_size)`
  and `write_scores(stream, entries, name_size)` for the encrypted
  scoreboard. Each entry is a fixed-size name followed by a 100-byte text
  line (`LINE_SIZE`).
- `roguelib.records` — structured saved-game records: `Coord`, `Stats`,
  `Room`, `ObjInfo`, `DelayedAction` with its `Daemon` function numbers, and
  matching `write_*` / `read_*` functions for coordinates, stats, rooms,
  room tables, object-info tables and the delayed-action table.
- `roguelib.items` — item rules: `num` (plus numbers for armour and
  weapons), `pick_one` (choice from cumulative probabilities), `set_order`
  (shuffle), `nothing` and `nameit` (discovery and item names),
  `init_weapon` (a new `Weapon` of a `WeaponKind`, with its missile group)
  and `fallpos` (where a dropped object lands). Random choices take an
  `rnd(n)` callable returning an integer in `range(n)`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import io
from roguelib.savestate import StateWriter, StateReader
from roguelib.scores import ScoreEntry, read_scores, write_scores
from roguelib.items import num, nameit

buf = io.BytesIO()
writer = StateWriter(buf)
writer.write_int(42)
writer.write_string("hello")

buf.seek(0)
reader = StateReader(buf)
assert reader.read_int() == 42
assert reader.read_new_string() == "hello"

board = io.BytesIO()
write_scores(board, [ScoreEntry(name="rodney", score=100, level=3)], 80)
print(read_scores(board, 1, 80))

print(num(2, -1, True))   # +2,-1
print(nameit(1, "potion", "amber", "healing", False, None, ""))  # An amber potion
```

## What this package does not do

It is a library only: there is no command to run, no playable game, no
screen handling and no map. It has no password hashing. It saves and
restores the records listed above, but has no records for items carried in
lists, monsters or map squares, and so cannot read or write a complete
saved game on its own.