"""Saved-game records built from the primitive reader and writer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Sequence

from roguelib.savestate import Marker, SaveFormatError, StateReader, StateWriter

__all__ = [
    "EXIT_COUNT",
    "Coord",
    "Stats",
    "Room",
    "ObjInfo",
    "Daemon",
    "DelayedAction",
    "write_coord",
    "read_coord",
    "write_stats",
    "read_stats",
    "write_room",
    "read_room",
    "write_rooms",
    "read_rooms",
    "write_obj_info",
    "read_obj_info",
    "write_daemons",
    "read_daemons",
]

EXIT_COUNT = 12


@dataclass(frozen=True)
class Coord:
    x: int = 0
    y: int = 0


@dataclass
class Stats:
    """Strength, experience, level, armour, hit points and damage."""

    strength: int = 0
    exp: int = 0
    level: int = 0
    armor: int = 0
    hpt: int = 0
    damage: str = ""
    maxhp: int = 0
    damage_size: int | None = None

    def damage_field_size(self) -> int:
        """Bytes the damage string takes on disk."""
        if self.damage_size is not None:
            return self.damage_size
        return len(self.damage.encode("latin-1")) + 1


@dataclass
class Room:
    pos: Coord = field(default_factory=Coord)
    max: Coord = field(default_factory=Coord)
    gold: Coord = field(default_factory=Coord)
    goldval: int = 0
    flags: int = 0
    nexits: int = 0
    exits: list[Coord] = field(default_factory=lambda: [Coord()] * EXIT_COUNT)


@dataclass
class ObjInfo:
    """What is known about one kind of magic item; the name is not saved."""

    name: str = ""
    prob: int = 0
    worth: int = 0
    guess: str | None = None
    know: bool = False


class Daemon(IntEnum):
    """Functions a delayed action may call, by their saved number."""

    UNKNOWN = -1
    ROLLWAND = 1
    DOCTOR = 2
    STOMACH = 3
    RUNNERS = 4
    SWANDER = 5
    NOHASTE = 6
    UNCONFUSE = 7
    UNSEE = 8
    SIGHT = 9


@dataclass
class DelayedAction:
    type: int = 0
    func: Daemon | None = None
    arg: int = 0
    time: int = 0


def write_coord(writer: StateWriter, coord: Coord) -> None:
    writer.write_int(coord.x)
    writer.write_int(coord.y)


def read_coord(reader: StateReader) -> Coord:
    x = reader.read_int()
    y = reader.read_int()
    return Coord(x, y)


def write_stats(writer: StateWriter, stats: Stats) -> None:
    writer.write_marker(Marker.STATS)
    writer.write_uint(stats.strength)
    writer.write_int(stats.exp)
    writer.write_int(stats.level)
    writer.write_int(stats.armor)
    writer.write_int(stats.hpt)
    writer.write_chars(stats.damage, stats.damage_field_size())
    writer.write_int(stats.maxhp)


def read_stats(reader: StateReader, damage_size: int) -> Stats:
    reader.read_marker(Marker.STATS)
    strength = reader.read_uint()
    exp = reader.read_int()
    level = reader.read_int()
    armor = reader.read_int()
    hpt = reader.read_int()
    damage = reader.read_chars(damage_size).split(b"\0", 1)[0].decode("latin-1")
    maxhp = reader.read_int()
    return Stats(strength, exp, level, armor, hpt, damage, maxhp, damage_size)


def write_room(writer: StateWriter, room: Room) -> None:
    if len(room.exits) != EXIT_COUNT:
        raise ValueError(f"a room has exactly {EXIT_COUNT} exit slots")
    write_coord(writer, room.pos)
    write_coord(writer, room.max)
    write_coord(writer, room.gold)
    writer.write_int(room.goldval)
    writer.write_short(room.flags)
    writer.write_int(room.nexits)
    for exit_ in room.exits:
        write_coord(writer, exit_)


def read_room(reader: StateReader) -> Room:
    pos = read_coord(reader)
    max_ = read_coord(reader)
    gold = read_coord(reader)
    goldval = reader.read_int()
    flags = reader.read_short()
    nexits = reader.read_int()
    exits = [read_coord(reader) for _ in range(EXIT_COUNT)]
    return Room(pos, max_, gold, goldval, flags, nexits, exits)


def write_rooms(writer: StateWriter, rooms: Sequence[Room]) -> None:
    writer.write_int(len(rooms))
    for room in rooms:
        write_room(writer, room)


def read_rooms(reader: StateReader, capacity: int) -> list[Room]:
    """Read a room table holding at most ``capacity`` rooms."""
    value = reader.read_int()
    if value > capacity:
        raise SaveFormatError(f"{value} rooms exceed room table of {capacity}")
    return [read_room(reader) for _ in range(max(value, 0))]


def write_obj_info(writer: StateWriter, infos: Sequence[ObjInfo]) -> None:
    writer.write_marker(Marker.MAGICITEMS)
    writer.write_int(len(infos))
    for info in infos:
        writer.write_int(info.prob)
        writer.write_int(info.worth)
        writer.write_string(info.guess)
        writer.write_boolean(info.know)


def read_obj_info(reader: StateReader, infos: Sequence[ObjInfo]) -> list[ObjInfo]:
    """Return ``infos`` with the saved state of the leading entries applied."""
    reader.read_marker(Marker.MAGICITEMS)
    value = reader.read_int()
    if value > len(infos):
        raise SaveFormatError(f"{value} item kinds exceed table of {len(infos)}")
    result = list(infos)
    for n in range(max(value, 0)):
        prob = reader.read_int()
        worth = reader.read_int()
        guess = reader.read_new_string()
        know = reader.read_boolean()
        result[n] = replace(result[n], prob=prob, worth=worth, guess=guess, know=know)
    return result


def write_daemons(writer: StateWriter, actions: Sequence[DelayedAction]) -> None:
    writer.write_marker(Marker.DAEMONS)
    writer.write_int(len(actions))
    for action in actions:
        writer.write_int(action.type)
        writer.write_int(0 if action.func is None else int(action.func))
        writer.write_int(action.arg)
        writer.write_int(action.time)


def read_daemons(reader: StateReader, count: int) -> list[DelayedAction]:
    """Read ``count`` delayed actions; unknown functions come back as ``None``."""
    reader.read_marker(Marker.DAEMONS)
    value = reader.read_int()
    if value > count:
        raise SaveFormatError(f"{value} delayed actions exceed table of {count}")
    actions = []
    for _ in range(count):
        type_ = reader.read_int()
        func = reader.read_int()
        arg = reader.read_int()
        time = reader.read_int()
        daemon = Daemon(func) if func >= 1 and func <= Daemon.SIGHT else None
        actions.append(DelayedAction(type_, daemon, arg, time))
    return actions