import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from roguelib.records import (
    EXIT_COUNT,
    Coord,
    Daemon,
    DelayedAction,
    ObjInfo,
    Room,
    Stats,
    read_coord,
    read_daemons,
    read_obj_info,
    read_room,
    read_rooms,
    read_stats,
    write_coord,
    write_daemons,
    write_obj_info,
    write_room,
    write_rooms,
    write_stats,
)
from roguelib.savestate import Marker, SaveFormatError, StateReader, StateWriter


def _roundtrip(write, value):
    stream = io.BytesIO()
    write(StateWriter(stream), value)
    stream.seek(0)
    return StateReader(stream)


def _room(seed):
    return Room(
        pos=Coord(seed, seed + 1),
        max=Coord(10, 4),
        gold=Coord(seed + 2, 3),
        goldval=seed * 7,
        flags=seed,
        nexits=2,
        exits=[Coord(i, seed) for i in range(EXIT_COUNT)],
    )


@given(st.integers(-(2**31), 2**31 - 1), st.integers(-(2**31), 2**31 - 1))
def test_coord_round_trip(x, y):
    reader = _roundtrip(write_coord, Coord(x, y))
    assert read_coord(reader) == Coord(x, y)


def test_coord_order_is_x_then_y():
    reader = _roundtrip(write_coord, Coord(3, 9))
    assert reader.read_int() == 3
    assert reader.read_int() == 9


def test_stats_round_trip():
    stats = Stats(16, 20, 2, 10, 12, "1x4", 12, damage_size=13)
    reader = _roundtrip(write_stats, stats)
    assert read_stats(reader, 13) == stats


def test_stats_wrong_damage_size():
    stats = Stats(damage="1x4", damage_size=13)
    reader = _roundtrip(write_stats, stats)
    with pytest.raises(SaveFormatError):
        read_stats(reader, 8)


def test_stats_bad_marker():
    stream = io.BytesIO()
    StateWriter(stream).write_marker(Marker.OBJECT)
    stream.seek(0)
    with pytest.raises(SaveFormatError):
        read_stats(StateReader(stream), 13)


def test_room_round_trip():
    room = _room(4)
    reader = _roundtrip(write_room, room)
    assert read_room(reader) == room


def test_room_needs_all_exits():
    with pytest.raises(ValueError):
        write_room(StateWriter(io.BytesIO()), Room(exits=[Coord()]))


def test_rooms_round_trip():
    rooms = [_room(1), _room(2), _room(3)]
    reader = _roundtrip(write_rooms, rooms)
    assert read_rooms(reader, 9) == rooms


def test_rooms_over_capacity():
    reader = _roundtrip(write_rooms, [_room(1), _room(2)])
    with pytest.raises(SaveFormatError):
        read_rooms(reader, 1)


def test_obj_info_round_trip_keeps_names():
    saved = [ObjInfo("a", 5, 10, "fizzy", False), ObjInfo("b", 9, 20, None, True)]
    reader = _roundtrip(write_obj_info, saved)
    table = [ObjInfo("confusion"), ObjInfo("hallucination"), ObjInfo("poison")]
    result = read_obj_info(reader, table)
    assert result[0] == ObjInfo("confusion", 5, 10, "fizzy", False)
    assert result[1] == ObjInfo("hallucination", 9, 20, None, True)
    assert result[2] == table[2]


def test_obj_info_too_many():
    reader = _roundtrip(write_obj_info, [ObjInfo(), ObjInfo()])
    with pytest.raises(SaveFormatError):
        read_obj_info(reader, [ObjInfo()])


def test_daemons_round_trip():
    actions = [
        DelayedAction(1, Daemon.DOCTOR, 0, -1),
        DelayedAction(2, Daemon.SIGHT, 3, 40),
        DelayedAction(0, None, 0, 0),
    ]
    reader = _roundtrip(write_daemons, actions)
    assert read_daemons(reader, 3) == actions


def test_daemon_function_number_on_disk():
    reader = _roundtrip(write_daemons, [DelayedAction(1, Daemon.DOCTOR, 5, 6)])
    reader.read_marker(Marker.DAEMONS)
    assert reader.read_int() == 1
    assert reader.read_int() == 1
    assert reader.read_int() == int(Daemon.DOCTOR)


def test_unknown_daemon_reads_as_none():
    reader = _roundtrip(write_daemons, [DelayedAction(1, Daemon.UNKNOWN, 5, 6)])
    (action,) = read_daemons(reader, 1)
    assert action.func is None
    assert (action.type, action.arg, action.time) == (1, 5, 6)


def test_daemons_over_capacity():
    reader = _roundtrip(write_daemons, [DelayedAction(), DelayedAction()])
    with pytest.raises(SaveFormatError):
        read_daemons(reader, 1)