"""Item naming, random item choices and weapon set-up."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag, auto
from typing import Callable, Sequence

from roguelib.records import Coord

__all__ = [
    "ItemType",
    "WeaponKind",
    "WeaponFlag",
    "Weapon",
    "num",
    "pick_one",
    "set_order",
    "nothing",
    "nameit",
    "init_weapon",
    "fallpos",
]

Rnd = Callable[[int], int]
"""A random source: ``rnd(n)`` returns an integer in ``range(n)``."""


class ItemType(Enum):
    """Kinds of object the hero can find."""

    POTION = auto()
    SCROLL = auto()
    FOOD = auto()
    WEAPON = auto()
    ARMOR = auto()
    RING = auto()
    STICK = auto()
    AMULET = auto()
    GOLD = auto()
    R_OR_S = auto()


class WeaponKind(IntEnum):
    """Weapons, in the order of the weapon tables."""

    MACE = 0
    SWORD = 1
    BOW = 2
    ARROW = 3
    DAGGER = 4
    TWO_HANDED_SWORD = 5
    DART = 6
    SHURIKEN = 7
    SPEAR = 8


class WeaponFlag(IntFlag):
    """Object flags that matter when setting up a weapon."""

    NONE = 0
    CURSED = auto()
    KNOWN = auto()
    MISSILE = auto()
    MANY = auto()


@dataclass
class Weapon:
    """A freshly made weapon."""

    kind: WeaponKind
    damage: str
    hurl_damage: str
    launch: WeaponKind | None
    flags: WeaponFlag
    count: int
    group: int
    hplus: int = 0
    dplus: int = 0


@dataclass(frozen=True)
class _InitialWeapon:
    damage: str
    hurl_damage: str
    launch: WeaponKind | None
    flags: WeaponFlag


_M = WeaponFlag.MISSILE
_MANY = WeaponFlag.MANY

_INITIAL = {
    WeaponKind.MACE: _InitialWeapon("2x4", "1x3", None, WeaponFlag.NONE),
    WeaponKind.SWORD: _InitialWeapon("3x4", "1x2", None, WeaponFlag.NONE),
    WeaponKind.BOW: _InitialWeapon("1x1", "1x1", None, WeaponFlag.NONE),
    WeaponKind.ARROW: _InitialWeapon("1x1", "2x3", WeaponKind.BOW, _MANY | _M),
    WeaponKind.DAGGER: _InitialWeapon("1x6", "1x4", None, _M),
    WeaponKind.TWO_HANDED_SWORD: _InitialWeapon("4x4", "1x2", None, WeaponFlag.NONE),
    WeaponKind.DART: _InitialWeapon("1x1", "1x3", None, _MANY | _M),
    WeaponKind.SHURIKEN: _InitialWeapon("1x2", "2x4", None, _MANY | _M),
    WeaponKind.SPEAR: _InitialWeapon("2x3", "1x6", None, _M),
}

_DISCOVERY_NOUNS = {
    ItemType.POTION: "potion",
    ItemType.SCROLL: "scroll",
    ItemType.RING: "ring",
    ItemType.STICK: "stick",
}


def _vowelstr(word: str) -> str:
    """The letter that turns "A" into "An" before ``word``, if any."""
    return "n" if word[:1].lower() in ("a", "e", "i", "o", "u") else ""


def num(n1: int, n2: int, is_weapon: bool) -> str:
    """Format the plus numbers of armour, or of a weapon's hit and damage."""
    text = f"{n1}" if n1 < 0 else f"+{n1}"
    if is_weapon:
        text += f",{n2}" if n2 < 0 else f",+{n2}"
    return text


def pick_one(probabilities: Sequence[int], roll: int) -> int:
    """Index of the first cumulative probability above ``roll``, else 0."""
    return next((i for i, prob in enumerate(probabilities) if roll < prob), 0)


def set_order(count: int, rnd: Rnd) -> list[int]:
    """Return ``range(count)`` shuffled with ``rnd``."""
    order = list(range(count))
    for i in range(count, 0, -1):
        r = rnd(i)
        order[i - 1], order[r] = order[r], order[i - 1]
    return order


def nothing(item_type: ItemType | None, terse: bool) -> str:
    """The message for an empty discovery list; ``None`` means all types."""
    text = "Nothing" if terse else "Haven't discovered anything"
    if item_type is None:
        return text
    try:
        noun = _DISCOVERY_NOUNS[item_type]
    except KeyError:
        raise ValueError(f"no discoveries are kept for {item_type}") from None
    return f"{text} about any {noun}s"


def nameit(
    count: int,
    kind: str,
    which: str,
    name: str,
    know: bool,
    guess: str | None,
    suffix: str,
) -> str:
    """Name a potion, ring or stick.

    ``kind`` is the noun ("potion"), ``which`` its look (a colour, stone or
    material), ``name`` the real name and ``suffix`` extra text such as the
    charges, shown only when the item is known or guessed.
    """
    if know or guess is not None:
        head = f"A {kind} " if count == 1 else f"{count} {kind}s "
        if know:
            return f"{head}of {name}{suffix}({which})"
        return f"{head}called {guess}{suffix}({which})"
    if count == 1:
        return f"A{_vowelstr(which)} {which} {kind}"
    return f"{count} {which} {kind}s"


def init_weapon(kind: WeaponKind, rnd: Rnd, group: int) -> tuple[Weapon, int]:
    """Make a new weapon of ``kind``.

    ``group`` is the next free missile group; the new value is returned
    alongside the weapon.
    """
    kind = WeaponKind(kind)
    base = _INITIAL[kind]
    if kind is WeaponKind.DAGGER:
        count, weapon_group, group = rnd(4) + 2, group, group + 1
    elif base.flags & WeaponFlag.MANY:
        count, weapon_group, group = rnd(8) + 8, group, group + 1
    else:
        count, weapon_group = 1, 0
    weapon = Weapon(
        kind=kind,
        damage=base.damage,
        hurl_damage=base.hurl_damage,
        launch=base.launch,
        flags=base.flags,
        count=count,
        group=weapon_group,
    )
    return weapon, group


def fallpos(
    pos: Coord, hero: Coord, is_open: Callable[[int, int], bool], rnd: Rnd
) -> Coord | None:
    """Pick a random open square around ``pos``, never the hero's.

    ``is_open(y, x)`` tells whether an object may land there. Returns
    ``None`` when there is nowhere to fall.
    """
    chosen: Coord | None = None
    cnt = 0
    for y in range(pos.y - 1, pos.y + 2):
        for x in range(pos.x - 1, pos.x + 2):
            if y == hero.y and x == hero.x:
                continue
            if is_open(y, x):
                cnt += 1
                if rnd(cnt) == 0:
                    chosen = Coord(x, y)
    return chosen