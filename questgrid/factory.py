"""Builders that turn lines of a scenario file into board objects."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .characters import Archer, Character, Elite, Enemy, Hero, Warrior, Wizard
from .enums import EMPTY_SYMBOL, Gender, PotionKind
from .items import (
    Armor,
    BodyArmor,
    Bow,
    CrossBow,
    HandArmor,
    Hammer,
    Item,
    Potion,
    Staff,
    Sword,
    Wand,
    Weapon,
)

_DIGITS = re.compile(r"\d+")
_NUMBER = re.compile(r"[\d.]*")
_LEADING_FLOAT = re.compile(r"\d+(?:\.\d*)?")

_WEAPONS: dict[str, type[Weapon]] = {
    "hammer": Hammer,
    "bow": Bow,
    "staff": Staff,
    "sword": Sword,
    "crossbow": CrossBow,
    "wand": Wand,
}

_ARMORS: dict[str, type[Armor]] = {
    "bodyArmor": BodyArmor,
    "shieldArmor": HandArmor,
}

_HEROES: dict[str, type[Hero]] = {
    "archer": Archer,
    "wizard": Wizard,
    "warrior": Warrior,
}

_ENEMIES: dict[str, type[Enemy]] = {
    "enemy": Enemy,
    "elite": Elite,
}


@dataclass
class _Scanner:
    """Reads successive unsigned numbers out of a line."""

    line: str
    pos: int = 0

    def _skip_to_digit(self) -> None:
        while self.pos < len(self.line) and not self.line[self.pos].isdigit():
            self.pos += 1

    def next_int(self) -> int:
        """Return the next run of digits as an integer."""
        self._skip_to_digit()
        match = _DIGITS.match(self.line, self.pos)
        if match is None:
            raise ValueError(f"expected a whole number in line {self.line!r}")
        self.pos = match.end()
        return int(match.group())

    def next_float(self) -> float:
        """Return the next number made of digits and dots; 0.0 if none is left."""
        self._skip_to_digit()
        match = _NUMBER.match(self.line, self.pos)
        text = match.group() if match else ""
        self.pos += len(text)
        leading = _LEADING_FLOAT.match(text)
        return float(leading.group()) if leading else 0.0


def build_world(line: str) -> list[list[str]]:
    """Build an empty board whose row and column counts are given by ``line``."""
    scanner = _Scanner(line)
    rows = scanner.next_int()
    cols = scanner.next_int()
    return [[EMPTY_SYMBOL] * cols for _ in range(rows)]


def build_potion(line: str, name: str) -> Potion:
    """Build a potion; ``mana`` gives a mana potion, anything else a life potion."""
    kind = PotionKind.MANA if name == "mana" else PotionKind.LIFE
    scanner = _Scanner(line)
    amount = scanner.next_float()
    x = scanner.next_int()
    y = scanner.next_int()
    return Potion(x, y, kind, amount)


def build_weapon(line: str, name: str) -> Item:
    """Build the weapon called ``name`` from its power and position."""
    scanner = _Scanner(line)
    power = scanner.next_float()
    x = scanner.next_int()
    y = scanner.next_int()
    try:
        cls = _WEAPONS[name]
    except KeyError:
        raise ValueError(f"unknown weapon {name!r}") from None
    return cls(x, y, power)


def build_armor(line: str, name: str) -> Item:
    """Build body armor or a shield from its defence amount and position."""
    scanner = _Scanner(line)
    defence = scanner.next_float()
    x = scanner.next_int()
    y = scanner.next_int()
    try:
        cls = _ARMORS[name]
    except KeyError:
        raise ValueError(f"unknown armor {name!r}") from None
    return cls(x, y, defence)


def build_enemy(line: str, name: str) -> Character:
    """Build an enemy or an elite from its power, start and end points."""
    scanner = _Scanner(line)
    power = scanner.next_float()
    x1, y1, x2, y2 = (scanner.next_int() for _ in range(4))
    try:
        cls = _ENEMIES[name]
    except KeyError:
        raise ValueError(f"unknown enemy {name!r}") from None
    return cls(power, x1, y1, x2, y2)


def build_actor(line: str, name: str) -> Character:
    """Build a hero from its power, start, destination and gender (0 is female)."""
    scanner = _Scanner(line)
    power = scanner.next_float()
    x1, y1, x2, y2 = (scanner.next_int() for _ in range(4))
    gender = Gender.FEMALE if scanner.next_int() == 0 else Gender.MALE
    try:
        cls = _HEROES[name]
    except KeyError:
        raise ValueError(f"unknown hero {name!r}") from None
    return cls(power, x1, y1, x2, y2, gender)