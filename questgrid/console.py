"""Drawing the board and listing characters as text."""

from __future__ import annotations

import sys
from typing import Iterable, MutableSequence, Optional, Sequence, TextIO

from .characters import Character
from .enums import (
    ARCHER_SYMBOL,
    ARMOR_SYMBOL,
    ELITE_SYMBOL,
    EMPTY_SYMBOL,
    ENEMY_SYMBOL,
    ERROR_SYMBOL,
    POTION_SYMBOL,
    WARRIOR_SYMBOL,
    WEAPON_SYMBOL,
    WIZARD_SYMBOL,
    CharacterKind,
    ItemKind,
)
from .items import Item

_ITEM_SYMBOLS = {
    ItemKind.POTION: POTION_SYMBOL,
    ItemKind.WEAPON: WEAPON_SYMBOL,
    ItemKind.ARMOR: ARMOR_SYMBOL,
}

_CHARACTER_SYMBOLS = {
    CharacterKind.WARRIOR: WARRIOR_SYMBOL,
    CharacterKind.ARCHER: ARCHER_SYMBOL,
    CharacterKind.WIZARD: WIZARD_SYMBOL,
    CharacterKind.ENEMY: ENEMY_SYMBOL,
    CharacterKind.ELITE: ELITE_SYMBOL,
}


def item_symbol(item: Item) -> str:
    """The board symbol for ``item``."""
    return _ITEM_SYMBOLS.get(item.kind, ERROR_SYMBOL)


def character_symbol(character: Character) -> str:
    """The board symbol for ``character``."""
    return _CHARACTER_SYMBOLS.get(character.kind, ERROR_SYMBOL)


def symbol_at(
    i: int, j: int, items: Iterable[Item], characters: Iterable[Character]
) -> str:
    """The symbol for cell ``(i, j)``: items first, then characters, else empty."""
    for item in items:
        if item.point.x == i and item.point.y == j:
            return item_symbol(item)
    for character in characters:
        start = character.location_start
        if start.x == i and start.y == j:
            return character_symbol(character)
    return EMPTY_SYMBOL


def fill_world(
    items: Sequence[Item],
    characters: Iterable[Character],
    world: Sequence[MutableSequence[str]],
) -> None:
    """Mark every cell of ``world`` with what stands on it."""
    characters = list(characters)
    for i, row in enumerate(world):
        for j in range(len(row)):
            row[j] = symbol_at(i, j, items, characters)


def render_world(world: Iterable[Iterable[str]]) -> str:
    """The board as text: each cell followed by a space, a blank line at the end."""
    lines = ("".join(f"{cell} " for cell in row) + "\n" for row in world)
    return "".join(lines) + "\n"


def print_world(world: Iterable[Iterable[str]], out: Optional[TextIO] = None) -> None:
    """Write the board to ``out`` (standard output by default)."""
    (out or sys.stdout).write(render_world(world))


def print_characters(
    characters: Iterable[Character], out: Optional[TextIO] = None
) -> None:
    """Write one line per character to ``out``, followed by blank lines."""
    stream = out or sys.stdout
    for character in characters:
        stream.write(f"{character}\n")
    stream.write("\n\n\n")