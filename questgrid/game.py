"""The game loop: reading a scenario, running it and saving the final board."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from .characters import Character, Hero
from .console import fill_world, print_characters, print_world
from .enums import EMPTY_SYMBOL, ENEMY_SYMBOL, ITEM_SYMBOL, OUTPUT_SUFFIX, LifeState
from .factory import (
    build_actor,
    build_armor,
    build_enemy,
    build_potion,
    build_weapon,
    build_world,
)
from .geometry import Point2d, SearchConclusion
from .items import Item

_POTIONS = frozenset({"mana", "health"})
_HEROES = frozenset({"warrior", "wizard", "archer"})
_ENEMIES = frozenset({"enemy", "elite"})
_WEAPONS = frozenset({"bow", "sword", "crossbow", "staff", "wand", "hammer"})
_ARMORS = frozenset({"bodyArmor", "shieldArmor"})


def line_name(line: str) -> str:
    """The name at the start of a scenario line, up to the first comma."""
    return line.partition(",")[0]


def output_name(path: str) -> str:
    """The result file name for a scenario path.

    The base name is taken up to the first underscore of the path, starting
    over after every slash, and the output suffix is appended.
    """
    name = ""
    for char in os.fspath(path):
        if char == "_":
            break
        name += char
        if char == "/":
            name = ""
    return name + OUTPUT_SUFFIX


class Game:
    """One scenario: the board, the items on it and the characters on it."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        out: Optional[TextIO] = None,
        output_dir: Optional[str | os.PathLike[str]] = None,
    ) -> None:
        self.path = os.fspath(path)
        self.out = out
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.world: list[list[str]] = []
        self.items: list[Item] = []
        self.characters: dict[Character, Point2d] = {}

    @property
    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def _say(self, text: str) -> None:
        self._stream.write(text + "\n")

    def _show(self) -> None:
        print_world(self.world, self._stream)

    @property
    def _size(self) -> tuple[int, int]:
        rows = len(self.world)
        return rows, (len(self.world[0]) if rows else 0)

    def read(self) -> None:
        """Load the scenario file into the board, the items and the characters."""
        world: Optional[list[list[str]]] = None
        items: list[Item] = []
        characters: dict[Character, Point2d] = {}
        with open(self.path, encoding="utf-8") as handle:
            for raw in handle:
                line = raw.rstrip("\r\n")
                name = line_name(line)
                if name == "matrix":
                    world = build_world(line)
                elif name in _POTIONS:
                    items.append(build_potion(line, name))
                elif name in _HEROES:
                    hero = build_actor(line, name)
                    characters[hero] = Point2d(hero.location_end.x, hero.location_end.y)
                elif name in _ENEMIES:
                    enemy = build_enemy(line, name)
                    characters[enemy] = Point2d(enemy.location_end.x, enemy.location_end.y)
                elif name in _WEAPONS:
                    items.append(build_weapon(line, name))
                elif name in _ARMORS:
                    items.append(build_armor(line, name))
        if world is None:
            raise ValueError(f"scenario {self.path!r} has no matrix line")
        self.world = world
        self.items = items
        self.characters = characters

    def play(self) -> None:
        """Run the game until every hero has died or finished, then save the result."""
        self._say("First configuration")
        self.read()
        fill_world(self.items, self.characters, self.world)
        self._show()

        stop = False
        while not stop:
            stop = True
            for character in list(self.characters):
                if not isinstance(character, Hero):
                    continue
                if character.state in (LifeState.DEAD, LifeState.FINISH):
                    continue
                stop = False
                for conclusion in character.scan_environment(self.world):
                    if conclusion.symbol == ITEM_SYMBOL:
                        self._collect_item(character, conclusion)
                    elif conclusion.symbol == ENEMY_SYMBOL:
                        self._fight(character, conclusion)
                self._move_hero(character)

        print_characters(self.characters, self._stream)
        self.write_last_configuration()

    def _collect_item(self, hero: Hero, place: SearchConclusion) -> None:
        x, y = place.point.x, place.point.y
        for item in self.items:
            if item.point.x == x and item.point.y == y and hero.use(item):
                here = hero.location_start
                self._say(f"{self.world[here.x][here.y]} take item {self.world[x][y]}")
                self.world[x][y] = EMPTY_SYMBOL
                self._show()

    def _fight(self, hero: Hero, place: SearchConclusion) -> None:
        x, y = place.point.x, place.point.y
        for enemy in list(self.characters):
            end = enemy.location_end
            if end.x != x or end.y != y:
                continue
            if enemy.state is LifeState.ALIVE:
                hero.attack(enemy)
                here = hero.location_start
                self._say(f"{self.world[here.x][here.y]} attack {self.world[x][y]}")
            if hero.state is LifeState.DEAD:
                here = hero.location_start
                self.world[here.x][here.y] = EMPTY_SYMBOL
                self._show()
            if enemy.state is LifeState.DEAD:
                self.world[end.x][end.y] = EMPTY_SYMBOL
                self._show()

    def _move_hero(self, hero: Hero) -> None:
        rows, cols = self._size
        x, y = hero.location_start.x, hero.location_start.y
        if not (0 <= x < rows and 0 <= y < cols):
            raise ValueError(f"hero at ({x},{y}) stands outside the board")
        symbol = self.world[x][y]
        self.world[x][y] = EMPTY_SYMBOL
        destination = self.characters[hero]
        hero.move(destination.x, destination.y, rows, cols)
        self.world[hero.location_start.x][hero.location_start.y] = symbol
        self._say(f"{symbol} MOVE!!!")
        self._show()

    def write_last_configuration(self) -> Path:
        """Write the final board and every character to the result file."""
        name = output_name(self.path)
        target = self.output_dir / name if self.output_dir is not None else Path(name)
        with open(target, "w", encoding="utf-8") as handle:
            for row in self.world:
                handle.write("".join(f"{cell} " for cell in row) + "\n")
            for character in self.characters:
                handle.write(f"{character}\n")
            handle.write("\n")
        return target