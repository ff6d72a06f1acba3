import io

from questgrid.characters import Archer, Elite, Enemy, Warrior, Wizard
from questgrid.console import (
    character_symbol,
    fill_world,
    item_symbol,
    print_characters,
    print_world,
    render_world,
    symbol_at,
)
from questgrid.enums import (
    ARCHER_SYMBOL,
    ARMOR_SYMBOL,
    ELITE_SYMBOL,
    EMPTY_SYMBOL,
    ENEMY_SYMBOL,
    POTION_SYMBOL,
    WARRIOR_SYMBOL,
    WEAPON_SYMBOL,
    WIZARD_SYMBOL,
    PotionKind,
)
from questgrid.items import BodyArmor, Potion, Sword


def test_item_symbols():
    assert item_symbol(Potion(0, 0, PotionKind.LIFE, 10)) == POTION_SYMBOL
    assert item_symbol(Sword(0, 0, 5)) == WEAPON_SYMBOL
    assert item_symbol(BodyArmor(0, 0, 0.5)) == ARMOR_SYMBOL
    assert POTION_SYMBOL == "P"


def test_character_symbols():
    assert character_symbol(Warrior(1, 0, 0, 1, 1)) == WARRIOR_SYMBOL
    assert character_symbol(Archer(1, 0, 0, 1, 1)) == ARCHER_SYMBOL
    assert character_symbol(Wizard(1, 0, 0, 1, 1)) == WIZARD_SYMBOL
    assert character_symbol(Enemy(1, 0, 0, 0, 0)) == ENEMY_SYMBOL
    assert character_symbol(Elite(1, 0, 0, 0, 0)) == ELITE_SYMBOL


def test_symbol_at_prefers_items():
    items = [Sword(1, 1, 5)]
    characters = [Enemy(10, 1, 1, 1, 1)]
    assert symbol_at(1, 1, items, characters) == WEAPON_SYMBOL


def test_symbol_at_character_and_empty():
    characters = [Wizard(3, 2, 0, 4, 4)]
    assert symbol_at(2, 0, [], characters) == WIZARD_SYMBOL
    assert symbol_at(0, 2, [], characters) == EMPTY_SYMBOL


def test_fill_world_marks_cells():
    world = [["?"] * 3 for _ in range(2)]
    items = [Potion(0, 2, PotionKind.MANA, 5)]
    characters = {Archer(1, 1, 0, 1, 2): None}
    fill_world(items, characters, world)
    assert world == [
        [EMPTY_SYMBOL, EMPTY_SYMBOL, POTION_SYMBOL],
        [ARCHER_SYMBOL, EMPTY_SYMBOL, EMPTY_SYMBOL],
    ]


def test_render_world_format():
    assert render_world([["a", "b"], ["c", "d"]]) == "a b \nc d \n\n"


def test_print_world_writes_render():
    world = [[".", "E"], ["R", "."]]
    out = io.StringIO()
    print_world(world, out)
    assert out.getvalue() == render_world(world)


def test_print_characters_lists_each():
    heroes = [Warrior(2, 0, 0, 1, 1), Enemy(3, 1, 1, 1, 1)]
    out = io.StringIO()
    print_characters(heroes, out)
    text = out.getvalue()
    lines = text.split("\n")
    assert lines[0] == str(heroes[0])
    assert lines[1] == str(heroes[1])
    assert text.endswith("\n\n\n")


def test_print_characters_empty():
    out = io.StringIO()
    print_characters([], out)
    assert out.getvalue() == "\n\n\n"