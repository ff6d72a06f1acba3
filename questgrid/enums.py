"""Enumerations and fixed game constants."""

from enum import Enum


class CharacterKind(Enum):
    """Every kind of character that can stand on the board."""

    ARCHER = "archer"
    WIZARD = "wizard"
    WARRIOR = "warrior"
    ENEMY = "enemy"
    ELITE = "elite"


class PotionKind(Enum):
    """What a potion restores."""

    LIFE = "life"
    MANA = "mana"


class WeaponName(Enum):
    """The concrete weapon types."""

    BOW = "bow"
    CROSSBOW = "crossbow"
    STAFF = "staff"
    WAND = "wand"
    HAMMER = "hammer"
    SWORD = "sword"


class Hands(Enum):
    """How many hands a weapon occupies."""

    ONE_HAND = 1
    TWO_HAND = 2


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


class LifeState(Enum):
    """Where a character stands in the game."""

    ALIVE = "alive"
    DEAD = "dead"
    FINISH = "finish"


class ItemKind(Enum):
    """The broad category of an item lying on the board."""

    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"


class ArmorKind(Enum):
    BODY_ARMOR = "body"
    SHIELD_ARMOR = "shield"


MAX_LIFE = 100
START_LIFE = 100
START_DEFENCE = 1

ITEM_SYMBOL = "I"
POTION_SYMBOL = "P"
WEAPON_SYMBOL = "W"
ARMOR_SYMBOL = "S"
ENEMY_SYMBOL = "E"
ELITE_SYMBOL = "L"
WARRIOR_SYMBOL = "A"
ARCHER_SYMBOL = "R"
WIZARD_SYMBOL = "Z"
ERROR_SYMBOL = "E"
EMPTY_SYMBOL = "."

OUTPUT_SUFFIX = "_out.csv"

ARCHER_RADIUS = 5
WARRIOR_RADIUS = 3
WIZARD_RADIUS = 3

TWO_HAND_WEAPON_POWER = 1.6
ONE_HAND_WEAPON_POWER = 1.2

SWITCH_WEAPON_SHIELD = 0.85