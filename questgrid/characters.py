"""Heroes and enemies that walk the board, fight and pick up items."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .enums import (
    ARCHER_RADIUS,
    ARMOR_SYMBOL,
    ELITE_SYMBOL,
    ENEMY_SYMBOL,
    ITEM_SYMBOL,
    MAX_LIFE,
    POTION_SYMBOL,
    START_DEFENCE,
    START_LIFE,
    SWITCH_WEAPON_SHIELD,
    WARRIOR_RADIUS,
    WEAPON_SYMBOL,
    WIZARD_RADIUS,
    ArmorKind,
    CharacterKind,
    Gender,
    Hands,
    LifeState,
    PotionKind,
    WeaponName,
)
from .geometry import Point2d, SearchConclusion
from .items import Armor, Item, Potion, Weapon

_ENEMY_MARKS = frozenset({ENEMY_SYMBOL, ELITE_SYMBOL})
_ITEM_MARKS = frozenset({POTION_SYMBOL, ARMOR_SYMBOL, WEAPON_SYMBOL})


class Character(ABC):
    """A living figure on the board with a start and a destination."""

    def __init__(
        self,
        power_amount: float,
        kind: CharacterKind,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
    ) -> None:
        self.power_amount = float(power_amount)
        self.kind = kind
        self.life_amount = float(START_LIFE)
        self.total_power = float(power_amount)
        self.total_defence = float(START_DEFENCE)
        self.state = LifeState.ALIVE
        self.location_start = Point2d(x1, y1)
        self.location_end = Point2d(x2, y2)

    def damage(self, amount: float) -> None:
        """Lose life by ``amount`` scaled by this character's defence."""
        self.life_amount -= amount * self.total_defence
        if self.life_amount <= 0:
            self.state = LifeState.DEAD

    @abstractmethod
    def attack(self, other: Character) -> None:
        """Strike ``other``."""

    def __str__(self) -> str:
        return (
            f"(Health:{self.life_amount:f})(Power:{self.power_amount:f})"
            f"(TotalPower:{self.total_power:f})(TotalDefence:{self.total_defence:f})"
            f"(location:({self.location_start.x},{self.location_start.y}))"
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class Enemy(Character):
    """A stationary foe that hits back with its whole power."""

    def __init__(
        self,
        power_amount: float,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        kind: CharacterKind = CharacterKind.ENEMY,
    ) -> None:
        super().__init__(power_amount, kind, x1, y1, x2, y2)

    def attack(self, other: Character) -> None:
        other.damage(self.total_power)

    def __str__(self) -> str:
        return "(Enemy:)" + Character.__str__(self)


class Elite(Enemy):
    def __init__(
        self,
        power_amount: float,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        kind: CharacterKind = CharacterKind.ELITE,
    ) -> None:
        super().__init__(power_amount, x1, y1, x2, y2, kind)

    def __str__(self) -> str:
        return "(Elite:)" + Character.__str__(self)


class Hero(Character):
    """A hero walks towards its destination, collecting items and fighting."""

    def __init__(
        self,
        power_amount: float,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        kind: CharacterKind,
        gender: Gender,
        radius: float,
    ) -> None:
        super().__init__(power_amount, kind, x1, y1, x2, y2)
        self.gender = gender
        self.radius = radius
        self.hand_armor: Optional[Armor] = None
        self.body_armor: Optional[Armor] = None
        self.weapon: Optional[Weapon] = None

    def attack(self, other: Character) -> None:
        """Exchange blows with ``other`` until one of the two has no life left."""
        while other.life_amount > 0 and self.life_amount > 0:
            other.damage(self.total_power)
            other.attack(self)

    def move(self, x: int, y: int, world_size_x: int, world_size_y: int) -> None:
        """Take one step towards ``(x, y)``, staying inside the world."""
        i, j = self.location_start.x, self.location_start.y
        if x > i and y > j:
            i, j = i + 1, j + 1
        elif x < i and y < j:
            i, j = i - 1, j - 1
        elif x < i and y > j:
            i, j = i - 1, j + 1
        elif x > i and y < j:
            i, j = i + 1, j - 1
        elif x == i and y > j:
            j += 1
        elif x == i and y < j:
            j -= 1
        elif x < i and y == j:
            i -= 1
        else:
            i += 1

        finish = False
        if i < 0:
            i, finish = 0, True
        if j < 0:
            j, finish = 0, True
        if i >= world_size_x:
            i, finish = world_size_x - 1, True
        if j >= world_size_y:
            j, finish = world_size_y - 1, True

        self.location_start.x = i
        self.location_start.y = j
        if finish or (i == self.location_end.x and j == self.location_end.y):
            self.state = LifeState.FINISH

    def use(self, item: Item) -> bool:
        """Try to take ``item``; return whether it was picked up."""
        if isinstance(item, Weapon):
            return self._use_weapon(item)
        if isinstance(item, Armor):
            return self._use_armor(item)
        if isinstance(item, Potion):
            return self._use_potion(item)
        return False

    def scan_environment(self, world: Sequence[Sequence[str]]) -> list[SearchConclusion]:
        """List the enemies and items within this hero's radius on ``world``."""
        rows = len(world)
        cols = len(world[0]) if rows else 0
        reach = int(self.radius)
        here = self.location_start
        found: list[SearchConclusion] = []
        for i in range(here.x - reach, here.x + reach + 1):
            for j in range(here.y - reach, here.y + reach + 1):
                if here.distance(i, j) > self.radius:
                    continue
                if not (0 <= i < rows and 0 <= j < cols):
                    continue
                mark = world[i][j]
                if mark in _ENEMY_MARKS:
                    found.append(SearchConclusion(Point2d(i, j), ENEMY_SYMBOL))
                elif mark in _ITEM_MARKS:
                    found.append(SearchConclusion(Point2d(i, j), ITEM_SYMBOL))
        return found

    def __str__(self) -> str:
        return "(Hero:)" + super().__str__()

    def _equip_weapon(self, weapon: Weapon) -> None:
        self.weapon = weapon
        self.total_power = self.power_amount * weapon.power

    def _drop_shield(self) -> None:
        assert self.hand_armor is not None
        self.total_defence /= self.hand_armor.defence_amount
        self.hand_armor = None

    def _use_potion(self, potion: Potion) -> bool:
        if self.life_amount == MAX_LIFE:
            return False
        self.life_amount = min(self.life_amount + potion.amount, float(MAX_LIFE))
        return True

    def _use_armor(self, armor: Armor) -> bool:
        if armor.armor_kind is ArmorKind.BODY_ARMOR:
            return self._lift_body_armor(armor)
        if armor.armor_kind is ArmorKind.SHIELD_ARMOR:
            return self._lift_shield(armor)
        return False

    def _use_weapon(self, weapon: Weapon) -> bool:
        if weapon.hands is Hands.ONE_HAND:
            return self._lift_one_hand_weapon(weapon)
        if weapon.hands is Hands.TWO_HAND:
            return self._lift_two_hand_weapon(weapon)
        return False

    def _lift_two_hand_weapon(self, weapon: Weapon) -> bool:
        if self.hand_armor is None:
            self._equip_weapon(weapon)
            return True
        if self.weapon is None or self.hand_armor.defence_amount >= SWITCH_WEAPON_SHIELD:
            self._drop_shield()
            self._equip_weapon(weapon)
            return True
        return False

    def _lift_one_hand_weapon(self, weapon: Weapon) -> bool:
        if self.weapon is None:
            self._equip_weapon(weapon)
            return True
        if self.weapon.hands is Hands.ONE_HAND and self.weapon.power < weapon.power:
            self._equip_weapon(weapon)
            return True
        return False

    def _lift_shield(self, armor: Armor) -> bool:
        if self.hand_armor is None:
            if self.weapon is None or self.weapon.hands is Hands.ONE_HAND:
                self.hand_armor = armor
                self.total_defence *= armor.defence_amount
                return True
            return False
        if self.hand_armor.defence_amount > armor.defence_amount:
            self.total_defence = (
                self.total_defence / self.hand_armor.defence_amount
            ) * armor.defence_amount
            self.hand_armor = armor
            return True
        return False

    def _lift_body_armor(self, armor: Armor) -> bool:
        if self.body_armor is None:
            self.body_armor = armor
            self.total_defence *= armor.defence_amount
            return True
        if self.body_armor.defence_amount > armor.defence_amount:
            self.total_defence = (
                self.total_defence / self.body_armor.defence_amount
            ) * armor.defence_amount
            self.body_armor = armor
            return True
        return False


class Archer(Hero):
    """Sees far; fights with bows and crossbows, drinks only life potions."""

    def __init__(
        self,
        power_amount: float,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        gender: Gender = Gender.MALE,
        kind: CharacterKind = CharacterKind.ARCHER,
    ) -> None:
        super().__init__(power_amount, x1, y1, x2, y2, kind, gender, ARCHER_RADIUS)

    def use(self, item: Item) -> bool:
        if isinstance(item, Armor):
            return super().use(item)
        if isinstance(item, Weapon):
            return item.name in (WeaponName.BOW, WeaponName.CROSSBOW) and super().use(item)
        if isinstance(item, Potion):
            return item.potion_kind is PotionKind.LIFE and super().use(item)
        return False

    def __str__(self) -> str:
        return "(Archer:)" + super().__str__()


class Warrior(Hero):
    """Fights with swords and hammers, drinks only life potions."""

    def __init__(
        self,
        power_amount: float,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        gender: Gender = Gender.MALE,
        kind: CharacterKind = CharacterKind.WARRIOR,
    ) -> None:
        super().__init__(power_amount, x1, y1, x2, y2, kind, gender, WARRIOR_RADIUS)

    def use(self, item: Item) -> bool:
        if isinstance(item, Armor):
            return super().use(item)
        if isinstance(item, Weapon):
            return item.name in (WeaponName.SWORD, WeaponName.HAMMER) and super().use(item)
        if isinstance(item, Potion):
            return item.potion_kind is PotionKind.LIFE and super().use(item)
        return False

    def __str__(self) -> str:
        return "(Warrior:)" + super().__str__()


class Wizard(Hero):
    """Fights with staffs and wands, drinks every potion."""

    def __init__(
        self,
        power_amount: float,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        gender: Gender = Gender.MALE,
        kind: CharacterKind = CharacterKind.WIZARD,
    ) -> None:
        super().__init__(power_amount, x1, y1, x2, y2, kind, gender, WIZARD_RADIUS)

    def use(self, item: Item) -> bool:
        if isinstance(item, Armor):
            return super().use(item)
        if isinstance(item, Weapon):
            return item.name in (WeaponName.STAFF, WeaponName.WAND) and super().use(item)
        if isinstance(item, Potion):
            return super().use(item)
        return False

    def __str__(self) -> str:
        return "(Wizard:)" + super().__str__()