"""Items that lie on the board: armor, weapons and potions."""

from __future__ import annotations

from .enums import (
    ONE_HAND_WEAPON_POWER,
    TWO_HAND_WEAPON_POWER,
    ArmorKind,
    Hands,
    ItemKind,
    PotionKind,
    WeaponName,
)
from .geometry import Point2d


class Item:
    """Anything that can be picked up from the board."""

    def __init__(self, x: int, y: int, kind: ItemKind) -> None:
        self.point = Point2d(x, y)
        self.kind = kind

    def __str__(self) -> str:
        return f"(Item:)(Location:({self.point.x},{self.point.y}))"

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class Armor(Item):
    """Armor multiplies the damage its wearer takes by ``defence_amount``."""

    def __init__(self, x: int, y: int, defence_amount: float, armor_kind: ArmorKind) -> None:
        super().__init__(x, y, ItemKind.ARMOR)
        self.defence_amount = float(defence_amount)
        self.armor_kind = armor_kind

    def __str__(self) -> str:
        return f"(Armor:)(DefenceAmount:{self.defence_amount:f})" + super().__str__()


class BodyArmor(Armor):
    def __init__(
        self,
        x: int,
        y: int,
        defence_amount: float,
        armor_kind: ArmorKind = ArmorKind.BODY_ARMOR,
    ) -> None:
        super().__init__(x, y, defence_amount, armor_kind)

    def __str__(self) -> str:
        return "(BodyArmor:)" + super().__str__()


class HandArmor(Armor):
    def __init__(
        self,
        x: int,
        y: int,
        defence_amount: float,
        armor_kind: ArmorKind = ArmorKind.SHIELD_ARMOR,
    ) -> None:
        super().__init__(x, y, defence_amount, armor_kind)

    def __str__(self) -> str:
        return "(HandArmor:)" + super().__str__()


class Weapon(Item):
    """A weapon; ``power`` multiplies its wielder's base power."""

    def __init__(self, x: int, y: int, name: WeaponName, hands: Hands, power: float) -> None:
        super().__init__(x, y, ItemKind.WEAPON)
        self.name = name
        self.hands = hands
        self.power = float(power)

    def __str__(self) -> str:
        return f"(Weapon:)(PowerAmount:{self.power:f})" + super().__str__()


class OneHandWeapon(Weapon):
    """A weapon held in one hand; its power is boosted by the one-hand factor."""

    def __init__(self, x: int, y: int, name: WeaponName, power: float) -> None:
        super().__init__(x, y, name, Hands.ONE_HAND, power * ONE_HAND_WEAPON_POWER)

    def __str__(self) -> str:
        return f"(OneHandWeapon:)(WeaponPower:{ONE_HAND_WEAPON_POWER:f})" + super().__str__()


class TwoHandWeapon(Weapon):
    """A weapon held in both hands; its power is boosted by the two-hand factor."""

    def __init__(self, x: int, y: int, name: WeaponName, power: float) -> None:
        super().__init__(x, y, name, Hands.TWO_HAND, power * TWO_HAND_WEAPON_POWER)

    def __str__(self) -> str:
        return f"(TwoHand:)(WeaponPower:{TWO_HAND_WEAPON_POWER:f})" + super().__str__()


class Bow(TwoHandWeapon):
    def __init__(self, x: int, y: int, power: float, name: WeaponName = WeaponName.BOW) -> None:
        super().__init__(x, y, name, power)

    def __str__(self) -> str:
        return "(Bow:)" + super().__str__()


class CrossBow(OneHandWeapon):
    def __init__(
        self, x: int, y: int, power: float, name: WeaponName = WeaponName.CROSSBOW
    ) -> None:
        super().__init__(x, y, name, power)

    def __str__(self) -> str:
        return "(CrossBow:)" + super().__str__()


class Hammer(TwoHandWeapon):
    def __init__(self, x: int, y: int, power: float, name: WeaponName = WeaponName.HAMMER) -> None:
        super().__init__(x, y, name, power)

    def __str__(self) -> str:
        return "(Hammer:)" + super().__str__()


class Staff(TwoHandWeapon):
    def __init__(self, x: int, y: int, power: float, name: WeaponName = WeaponName.STAFF) -> None:
        super().__init__(x, y, name, power)

    def __str__(self) -> str:
        return "(Staff:)" + super().__str__()


class Sword(OneHandWeapon):
    def __init__(self, x: int, y: int, power: float, name: WeaponName = WeaponName.SWORD) -> None:
        super().__init__(x, y, name, power)

    def __str__(self) -> str:
        return "(Sword:)" + super().__str__()


class Wand(OneHandWeapon):
    def __init__(self, x: int, y: int, power: float, name: WeaponName = WeaponName.WAND) -> None:
        super().__init__(x, y, name, power)

    def __str__(self) -> str:
        return "(Wand:)" + super().__str__()


class Potion(Item):
    """A potion restoring ``amount`` of life (or mana)."""

    def __init__(self, x: int, y: int, potion_kind: PotionKind, amount: float) -> None:
        super().__init__(x, y, ItemKind.POTION)
        self.potion_kind = potion_kind
        self.amount = float(amount)

    def __str__(self) -> str:
        return f"(Potion:)(HealthAmount:{self.amount:f})" + super().__str__()