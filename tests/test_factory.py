import pytest

from questgrid.characters import Archer, Elite, Enemy, Warrior, Wizard
from questgrid.enums import (
    EMPTY_SYMBOL,
    ONE_HAND_WEAPON_POWER,
    TWO_HAND_WEAPON_POWER,
    ArmorKind,
    Gender,
    Hands,
    PotionKind,
    WeaponName,
)
from questgrid.factory import (
    build_actor,
    build_armor,
    build_enemy,
    build_potion,
    build_weapon,
    build_world,
)
from questgrid.items import BodyArmor, Bow, CrossBow, HandArmor, Hammer, Staff, Sword, Wand


def test_build_world_dimensions():
    world = build_world("matrix,3,4")
    assert len(world) == 3
    assert all(len(row) == 4 for row in world)
    assert all(cell == EMPTY_SYMBOL for row in world for cell in row)


def test_build_world_rows_independent():
    world = build_world("matrix,2,2")
    world[0][0] = "X"
    assert world[1][0] == EMPTY_SYMBOL


def test_build_world_missing_size_raises():
    with pytest.raises(ValueError):
        build_world("matrix,5")


@pytest.mark.parametrize(
    "name,kind", [("mana", PotionKind.MANA), ("health", PotionKind.LIFE)]
)
def test_build_potion(name, kind):
    potion = build_potion(f"{name},20.5,1,2", name)
    assert potion.potion_kind is kind
    assert potion.amount == 20.5
    assert (potion.point.x, potion.point.y) == (1, 2)


@pytest.mark.parametrize(
    "name,cls,weapon_name,hands",
    [
        ("hammer", Hammer, WeaponName.HAMMER, Hands.TWO_HAND),
        ("bow", Bow, WeaponName.BOW, Hands.TWO_HAND),
        ("staff", Staff, WeaponName.STAFF, Hands.TWO_HAND),
        ("sword", Sword, WeaponName.SWORD, Hands.ONE_HAND),
        ("crossbow", CrossBow, WeaponName.CROSSBOW, Hands.ONE_HAND),
        ("wand", Wand, WeaponName.WAND, Hands.ONE_HAND),
    ],
)
def test_build_weapon_kinds(name, cls, weapon_name, hands):
    weapon = build_weapon(f"{name},2,3,4", name)
    assert type(weapon) is cls
    assert weapon.name is weapon_name
    assert weapon.hands is hands
    assert (weapon.point.x, weapon.point.y) == (3, 4)


def test_build_weapon_power_boost():
    sword = build_weapon("sword,2,0,0", "sword")
    hammer = build_weapon("hammer,2,0,0", "hammer")
    assert sword.power == pytest.approx(2 * ONE_HAND_WEAPON_POWER)
    assert hammer.power == pytest.approx(2 * TWO_HAND_WEAPON_POWER)


def test_build_weapon_unknown_raises():
    with pytest.raises(ValueError):
        build_weapon("axe,2,0,0", "axe")


def test_build_armor():
    body = build_armor("bodyArmor,0.5,1,1", "bodyArmor")
    shield = build_armor("shieldArmor,0.9,2,3", "shieldArmor")
    assert isinstance(body, BodyArmor)
    assert body.armor_kind is ArmorKind.BODY_ARMOR
    assert body.defence_amount == 0.5
    assert isinstance(shield, HandArmor)
    assert shield.armor_kind is ArmorKind.SHIELD_ARMOR
    assert (shield.point.x, shield.point.y) == (2, 3)


def test_build_armor_unknown_raises():
    with pytest.raises(ValueError):
        build_armor("helmet,0.5,1,1", "helmet")


def test_build_enemy_and_elite():
    enemy = build_enemy("enemy,30,4,5,4,5", "enemy")
    elite = build_enemy("elite,60,1,2,1,2", "elite")
    assert type(enemy) is Enemy
    assert enemy.power_amount == 30
    assert (enemy.location_start.x, enemy.location_start.y) == (4, 5)
    assert type(elite) is Elite
    assert (elite.location_end.x, elite.location_end.y) == (1, 2)


def test_build_enemy_unknown_raises():
    with pytest.raises(ValueError):
        build_enemy("dragon,30,1,1,1,1", "dragon")


@pytest.mark.parametrize(
    "name,cls", [("archer", Archer), ("wizard", Wizard), ("warrior", Warrior)]
)
def test_build_actor_kinds(name, cls):
    hero = build_actor(f"{name},7.5,0,1,8,9,1", name)
    assert type(hero) is cls
    assert hero.power_amount == 7.5
    assert (hero.location_start.x, hero.location_start.y) == (0, 1)
    assert (hero.location_end.x, hero.location_end.y) == (8, 9)
    assert hero.gender is Gender.MALE


def test_build_actor_gender_zero_is_female():
    hero = build_actor("archer,5,0,0,3,3,0", "archer")
    assert hero.gender is Gender.FEMALE


def test_build_actor_missing_gender_raises():
    with pytest.raises(ValueError):
        build_actor("archer,5,0,0,3,3", "archer")