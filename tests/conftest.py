import pytest

from equip_refine.game_data import GameDatabase, MessageLog, PartyInventory
from equip_refine.models import ActorDefinition, ItemCategory, ItemDefinition
from equip_refine.session import RefinementSession

SWORD_C = 1
SWORD_A = 2
DAGGER_A = 3
STAFF_UNRANKED = 4
SHIELD_C = 10
MAIL_A = 12
ORE_C = 20
ORE_B = 21
ORE_A = 22
ORE_A_PURE = 23


def _items():
    return [
        ItemDefinition(SWORD_C, "Bronze Sword", ItemCategory.WEAPON, 97, rank="C"),
        ItemDefinition(SWORD_A, "Mythril Blade", ItemCategory.WEAPON, 98, rank="A"),
        ItemDefinition(DAGGER_A, "Mythril Dagger", ItemCategory.WEAPON, 99, rank="A"),
        ItemDefinition(STAFF_UNRANKED, "Wooden Staff", ItemCategory.WEAPON, 101),
        ItemDefinition(SHIELD_C, "Leather Shield", ItemCategory.ARMOR, 128, rank="C"),
        ItemDefinition(MAIL_A, "Knight Mail", ItemCategory.ARMOR, 135, rank="A"),
        ItemDefinition(ORE_C, "Rough Whetstone", ItemCategory.MATERIAL, 176, target_rank="C"),
        ItemDefinition(ORE_B, "Fine Whetstone", ItemCategory.MATERIAL, 177, target_rank="B"),
        ItemDefinition(ORE_A, "Mythril Ore", ItemCategory.MATERIAL, 178, target_rank="A"),
        ItemDefinition(ORE_A_PURE, "Pure Mythril Ore", ItemCategory.MATERIAL, 178, target_rank="A"),
    ]


def _actors():
    return [
        ActorDefinition(1, "Reid", [SWORD_A, SHIELD_C, None, MAIL_A, None]),
        ActorDefinition(2, "Priscilla", [STAFF_UNRANKED, None, None, None, None]),
        ActorDefinition(3, "Gale", [SWORD_C, None, None, None, None]),
    ]


@pytest.fixture
def database() -> GameDatabase:
    return GameDatabase(_items(), _actors())


@pytest.fixture
def inventory() -> PartyInventory:
    return PartyInventory({ORE_C: 2, ORE_B: 1, ORE_A: 3})


@pytest.fixture
def messages() -> MessageLog:
    return MessageLog()


@pytest.fixture
def session(database, inventory, messages) -> RefinementSession:
    return RefinementSession(database, inventory=inventory, messages=messages)
