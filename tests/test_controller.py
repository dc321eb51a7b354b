import pytest

from conftest import (
    DAGGER_A,
    MAIL_A,
    ORE_A,
    ORE_B,
    ORE_C,
    SHIELD_C,
    SWORD_A,
    SWORD_C,
)
from equip_refine.models import EquipmentKey, OutcomeKind


def test_refine_raises_level_and_consumes_one_material(session):
    key = EquipmentKey(1, 0, SWORD_A)
    outcome = session.controller.attempt_refine(1, 0, ORE_A)

    assert outcome.ok
    assert outcome.kind is OutcomeKind.REFINED
    assert outcome.level == 1
    assert outcome.key == key
    assert session.registry.get(key).level == 1
    assert session.inventory.quantity_of(ORE_A) == 2
    assert session.messages.messages == ["Mythril Blade was refined to +1!"]


def test_levels_climb_by_one_up_to_the_rank_cap(session):
    session.inventory.gain(ORE_A, 10)
    key = EquipmentKey(1, 0, SWORD_A)
    levels = []
    for _ in range(5):
        session.controller.attempt_refine(1, 0, ORE_A)
        levels.append(session.registry.level(key))

    assert levels == [1, 2, 3, 3, 3]
    assert levels == sorted(levels)


def test_max_level_refusal_keeps_material(session):
    key = EquipmentKey(1, 1, SHIELD_C)
    assert session.controller.attempt_refine(1, 1, ORE_C).ok
    assert session.inventory.quantity_of(ORE_C) == 1

    outcome = session.controller.attempt_refine(1, 1, ORE_C)

    assert outcome.kind is OutcomeKind.MAX_LEVEL_REACHED
    assert "max +1" in outcome.message
    assert session.registry.level(key) == 1
    assert session.inventory.quantity_of(ORE_C) == 1


def test_rank_mismatch_leaves_registry_unchanged(session):
    outcome = session.controller.attempt_refine(1, 0, ORE_B)

    assert outcome.kind is OutcomeKind.RANK_MISMATCH
    assert len(session.registry) == 0
    assert session.inventory.quantity_of(ORE_B) == 1


def test_unranked_equipment_is_a_rank_mismatch(session):
    outcome = session.controller.attempt_refine(2, 0, ORE_C)
    assert outcome.kind is OutcomeKind.RANK_MISMATCH
    assert len(session.registry) == 0


@pytest.mark.parametrize(
    "actor_id, slot, material, kind",
    [
        (99, 0, ORE_A, OutcomeKind.ACTOR_NOT_FOUND),
        (1, 2, ORE_A, OutcomeKind.SLOT_EMPTY),
        (1, 42, ORE_A, OutcomeKind.SLOT_EMPTY),
        (1, 0, 999, OutcomeKind.MATERIAL_NOT_FOUND),
        # equipment is not a material
        (1, 0, DAGGER_A, OutcomeKind.MATERIAL_NOT_FOUND),
    ],
)
def test_refusals_are_reported_not_raised(session, actor_id, slot, material, kind):
    outcome = session.controller.attempt_refine(actor_id, slot, material)

    assert not outcome.ok
    assert outcome.kind is kind
    assert outcome.level is None
    assert len(session.registry) == 0
    assert session.messages.messages == [outcome.message]


def test_exactly_one_message_per_attempt(session):
    session.controller.attempt_refine(1, 0, ORE_A)
    session.controller.attempt_refine(1, 0, ORE_C)
    session.controller.attempt_refine(99, 0, ORE_A)
    assert len(session.messages.messages) == 3


def test_swapped_equipment_starts_from_zero(session):
    session.controller.attempt_refine(1, 0, ORE_A)
    session.controller.attempt_refine(1, 0, ORE_A)
    assert session.registry.level(EquipmentKey(1, 0, SWORD_A)) == 2

    session.database.change_equip(1, 0, DAGGER_A)
    assert session.registry.level(EquipmentKey(1, 0, DAGGER_A)) == 0

    outcome = session.controller.attempt_refine(1, 0, ORE_A)
    assert outcome.level == 1

    # the old weapon keeps its level when equipped again
    session.database.change_equip(1, 0, SWORD_A)
    assert session.registry.level(EquipmentKey(1, 0, SWORD_A)) == 2


def test_armor_slots_refine_independently(session):
    session.controller.attempt_refine(1, 3, ORE_A)
    assert session.registry.level(EquipmentKey(1, 3, MAIL_A)) == 1
    assert session.registry.level(EquipmentKey(1, 0, SWORD_A)) == 0


def test_same_item_on_two_actors_has_separate_levels(session):
    session.database.change_equip(1, 0, SWORD_C)
    session.controller.attempt_refine(1, 0, ORE_C)
    assert session.registry.level(EquipmentKey(1, 0, SWORD_C)) == 1
    assert session.registry.level(EquipmentKey(3, 0, SWORD_C)) == 0
