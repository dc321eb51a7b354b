from conftest import MAIL_A, ORE_A, SHIELD_C, SWORD_A
from equip_refine.config import DEFAULT_SLOT_NAMES, EMPTY_SLOT_TEXT


def test_slot_rows_show_levels_and_empty_slots(session):
    session.controller.attempt_refine(1, 0, ORE_A)
    rows = session.display.slot_rows(1)

    assert [row.slot_name for row in rows] == DEFAULT_SLOT_NAMES
    assert [row.text for row in rows] == [
        "Mythril Blade +1",
        "Leather Shield",
        EMPTY_SLOT_TEXT,
        "Knight Mail",
        EMPTY_SLOT_TEXT,
    ]
    assert rows[0].item_id == SWORD_A
    assert rows[0].icon_index == 98
    assert rows[0].level == 1
    assert rows[2].item_id is None


def test_actor_slot_names_override_defaults(session):
    session.database.actor(1).slot_names = ["Main", "Off"]
    rows = session.display.slot_rows(1)
    assert [row.slot_name for row in rows] == ["Main", "Off", "", "", ""]


def test_display_name(session):
    session.controller.attempt_refine(1, 3, ORE_A)
    assert session.display.display_name(1, MAIL_A) == "Knight Mail +1"
    assert session.display.display_name(1, SHIELD_C) == "Leather Shield"
    # not worn by this actor
    assert session.display.display_name(3, MAIL_A) == "Knight Mail"
    assert session.display.display_name(99, MAIL_A) == "Knight Mail"
    assert session.display.display_name(1, 999) == ""


def test_slot_rows_for_missing_actor(session):
    assert session.display.slot_rows(99) == []
