from equip_refine.models import EquipmentKey, RefinementRecord
from equip_refine.store import RefinementRegistry


def test_absent_key_reads_as_level_zero():
    registry = RefinementRegistry()
    record = registry.get(EquipmentKey(1, 0, 5))
    assert record == RefinementRecord(level=0)
    assert len(registry) == 0


def test_set_level_overwrites_without_validation():
    registry = RefinementRegistry()
    key = EquipmentKey(1, 0, 5)
    registry.set_level(key, 2)
    assert registry.level(key) == 2
    registry.set_level(key, 99)
    assert registry.level(key) == 99
    assert key in registry


def test_get_returns_a_copy():
    registry = RefinementRegistry()
    key = EquipmentKey(1, 0, 5)
    registry.set_level(key, 1)
    registry.get(key).level = 42
    assert registry.level(key) == 1


def test_keys_are_scoped_by_item():
    registry = RefinementRegistry()
    registry.set_level(EquipmentKey(1, 0, 5), 2)
    assert registry.level(EquipmentKey(1, 0, 6)) == 0
    assert registry.level(EquipmentKey(2, 0, 5)) == 0
    assert registry.level(EquipmentKey(1, 1, 5)) == 0


def test_export_is_ordered_and_import_replaces():
    registry = RefinementRegistry()
    registry.set_level(EquipmentKey(2, 0, 1), 1)
    registry.set_level(EquipmentKey(1, 3, 12), 2)
    registry.set_level(EquipmentKey(1, 0, 2), 3)

    exported = registry.export_all()
    assert [key for key, _ in exported] == [
        EquipmentKey(1, 0, 2),
        EquipmentKey(1, 3, 12),
        EquipmentKey(2, 0, 1),
    ]

    registry.import_all([((9, 9, 9), RefinementRecord(level=1))])
    assert len(registry) == 1
    assert registry.level(EquipmentKey(9, 9, 9)) == 1
    assert registry.level(EquipmentKey(1, 0, 2)) == 0


def test_registries_compare_by_contents():
    first = RefinementRegistry()
    second = RefinementRegistry()
    assert first == second
    first.set_level(EquipmentKey(1, 0, 2), 1)
    assert first != second
    second.import_all(first.export_all())
    assert first == second
