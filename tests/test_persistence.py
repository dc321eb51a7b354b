import json

import pytest

from equip_refine.config import SAVE_FIELD
from equip_refine.models import EquipmentKey
from equip_refine.persistence import (
    PersistenceAdapter,
    decode_key,
    encode_key,
    read_save,
    write_save,
)
from equip_refine.store import RefinementRegistry


def _registry(levels):
    registry = RefinementRegistry()
    for key, level in levels.items():
        registry.set_level(EquipmentKey(*key), level)
    return registry


def test_snapshot_encodes_composite_keys():
    registry = _registry({(1, 0, 2): 2, (1, 3, 12): 1})
    assert PersistenceAdapter(registry).snapshot() == {"1-0-2": 2, "1-3-12": 1}


@pytest.mark.parametrize(
    "levels",
    [
        {},
        {(1, 0, 2): 1},
        {(1, 0, 2): 3, (1, 3, 12): 1, (4, 1, 10): 0, (12, 10, 120): 4},
        {(-1, 0, 5): 2, (3, -2, -7): 1},
    ],
)
def test_restore_of_snapshot_reproduces_registry(levels):
    original = _registry(levels)
    payload = json.loads(json.dumps(PersistenceAdapter(original).snapshot()))

    restored = RefinementRegistry()
    restored.set_level(EquipmentKey(7, 7, 7), 1)
    PersistenceAdapter(restored).restore(payload)

    assert restored == original


@pytest.mark.parametrize("data", [None, [], "garbage"])
def test_restore_without_data_gives_empty_registry(data):
    registry = _registry({(1, 0, 2): 1})
    PersistenceAdapter(registry).restore(data)
    assert len(registry) == 0


def test_restore_skips_unreadable_entries(caplog):
    registry = RefinementRegistry()
    PersistenceAdapter(registry).restore({
        "1-0-2": 2,
        "1-0": 1,
        "a-b-c": 1,
        "1-1-3": -1,
        "1-2-4": "3",
        "1-3-5": True,
    })
    assert registry.export_all() == _registry({(1, 0, 2): 2}).export_all()
    assert "Skipping unreadable refinement entry" in caplog.text


def test_restore_accepts_level_objects():
    registry = RefinementRegistry()
    PersistenceAdapter(registry).restore({"1-0-2": {"level": 2}, "1-1-3": {}})
    assert registry.level(EquipmentKey(1, 0, 2)) == 2
    assert registry.level(EquipmentKey(1, 1, 3)) == 0


def test_key_encoding():
    assert encode_key(EquipmentKey(3, 1, 40)) == "3-1-40"
    assert decode_key("3-1-40") == EquipmentKey(3, 1, 40)
    assert decode_key("3-1") is None
    assert decode_key("3-x-40") is None
    assert decode_key("-1--2-40") == EquipmentKey(-1, -2, 40)
    assert decode_key("1_0-1-40") is None
    assert decode_key(" 3-1-40") is None
    assert decode_key("3-1-40-") is None


def test_save_contents_field():
    registry = _registry({(1, 0, 2): 1})
    adapter = PersistenceAdapter(registry)
    contents = adapter.make_save_contents({"gold": 100})
    assert contents == {"gold": 100, SAVE_FIELD: {"1-0-2": 1}}

    other = _registry({(5, 5, 5): 5})
    PersistenceAdapter(other).extract_save_contents(contents)
    assert other == registry


def test_save_made_before_refinement_loads_empty():
    registry = _registry({(1, 0, 2): 1})
    PersistenceAdapter(registry).extract_save_contents({"gold": 100})
    assert len(registry) == 0


def test_write_and_read_save(tmp_path):
    path = tmp_path / "saves" / "file1.json"
    write_save(path, {SAVE_FIELD: {"1-0-2": 1}})
    assert read_save(path) == {SAVE_FIELD: {"1-0-2": 1}}
    assert [p.name for p in path.parent.iterdir()] == ["file1.json"]


def test_write_save_keeps_old_file_when_replace_fails(tmp_path, monkeypatch):
    path = tmp_path / "file1.json"
    write_save(path, {"version": 1})
    original = path.read_text(encoding="utf8")

    def _boom(src, dst):
        raise RuntimeError("simulated failure")

    monkeypatch.setattr("equip_refine.persistence.os.replace", _boom)
    with pytest.raises(RuntimeError):
        write_save(path, {"version": 2})

    assert path.read_text(encoding="utf8") == original
    assert [p.name for p in tmp_path.iterdir()] == ["file1.json"]


def test_read_save_rejects_non_objects(tmp_path):
    path = tmp_path / "file1.json"
    path.write_text("[1, 2]", encoding="utf8")
    with pytest.raises(ValueError):
        read_save(path)
