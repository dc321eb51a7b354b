"""In-memory game database, party inventory and message log.

These are the host-side collaborators used by the CLI, the TUI and the
tests. A database is usually loaded from a JSON file shaped like::

    {
      "items": [
        {"id": 1, "name": "Bronze Sword", "category": "weapon",
         "iconIndex": 97, "note": "<rank:C>"},
        {"id": 20, "name": "Whetstone C", "category": "material",
         "note": "<targetRank:C>"}
      ],
      "actors": [
        {"id": 1, "name": "Reid", "equips": [1, null, null, null, null]}
      ],
      "party": {"items": {"20": 3}}
    }
"""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

from .models import ActorDefinition, ItemCategory, ItemDefinition
from .utils import parse_note_tags

logger = logging.getLogger(__name__)


class GameDatabase:
    """Item definitions and actors.

    Implements both the ReferenceData and Actors collaborators.
    """

    def __init__(
        self,
        items: Iterable[ItemDefinition] = (),
        actors: Iterable[ActorDefinition] = (),
        starting_items: Optional[Mapping[int, int]] = None,
    ):
        self._items: dict[int, ItemDefinition] = {}
        self._actors: dict[int, ActorDefinition] = {}
        self.starting_items: dict[int, int] = dict(starting_items or {})
        for item in items:
            if item.id in self._items:
                raise ValueError(f"Duplicate item id {item.id}")
            self._items[item.id] = item
        for actor in actors:
            if actor.id in self._actors:
                raise ValueError(f"Duplicate actor id {actor.id}")
            self._actors[actor.id] = actor

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameDatabase":
        items = [_parse_item(raw) for raw in data.get("items", [])]
        actors = [_parse_actor(raw) for raw in data.get("actors", [])]
        party = data.get("party") or {}
        starting_items = {
            int(item_id): int(amount)
            for item_id, amount in (party.get("items") or {}).items()
        }
        return cls(items, actors, starting_items)

    @classmethod
    def from_file(cls, path: Path) -> "GameDatabase":
        with Path(path).open("r", encoding="utf8") as handle:
            data = json.load(handle)
        if not isinstance(data, Mapping):
            raise ValueError(f"{path}: game data must be a JSON object")
        database = cls.from_dict(data)
        logger.debug("Loaded %d item(s) and %d actor(s) from %s",
                     len(database._items), len(database._actors), path)
        return database

    # Reference data

    def definition_of(self, item_id: int) -> Optional[ItemDefinition]:
        return self._items.get(item_id)

    def all_material_definitions(self) -> list[ItemDefinition]:
        return [item for item in self._items.values() if item.is_material]

    def items(self) -> list[ItemDefinition]:
        return list(self._items.values())

    # Actors

    def actor(self, actor_id: int) -> Optional[ActorDefinition]:
        return self._actors.get(actor_id)

    def actors(self) -> list[ActorDefinition]:
        return list(self._actors.values())

    def equipped_item_at(self, actor_id: int, slot_index: int) -> Optional[int]:
        actor = self._actors.get(actor_id)
        if actor is None or not 0 <= slot_index < len(actor.equips):
            return None
        return actor.equips[slot_index]

    def current_loadout(self, actor_id: int) -> Sequence[Optional[int]]:
        actor = self._actors.get(actor_id)
        return list(actor.equips) if actor else []

    def change_equip(self, actor_id: int, slot_index: int, item_id: Optional[int]) -> None:
        """Put ``item_id`` (or nothing) in a slot.

        Raises:
            KeyError: If the actor or item does not exist
            IndexError: If the slot is out of range
        """
        actor = self._actors[actor_id]
        if item_id is not None:
            item = self._items[item_id]
            if not item.is_equipment:
                raise ValueError(f"{item.name} cannot be equipped")
        if not 0 <= slot_index < len(actor.equips):
            raise IndexError(f"Actor {actor_id} has no slot {slot_index}")
        actor.equips[slot_index] = item_id


class PartyInventory:
    """Party item counts."""

    def __init__(self, quantities: Optional[Mapping[int, int]] = None):
        self._quantities: dict[int, int] = {}
        for item_id, amount in (quantities or {}).items():
            self.gain(int(item_id), int(amount))

    def quantity_of(self, item_id: int) -> int:
        return self._quantities.get(item_id, 0)

    def has_item(self, item_id: int) -> bool:
        return self.quantity_of(item_id) > 0

    def gain(self, item_id: int, amount: int = 1) -> None:
        total = max(0, self.quantity_of(item_id) + amount)
        if total:
            self._quantities[item_id] = total
        else:
            self._quantities.pop(item_id, None)

    def consume_one(self, item_id: int) -> None:
        self.gain(item_id, -1)

    def as_dict(self) -> dict[str, int]:
        return {str(item_id): amount for item_id, amount in sorted(self._quantities.items())}


class MessageLog:
    """Collects announcements in emission order."""

    def __init__(self):
        self.messages: list[str] = []

    def announce(self, text: str) -> None:
        self.messages.append(text)

    @property
    def last(self) -> Optional[str]:
        return self.messages[-1] if self.messages else None

    def clear(self) -> None:
        self.messages.clear()


def _parse_item(raw: Mapping[str, Any]) -> ItemDefinition:
    try:
        category = ItemCategory(raw["category"])
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Item {raw.get('id')!r} has an invalid category") from exc
    note = raw.get("note", "") or ""
    tags = parse_note_tags(note)
    return ItemDefinition(
        id=int(raw["id"]),
        name=str(raw.get("name", "")),
        category=category,
        icon_index=int(raw.get("iconIndex", 0)),
        rank=raw.get("rank") or tags.get("rank") or None,
        target_rank=raw.get("targetRank") or tags.get("targetRank") or None,
        note=note,
    )


def _parse_actor(raw: Mapping[str, Any]) -> ActorDefinition:
    equips = [None if item_id in (None, 0) else int(item_id) for item_id in raw.get("equips", [])]
    return ActorDefinition(
        id=int(raw["id"]),
        name=str(raw.get("name", "")),
        equips=equips,
        slot_names=[str(name) for name in raw.get("slots", [])],
    )
