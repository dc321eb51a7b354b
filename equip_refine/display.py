"""Equipment names and slot rows with refinement levels."""
from dataclasses import dataclass
from typing import Optional

from .config import DEFAULT_SLOT_NAMES, EMPTY_SLOT_TEXT
from .core import CategoryRegistry
from .interfaces import Actors, ReferenceData
from .models import EquipmentKey
from .store import RefinementRegistry
from .utils import format_refined_name


def category_lines() -> list[str]:
    """One line per item category saying what a refinement level adds to."""
    lines = []
    for info in CategoryRegistry.get_all_info():
        if info.refinable:
            params = ", ".join(param.name for param in info.affects) or "nothing"
            lines.append(f"{info.name}: bonus adds to {params}")
        else:
            lines.append(f"{info.name}: not refinable")
    return lines


@dataclass(slots=True)
class SlotRow:
    """One line of an equipment window."""
    slot_index: int
    slot_name: str
    item_id: Optional[int]
    icon_index: int
    text: str
    level: int = 0


class EquipmentDisplay:
    """Formats equipped items for the host's windows."""

    def __init__(self, registry: RefinementRegistry, reference: ReferenceData, actors: Actors):
        self.registry = registry
        self.reference = reference
        self.actors = actors

    def display_name(self, actor_id: int, item_id: int) -> str:
        """Item name with the level it holds in this actor's loadout.

        The first slot holding ``item_id`` is used; an item the actor does
        not wear shows its plain name.
        """
        item = self.reference.definition_of(item_id)
        if item is None:
            return ""
        if self.actors.actor(actor_id) is None:
            return item.name
        loadout = list(self.actors.current_loadout(actor_id))
        if item_id not in loadout:
            return item.name
        slot_index = loadout.index(item_id)
        level = self.registry.get(EquipmentKey(actor_id, slot_index, item_id)).level
        return format_refined_name(item.name, level)

    def slot_rows(self, actor_id: int) -> list[SlotRow]:
        """One row per equipment slot, ``"-"`` for empty slots."""
        actor = self.actors.actor(actor_id)
        if actor is None:
            return []
        slot_names = actor.slot_names or DEFAULT_SLOT_NAMES
        rows = []
        for slot_index, item_id in enumerate(self.actors.current_loadout(actor_id)):
            slot_name = slot_names[slot_index] if slot_index < len(slot_names) else ""
            item = self.reference.definition_of(item_id) if item_id is not None else None
            if item is None:
                rows.append(SlotRow(slot_index, slot_name, None, 0, EMPTY_SLOT_TEXT))
                continue
            level = self.registry.get(EquipmentKey(actor_id, slot_index, item.id)).level
            rows.append(SlotRow(
                slot_index=slot_index,
                slot_name=slot_name,
                item_id=item.id,
                icon_index=item.icon_index,
                text=format_refined_name(item.name, level),
                level=level,
            ))
        return rows
