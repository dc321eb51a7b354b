"""Refinement controller: validates and applies refinement attempts."""
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import (
    ActorNotFound,
    MaterialNotFound,
    MaxLevelReached,
    NoMaterialAvailable,
    RankMismatch,
    RefinementError,
    SlotEmpty,
)
from .interfaces import Actors, Inventory, Messenger, ReferenceData
from .models import EquipmentKey, ItemDefinition, OutcomeKind
from .policy import RankPolicy
from .store import RefinementRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Outcome:
    """Result of one refinement attempt."""
    kind: OutcomeKind
    message: str
    key: Optional[EquipmentKey] = None
    level: Optional[int] = None
    material_id: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.REFINED


class RefinementController:
    """Spends materials to raise the refinement level of equipped items.

    Every check runs before anything is written, so a refused attempt leaves
    the registry and the inventory untouched. Each attempt announces exactly
    one message and returns an Outcome; refusals are never raised to the
    caller.
    """

    def __init__(
        self,
        registry: RefinementRegistry,
        policy: RankPolicy,
        reference: ReferenceData,
        actors: Actors,
        inventory: Inventory,
        messenger: Messenger,
    ):
        self.registry = registry
        self.policy = policy
        self.reference = reference
        self.actors = actors
        self.inventory = inventory
        self.messenger = messenger

    def attempt_refine(self, actor_id: int, slot_index: int, material_id: int) -> Outcome:
        """Refine the item in ``slot_index`` using one ``material_id``."""
        try:
            outcome = self._refine(actor_id, slot_index, material_id)
        except RefinementError as exc:
            outcome = Outcome(kind=exc.kind, message=exc.message, material_id=material_id)
            logger.info(
                "Refinement refused for actor=%s slot=%s material=%s: %s",
                actor_id, slot_index, material_id, exc.kind.value,
            )
        self.messenger.announce(outcome.message)
        return outcome

    def auto_refine(self, actor_id: int, slot_index: int) -> Outcome:
        """Refine using the first held material that matches the item's rank.

        Candidates are checked in ascending item id order.
        """
        try:
            material_id = self._find_material(actor_id, slot_index)
        except RefinementError as exc:
            logger.info(
                "Auto refinement refused for actor=%s slot=%s: %s",
                actor_id, slot_index, exc.kind.value,
            )
            outcome = Outcome(kind=exc.kind, message=exc.message)
            self.messenger.announce(outcome.message)
            return outcome
        return self.attempt_refine(actor_id, slot_index, material_id)

    def _refine(self, actor_id: int, slot_index: int, material_id: int) -> Outcome:
        equip = self._equipped(actor_id, slot_index)

        material = self.reference.definition_of(material_id)
        if material is None or not material.is_material:
            raise MaterialNotFound(f"Item {material_id} is not a refinement material.")

        rank = equip.rank
        if rank is None:
            raise RankMismatch(f"{equip.name} has no rank and cannot be refined.")
        if material.target_rank != rank:
            raise RankMismatch(
                f"{material.name} refines rank {material.target_rank or '?'} "
                f"equipment, but {equip.name} is rank {rank}."
            )

        key = EquipmentKey(actor_id, slot_index, equip.id)
        level = self.registry.get(key).level
        max_level = self.policy.max_level(rank)
        if level >= max_level:
            raise MaxLevelReached(f"{equip.name} cannot be refined further (max +{max_level}).")

        new_level = level + 1
        self.registry.set_level(key, new_level)
        self.inventory.consume_one(material.id)
        logger.debug("Refined %s to +%d with material %s", key, new_level, material.id)
        return Outcome(
            kind=OutcomeKind.REFINED,
            message=f"{equip.name} was refined to +{new_level}!",
            key=key,
            level=new_level,
            material_id=material.id,
        )

    def _find_material(self, actor_id: int, slot_index: int) -> int:
        equip = self._equipped(actor_id, slot_index)
        rank = equip.rank
        if rank is None:
            raise NoMaterialAvailable(f"{equip.name} has no rank; no material can refine it.")

        candidates = sorted(self.reference.all_material_definitions(), key=lambda item: item.id)
        for material in candidates:
            if material.target_rank == rank and self.inventory.quantity_of(material.id) > 0:
                return material.id
        raise NoMaterialAvailable(f"You have no rank {rank} refinement material.")

    def _equipped(self, actor_id: int, slot_index: int) -> ItemDefinition:
        if self.actors.actor(actor_id) is None:
            raise ActorNotFound(f"Actor {actor_id} does not exist.")
        item_id = self.actors.equipped_item_at(actor_id, slot_index)
        equip = self.reference.definition_of(item_id) if item_id is not None else None
        if equip is None:
            raise SlotEmpty(f"Nothing is equipped in slot {slot_index}.")
        return equip
