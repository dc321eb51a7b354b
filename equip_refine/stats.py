"""Stat projection: the bonus an actor gets from refined equipment."""
from .core.registry import CategoryRegistry
from .interfaces import Actors, ReferenceData
from .models import EquipmentKey, ParamKind
from .policy import RankPolicy
from .store import RefinementRegistry


class StatProjector:
    """Sums refinement bonuses over an actor's current loadout.

    Called by the host's stat pipeline. Missing actors, empty slots, unknown
    items and unranked items all contribute 0.
    """

    def __init__(
        self,
        registry: RefinementRegistry,
        policy: RankPolicy,
        reference: ReferenceData,
        actors: Actors,
    ):
        self.registry = registry
        self.policy = policy
        self.reference = reference
        self.actors = actors

    def bonus_for(self, actor_id: int, param: ParamKind) -> int:
        if self.actors.actor(actor_id) is None:
            return 0
        loadout = self.actors.current_loadout(actor_id)
        return sum(
            self.slot_bonus(actor_id, slot_index, param)
            for slot_index in range(len(loadout))
        )

    def slot_bonus(self, actor_id: int, slot_index: int, param: ParamKind) -> int:
        """Bonus from a single slot toward ``param``."""
        item_id = self.actors.equipped_item_at(actor_id, slot_index)
        if item_id is None:
            return 0
        item = self.reference.definition_of(item_id)
        if item is None or not CategoryRegistry.affects(item.category, param):
            return 0
        level = self.registry.get(EquipmentKey(actor_id, slot_index, item.id)).level
        return level * self.policy.per_level_value(item.rank)

    def param_plus(self, actor_id: int, param: ParamKind, base: int) -> int:
        """Stat hook: ``base`` plus the refinement bonus."""
        return base + self.bonus_for(actor_id, param)
