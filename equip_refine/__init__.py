"""Equipment refinement: spend materials to permanently raise equipment stats."""

# Register item categories before anything asks the CategoryRegistry
from . import item_types
from .controller import Outcome, RefinementController
from .display import EquipmentDisplay, SlotRow
from .models import (
    ActorDefinition,
    EquipmentKey,
    ItemCategory,
    ItemDefinition,
    OutcomeKind,
    ParamKind,
    Rank,
    RefinementRecord,
)
from .persistence import PersistenceAdapter
from .policy import RankEntry, RankPolicy
from .session import RefinementSession
from .stats import StatProjector
from .store import RefinementRegistry

__all__ = [
    "ActorDefinition",
    "EquipmentDisplay",
    "EquipmentKey",
    "ItemCategory",
    "ItemDefinition",
    "Outcome",
    "OutcomeKind",
    "ParamKind",
    "PersistenceAdapter",
    "Rank",
    "RankEntry",
    "RankPolicy",
    "RefinementController",
    "RefinementRecord",
    "RefinementRegistry",
    "RefinementSession",
    "SlotRow",
    "StatProjector",
]
