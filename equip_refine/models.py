"""Data models for equipment refinement."""
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

from .config import PARAM_ATK, PARAM_DEF


class Rank(str, Enum):
    """Refinement ranks shipped with the game.

    Ranks are compared as plain strings, so note tags may also declare ranks
    outside this set; those simply have no policy entry.
    """
    C = "C"
    B = "B"
    A = "A"
    S = "S"


class ParamKind(Enum):
    """Host parameter ids."""
    MHP = 0
    MMP = 1
    ATK = PARAM_ATK
    DEF = PARAM_DEF
    MAT = 4
    MDF = 5
    AGI = 6
    LUK = 7


class ItemCategory(Enum):
    """Item definition categories."""
    WEAPON = "weapon"
    ARMOR = "armor"
    MATERIAL = "material"


@dataclass(slots=True)
class ItemDefinition:
    """Read-only item definition from the game database.

    Attributes:
        id: Item id, unique across every category
        name: Display name
        category: Weapon, armor or material
        icon_index: Icon sheet index
        rank: Declared rank for equipment (``<rank:X>``)
        target_rank: Rank a material can refine (``<targetRank:X>``)
        note: Raw note text the tags were read from
    """
    id: int
    name: str
    category: ItemCategory
    icon_index: int = 0
    rank: Optional[str] = None
    target_rank: Optional[str] = None
    note: str = ""

    @property
    def is_equipment(self) -> bool:
        return self.category in (ItemCategory.WEAPON, ItemCategory.ARMOR)

    @property
    def is_material(self) -> bool:
        return self.category is ItemCategory.MATERIAL


@dataclass(slots=True)
class ActorDefinition:
    """An actor and the item ids currently equipped per slot."""
    id: int
    name: str
    equips: list[Optional[int]] = field(default_factory=list)
    slot_names: list[str] = field(default_factory=list)


class EquipmentKey(NamedTuple):
    """Identity of one refinement counter: who, where, and which item."""
    actor_id: int
    slot_index: int
    item_id: int


@dataclass(slots=True)
class RefinementRecord:
    """Refinement state of one equipped item."""
    level: int = 0


class OutcomeKind(Enum):
    """Result of a refinement attempt."""
    REFINED = "refined"
    ACTOR_NOT_FOUND = "actor_not_found"
    SLOT_EMPTY = "slot_empty"
    MATERIAL_NOT_FOUND = "material_not_found"
    RANK_MISMATCH = "rank_mismatch"
    MAX_LEVEL_REACHED = "max_level_reached"
    NO_MATERIAL_AVAILABLE = "no_material_available"
