"""Base abstractions for item category modules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..models import ItemCategory, ParamKind


@dataclass
class ItemCategoryInfo:
    """Metadata about an item category for refinement and display.

    Attributes:
        category: The category this module describes
        name: Display name (e.g., "Weapons")
        description: Brief description for the selection screen
        refinable: Whether items of this category hold refinement levels
        affects: Parameters a refinement level adds to
    """
    category: ItemCategory
    name: str
    description: str
    refinable: bool = False
    affects: tuple[ParamKind, ...] = ()


class ItemCategoryModule(ABC):
    """Abstract base class for item category modules (plugin pattern).

    Each category (weapon, armor, material) implements this class to
    register with the system. Which stat a refined item boosts is data on
    the module rather than a separate code path.
    """

    @classmethod
    @abstractmethod
    def get_info(cls) -> ItemCategoryInfo:
        """Return metadata about this category."""
        pass

    @classmethod
    def affects(cls, param: ParamKind) -> bool:
        """Return True if refining this category boosts ``param``."""
        info = cls.get_info()
        return info.refinable and param in info.affects
