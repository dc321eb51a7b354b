"""Registry for item category modules."""

from typing import Dict, Optional, Type

from ..models import ItemCategory, ParamKind
from .base import ItemCategoryInfo, ItemCategoryModule


class CategoryRegistry:
    """Central registry for all item category modules.

    Use the @CategoryRegistry.register decorator to register modules.

    Example:
        @CategoryRegistry.register
        class WeaponModule(ItemCategoryModule):
            ...
    """

    _modules: Dict[ItemCategory, Type[ItemCategoryModule]] = {}

    @classmethod
    def register(cls, module_class: Type[ItemCategoryModule]) -> Type[ItemCategoryModule]:
        """Decorator to register a category module.

        Args:
            module_class: The module class to register

        Returns:
            The same module class (for decorator chaining)
        """
        info = module_class.get_info()
        cls._modules[info.category] = module_class
        return module_class

    @classmethod
    def get(cls, category: ItemCategory) -> Optional[Type[ItemCategoryModule]]:
        """Get a module by its category.

        Args:
            category: The item category

        Returns:
            The module class, or None if not found
        """
        return cls._modules.get(category)

    @classmethod
    def get_all_info(cls) -> list[ItemCategoryInfo]:
        """Get info for all modules, refinable categories first."""
        return sorted(
            [m.get_info() for m in cls._modules.values()],
            key=lambda x: (not x.refinable, x.name)
        )

    @classmethod
    def is_refinable(cls, category: ItemCategory) -> bool:
        """Check if items of a category hold refinement levels."""
        module = cls.get(category)
        return module is not None and module.get_info().refinable

    @classmethod
    def affects(cls, category: ItemCategory, param: ParamKind) -> bool:
        """Check if a refined item of ``category`` contributes to ``param``.

        Unregistered categories contribute nothing.
        """
        module = cls.get(category)
        return module is not None and module.affects(param)
