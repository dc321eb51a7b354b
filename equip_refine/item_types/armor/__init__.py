"""Armor category: refinement adds to defense."""

from equip_refine.core.base import ItemCategoryInfo, ItemCategoryModule
from equip_refine.core.registry import CategoryRegistry
from equip_refine.models import ItemCategory, ParamKind


@CategoryRegistry.register
class ArmorModule(ItemCategoryModule):
    """Shields, helmets, body armor and accessories gain defense."""

    @classmethod
    def get_info(cls) -> ItemCategoryInfo:
        return ItemCategoryInfo(
            category=ItemCategory.ARMOR,
            name="Armor",
            description="Refine armor to raise defense",
            refinable=True,
            affects=(ParamKind.DEF,),
        )
