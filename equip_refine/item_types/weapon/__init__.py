"""Weapon category: refinement adds to attack."""

from equip_refine.core.base import ItemCategoryInfo, ItemCategoryModule
from equip_refine.core.registry import CategoryRegistry
from equip_refine.models import ItemCategory, ParamKind


@CategoryRegistry.register
class WeaponModule(ItemCategoryModule):
    """Weapons gain attack per refinement level."""

    @classmethod
    def get_info(cls) -> ItemCategoryInfo:
        return ItemCategoryInfo(
            category=ItemCategory.WEAPON,
            name="Weapons",
            description="Refine weapons to raise attack",
            refinable=True,
            affects=(ParamKind.ATK,),
        )
