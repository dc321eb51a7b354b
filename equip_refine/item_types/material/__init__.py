"""Material category: consumables spent on refinement."""

from equip_refine.core.base import ItemCategoryInfo, ItemCategoryModule
from equip_refine.core.registry import CategoryRegistry
from equip_refine.models import ItemCategory


@CategoryRegistry.register
class MaterialModule(ItemCategoryModule):
    """Refinement materials. Never refined themselves."""

    @classmethod
    def get_info(cls) -> ItemCategoryInfo:
        return ItemCategoryInfo(
            category=ItemCategory.MATERIAL,
            name="Materials",
            description="Consumed one at a time to refine equipment of the target rank",
            refinable=False,
        )
