"""Core abstractions for equipment refinement."""

from .base import ItemCategoryInfo, ItemCategoryModule
from .registry import CategoryRegistry

__all__ = [
    "ItemCategoryInfo",
    "ItemCategoryModule",
    "CategoryRegistry",
]
