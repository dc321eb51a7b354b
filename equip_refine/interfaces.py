"""Host collaborators the refinement engine calls into."""
from typing import Iterable, Optional, Protocol, Sequence

from .models import ActorDefinition, ItemDefinition


class ReferenceData(Protocol):
    """Read-only item definitions."""

    def definition_of(self, item_id: int) -> Optional[ItemDefinition]: ...

    def all_material_definitions(self) -> Iterable[ItemDefinition]: ...


class Actors(Protocol):
    """Actors and what they have equipped."""

    def actor(self, actor_id: int) -> Optional[ActorDefinition]: ...

    def equipped_item_at(self, actor_id: int, slot_index: int) -> Optional[int]: ...

    def current_loadout(self, actor_id: int) -> Sequence[Optional[int]]: ...


class Inventory(Protocol):
    """Party item counts."""

    def quantity_of(self, item_id: int) -> int: ...

    def consume_one(self, item_id: int) -> None: ...


class Messenger(Protocol):
    """Fire-and-forget message window."""

    def announce(self, text: str) -> None: ...
