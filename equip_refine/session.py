"""Wiring of the refinement engine to a host game state."""
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from .config import SAVE_FIELD
from .controller import RefinementController
from .display import EquipmentDisplay
from .game_data import GameDatabase, MessageLog, PartyInventory
from .persistence import PersistenceAdapter, read_save, write_save
from .policy import RankPolicy
from .stats import StatProjector
from .store import RefinementRegistry

logger = logging.getLogger(__name__)


class RefinementSession:
    """One running game: shared registry plus everything that reads it.

    The registry instance lives as long as the session. ``new_game``
    empties it, ``load`` replaces its contents, and ``save`` writes it out.
    """

    def __init__(
        self,
        database: GameDatabase,
        inventory: Optional[PartyInventory] = None,
        policy: Optional[RankPolicy] = None,
        messages: Optional[MessageLog] = None,
    ):
        self.database = database
        if inventory is None:
            inventory = PartyInventory(database.starting_items)
        self.inventory = inventory
        self.policy = policy if policy is not None else RankPolicy.default()
        self.messages = messages if messages is not None else MessageLog()
        self.registry = RefinementRegistry()

        self.controller = RefinementController(
            registry=self.registry,
            policy=self.policy,
            reference=database,
            actors=database,
            inventory=self.inventory,
            messenger=self.messages,
        )
        self.projector = StatProjector(self.registry, self.policy, database, database)
        self.display = EquipmentDisplay(self.registry, database, database)
        self.persistence = PersistenceAdapter(self.registry)

    @classmethod
    def from_files(
        cls,
        data_path: Path,
        save_path: Optional[Path] = None,
        policy_path: Optional[Path] = None,
    ) -> "RefinementSession":
        """Load game data, then the save file if one exists."""
        database = GameDatabase.from_file(data_path)
        policy = RankPolicy.from_toml(policy_path) if policy_path else None
        session = cls(database, policy=policy)
        if save_path is not None and Path(save_path).exists():
            session.load(save_path)
        return session

    def new_game(self) -> None:
        """Start over: empty registry, starting party items."""
        self.registry.clear()
        self.messages.clear()
        self._set_inventory(PartyInventory(self.database.starting_items))

    def make_save_contents(self) -> dict[str, Any]:
        contents: dict[str, Any] = {
            "party": {"items": self.inventory.as_dict()},
            "actors": {
                str(actor.id): list(actor.equips) for actor in self.database.actors()
            },
        }
        self.persistence.make_save_contents(contents)
        return contents

    def extract_save_contents(self, contents: Mapping[str, Any]) -> None:
        """Apply a loaded save document.

        Every section is parsed before any state changes, so a malformed
        document leaves the session as it was.

        Raises:
            ValueError: If the party items or actor equips cannot be read
        """
        inventory = None
        party = contents.get("party")
        if isinstance(party, Mapping) and isinstance(party.get("items"), Mapping):
            try:
                inventory = PartyInventory(party["items"])
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Unreadable party items: {exc}") from exc

        loadouts: dict[int, list[Optional[int]]] = {}
        actors = contents.get("actors")
        if isinstance(actors, Mapping):
            for raw_id, equips in actors.items():
                try:
                    actor_id = int(raw_id)
                    if isinstance(equips, list):
                        loadouts[actor_id] = [
                            None if item_id in (None, 0) else int(item_id) for item_id in equips
                        ]
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"Unreadable equipment for actor {raw_id!r}: {exc}") from exc

        records = self.persistence.decode(contents.get(SAVE_FIELD))

        if inventory is not None:
            self._set_inventory(inventory)
        for actor_id, equips in loadouts.items():
            actor = self.database.actor(actor_id)
            if actor is not None:
                actor.equips = equips
        self.persistence.apply(records)

    def save(self, path: Path) -> None:
        write_save(path, self.make_save_contents())
        logger.info("Saved game to %s", path)

    def load(self, path: Path) -> None:
        self.extract_save_contents(read_save(path))
        logger.info("Loaded game from %s", path)

    def _set_inventory(self, inventory: PartyInventory) -> None:
        self.inventory = inventory
        self.controller.inventory = inventory
