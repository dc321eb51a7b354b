"""Rank policy: maximum refinement level and per-level stat value by rank."""
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .config import INCREASED_VALUE_BY_RANK, MAX_REFINEMENT_BY_RANK

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RankEntry:
    """Policy for one rank."""
    max_level: int
    per_level: int


class RankPolicy:
    """Static rank table.

    Lookups never fail: an unknown or missing rank has a max level of 0
    (refinement impossible) and contributes 0 per level.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, RankEntry]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def default(cls) -> "RankPolicy":
        """Build the policy from the tables in ``config.py``."""
        ranks = list(MAX_REFINEMENT_BY_RANK)
        ranks += [r for r in INCREASED_VALUE_BY_RANK if r not in MAX_REFINEMENT_BY_RANK]
        return cls({
            rank: RankEntry(
                max_level=MAX_REFINEMENT_BY_RANK.get(rank, 0),
                per_level=INCREASED_VALUE_BY_RANK.get(rank, 0),
            )
            for rank in ranks
        })

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RankPolicy":
        """Build a policy from ``{rank: {"max_level": n, "per_level": n}}``.

        Raises:
            ValueError: If an entry is not a table or holds a negative or
                non-integer value
        """
        entries: dict[str, RankEntry] = {}
        for rank, raw in data.items():
            if not isinstance(raw, Mapping):
                raise ValueError(f"Rank {rank!r} must be a table, got {type(raw).__name__}")
            max_level = _require_count(raw.get("max_level", 0), f"{rank}.max_level")
            per_level = _require_count(raw.get("per_level", 0), f"{rank}.per_level")
            entries[str(rank)] = RankEntry(max_level=max_level, per_level=per_level)
        return cls(entries)

    @classmethod
    def from_toml(cls, path: Path) -> "RankPolicy":
        """Load a policy from a TOML file with one ``[ranks.X]`` table per rank.

        Ranks missing from the file keep their default values.
        """
        with Path(path).open("rb") as handle:
            payload = tomllib.load(handle)
        ranks = payload.get("ranks")
        if not isinstance(ranks, Mapping):
            raise ValueError(f"{path}: missing [ranks] table")
        merged = dict(cls.default()._entries)
        merged.update(cls.from_mapping(ranks)._entries)
        logger.info("Loaded rank policy for %d rank(s) from %s", len(ranks), path)
        return cls(merged)

    def max_level(self, rank: Optional[str]) -> int:
        entry = self._entries.get(rank) if rank is not None else None
        return entry.max_level if entry else 0

    def per_level_value(self, rank: Optional[str]) -> int:
        entry = self._entries.get(rank) if rank is not None else None
        return entry.per_level if entry else 0

    def ranks(self) -> list[str]:
        """Ranks with an entry, in declaration order."""
        return list(self._entries)

    def as_dict(self) -> dict[str, dict[str, int]]:
        return {
            rank: {"max_level": entry.max_level, "per_level": entry.per_level}
            for rank, entry in self._entries.items()
        }


def _require_count(value: Any, name: str) -> int:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value
