"""Refinement registry: the per-equipment refinement table."""
from typing import Iterable, Optional

from .models import EquipmentKey, RefinementRecord


class RefinementRegistry:
    """Mapping of EquipmentKey to RefinementRecord.

    Storage only: bounds are the controller's job. A key that was never
    written reads as level 0.
    """

    __slots__ = ("_records",)

    def __init__(self, records: Optional[Iterable[tuple[EquipmentKey, RefinementRecord]]] = None):
        self._records: dict[EquipmentKey, RefinementRecord] = {}
        if records is not None:
            self.import_all(records)

    def get(self, key: EquipmentKey) -> RefinementRecord:
        """Return a copy of the stored record, or a level-0 record."""
        record = self._records.get(key)
        return RefinementRecord(level=record.level) if record else RefinementRecord()

    def level(self, key: EquipmentKey) -> int:
        return self.get(key).level

    def set_level(self, key: EquipmentKey, level: int) -> None:
        """Overwrite the level stored for ``key``."""
        self._records[key] = RefinementRecord(level=level)

    def export_all(self) -> list[tuple[EquipmentKey, RefinementRecord]]:
        """Every stored record ordered by key."""
        return [
            (key, RefinementRecord(level=record.level))
            for key, record in sorted(self._records.items())
        ]

    def import_all(self, records: Iterable[tuple[EquipmentKey, RefinementRecord]]) -> None:
        """Replace the whole table with ``records``."""
        self._records = {
            EquipmentKey(*key): RefinementRecord(level=record.level)
            for key, record in records
        }

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefinementRegistry):
            return NotImplemented
        return self.export_all() == other.export_all()

    def __repr__(self) -> str:
        return f"RefinementRegistry({len(self._records)} record(s))"
