"""Save/load of the refinement registry.

The registry is stored as one field of the host's save document: a mapping
of ``"actor-slot-item"`` strings to integer levels. Restoring tolerates a
missing field (saves made before refinement existed) and skips entries it
cannot read instead of failing the load.
"""
import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Optional

from .config import KEY_DELIMITER, SAVE_FIELD
from .models import EquipmentKey, RefinementRecord
from .store import RefinementRegistry

logger = logging.getLogger(__name__)

# Ids may be negative, so a delimiter of "-" can also be a sign
_KEY_PATTERN = re.compile(
    re.escape(KEY_DELIMITER).join([r"(-?[0-9]+)"] * len(EquipmentKey._fields))
)


def encode_key(key: EquipmentKey) -> str:
    return KEY_DELIMITER.join(str(part) for part in key)


def decode_key(text: str) -> Optional[EquipmentKey]:
    """Parse an encoded key, or return None if it is malformed."""
    match = _KEY_PATTERN.fullmatch(str(text))
    if match is None:
        return None
    return EquipmentKey(*(int(part) for part in match.groups()))


def _decode_level(value: Any) -> Optional[int]:
    # Older saves stored {"level": n}
    if isinstance(value, Mapping):
        value = value.get("level", 0)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


class PersistenceAdapter:
    """Converts the registry to and from its save-document form."""

    def __init__(self, registry: RefinementRegistry):
        self.registry = registry

    def snapshot(self) -> dict[str, int]:
        """Encode every record as ``{"actor-slot-item": level}``."""
        return {
            encode_key(key): record.level
            for key, record in self.registry.export_all()
        }

    def decode(self, data: Optional[Mapping[str, Any]]) -> list[tuple[EquipmentKey, RefinementRecord]]:
        """Parse a saved table into records without touching the registry.

        ``None`` or a non-mapping gives no records.
        """
        records: list[tuple[EquipmentKey, RefinementRecord]] = []
        if isinstance(data, Mapping):
            for raw_key, raw_value in data.items():
                key = decode_key(raw_key)
                level = _decode_level(raw_value)
                if key is None or level is None:
                    logger.warning("Skipping unreadable refinement entry %r: %r", raw_key, raw_value)
                    continue
                records.append((key, RefinementRecord(level=level)))
        elif data is not None:
            logger.warning("Ignoring refinement data of type %s", type(data).__name__)
        return records

    def restore(self, data: Optional[Mapping[str, Any]]) -> None:
        """Replace the registry with the contents of ``data``."""
        self.apply(self.decode(data))

    def apply(self, records: list[tuple[EquipmentKey, RefinementRecord]]) -> None:
        self.registry.import_all(records)
        logger.info("Restored %d refinement record(s)", len(records))

    def make_save_contents(self, contents: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Add the refinement table to an outgoing save document."""
        contents[SAVE_FIELD] = self.snapshot()
        return contents

    def extract_save_contents(self, contents: Mapping[str, Any]) -> None:
        """Restore the refinement table from a loaded save document."""
        self.restore(contents.get(SAVE_FIELD))


def read_save(path: Path) -> dict[str, Any]:
    """Load a JSON save document.

    Raises:
        ValueError: If the file does not hold a JSON object
    """
    with Path(path).open("r", encoding="utf8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{path}: save data must be a JSON object")
    return payload


def write_save(path: Path, contents: Mapping[str, Any]) -> None:
    """Write a JSON save document, replacing the old file atomically."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.dumps(contents, indent=2, sort_keys=True)
    temp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf8", dir=path.parent, delete=False
        ) as handle:
            temp_path = Path(handle.name)
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
        temp_path = None
    finally:
        if temp_path is not None:
            try:
                temp_path.unlink()
            except FileNotFoundError:
                pass
