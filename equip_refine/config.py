"""Refinement configuration and rank tables.

Ranks are declared on equipment with a ``<rank:X>`` note tag and on
refinement materials with ``<targetRank:X>``. Values below are the defaults
shipped with the game; a TOML file can override them (see ``policy.py``).
"""

# Maximum refinement level per rank
# Format: {rank: max_level}
MAX_REFINEMENT_BY_RANK: dict[str, int] = {
    "C": 1,
    "B": 2,
    "A": 3,
    "S": 4,
}

# Stat increase granted per refinement level
# Weapons add it to attack, armor adds it to defense
# Format: {rank: value_per_level}
INCREASED_VALUE_BY_RANK: dict[str, int] = {
    "C": 1,
    "B": 2,
    "A": 3,
    "S": 4,
}

# Host parameter ids (mhp, mmp, atk, def, mat, mdf, agi, luk)
PARAM_ATK: int = 2
PARAM_DEF: int = 3

# Slot labels used when an actor does not declare its own
DEFAULT_SLOT_NAMES: list[str] = [
    "Weapon",
    "Shield",
    "Head",
    "Body",
    "Accessory",
]

# Save document field holding the refinement table
SAVE_FIELD: str = "equipRefineData"

# Delimiter for the encoded "actor-slot-item" key
KEY_DELIMITER: str = "-"

# Placeholder shown for an empty slot
EMPTY_SLOT_TEXT: str = "-"
