"""Utility functions for note tags and display."""
import re

_NOTE_TAG = re.compile(r"<(\w+)\s*:\s*([^>]*?)\s*>")


def parse_note_tags(note: str) -> dict[str, str]:
    """Read ``<key:value>`` tags from an item note.

    Later tags override earlier ones with the same key.
    """
    if not note:
        return {}
    return {key: value for key, value in _NOTE_TAG.findall(note)}


def format_refined_name(name: str, level: int) -> str:
    """Append the refinement level to an item name ("Sword +2")."""
    if level > 0:
        return f"{name} +{level}"
    return name
