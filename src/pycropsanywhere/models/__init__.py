"""Mod configuration models."""

from pycropsanywhere.models.force_tillable import ForceTillableConfig
from pycropsanywhere.models.mod_config import ModConfig
from pycropsanywhere.models.pattern_entry import PatternEntry, to_pattern_entries

__all__ = [
    "ForceTillableConfig",
    "ModConfig",
    "PatternEntry",
    "to_pattern_entries",
]
