"""Location-keyed configuration entry."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pycropsanywhere.models._base import CropsBaseModel


class PatternEntry(CropsBaseModel):
    """A single ``InLocations`` entry: a location pattern and its payload."""

    key: str
    """Pattern key: ``*``, ``indoors``, ``outdoors`` or a location name.

    Kept exactly as written in the configuration, surrounding whitespace
    included; matching lowercases it at comparison time.
    """

    config: Any = None
    """Opaque per-location payload, never inspected by this library."""


def to_pattern_entries(entries: Mapping[str, Any] | Iterable[Any]) -> tuple[PatternEntry, ...]:
    """Normalize a mapping or a sequence of entries/pairs into ``PatternEntry`` tuples.

    Mappings keep their insertion order, which for dicts decoded from JSON
    is the declaration order in the file.
    """
    if isinstance(entries, Mapping):
        return tuple(PatternEntry(key=key, config=value) for key, value in entries.items())

    result: list[PatternEntry] = []
    for item in entries:
        if isinstance(item, PatternEntry):
            result.append(item)
        elif isinstance(item, Mapping):
            result.append(PatternEntry.model_validate(item))
        else:
            key, value = item
            result.append(PatternEntry(key=key, config=value))
    return tuple(result)
