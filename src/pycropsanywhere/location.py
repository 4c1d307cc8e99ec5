"""Location protocol and pattern matching.

Locations are owned by the host game; this module only reads three facets
from them (plain name, unique name, outdoor flag) plus the object identity.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pycropsanywhere._constants import INDOOR_KEYS, OUTDOOR_KEYS, WILDCARD_KEY

LocationKey = tuple[str | None, bool, int]
"""Cache key for a location: ``(display name, is outdoors, instance id)``."""


@runtime_checkable
class GameLocation(Protocol):
    """A location instance as exposed by the host game.

    ``unique_name`` is set for locations that exist in several instances
    (cabins, sheds, ...) and is ``None`` otherwise.
    """

    name: str | None
    unique_name: str | None
    is_outdoors: bool


@runtime_checkable
class ForceTillableOptions(Protocol):
    """Force-tillable sub-configuration."""

    def is_any_enabled(self) -> bool: ...


def display_name(location: GameLocation) -> str | None:
    """Return the unique name of *location*, falling back to its plain name."""
    if location.unique_name is not None:
        return location.unique_name
    return location.name


def location_cache_key(location: GameLocation) -> LocationKey:
    """Build the cache key for *location*.

    ``id()`` distinguishes two live instances sharing a name (e.g. a
    location rebuilt by the game at day start).  Ids may be reused once an
    instance is garbage collected, so the key is only meaningful while the
    location is alive.
    """
    return (display_name(location), bool(location.is_outdoors), id(location))


def applies_to(key: str, location: GameLocation) -> bool:
    """Whether the pattern *key* applies to *location*.

    Keys are compared case-insensitively:

    * ``*`` matches every location
    * ``indoor``/``indoors`` match locations which aren't outdoors
    * ``outdoor``/``outdoors`` match outdoor locations
    * anything else must equal the location's name or unique name
    """
    key = key.lower()

    if key == WILDCARD_KEY:
        return True
    if key in INDOOR_KEYS:
        return not location.is_outdoors
    if key in OUTDOOR_KEYS:
        return bool(location.is_outdoors)

    name = location.name.lower() if location.name is not None else None
    unique_name = display_name(location)
    if unique_name is not None:
        unique_name = unique_name.lower()
    return key == name or key == unique_name
