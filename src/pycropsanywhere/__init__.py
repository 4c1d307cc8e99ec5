"""pycropsanywhere - Per-location configuration lookup for Crops Anytime Anywhere."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pycropsanywhere")
except PackageNotFoundError:
    __version__ = "0+local"
from pycropsanywhere.config import ResolverConfig
from pycropsanywhere.exceptions import ConfigValidationError, CropsAnywhereError
from pycropsanywhere.location import (
    ForceTillableOptions,
    GameLocation,
    applies_to,
    display_name,
    location_cache_key,
)
from pycropsanywhere.models import ForceTillableConfig, ModConfig, PatternEntry
from pycropsanywhere.resolver import LocationConfigResolver, ResolverStats

__all__ = [
    "__version__",
    "ConfigValidationError",
    "CropsAnywhereError",
    "ForceTillableConfig",
    "ForceTillableOptions",
    "GameLocation",
    "LocationConfigResolver",
    "ModConfig",
    "PatternEntry",
    "ResolverConfig",
    "ResolverStats",
    "applies_to",
    "display_name",
    "location_cache_key",
]
