"""Per-location configuration lookup.

The resolver is the only component that decides which ``InLocations``
entry applies to a location.  Results are memoized per location instance
for the lifetime of the resolver; create a new resolver whenever the
underlying configuration is reloaded.
"""

from __future__ import annotations

import contextlib
import dataclasses
import logging
import threading
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pycropsanywhere._constants import WILDCARD_KEY
from pycropsanywhere.config import ResolverConfig
from pycropsanywhere.location import (
    ForceTillableOptions,
    GameLocation,
    LocationKey,
    applies_to,
    display_name,
    location_cache_key,
)
from pycropsanywhere.models.mod_config import ModConfig
from pycropsanywhere.models.pattern_entry import PatternEntry, to_pattern_entries

_logger = logging.getLogger(__name__)

TConfig = TypeVar("TConfig")

EntriesInput = Mapping[str, Any] | Iterable[PatternEntry | tuple[str, Any]]


def _make_lock(thread_safe: bool) -> contextlib.AbstractContextManager[Any]:
    return threading.Lock() if thread_safe else contextlib.nullcontext()


@dataclasses.dataclass
class ResolverStats:
    """Counters describing how lookups were served."""

    hits: int = 0
    """Lookups answered from the cache."""

    misses: int = 0
    """Lookups which required evaluating the pattern entries."""

    evaluations: int = 0
    """Individual pattern keys checked against a location."""

    fast_path: int = 0
    """Lookups answered by the single ``*`` entry shortcut."""


class LocationConfigResolver(Generic[TConfig]):
    """Resolve the per-location config which applies to a game location.

    Entries are checked in declaration order and the **last** matching
    entry wins, so a broad key listed after a specific one overrides it.

    The cache is never invalidated: a given location instance is assumed
    to resolve to the same entry for the life of the resolver.
    """

    def __init__(
        self,
        entries: EntriesInput | None,
        *,
        force_tillable: ForceTillableOptions | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self._config = config or ResolverConfig()
        self._entries: tuple[PatternEntry, ...] | None = (
            to_pattern_entries(entries) if entries is not None else None
        )
        self._force_tillable = force_tillable
        self._only_has_global = (
            self._entries is not None and len(self._entries) == 1 and self._entries[0].key == WILDCARD_KEY
        )
        self._cache: dict[LocationKey, PatternEntry | None] = {}
        self._lock = _make_lock(self._config.thread_safe)
        # Separate lock so the fast path never waits on cache evaluation.
        self._stats_lock = _make_lock(self._config.thread_safe)
        self._stats = ResolverStats()

    @classmethod
    def from_mod_config(
        cls,
        mod_config: ModConfig,
        *,
        config: ResolverConfig | None = None,
    ) -> LocationConfigResolver[Any]:
        """Create a resolver for a parsed :class:`ModConfig`."""
        return cls(
            mod_config.in_locations,
            force_tillable=mod_config.force_tillable,
            config=config,
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[PatternEntry, ...] | None:
        """The configured entries in declaration order, if any."""
        return self._entries

    @property
    def only_has_global_wildcard(self) -> bool:
        """Whether there's exactly one entry and it's for the ``*`` key."""
        return self._only_has_global

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    @property
    def stats(self) -> ResolverStats:
        """A snapshot of the lookup counters."""
        with self._stats_lock:
            return dataclasses.replace(self._stats)

    # ------------------------------------------------------------------
    # Force tillable
    # ------------------------------------------------------------------

    def has_tillable_overrides(self) -> bool:
        """Whether any tiles are forced tillable."""
        return self._force_tillable is not None and self._force_tillable.is_any_enabled()

    def get_force_tillable_config(self) -> ForceTillableOptions | None:
        """Get the force-tillable options as configured."""
        return self._force_tillable

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def resolve(self, location: GameLocation) -> TConfig | None:
        """Get the config payload which applies to *location*, if any."""
        entry = self.resolve_entry(location)
        if entry is None:
            return None
        return entry.config  # type: ignore[no-any-return]

    def try_resolve(self, location: GameLocation) -> tuple[bool, TConfig | None]:
        """Get ``(found, config)`` for *location*."""
        config = self.resolve(location)
        return config is not None, config

    def resolve_entry(self, location: GameLocation) -> PatternEntry | None:
        """Get the winning entry for *location*, including its original key."""
        # shortcuts for common cases
        if self._entries is None:
            return None
        if self._only_has_global:
            with self._stats_lock:
                self._stats.fast_path += 1
            return self._entries[0]

        cache_key = location_cache_key(location)
        with self._lock:
            if cache_key in self._cache:
                with self._stats_lock:
                    self._stats.hits += 1
                return self._cache[cache_key]

            entry = self._match(self._entries, location)
            self._cache[cache_key] = entry
            with self._stats_lock:
                self._stats.misses += 1
                self._stats.evaluations += len(self._entries)
            return entry

    def _match(self, entries: tuple[PatternEntry, ...], location: GameLocation) -> PatternEntry | None:
        # No early exit: a later entry must be able to override an earlier one.
        matched: PatternEntry | None = None
        for entry in entries:
            if applies_to(entry.key, location):
                matched = entry

        if self._config.log_matches:
            _logger.debug(
                "Location %r (outdoors=%s) matched key=%r",
                display_name(location),
                location.is_outdoors,
                matched.key if matched is not None else None,
            )
        return matched
