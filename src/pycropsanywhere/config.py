"""Resolver configuration for pycropsanywhere."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pycropsanywhere._constants import ENV_LOG_MATCHES, ENV_THREAD_SAFE


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ResolverConfig:
    """Runtime behaviour of :class:`~pycropsanywhere.resolver.LocationConfigResolver`.

    Parameters
    ----------
    thread_safe : bool
        Serialize the cache check/compute/store sequence behind a lock.
        Leave disabled when a single thread (e.g. the game loop) owns
        the resolver.
    log_matches : bool
        Emit a DEBUG record naming the winning pattern key every time a
        location is evaluated (cache misses only).
    """

    thread_safe: bool = False
    log_matches: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> ResolverConfig:
        """Create configuration from environment variables.

        Reads ``CROPSANYWHERE_THREAD_SAFE`` and ``CROPSANYWHERE_LOG_MATCHES``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        ResolverConfig
            Populated configuration.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "thread_safe" not in overrides:
            config_kwargs["thread_safe"] = _env_bool(env.get(ENV_THREAD_SAFE), False)
        if "log_matches" not in overrides:
            config_kwargs["log_matches"] = _env_bool(env.get(ENV_LOG_MATCHES), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
