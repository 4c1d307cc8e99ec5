"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Location pattern keys (compared lowercased)
# ------------------------------------------------------------------

WILDCARD_KEY = "*"
INDOOR_KEYS: frozenset[str] = frozenset({"indoor", "indoors"})
OUTDOOR_KEYS: frozenset[str] = frozenset({"outdoor", "outdoors"})

# ------------------------------------------------------------------
# Environment variables read by ResolverConfig.from_env
# ------------------------------------------------------------------

ENV_THREAD_SAFE = "CROPSANYWHERE_THREAD_SAFE"
ENV_LOG_MATCHES = "CROPSANYWHERE_LOG_MATCHES"
