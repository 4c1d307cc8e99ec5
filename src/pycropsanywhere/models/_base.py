"""Base model for the mod configuration file.

Every configuration model inherits from :class:`CropsBaseModel` which
provides:

* ``alias_generator=to_pascal`` so the PascalCase keys used in the mod's
  ``config.json`` map automatically to snake_case fields.
* A ``model_validator(mode="before")`` that matches incoming keys to
  fields case-insensitively, since hand-edited config files are not
  consistent about casing (``inLocations``, ``InLocations``, ``in_locations``).
"""

from __future__ import annotations

import functools
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_pascal


@functools.cache
def _key_lookup(model: type[BaseModel]) -> dict[str, str]:
    """Map lowercased field names and aliases of *model* to the canonical alias."""
    lookup: dict[str, str] = {}
    for name, field in model.model_fields.items():
        alias = field.alias or name
        lookup[name.lower()] = alias
        lookup[alias.lower()] = alias
    return lookup


class CropsBaseModel(BaseModel):
    """Base for mod configuration models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        lookup = _key_lookup(cls)
        normalized: dict[Any, Any] = {}
        for key, value in values.items():
            target = lookup.get(key.lower(), key) if isinstance(key, str) else key
            normalized[target] = value
        return normalized
