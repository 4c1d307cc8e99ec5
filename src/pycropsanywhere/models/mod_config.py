"""Top-level mod configuration model."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator

from pycropsanywhere.exceptions import ConfigValidationError
from pycropsanywhere.models._base import CropsBaseModel
from pycropsanywhere.models.force_tillable import ForceTillableConfig
from pycropsanywhere.models.pattern_entry import PatternEntry


def _pair_to_dict(item: Any) -> Any:
    if isinstance(item, (list, tuple)) and len(item) == 2:
        return {"key": item[0], "config": item[1]}
    return item


class ModConfig(CropsBaseModel):
    """The parsed mod configuration consumed by the location resolver.

    ``in_locations`` preserves the order entries were declared in: later
    entries take precedence over earlier ones when several match.
    """

    in_locations: tuple[PatternEntry, ...] | None = None
    """Per-location entries, or ``None`` if none were configured."""

    force_tillable: ForceTillableConfig | None = Field(default_factory=ForceTillableConfig)
    """Tiles to force tillable, or ``None`` if explicitly disabled."""

    @field_validator("in_locations", mode="before")
    @classmethod
    def _coerce_in_locations(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return [{"key": key, "config": config} for key, config in value.items()]
        if isinstance(value, (list, tuple)):
            return [_pair_to_dict(item) for item in value]
        return value

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModConfig:
        """Parse a raw configuration dict (e.g. decoded ``config.json``).

        Raises
        ------
        ConfigValidationError
            If the data doesn't have the expected shape.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigValidationError(
                f"Invalid mod configuration ({exc.error_count()} error(s))",
                errors=exc.errors(include_url=False),
            ) from exc
