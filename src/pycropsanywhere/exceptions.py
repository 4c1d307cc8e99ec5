"""Custom exception hierarchy for pycropsanywhere."""

from __future__ import annotations

from typing import Any


class CropsAnywhereError(Exception):
    """Base exception for all pycropsanywhere errors."""


class ConfigValidationError(CropsAnywhereError):
    """Raw mod configuration could not be parsed.

    Raised by :meth:`pycropsanywhere.models.ModConfig.from_dict` when the
    input does not have the expected shape (e.g. ``ForceTillable`` is not
    an object).  The per-location payloads themselves are never validated.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message)
