"""Force-tillable tile options."""

from __future__ import annotations

from pycropsanywhere.models._base import CropsBaseModel


class ForceTillableConfig(CropsBaseModel):
    """Tile types which should be tillable even if the map doesn't allow it."""

    dirt: bool = True
    """Whether dirt tiles are forced tillable."""

    grass: bool = True
    """Whether grass tiles are forced tillable."""

    stone: bool = False
    """Whether stone tiles are forced tillable."""

    other: tuple[int, ...] = ()
    """Extra tile indexes to force tillable."""

    def is_any_enabled(self) -> bool:
        """Whether any tile type is forced tillable."""
        return self.dirt or self.grass or self.stone or bool(self.other)
