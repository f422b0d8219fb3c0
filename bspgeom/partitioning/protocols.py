# bspgeom/partitioning/protocols.py
"""Protocol interfaces for the dimension-agnostic BSP algorithms.

The tree builder and the sub-hyperplane wrapper only talk to hyperplanes and
regions through these interfaces, so the same code serves 2D lines and 3D
planes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from bspgeom.partitioning.enums import HyperplaneKind, Side

if TYPE_CHECKING:
    from bspgeom.partitioning.sub_hyperplane import SplitSubHyperplane, SubHyperplane


class Region(Protocol):
    """Protocol for a region of a (sub-)space."""

    def is_empty(self) -> bool:
        """Check if the region contains no point."""
        ...

    def size(self) -> float:
        """Measure of the region (length, area...), ``inf`` if unbounded."""
        ...

    def copy_self(self) -> Region:
        """Return an independent copy of the region."""
        ...


class Hyperplane(Protocol):
    """Protocol for an oriented hyperplane usable as a BSP cut."""

    kind: HyperplaneKind

    def copy_self(self) -> Hyperplane:
        """Return an independent copy of the hyperplane."""
        ...

    def reset(self, *args: Any) -> None:
        """Re-derive the instance in place from defining points."""
        ...

    def to_sub_space(self, point: Any) -> Any:
        """Transform a space point into a sub-space point."""
        ...

    def to_space(self, point: Any) -> Any:
        """Transform a sub-space point into a space point."""
        ...

    def offset(self, point: Any) -> float:
        """Oriented distance of a space point to the hyperplane."""
        ...

    def whole_hyperplane(self) -> Region:
        """Region of the sub-space covering the whole hyperplane."""
        ...

    def whole_space(self) -> Region:
        """Region covering the whole space."""
        ...

    def same_orientation_as(self, other: Any) -> bool:
        """Check if both hyperplanes have the same orientation."""
        ...

    def side(self, sub: SubHyperplane) -> Side:
        """Relative position of a sub-hyperplane with respect to the instance."""
        ...

    def split(self, sub: SubHyperplane) -> SplitSubHyperplane:
        """Split a sub-hyperplane in its plus and minus parts."""
        ...


__all__ = ["Hyperplane", "Region"]
