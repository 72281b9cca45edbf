"""Axis-aligned bounding boxes of point sets in any dimension."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence

__all__ = ["BoundingBox"]


class BoundingBox:
    """An axis-aligned box that is never flat along any axis.

    Built from a flat sequence of coordinates, ``dimension`` values per
    point, it encloses every point.  Without points it is the unit box
    from 0 to 1 along every axis.  With ``cube`` true the box is grown
    around its center until every side equals the longest one.  Any axis
    along which the box has zero extent is widened by 5% of the smallest
    non-zero half side (or by 0.05 if every side is zero).
    """

    def __init__(
        self,
        dimension: int = 3,
        points: Optional[Sequence[float]] = None,
        cube: bool = False,
    ):
        self.dimension = max(int(dimension), 0)
        d = self.dimension
        self.min: List[float] = []
        self.max: List[float] = []
        self.step = 0.0
        if d == 0:
            return

        if points is None:
            self.min = [0.0] * d
            self.max = [1.0] * d
        else:
            coords = list(points)
            rows = [coords[j * d:(j + 1) * d] for j in range(len(coords) // d)]
            if rows:
                self.min = [min(column) for column in zip(*rows)]
                self.max = [max(column) for column in zip(*rows)]
            else:
                self.min = [0.0] * d
                self.max = [0.0] * d

            if cube:
                center = [(lo + hi) / 2 for lo, hi in zip(self.min, self.max)]
                half_side = max(
                    [0.0] + [(hi - lo) / 2 for lo, hi in zip(self.min, self.max)]
                )
                self.min = [c - half_side for c in center]
                self.max = [c + half_side for c in center]

        self._ensure_volume()
        self.step = self.side()

    def _ensure_volume(self) -> None:
        half_sides = [(hi - lo) / 2 for lo, hi in zip(self.min, self.max)]
        positive = [h for h in half_sides if h > 0.0]
        min_side = min(positive) if positive else 1.0
        pad = min_side * 0.05
        for i, (lo, hi) in enumerate(zip(self.min, self.max)):
            if lo == hi:
                self.min[i] = lo - pad
                self.max[i] = hi + pad

    def _clamp(self, i: int) -> int:
        if self.dimension == 0:
            raise IndexError("empty bounding box")
        return min(max(i, 0), self.dimension - 1)

    def center(self, i: int) -> float:
        """Center along axis ``i``; out-of-range indices are clamped."""
        j = self._clamp(i)
        return (self.max[j] + self.min[j]) / 2

    def side(self, i: Optional[int] = None) -> float:
        """Length along axis ``i`` (clamped), or the longest side if ``i`` is None."""
        if i is None:
            return max([0.0] + [hi - lo for lo, hi in zip(self.min, self.max)])
        j = self._clamp(i)
        return self.max[j] - self.min[j]

    def max_side(self) -> float:
        """Length of the longest side, 0 for an empty box."""
        if self.dimension == 0:
            return 0.0
        return max(self.side(i) for i in range(self.dimension))

    def diameter(self) -> float:
        """Length of the box diagonal."""
        total = sum(self.side(i) ** 2 for i in range(self.dimension))
        return math.sqrt(total) if total > 0.0 else 0.0

    def _checked(self, values: Iterable[float]) -> List[float]:
        values = [float(v) for v in values]
        if len(values) != self.dimension:
            raise ValueError(
                f"expected {self.dimension} values, got {len(values)}"
            )
        return values

    def set_min(self, values: Iterable[float]) -> None:
        """Replace the lower corner."""
        self.min = self._checked(values)

    def set_max(self, values: Iterable[float]) -> None:
        """Replace the upper corner."""
        self.max = self._checked(values)