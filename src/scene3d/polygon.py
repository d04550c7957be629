"""Flat coloured polygons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Tuple

from .geometry import Matrix, Point, apply_matrix

if TYPE_CHECKING:
    from .surface import RenderSurface

Color = Tuple[int, int, int, int]


class InvalidGeometry(ValueError):
    """Raised when a polygon is built from fewer than three points."""


@dataclass(frozen=True, slots=True, init=False)
class Polygon:
    """Ordered outline of at least three points with an RGBA fill colour."""

    points: Tuple[Point, ...]
    color: Color

    def __init__(self, points: Iterable[Point], color: Color) -> None:
        stored = tuple(points)
        if len(stored) < 3:
            raise InvalidGeometry(
                f"A polygon must have at least 3 points, got {len(stored)}"
            )
        object.__setattr__(self, "points", stored)
        object.__setattr__(self, "color", tuple(color))

    def transform(self, m: Matrix) -> "Polygon":
        return Polygon([apply_matrix(m, point) for point in self.points], self.color)

    def projected(self) -> List[Tuple[float, float]]:
        """Orthographic projection onto the XY plane."""
        return [(point.x, point.y) for point in self.points]

    def render(self, surface: "RenderSurface") -> None:
        outline = self.projected()
        for x, y in outline:
            surface.push(x, y, self.color)
        first_x, first_y = outline[0]
        surface.push(first_x, first_y, self.color)
        surface.polygon(1)
