"""Predefined scene content."""

from __future__ import annotations

from typing import Callable, Dict, List

from .geometry import Point
from .polygon import Color, Polygon
from .space import DrawOrder, Space

BLACK: Color = (0, 0, 0, 255)
ALICE_BLUE: Color = (240, 248, 255, 255)
DIM_GRAY: Color = (105, 105, 105, 255)
RED: Color = (255, 0, 0, 255)
GREEN: Color = (0, 128, 0, 255)
BLUE: Color = (0, 0, 255, 255)
YELLOW: Color = (255, 255, 0, 255)
ORANGE: Color = (255, 165, 0, 255)

BACKGROUND = DIM_GRAY

PYRAMID_POINTS = (
    Point(-50.0, 0.0, -50.0),
    Point(0.0, 100.0, 0.0),  # apex
    Point(50.0, 0.0, -50.0),
    Point(-50.0, 0.0, 50.0),
    Point(50.0, 0.0, 50.0),
)


def axis_lines(length: float = 300.0, color: Color = BLACK) -> List[Polygon]:
    """Return the X, Y and Z axes as degenerate three-point polygons."""

    def axis(start: Point, end: Point) -> Polygon:
        return Polygon((start, start, end), color)

    return [
        axis(Point(-length, 0.0, 0.0), Point(length, 0.0, 0.0)),
        axis(Point(0.0, -length, 0.0), Point(0.0, length, 0.0)),
        axis(Point(0.0, 0.0, length), Point(0.0, 0.0, -length)),
    ]


def pyramid(p1: Point, p2: Point, p3: Point, p4: Point, p5: Point) -> List[Polygon]:
    """Square-based pyramid with apex ``p2``; the floor is a single triangle."""

    return [
        Polygon((p1, p4, p5), BLACK),  # floor
        Polygon((p1, p2, p4), ALICE_BLUE),  # left
        Polygon((p2, p3, p5), RED),  # right
        Polygon((p1, p2, p3), GREEN),  # front
        Polygon((p2, p4, p5), BLUE),  # back
    ]


def tetrahedron(p1: Point, p2: Point, p3: Point, p4: Point) -> List[Polygon]:
    return [
        Polygon((p1, p2, p3), RED),
        Polygon((p1, p2, p4), GREEN),
        Polygon((p1, p3, p4), BLUE),
        Polygon((p2, p3, p4), BLACK),
    ]


def pyramid_scene() -> List[Polygon]:
    return pyramid(*PYRAMID_POINTS)


def tetrahedron_scene() -> List[Polygon]:
    p1, p2, p3, p4, _ = PYRAMID_POINTS
    return tetrahedron(p1, p2, p3, p4)


SCENES: Dict[str, Callable[[], List[Polygon]]] = {
    "pyramid": pyramid_scene,
    "tetrahedron": tetrahedron_scene,
}


def build_space(
    name: str = "pyramid",
    *,
    draw_order: DrawOrder = DrawOrder.DEPTH,
    with_axes: bool = True,
) -> Space:
    """Return a fresh scene holding the axes followed by the named object."""
    try:
        factory = SCENES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown scene object '{name}'") from exc

    space = Space(draw_order=draw_order)
    if with_axes:
        space.extend(axis_lines())
    space.extend(factory())
    return space
