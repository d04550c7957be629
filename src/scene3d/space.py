"""Scene that owns the cumulative rotation and the polygons to draw."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List

from .geometry import IDENTITY, Matrix, Point, compose, rotation_x, rotation_y, rotation_z
from .ordering import REFERENCE_POINT, depth_order
from .polygon import Polygon

if TYPE_CHECKING:
    from .surface import RenderSurface


class DrawOrder(Enum):
    """How :meth:`Space.draw` sequences polygons.

    ``INSERTION`` still computes the depth ordering every frame but renders the
    polygons in the order they were added. ``DEPTH`` renders them back to front.
    """

    INSERTION = "insertion"
    DEPTH = "depth"


_AXIS_ROTATIONS: Dict[str, Callable[[float], Matrix]] = {
    "x": rotation_x,
    "y": rotation_y,
    "z": rotation_z,
}


class Space:
    """Polygons viewed through a rotation accumulated frame by frame."""

    def __init__(
        self,
        *,
        draw_order: DrawOrder = DrawOrder.DEPTH,
        reference: Point = REFERENCE_POINT,
    ) -> None:
        self.matrix: Matrix = IDENTITY
        self.objects: List[Polygon] = []
        self.draw_order = draw_order
        self.reference = reference

    def rotate(self, delta: Matrix) -> None:
        self.matrix = compose(self.matrix, delta)

    def rotate_x(self, angle: float) -> None:
        self.rotate(rotation_x(angle))

    def rotate_y(self, angle: float) -> None:
        self.rotate(rotation_y(angle))

    def rotate_z(self, angle: float) -> None:
        self.rotate(rotation_z(angle))

    def rotate_axis(self, axis: str, angle: float) -> None:
        try:
            factory = _AXIS_ROTATIONS[axis.lower()]
        except KeyError as exc:
            raise ValueError(f"Unknown rotation axis '{axis}'") from exc
        self.rotate(factory(angle))

    def reset(self) -> None:
        self.matrix = IDENTITY

    def add_object(self, polygon: Polygon) -> None:
        self.objects.append(polygon)

    def extend(self, polygons: Iterable[Polygon]) -> None:
        for polygon in polygons:
            self.add_object(polygon)

    def transformed(self) -> List[Polygon]:
        return [polygon.transform(self.matrix) for polygon in self.objects]

    def depth_order(self) -> List[int]:
        return depth_order(self.transformed(), self.reference)

    def draw(self, surface: "RenderSurface") -> None:
        order = self.depth_order()
        if self.draw_order is DrawOrder.INSERTION:
            order = list(range(len(self.objects)))

        for index in order:
            self.objects[index].transform(self.matrix).render(surface)
