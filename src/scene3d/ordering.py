"""Back-to-front ordering of polygons by centroid distance.

This is the painter's algorithm approximation: polygons whose centroid lies
farthest from a fixed reference point are drawn first. Polygons with
overlapping depth ranges can still come out in the wrong order.
"""

from __future__ import annotations

from typing import List, Sequence

from .geometry import Point, centroid, distance
from .polygon import Polygon

REFERENCE_POINT = Point(0.0, 0.0, 200.0)


def depth_key(polygon: Polygon, reference: Point = REFERENCE_POINT) -> float:
    return distance(centroid(polygon.points), reference)


def depth_order(polygons: Sequence[Polygon], reference: Point = REFERENCE_POINT) -> List[int]:
    """Return polygon indices sorted by descending distance from ``reference``.

    Ties keep their insertion order.
    """
    keys = [depth_key(polygon, reference) for polygon in polygons]
    return sorted(range(len(polygons)), key=lambda index: keys[index], reverse=True)


def painter_sort(polygons: Sequence[Polygon], reference: Point = REFERENCE_POINT) -> List[Polygon]:
    return [polygons[index] for index in depth_order(polygons, reference)]
