"""Rotating flat-shaded polygon scene drawn with the painter's algorithm."""

from .animation import FRAME_LENGTH, Animator
from .geometry import IDENTITY, Matrix, Point, Vector, apply_matrix, centroid, compose, distance
from .objects import axis_lines, build_space, pyramid, tetrahedron
from .ordering import REFERENCE_POINT, depth_order
from .polygon import InvalidGeometry, Polygon
from .space import DrawOrder, Space
from .surface import RenderSurface, SurfaceUnavailable, TerminalSurface
from .terminal import TerminalController

__all__ = [
    "Animator",
    "DrawOrder",
    "FRAME_LENGTH",
    "IDENTITY",
    "InvalidGeometry",
    "Matrix",
    "Point",
    "Polygon",
    "REFERENCE_POINT",
    "RenderSurface",
    "Space",
    "SurfaceUnavailable",
    "TerminalController",
    "TerminalSurface",
    "Vector",
    "apply_matrix",
    "axis_lines",
    "build_space",
    "centroid",
    "compose",
    "depth_order",
    "distance",
    "pyramid",
    "tetrahedron",
]
