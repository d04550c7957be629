"""Point, vector and matrix primitives for the rotating scene.

Points are transformed as row vectors multiplied on the right by a matrix,
so a matrix's rows are the images of the basis vectors. The same convention
is used when two matrices are composed.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable position in 3D space."""

    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class Vector:
    """Basis row of a :class:`Matrix`."""

    x: float
    y: float
    z: float

    def dot_column(self, m: "Matrix", column: str) -> float:
        return (
            self.x * getattr(m.x, column)
            + self.y * getattr(m.y, column)
            + self.z * getattr(m.z, column)
        )


@dataclass(frozen=True, slots=True)
class Matrix:
    """3x3 transform stored as three basis row vectors."""

    x: Vector
    y: Vector
    z: Vector

    @classmethod
    def identity(cls) -> "Matrix":
        return cls(
            Vector(1.0, 0.0, 0.0),
            Vector(0.0, 1.0, 0.0),
            Vector(0.0, 0.0, 1.0),
        )

    def rows(self) -> tuple[Vector, Vector, Vector]:
        return (self.x, self.y, self.z)


IDENTITY = Matrix.identity()


def distance(a: Point, b: Point) -> float:
    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)


def centroid(points: Sequence[Point]) -> Point:
    if not points:
        raise ValueError("centroid requires at least one point")
    n = float(len(points))
    return Point(
        sum(p.x for p in points) / n,
        sum(p.y for p in points) / n,
        sum(p.z for p in points) / n,
    )


def apply_matrix(m: Matrix, p: Point) -> Point:
    return Point(
        p.x * m.x.x + p.y * m.y.x + p.z * m.z.x,
        p.x * m.x.y + p.y * m.y.y + p.z * m.z.y,
        p.x * m.x.z + p.y * m.y.z + p.z * m.z.z,
    )


def compose(a: Matrix, b: Matrix) -> Matrix:
    """Return ``a x b``: every row of ``a`` multiplied on the right by ``b``."""

    def row(r: Vector) -> Vector:
        return Vector(r.dot_column(b, "x"), r.dot_column(b, "y"), r.dot_column(b, "z"))

    return Matrix(row(a.x), row(a.y), row(a.z))


def rotation_x(angle: float) -> Matrix:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Matrix(
        Vector(1.0, 0.0, 0.0),
        Vector(0.0, cos_a, sin_a),
        Vector(0.0, -sin_a, cos_a),
    )


def rotation_y(angle: float) -> Matrix:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Matrix(
        Vector(cos_a, 0.0, -sin_a),
        Vector(0.0, 1.0, 0.0),
        Vector(sin_a, 0.0, cos_a),
    )


def rotation_z(angle: float) -> Matrix:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Matrix(
        Vector(cos_a, sin_a, 0.0),
        Vector(-sin_a, cos_a, 0.0),
        Vector(0.0, 0.0, 1.0),
    )


def matrices_close(a: Matrix, b: Matrix, tolerance: float = 1e-9) -> bool:
    for row_a, row_b in zip(a.rows(), b.rows()):
        if (
            abs(row_a.x - row_b.x) > tolerance
            or abs(row_a.y - row_b.y) > tolerance
            or abs(row_a.z - row_b.z) > tolerance
        ):
            return False
    return True
