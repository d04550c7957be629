import unittest

from src.scene3d.geometry import IDENTITY, Point, apply_matrix, matrices_close, rotation_x
from src.scene3d.objects import PYRAMID_POINTS, axis_lines, build_space, pyramid
from src.scene3d.ordering import depth_key
from src.scene3d.polygon import Polygon
from src.scene3d.space import DrawOrder, Space

GREY = (128, 128, 128, 255)


class RecordingSurface:
    """Collects the outlines a scene submits, one list of vertices per polygon."""

    def __init__(self) -> None:
        self.outlines = []
        self._current = []
        self.line_widths = []

    def push(self, x, y, color) -> None:
        self._current.append((x, y, color))

    def polygon(self, line_width) -> None:
        self.outlines.append(self._current)
        self.line_widths.append(line_width)
        self._current = []


def triangle_at(z: float, color=GREY) -> Polygon:
    return Polygon((Point(-1.0, 0.0, z), Point(1.0, 0.0, z), Point(0.0, 0.0, z)), color)


class SpaceRotationTests(unittest.TestCase):
    def test_starts_empty_at_identity(self) -> None:
        space = Space()
        self.assertEqual(space.matrix, IDENTITY)
        self.assertEqual(space.objects, [])

    def test_zero_rotations_are_no_ops(self) -> None:
        space = Space()
        space.rotate_x(0.0)
        space.rotate_y(0.0)
        space.rotate_z(0.0)
        self.assertTrue(matrices_close(space.matrix, IDENTITY, 0.0))

    def test_inverse_rotation_restores_matrix(self) -> None:
        space = Space()
        space.rotate_x(-0.33)
        before = space.matrix
        space.rotate_z(0.8)
        space.rotate_z(-0.8)
        self.assertTrue(matrices_close(space.matrix, before, 1e-12))

    def test_rotation_accumulates(self) -> None:
        space = Space()
        for _ in range(10):
            space.rotate_x(0.1)
        self.assertTrue(matrices_close(space.matrix, rotation_x(1.0), 1e-12))

    def test_rotate_axis_dispatch(self) -> None:
        by_name = Space()
        by_method = Space()
        by_name.rotate_axis("Y", 0.25)
        by_method.rotate_y(0.25)
        self.assertEqual(by_name.matrix, by_method.matrix)

        with self.assertRaises(ValueError):
            by_name.rotate_axis("w", 0.1)

    def test_reset(self) -> None:
        space = Space()
        space.rotate_z(1.0)
        space.reset()
        self.assertEqual(space.matrix, IDENTITY)

    def test_add_object_keeps_duplicates(self) -> None:
        space = Space()
        polygon = triangle_at(0.0)
        space.add_object(polygon)
        space.add_object(polygon)
        self.assertEqual(space.objects, [polygon, polygon])


class SpaceDrawTests(unittest.TestCase):
    def setUp(self) -> None:
        self.near = triangle_at(190.0, (1, 0, 0, 255))
        self.far = triangle_at(150.0, (2, 0, 0, 255))
        self.middle = triangle_at(170.0, (3, 0, 0, 255))

    def _drawn_colors(self, space: Space):
        surface = RecordingSurface()
        space.draw(surface)
        return [outline[0][2] for outline in surface.outlines]

    def test_depth_order_draws_back_to_front(self) -> None:
        space = Space(draw_order=DrawOrder.DEPTH)
        space.extend([self.near, self.far, self.middle])

        self.assertEqual(space.depth_order(), [1, 2, 0])
        self.assertEqual(
            self._drawn_colors(space),
            [self.far.color, self.middle.color, self.near.color],
        )

    def test_insertion_order_ignores_sorting(self) -> None:
        space = Space(draw_order=DrawOrder.INSERTION)
        space.extend([self.near, self.far, self.middle])

        self.assertEqual(space.depth_order(), [1, 2, 0])
        self.assertEqual(
            self._drawn_colors(space),
            [self.near.color, self.far.color, self.middle.color],
        )

    def test_ordering_uses_rotated_points(self) -> None:
        space = Space()
        space.extend([self.near, self.far])
        # Half a turn about X sends z to -z, so the old "near" becomes farthest.
        space.rotate_x(3.141592653589793)
        self.assertEqual(space.depth_order(), [0, 1])

    def test_draw_does_not_mutate_objects(self) -> None:
        space = Space()
        space.extend(pyramid(*PYRAMID_POINTS))
        before = list(space.objects)
        space.rotate_y(0.5)
        space.draw(RecordingSurface())
        self.assertEqual(space.objects, before)

    def test_pyramid_scene_vertices_match_rotation(self) -> None:
        for order in DrawOrder:
            with self.subTest(order=order):
                space = build_space("pyramid", draw_order=order)
                space.rotate_x(-0.33)
                expected_matrix = rotation_x(-0.33)
                self.assertTrue(matrices_close(space.matrix, expected_matrix))

                surface = RecordingSurface()
                space.draw(surface)

                self.assertEqual(len(space.objects), 8)
                self.assertEqual(len(surface.outlines), 8)
                self.assertEqual(surface.line_widths, [1] * 8)

                transformed = [polygon.transform(space.matrix) for polygon in space.objects]
                if order is DrawOrder.DEPTH:
                    keys = [depth_key(polygon) for polygon in transformed]
                    indices = sorted(range(len(keys)), key=lambda i: keys[i], reverse=True)
                else:
                    indices = list(range(len(space.objects)))

                for index, outline in zip(indices, surface.outlines):
                    polygon = space.objects[index]
                    points = list(polygon.points) + [polygon.points[0]]
                    self.assertEqual(len(outline), len(points))
                    for (x, y, color), point in zip(outline, points):
                        rotated = apply_matrix(expected_matrix, point)
                        self.assertAlmostEqual(x, rotated.x)
                        self.assertAlmostEqual(y, rotated.y)
                        self.assertEqual(color, polygon.color)

    def test_axis_lines_are_degenerate_triangles(self) -> None:
        axes = axis_lines()
        self.assertEqual(len(axes), 3)
        for axis in axes:
            self.assertEqual(axis.points[0], axis.points[1])
            self.assertEqual(axis.color, (0, 0, 0, 255))


if __name__ == "__main__":
    unittest.main()
