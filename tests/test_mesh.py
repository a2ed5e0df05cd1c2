import math
import unittest

from wireframe_projector.math_utils import Mat4, Vec4, radians
from wireframe_projector.mesh import Mesh, Triangle


def assert_vec_close(test, expected, actual, delta=1e-6):
    for i in range(4):
        test.assertAlmostEqual(expected[i], actual[i], delta=delta)


class TriangleTests(unittest.TestCase):
    def test_from_points_requires_nine_coordinates(self) -> None:
        with self.assertRaises(ValueError):
            Triangle.from_points(1, 2, 3)

    def test_clone_is_independent(self) -> None:
        t1 = Triangle.from_points(.5, .5, 0, -.5, -.5, 0, -.5, .5, 0)
        t2 = t1.clone()
        self.assertEqual(t1, t2)
        self.assertIsNot(t1.v1, t2.v1)

        moved = t2.transform(Mat4.translation(1, 0, 0))
        self.assertNotEqual(t1, moved)
        self.assertEqual(t1, t2)

    def test_transform_moves_all_vertices(self) -> None:
        t = Triangle.from_points(0, 0, 0, 1, 0, 0, 0, 1, 0).transform(Mat4.translation(0, 0, 5))
        self.assertEqual([v.z for v in t], [5.0, 5.0, 5.0])

    def test_counter_clockwise_normal(self) -> None:
        t = Triangle.from_points(.5, .5, 0, -.5, .5, 0, -.5, -.5, 0)
        assert_vec_close(self, Vec4(0, 0, 1), t.normal())

        t = Triangle.from_points(-.5, .5, 0, -.5, -.5, 0, .5, .5, 0)
        assert_vec_close(self, Vec4(0, 0, 1), t.normal())

    def test_clockwise_normal(self) -> None:
        t = Triangle.from_points(-.5, -.5, 0, -.5, .5, 0, .5, .5, 0)
        assert_vec_close(self, Vec4(0, 0, -1), t.normal())

        t = Triangle.from_points(.5, .5, 0, -.5, -.5, 0, -.5, .5, 0)
        assert_vec_close(self, Vec4(0, 0, -1), t.normal())

    def test_rotated_clockwise_normal(self) -> None:
        t = Triangle.from_points(-.5, .5, 0, .5, .5, 0, -.5, -.5, 0).transform(
            Mat4.rotation_x(radians(45)))
        assert_vec_close(self, Vec4(0, 0.7071067811865476, -0.7071067811865476), t.normal())

    def test_degenerate_triangle_has_zero_normal(self) -> None:
        t = Triangle.from_points(0, 0, 0, 1, 1, 1, 2, 2, 2)
        self.assertEqual(t.normal().length(), 0.0)


class MeshTests(unittest.TestCase):
    def setUp(self) -> None:
        self.mesh = Mesh([Triangle.from_points(.5, .5, 0, -.5, -.5, 0, -.5, .5, 0)])

    def test_clone(self) -> None:
        copy = self.mesh.clone()
        self.assertEqual(copy, self.mesh)
        self.assertIsNot(copy.triangles[0], self.mesh.triangles[0])
        self.assertNotEqual(copy.move(1, 0, 0), self.mesh)

    def test_transform_returns_new_mesh(self) -> None:
        moved = self.mesh.move(0, 0, 1)
        self.assertEqual(self.mesh.triangles[0].v1, Vec4(.5, .5, 0))
        self.assertEqual(moved.triangles[0].v1, Vec4(.5, .5, 1))

    def test_merge_keeps_order(self) -> None:
        lifted = self.mesh.move(0, 0, 1)
        merged = self.mesh.merge([lifted])
        self.assertEqual(merged.triangles, [
            Triangle.from_points(.5, .5, 0, -.5, -.5, 0, -.5, .5, 0),
            Triangle.from_points(.5, .5, 1, -.5, -.5, 1, -.5, .5, 1),
        ])
        self.assertEqual(len(self.mesh), 1)

    def test_merge_many(self) -> None:
        meshes = [self.mesh.move(0, 0, z) for z in (1, 2, 3)]
        merged = self.mesh.merge(meshes)
        self.assertEqual([t.v1.z for t in merged], [0.0, 1.0, 2.0, 3.0])

    def test_merge_nothing(self) -> None:
        self.assertEqual(self.mesh.merge([]), self.mesh)

    def test_rotate_order(self) -> None:
        m = Mesh([Triangle.from_points(0, 0, 0, 1, 1, 0, 1, 0, 0)])
        t = m.rotate(radians(90), radians(90), radians(90)).triangles[0]
        assert_vec_close(self, Vec4(0, 0, 0), t.v1)
        assert_vec_close(self, Vec4(0, -1, 1), t.v2)
        assert_vec_close(self, Vec4(0, 0, 1), t.v3)

    def test_rotate_matches_matrix_composition(self) -> None:
        ax, ay, az = 0.3, -1.2, 2.0
        expected = self.mesh.transform(
            Mat4.rotation_x(ax) @ Mat4.rotation_y(ay) @ Mat4.rotation_z(az))
        for a, b in zip(self.mesh.rotate(ax, ay, az), expected):
            for va, vb in zip(a, b):
                assert_vec_close(self, vb, va)

    def test_vertices(self) -> None:
        self.assertEqual(len(list(self.mesh.merge([self.mesh]).vertices())), 6)


class CubeTests(unittest.TestCase):
    def test_twelve_triangles(self) -> None:
        self.assertEqual(len(Mesh.cube()), 12)

    def test_vertices_on_unit_cube(self) -> None:
        for v in Mesh.cube().vertices():
            for c in (v.x, v.y, v.z):
                self.assertAlmostEqual(abs(c), 0.5, delta=1e-9)

    def test_faces_point_outwards(self) -> None:
        for t in Mesh.cube():
            centre = (t.v1 + t.v2 + t.v3) * (1.0 / 3.0)
            self.assertGreater(centre.dot(t.normal()), 0.0)

    def test_rotated_cube_keeps_shape(self) -> None:
        cube = Mesh.cube().rotate(math.pi / 4, math.pi / 4, math.pi / 4)
        for t in cube:
            self.assertAlmostEqual(t.normal().length(), 1.0, delta=1e-9)


if __name__ == '__main__':
    unittest.main()
