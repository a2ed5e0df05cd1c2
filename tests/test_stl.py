import io
import os
import tempfile
import unittest

from wireframe_projector.math_utils import Vec4
from wireframe_projector.mesh import Mesh, Triangle
from wireframe_projector.stl import STLParseError, STLReader, load_stl, parse_coordinate, tokenize

WEDGE = """solid Object01
  facet normal -1.583127e-002 1.253177e-001 9.919903e-001
    outer loop
      vertex -2.131976e+001 -1.033176e+001 3.937008e+001
      vertex -2.131976e+001 -5.408154e-001 3.813319e+001
      vertex -2.375467e+001 -8.484154e-001 3.813319e+001
    endloop
  endfacet
  facet normal -4.649920e-002 1.174435e-001 9.919903e-001
    outer loop
      vertex -2.131976e+001 -1.033176e+001 3.937008e+001
      vertex -2.375467e+001 -8.484154e-001 3.813319e+001
      vertex -2.603659e+001 -1.751890e+000 3.813319e+001
    endloop
  endfacet
endsolid Object01
"""

SINGLE = """solid Object01
  facet normal -1.583127e-002 1.253177e-001 9.919903e-001
    outer loop
      vertex -2e+000 -2e+000 -2e+000
      vertex 0e+000 0e-000 0e+000
      vertex 0e+000 1e-000 0e+000
    endloop
  endfacet
endsolid Object01
"""


class TokenizerTests(unittest.TestCase):
    def test_tokenize_trims_whitespace(self) -> None:
        self.assertEqual(tokenize("\t  vertex 1 2 3  \r\n"), ['vertex', '1', '2', '3'])

    def test_tokenize_bytes(self) -> None:
        self.assertEqual(tokenize(b"vertex 1 2 3\n"), ['vertex', '1', '2', '3'])

    def test_parse_coordinate(self) -> None:
        self.assertEqual(parse_coordinate("-2.131976e+001"), -21.31976)
        self.assertEqual(parse_coordinate("0e-000"), 0.0)

    def test_unparsable_coordinate_is_zero(self) -> None:
        with self.assertLogs('wireframe_projector.stl', level='WARNING'):
            self.assertEqual(parse_coordinate("1.2.3", 7), 0.0)


class ReaderTests(unittest.TestCase):
    def test_read_triangles_in_order(self) -> None:
        reader = STLReader(io.StringIO(WEDGE))
        self.assertEqual(reader.read_triangle(), Triangle(
            Vec4(-21.31976, -10.33176, 39.37008),
            Vec4(-21.31976, -0.5408154, 38.13319),
            Vec4(-23.75467, -0.8484154, 38.13319)))
        self.assertEqual(reader.read_triangle(), Triangle(
            Vec4(-21.31976, -10.33176, 39.37008),
            Vec4(-23.75467, -0.8484154, 38.13319),
            Vec4(-26.03659, -1.75189, 38.13319)))
        self.assertIsNone(reader.read_triangle())
        self.assertIsNone(reader.read_triangle())

    def test_read_vertex_skips_other_lines(self) -> None:
        reader = STLReader(["solid x", "", "# comment", "facet normal 0 0 1",
                            "   vertex 1 2 3", "endsolid x"])
        self.assertEqual(reader.read_vertex(), Vec4(1, 2, 3))
        self.assertEqual(reader.line_no, 5)
        self.assertIsNone(reader.read_vertex())

    def test_short_vertex_line_is_ignored(self) -> None:
        reader = STLReader(["vertex 1 2", "vertexes 1 2 3", "vertex 4 5 6 7"])
        self.assertEqual(reader.read_vertex(), Vec4(4, 5, 6))

    def test_bad_number_reads_as_zero(self) -> None:
        reader = STLReader(["vertex 1 nope 3"])
        with self.assertLogs('wireframe_projector.stl', level='WARNING'):
            self.assertEqual(reader.read_vertex(), Vec4(1, 0, 3))

    def test_binary_stream(self) -> None:
        mesh = STLReader(io.BytesIO(WEDGE.encode('ascii'))).read_mesh()
        self.assertEqual(len(mesh), 2)

    def test_empty_stream(self) -> None:
        self.assertIsNone(STLReader(io.StringIO("")).read_triangle())
        self.assertEqual(len(STLReader(io.StringIO("solid\nendsolid\n")).read_mesh(normalize=True)), 0)

    def test_incomplete_triangle(self) -> None:
        for count in (1, 2):
            lines = ["vertex 0 0 0"] * (3 + count)
            reader = STLReader(lines)
            self.assertIsNotNone(reader.read_triangle())
            with self.assertRaises(STLParseError) as ctx:
                reader.read_triangle()
            self.assertIn("incomplete triangle", str(ctx.exception))
            self.assertEqual(ctx.exception.line_no, 3 + count)

    def test_incomplete_triangle_aborts_mesh(self) -> None:
        with self.assertRaises(STLParseError):
            STLReader(io.StringIO(WEDGE + "vertex 1 1 1\n")).read_mesh()

    def test_iterate(self) -> None:
        self.assertEqual(len(list(STLReader(io.StringIO(WEDGE)))), 2)


class NormalizeTests(unittest.TestCase):
    def test_normalized_single_triangle(self) -> None:
        mesh = STLReader(io.StringIO(SINGLE)).read_mesh(normalize=True)
        self.assertEqual(len(mesh), 1)
        t = mesh.triangles[0]
        expected = [(-1 / 3, -1 / 2, -1 / 3), (1 / 3, 1 / 6, 1 / 3), (1 / 3, 1 / 2, 1 / 3)]
        for v, (x, y, z) in zip(t, expected):
            self.assertAlmostEqual(v.x, x, delta=1e-12)
            self.assertAlmostEqual(v.y, y, delta=1e-12)
            self.assertAlmostEqual(v.z, z, delta=1e-12)
            self.assertEqual(v.w, 1.0)

    def test_normalized_bounding_box(self) -> None:
        mesh = STLReader(io.StringIO(WEDGE)).read_mesh(normalize=True)
        extents = []
        for i in range(3):
            lo = min(v[i] for v in mesh.vertices())
            hi = max(v[i] for v in mesh.vertices())
            self.assertAlmostEqual(lo + hi, 0.0, delta=1e-9)
            extents.append(hi - lo)
        self.assertAlmostEqual(max(extents), 1.0, delta=1e-9)

    def test_raw_mesh_is_untouched(self) -> None:
        mesh = STLReader(io.StringIO(SINGLE)).read_mesh(normalize=False)
        self.assertEqual(mesh.triangles[0].v1, Vec4(-2, -2, -2))

    def test_flat_point_mesh_is_only_centred(self) -> None:
        mesh = STLReader(["vertex 3 3 3"] * 3).read_mesh(normalize=True)
        for v in mesh.vertices():
            self.assertEqual((v.x, v.y, v.z), (0.0, 0.0, 0.0))


class LoadTests(unittest.TestCase):
    def test_load_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'single.stl')
            with open(path, 'w') as f:
                f.write(SINGLE)
            mesh = load_stl(path)
            self.assertAlmostEqual(mesh.triangles[0].v1.y, -0.5, delta=1e-12)
            self.assertEqual(Mesh.from_stl(path, normalize=False).triangles[0].v1, Vec4(-2, -2, -2))

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(OSError):
                load_stl(os.path.join(tmp, 'missing.stl'))


if __name__ == '__main__':
    unittest.main()
