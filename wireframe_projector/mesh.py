#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/mesh.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import Iterable, List, Sequence

from .math_utils import Mat4, Vec4


class Triangle:
    """Three ordered vertices. The order is the winding and fixes the normal's sign."""
    __slots__ = ('v1', 'v2', 'v3')

    def __init__(self, v1: Vec4, v2: Vec4, v3: Vec4):
        self.v1 = v1
        self.v2 = v2
        self.v3 = v3

    @classmethod
    def from_points(cls, *coords: float) -> 'Triangle':
        """Build a triangle from nine coordinates: x1, y1, z1, ..., z3."""
        if len(coords) != 9:
            raise ValueError(f"expected 9 coordinates, got {len(coords)}")
        return cls(Vec4(*coords[0:3]), Vec4(*coords[3:6]), Vec4(*coords[6:9]))

    def __repr__(self):
        return f"Triangle({self.v1!r}, {self.v2!r}, {self.v3!r})"

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.v1 == other.v1 and self.v2 == other.v2 and self.v3 == other.v3

    __hash__ = None

    def __iter__(self):
        yield self.v1
        yield self.v2
        yield self.v3

    def clone(self) -> 'Triangle':
        return Triangle(Vec4(*self.v1), Vec4(*self.v2), Vec4(*self.v3))

    def transform(self, mat: Mat4) -> 'Triangle':
        return Triangle(self.v1.transform(mat), self.v2.transform(mat), self.v3.transform(mat))

    def normal(self) -> Vec4:
        """
        Counter-clockwise winding (seen from the viewer) points the normal at
        the viewer; clockwise winding points it away.
        """
        return (self.v2 - self.v1).cross(self.v3 - self.v1)


class Mesh:
    """Ordered list of triangles. Every operation returns a new Mesh."""

    def __init__(self, triangles: Iterable[Triangle] = ()):
        self.triangles: List[Triangle] = list(triangles)

    def __repr__(self):
        return f"Mesh({len(self.triangles)} triangles)"

    def __len__(self):
        return len(self.triangles)

    def __iter__(self):
        return iter(self.triangles)

    def __eq__(self, other):
        if not isinstance(other, Mesh):
            return NotImplemented
        return self.triangles == other.triangles

    __hash__ = None

    def clone(self) -> 'Mesh':
        return Mesh(t.clone() for t in self.triangles)

    def merge(self, others: Sequence['Mesh']) -> 'Mesh':
        """This mesh's triangles followed by each other mesh's, in order."""
        merged = self.clone()
        for other in others:
            merged.triangles.extend(t.clone() for t in other.triangles)
        return merged

    def transform(self, mat: Mat4) -> 'Mesh':
        return Mesh(t.transform(mat) for t in self.triangles)

    def move(self, dx: float, dy: float, dz: float) -> 'Mesh':
        return self.transform(Mat4.translation(dx, dy, dz))

    def rotate(self, ax: float, ay: float, az: float) -> 'Mesh':
        """Rotate by the given angles in radians; Z is applied first, then Y, then X."""
        return self.transform(Mat4.rotation_x(ax) @ (Mat4.rotation_y(ay) @ Mat4.rotation_z(az)))

    def vertices(self):
        for t in self.triangles:
            yield from t

    @classmethod
    def cube(cls) -> 'Mesh':
        """Unit cube centred at the origin, 12 outward-facing triangles."""
        # counter-clockwise vertex winding
        top = cls([
            Triangle.from_points(.5, .5, .5, -.5, .5, .5, -.5, -.5, .5),
            Triangle.from_points(-.5, -.5, .5, .5, -.5, .5, .5, .5, .5),
        ])
        quarter = math.pi / 2
        return top.merge([
            top.rotate(math.pi, 0, 0),    # bottom
            top.rotate(quarter, 0, 0),    # north
            top.rotate(-quarter, 0, 0),   # south
            top.rotate(0, quarter, 0),    # west
            top.rotate(0, -quarter, 0),   # east
        ])

    @classmethod
    def from_stl(cls, filename, normalize: bool = True) -> 'Mesh':
        """Factory method to create a mesh from an ASCII STL file."""
        from .stl import load_stl
        return load_stl(filename, normalize=normalize)
