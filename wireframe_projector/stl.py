#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/stl.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#
# A crude ASCII STL reader: only `vertex x y z` lines carry meaning, every
# other line (solid, facet normal, outer loop, endloop, ...) is skipped.
# Consecutive vertex triplets form the triangles.
#

import logging
from typing import Iterable, List, Optional, Union

from .math_utils import Mat4, Vec4
from .mesh import Mesh, Triangle

logger = logging.getLogger(__name__)

VERTEX_KEYWORD = 'vertex'


class STLParseError(ValueError):
    """The mesh stream ended part way through a triangle."""

    def __init__(self, message: str, line_no: int):
        super().__init__(f"{message} (line {line_no})")
        self.line_no = line_no


def tokenize(line: Union[str, bytes]) -> List[str]:
    """Split one line into whitespace separated tokens."""
    if isinstance(line, bytes):
        line = line.decode('ascii', errors='replace')
    return line.split()


def parse_coordinate(token: str, line_no: int = 0) -> float:
    """Parse a coordinate; anything that is not a number reads as 0.0."""
    try:
        return float(token)
    except ValueError:
        logger.warning("line %d: unparsable coordinate %r, using 0.0", line_no, token)
        return 0.0


class STLReader:
    """
    Streaming reader over a line iterable (text file, binary file carrying
    ASCII, or a list of strings).

    The reader keeps one piece of state: how many vertices of the current
    triangle have been seen. Hitting the end of the stream with none pending
    ends the mesh; hitting it with one or two pending is an STLParseError.
    """

    def __init__(self, stream: Iterable[Union[str, bytes]]):
        self._lines = iter(stream)
        self.line_no = 0

    def read_vertex(self) -> Optional[Vec4]:
        """Next vertex in the stream, or None at the end of the stream."""
        for line in self._lines:
            self.line_no += 1
            tokens = tokenize(line)
            if len(tokens) < 4 or tokens[0] != VERTEX_KEYWORD:
                continue
            x, y, z = (parse_coordinate(t, self.line_no) for t in tokens[1:4])
            return Vec4(x, y, z)
        return None

    def read_triangle(self) -> Optional[Triangle]:
        """Next triangle (facet) in the stream, or None at the end of the stream."""
        pending = []
        while len(pending) < 3:
            v = self.read_vertex()
            if v is None:
                if not pending:
                    return None
                raise STLParseError("incomplete triangle in mesh stream", self.line_no)
            pending.append(v)
        return Triangle(*pending)

    def __iter__(self):
        t = self.read_triangle()
        while t is not None:
            yield t
            t = self.read_triangle()

    def read_mesh(self, normalize: bool = False) -> Mesh:
        """
        Read triangles until the end of the stream.

        With normalize=True a non-empty mesh is centred on the origin and
        scaled uniformly so its longest bounding box edge is exactly 1.
        """
        mesh = Mesh(self)
        logger.debug("read %d triangles from %d lines", len(mesh), self.line_no)
        if not normalize or not mesh.triangles:
            return mesh

        lo = [min(v[i] for v in mesh.vertices()) for i in range(3)]
        hi = [max(v[i] for v in mesh.vertices()) for i in range(3)]
        extent = [hi[i] - lo[i] for i in range(3)]

        mesh = mesh.move(*(extent[i] / 2.0 - hi[i] for i in range(3)))

        longest = max(extent)
        if longest == 0:
            # Every vertex coincides; centring is all that can be done.
            logger.warning("mesh has an empty bounding box, skipping scaling")
            return mesh
        factor = 1.0 / longest
        return mesh.transform(Mat4.scale(factor, factor, factor))


def load_stl(filename, normalize: bool = True) -> Mesh:
    """Open an ASCII STL file and read it into a Mesh. OSError propagates."""
    with open(filename, 'r', encoding='ascii', errors='replace') as f:
        mesh = STLReader(f).read_mesh(normalize=normalize)
    logger.info("loaded %s: %d triangles", filename, len(mesh))
    return mesh
