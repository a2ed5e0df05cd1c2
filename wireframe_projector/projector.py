#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/projector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from typing import Tuple

from .math_utils import Vec4, radians


class Projector:
    """
    Perspective projection onto a square raster.

    The camera sits at the origin looking down -z. Points with z >= 0 are
    not guarded against and project to inverted or infinite coordinates.
    """
    __slots__ = ('fov', 'size', 'plane', 'scale')

    def __init__(self, resolution: int, fov: float):
        if resolution < 1:
            raise ValueError("Projector requires a resolution of at least 1 pixel")
        if not 0.0 < fov < 180.0:
            raise ValueError("Projector field of view must be between 0 and 180 degrees")
        self.fov = radians(fov)                  # radians
        self.size = int(resolution)              # pixels per side
        self.plane = math.tan(self.fov / 2.0)    # half the width of the projection plane
        self.scale = self.size / (self.plane * 2.0)

    def __repr__(self):
        return f"Projector(size={self.size}, plane={self.plane:.4f})"

    def project(self, v: Vec4) -> Tuple[float, float]:
        """Pixel coordinates of v: projection plane, then NDC, then raster space."""
        return (
            (v.x / -v.z + self.plane) * self.scale,
            (v.y / -v.z + self.plane) * self.scale,
        )
