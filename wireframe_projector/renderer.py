#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math
from typing import List, Tuple

from .math_utils import Mat4, radians
from .mesh import Mesh, Triangle
from .projector import Projector

logger = logging.getLogger(__name__)

Point2 = Tuple[float, float]
# Closed outline: (p1, p2, p3, p1)
Polyline = Tuple[Point2, Point2, Point2, Point2]

# Fixed tilt of the spinning model: stand it up, then lean it like the earth's axis.
MODEL_TILT_X = math.pi / 2.0
MODEL_TILT_Y = radians(23.4)


def is_front_facing(t: Triangle) -> bool:
    """Back-face test for a camera at the origin looking down -z."""
    return t.v1.dot(t.normal()) < 0.0


def render_frame(mesh: Mesh, model_transform: Mat4, camera_transform: Mat4,
                 projector: Projector) -> List[Polyline]:
    """
    Transform the mesh into camera space, drop back faces and project the
    rest to closed pixel-space outlines, in mesh order.

    Pure: the input mesh is left untouched. Raises SingularMatrixError if
    camera_transform cannot be inverted.
    """
    view = mesh.transform(model_transform).transform(camera_transform.inverse())

    polylines = []
    for t in view:
        if not is_front_facing(t):
            continue
        p1 = projector.project(t.v1)
        p2 = projector.project(t.v2)
        p3 = projector.project(t.v3)
        polylines.append((p1, p2, p3, p1))

    logger.debug("frame: %d of %d triangles visible", len(polylines), len(mesh))
    return polylines


def spin_angle(seconds: float, period: float) -> float:
    """Rotation angle in radians after `seconds`, one revolution per `period`."""
    return (seconds % period) * (2.0 * math.pi / period)


class Renderer:
    """
    Stateless frame producer.

    frame(mesh, camera_matrix, seconds) spins the mesh about its tilted axis
    and returns the visible outlines. The camera matrix is read, never
    modified; callers sharing it with an input path pass a snapshot.
    """

    def __init__(self, projector: Projector, rotation_period: float = 30.0):
        if rotation_period <= 0:
            raise ValueError("rotation period must be positive")
        self.projector = projector
        self.rotation_period = rotation_period

    def model_transform(self, seconds: float) -> Mat4:
        angle = spin_angle(seconds, self.rotation_period)
        return (Mat4.rotation_x(MODEL_TILT_X) @ Mat4.rotation_y(MODEL_TILT_Y)
                @ Mat4.rotation_z(angle))

    def frame(self, mesh: Mesh, camera_matrix: Mat4, seconds: float) -> List[Polyline]:
        return render_frame(mesh, self.model_transform(seconds), camera_matrix, self.projector)
