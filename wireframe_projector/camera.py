#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import threading

from .math_utils import Mat4, radians

logger = logging.getLogger(__name__)


class CameraRig:
    """
    Camera transform shared between input handling and frame rendering.

    Input handlers call move()/turn()/apply(); the render tick calls
    snapshot() and hands the returned matrix to the renderer. Every update
    replaces the stored Mat4 under a lock, so a snapshot is never observed
    half written and never changes after it is taken.
    """
    __slots__ = ('_matrix', '_lock', 'move_step', 'turn_step')

    def __init__(self, matrix: Mat4 = None, move_step: float = 0.25,
                 turn_step: float = 1.0):
        self._matrix = matrix if matrix is not None else Mat4.identity()
        self._lock = threading.Lock()
        self.move_step = move_step   # world units per key press
        self.turn_step = turn_step   # degrees per key press

    @classmethod
    def at_distance(cls, distance: float, **kwargs) -> 'CameraRig':
        """Camera on the +z axis looking back at the origin."""
        return cls(Mat4.translation(0.0, 0.0, distance), **kwargs)

    def snapshot(self) -> Mat4:
        with self._lock:
            return self._matrix

    def apply(self, step: Mat4) -> Mat4:
        """Post-multiply the camera by step (step acts in camera space)."""
        with self._lock:
            self._matrix = self._matrix @ step
            return self._matrix

    def move(self, dx: float, dy: float, dz: float) -> Mat4:
        return self.apply(Mat4.translation(dx, dy, dz))

    def turn(self, degrees: float) -> Mat4:
        """Yaw about the camera's own y axis."""
        return self.apply(Mat4.rotation_y(radians(degrees)))

    # Key bindings

    def forward(self):
        return self.move(0.0, 0.0, -self.move_step)

    def back(self):
        return self.move(0.0, 0.0, self.move_step)

    def left(self):
        return self.move(-self.move_step, 0.0, 0.0)

    def right(self):
        return self.move(self.move_step, 0.0, 0.0)

    def turn_left(self):
        return self.turn(self.turn_step)

    def turn_right(self):
        return self.turn(-self.turn_step)
