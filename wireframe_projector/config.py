#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import os
from dataclasses import dataclass
from typing import Optional

from .math_utils import Mat4


@dataclass
class RenderConfig:
    """Configuration for the projection pipeline and the terminal front end."""
    resolution: Optional[int] = 600   # pixels per side; None = fit the terminal
    fov: float = 52.0                 # degrees
    rotation_period: float = 30.0     # seconds per full revolution
    camera_distance: float = 2.0
    normalize: bool = True
    use_braille: bool = True
    move_step: float = 0.25
    turn_step: float = 1.0            # degrees

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.resolution is not None and self.resolution < 1:
            raise ValueError(f"resolution must be a positive pixel count, got {self.resolution}")
        if not 0.0 < self.fov < 180.0:
            raise ValueError(f"fov must be between 0 and 180 degrees, got {self.fov}")
        if self.rotation_period <= 0:
            raise ValueError(f"rotation_period must be positive, got {self.rotation_period}")

    def initial_camera(self) -> Mat4:
        return Mat4.translation(0.0, 0.0, self.camera_distance)

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Default config for the current terminal. Checks TERM and LANG to
        decide whether Braille cells can be drawn; the raster fits the
        terminal instead of a fixed resolution.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        settings = dict(
            resolution=None,
            # Linux console font often lacks braille
            use_braille=supports_utf8 and not is_linux_console,
        )
        settings.update(overrides)
        return cls(**settings)
