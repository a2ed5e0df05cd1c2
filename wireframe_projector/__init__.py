#
# PROJECT: wireframe-projector
# MODULE: wireframe_projector/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import Vec4, Mat4, SingularMatrixError, DegenerateAxisError
from .mesh import Triangle, Mesh
from .stl import STLReader, STLParseError, load_stl
from .projector import Projector
from .renderer import Renderer, render_frame, is_front_facing
from .camera import CameraRig
from .config import RenderConfig
from .canvas import Canvas
from .logging_config import setup_logging
