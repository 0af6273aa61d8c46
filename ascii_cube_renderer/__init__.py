#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import Mat3
from .config import RenderConfig
from .transform import Transform, rotate
from .projector import Projector, ScreenPoint
from .canvas import FrameBuffer
from .rasterizer import Rasterizer, RasterStats
from .compositor import compose, present
from .display import TerminalSink, BufferSink
from .scene import SceneState
from .animation import CubeAnimation
