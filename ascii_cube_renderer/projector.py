#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/projector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from typing import NamedTuple, Optional


class ScreenPoint(NamedTuple):
    col: int
    row: int
    inv_z: float


class Projector:
    """
    Perspective projection onto the character grid.

    Columns are scaled twice as much as rows because a terminal cell is
    roughly twice as tall as it is wide. Results are not bounds-checked.
    """
    __slots__ = ('width', 'height', 'distance', 'zoom', 'half_w', 'half_h')

    def __init__(self, width: int, height: int, distance: float, zoom: float):
        self.width = width
        self.height = height
        self.distance = distance
        self.zoom = zoom
        # Integer centre, so odd sizes round down
        self.half_w = width // 2
        self.half_h = height // 2

    @classmethod
    def from_config(cls, config) -> 'Projector':
        return cls(config.width, config.height,
                   config.camera_distance, config.zoom)

    def project(self, x: float, y: float, z: float) -> Optional[ScreenPoint]:
        """Return the ScreenPoint for a rotated point, or None if it is behind the camera."""
        shifted_z = z + self.distance
        if shifted_z <= 0:
            return None

        inv_z = 1.0 / shifted_z
        scale = self.zoom * inv_z
        # int() truncates toward zero
        col = int(self.half_w + scale * x * 2)
        row = int(self.half_h + scale * y)
        return ScreenPoint(col, row, inv_z)
