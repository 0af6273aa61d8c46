#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from dataclasses import dataclass

from .canvas import FrameBuffer
from .config import DEFAULT_FACE_GLYPHS
from .projector import Projector
from .transform import Transform

FACE_NAMES = ('front', 'right', 'left', 'back', 'bottom', 'top')

# draw_point() outcomes
REJECTED = 0   # behind the camera
CLIPPED = 1    # projected outside the viewport
OCCLUDED = 2   # lost the depth test
WRITTEN = 3


@dataclass
class RasterStats:
    samples: int = 0
    rejected: int = 0
    clipped: int = 0
    occluded: int = 0
    written: int = 0

    def count(self, outcome: int):
        self.samples += 1
        if outcome == WRITTEN:
            self.written += 1
        elif outcome == OCCLUDED:
            self.occluded += 1
        elif outcome == CLIPPED:
            self.clipped += 1
        else:
            self.rejected += 1


def sample_axis(half_extent: float, step: float):
    """
    Grid coordinates covering [-half_extent, half_extent) at the given step.
    Each value is computed from its index rather than accumulated, so the
    sequence does not drift.
    """
    values = []
    n = 0
    while True:
        v = -half_extent + n * step
        if v >= half_extent:
            break
        values.append(v)
        n += 1
    return values


def face_points(u: float, v: float, h: float):
    """
    The six face samples for grid position (u, v), in FACE_NAMES order.
    Side faces swap or negate u so every face is oriented outward.
    """
    return (
        (u, v, -h),     # front
        (h, v, u),      # right
        (-h, v, -u),    # left
        (-u, v, h),     # back
        (u, -h, -v),    # bottom
        (u, h, v),      # top
    )


class Rasterizer:
    """
    Point-samples the cube surface into a FrameBuffer.

    Every sample is rotated, projected, clipped to the viewport and then
    depth-tested against the buffer: it is kept only if its inverse depth is
    strictly greater than what is stored, so equal depths keep the earlier
    sample.
    """

    def __init__(self, projector: Projector, half_extent: float,
                 step: float = 0.8, glyphs=DEFAULT_FACE_GLYPHS):
        self.projector = projector
        self.half_extent = half_extent
        self.step = step
        self.glyphs = tuple(glyphs)
        self.axis = sample_axis(half_extent, step)

    @classmethod
    def from_config(cls, config) -> 'Rasterizer':
        return cls(Projector.from_config(config), config.cube_half_extent,
                   config.sample_step, config.face_glyphs)

    def use_scene(self, scene):
        """Take camera distance, zoom and cube size from the scene for the next render."""
        self.projector.distance = scene.camera_distance
        self.projector.zoom = scene.zoom
        if scene.half_extent != self.half_extent:
            self.half_extent = scene.half_extent
            self.axis = sample_axis(self.half_extent, self.step)

    def draw_point(self, frame: FrameBuffer, transform: Transform,
                   x: float, y: float, z: float, glyph: str) -> int:
        """Rasterize one sample. Returns REJECTED, CLIPPED, OCCLUDED or WRITTEN."""
        rx, ry, rz = transform.apply(x, y, z)
        point = self.projector.project(rx, ry, rz)
        if point is None:
            return REJECTED

        col, row, inv_z = point
        if col < 0 or col >= frame.width or row < 0 or row >= frame.height:
            return CLIPPED

        index = row * frame.width + col
        if inv_z > frame.depth[index]:
            frame.depth[index] = inv_z
            frame.glyph[index] = glyph
            return WRITTEN
        return OCCLUDED

    def render(self, frame: FrameBuffer, transform: Transform) -> RasterStats:
        """Sample all six faces into frame. The caller resets frame first."""
        stats = RasterStats()
        count = stats.count
        draw = self.draw_point
        glyphs = self.glyphs
        h = self.half_extent
        axis = self.axis

        for u in axis:
            for v in axis:
                for (x, y, z), glyph in zip(face_points(u, v, h), glyphs):
                    count(draw(frame, transform, x, y, z, glyph))
        return stats
