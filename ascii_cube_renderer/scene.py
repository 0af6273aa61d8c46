#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .math_utils import wrap_angle


class SceneState:
    """
    Mutable scene for the animation loop.

    Holds the three rotation angles (radians) plus the fixed cube size,
    camera distance and zoom. Only advance() changes anything.
    """
    __slots__ = ('angle_a', 'angle_b', 'angle_c',
                 'half_extent', 'camera_distance', 'zoom', 'normalize')

    def __init__(self, half_extent: float = 20.0, camera_distance: float = 100.0,
                 zoom: float = 30.0, normalize: bool = True):
        self.angle_a = 0.0       # rotation about X
        self.angle_b = 0.0       # rotation about Y
        self.angle_c = 0.0       # rotation about Z
        self.half_extent = half_extent
        self.camera_distance = camera_distance
        self.zoom = zoom
        self.normalize = normalize

    @classmethod
    def from_config(cls, config) -> 'SceneState':
        return cls(config.cube_half_extent, config.camera_distance,
                   config.zoom, config.normalize_angles)

    @property
    def angles(self):
        return self.angle_a, self.angle_b, self.angle_c

    def advance(self, da: float, db: float, dc: float):
        """Add one frame's rotation increments, wrapping to [0, 2*pi) when normalize is set."""
        self.angle_a += da
        self.angle_b += db
        self.angle_c += dc
        if self.normalize:
            self.angle_a = wrap_angle(self.angle_a)
            self.angle_b = wrap_angle(self.angle_b)
            self.angle_c = wrap_angle(self.angle_c)
