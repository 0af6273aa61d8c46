#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/transform.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

from .math_utils import Mat3


def rotate(i: float, j: float, k: float, a: float, b: float, c: float):
    """Rotate (i, j, k) about X by a, Y by b, then Z by c. Returns (x, y, z)."""
    sa, ca = math.sin(a), math.cos(a)
    sb, cb = math.sin(b), math.cos(b)
    sc, cc = math.sin(c), math.cos(c)

    x = (i * cc * cb + j * cc * sb * sa - j * sc * ca
         + k * cc * sb * ca + k * sc * sa)
    y = (i * sc * cb + j * sc * sb * sa + j * cc * ca
         + k * sc * sb * ca - k * cc * sa)
    z = -i * sb + j * cb * sa + k * cb * ca
    return x, y, z


class Transform:
    """
    Rotation for a single frame.

    The nine matrix coefficients are computed once from the scene angles so
    the rasterizer's inner loop is only multiplies and adds. Produces the
    same result as rotate() for the same angles.
    """
    __slots__ = ('m0', 'm1', 'm2', 'm3', 'm4', 'm5', 'm6', 'm7', 'm8')

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 0.0):
        m = Mat3.euler(a, b, c).m
        self.m0, self.m1, self.m2 = m[0]
        self.m3, self.m4, self.m5 = m[1]
        self.m6, self.m7, self.m8 = m[2]

    @classmethod
    def from_scene(cls, scene) -> 'Transform':
        return cls(scene.angle_a, scene.angle_b, scene.angle_c)

    def apply(self, i: float, j: float, k: float):
        return (i * self.m0 + j * self.m1 + k * self.m2,
                i * self.m3 + j * self.m4 + k * self.m5,
                i * self.m6 + j * self.m7 + k * self.m8)
