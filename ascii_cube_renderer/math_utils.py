#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import math

TAU = 2.0 * math.pi


class Mat3:
    """3x3 rotation matrix, [row][col] storage."""
    __slots__ = ('m',)

    def __init__(self, data=None):
        if data:
            self.m = data
        else:
            self.m = [[0.0] * 3 for _ in range(3)]

    @classmethod
    def identity(cls) -> 'Mat3':
        res = cls()
        for i in range(3):
            res.m[i][i] = 1.0
        return res

    @classmethod
    def rotation_x(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c, s = math.cos(rad), math.sin(rad)
        mat.m[1][1], mat.m[1][2] = c, -s
        mat.m[2][1], mat.m[2][2] = s, c
        return mat

    @classmethod
    def rotation_y(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c, s = math.cos(rad), math.sin(rad)
        mat.m[0][0], mat.m[0][2] = c, s
        mat.m[2][0], mat.m[2][2] = -s, c
        return mat

    @classmethod
    def rotation_z(cls, rad: float) -> 'Mat3':
        mat = cls.identity()
        c, s = math.cos(rad), math.sin(rad)
        mat.m[0][0], mat.m[0][1] = c, -s
        mat.m[1][0], mat.m[1][1] = s, c
        return mat

    @classmethod
    def euler(cls, a: float, b: float, c: float) -> 'Mat3':
        """Rotate about X by a, then Y by b, then Z by c: Rz(c) @ Ry(b) @ Rx(a)."""
        return cls.rotation_z(c) @ cls.rotation_y(b) @ cls.rotation_x(a)

    def __matmul__(self, other):
        if not isinstance(other, Mat3):
            return NotImplemented
        a, b = self.m, other.m
        return Mat3([[sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3)]
                     for r in range(3)])


def wrap_angle(rad: float) -> float:
    """Fold an angle into [0, 2*pi)."""
    return rad % TAU
