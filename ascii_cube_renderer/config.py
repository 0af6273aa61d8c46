#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import os
import shutil
from dataclasses import dataclass, field
from typing import Tuple

# Glyph per face in rasterizer order: front, right, left, back, bottom, top
DEFAULT_FACE_GLYPHS = ('@', '#', '%', '.', '=', '^')


@dataclass
class RenderConfig:
    """Startup constants for the cube renderer and its animation loop."""
    width: int = 80
    height: int = 24
    cube_half_extent: float = 20.0
    camera_distance: float = 100.0
    zoom: float = 30.0
    sample_step: float = 0.8
    rotation_step: Tuple[float, float, float] = (0.05, 0.05, 0.01)
    frame_delay: float = 0.016   # seconds, slept after each frame
    normalize_angles: bool = True
    use_ansi: bool = True
    background: str = ' '
    face_glyphs: Tuple[str, ...] = field(default=DEFAULT_FACE_GLYPHS)

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError if any field is out of range."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"viewport must be positive, got {self.width}x{self.height}")
        if self.cube_half_extent <= 0:
            raise ValueError("cube_half_extent must be positive")
        if self.camera_distance <= 0:
            raise ValueError("camera_distance must be positive")
        if self.zoom <= 0:
            raise ValueError("zoom must be positive")
        if self.sample_step <= 0:
            raise ValueError("sample_step must be positive")
        if self.frame_delay < 0:
            raise ValueError("frame_delay cannot be negative")
        if len(self.rotation_step) != 3:
            raise ValueError("rotation_step needs exactly three increments")
        if len(self.face_glyphs) != 6:
            raise ValueError("face_glyphs needs one glyph per cube face (6)")
        for glyph in (self.background,) + tuple(self.face_glyphs):
            if not isinstance(glyph, str) or len(glyph) != 1:
                raise ValueError(f"glyph {glyph!r} is not a single character")

    @classmethod
    def detect_terminal(cls, fit: bool = False, **overrides) -> 'RenderConfig':
        """
        Build a config from the environment.
        Checks TERM for ANSI support; with fit=True the viewport follows the
        terminal size, leaving the last row free so the final newline
        does not scroll the frame.
        """
        term = os.environ.get('TERM', '').lower()
        # Dumb terminals ignore cursor control, so skip the escape codes there
        overrides.setdefault('use_ansi', term not in ('dumb', 'unknown'))

        if fit:
            size = shutil.get_terminal_size(fallback=(80, 25))
            overrides.setdefault('width', max(1, size.columns))
            overrides.setdefault('height', max(1, size.lines - 1))

        return cls(**overrides)
