#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

class FrameBuffer:
    """
    Depth and glyph buffers for one frame, indexed by row * width + col.

    depth holds inverse depth (1 / z), so larger is closer and 0.0 means
    nothing has been drawn there yet. Both lists are allocated once and
    overwritten in place by reset(), so memory stays flat across frames.
    """
    __slots__ = ['width', 'height', 'background', 'depth', 'glyph',
                 '_clear_depth', '_clear_glyph']

    def __init__(self, width: int, height: int, background: str = ' '):
        self.width, self.height = width, height
        self.background = background
        size = width * height
        self.depth = [0.0] * size
        self.glyph = [background] * size
        # Templates copied over the live buffers on reset
        self._clear_depth = [0.0] * size
        self._clear_glyph = [background] * size

    def __len__(self):
        return self.width * self.height

    def reset(self):
        """Mark every cell infinitely far and blank."""
        self.depth[:] = self._clear_depth
        self.glyph[:] = self._clear_glyph

    def index(self, col: int, row: int) -> int:
        return row * self.width + col

    def get(self, index: int):
        """Return (depth, glyph) stored at index."""
        return self.depth[index], self.glyph[index]

    def set(self, index: int, depth: float, glyph: str):
        self.depth[index] = depth
        self.glyph[index] = glyph

    def row(self, r: int) -> str:
        start = r * self.width
        return ''.join(self.glyph[start:start + self.width])

    def coverage(self) -> int:
        """Number of cells holding a face glyph."""
        bg = self.background
        return sum(1 for g in self.glyph if g != bg)
