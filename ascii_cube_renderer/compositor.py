#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/compositor.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .canvas import FrameBuffer

CURSOR_HOME = "\x1b[H"


def compose(frame: FrameBuffer, home: str = CURSOR_HOME) -> str:
    """
    Serialize the glyph buffer into one text block: the cursor-home prefix,
    then every row followed by a newline. Nothing follows the last newline.
    """
    width = frame.width
    glyph = frame.glyph
    parts = [home]
    for start in range(0, width * frame.height, width):
        parts.extend(glyph[start:start + width])
        parts.append('\n')
    return ''.join(parts)


def present(sink, frame: FrameBuffer, home: str = CURSOR_HOME) -> str:
    """Write the composed frame to sink in a single write, then flush."""
    block = compose(frame, home)
    sink.write(block)
    sink.flush()
    return block
