#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/display.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import sys

CLEAR_SCREEN = "\x1b[2J\x1b[H"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TerminalSink:
    """
    Writes frames and ANSI control sequences to a text stream (stdout by
    default). With use_ansi=False the control sequences are skipped and
    only frame text is written.
    """

    def __init__(self, stream=None, use_ansi: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.use_ansi = use_ansi

    def write(self, text: str):
        self.stream.write(text)

    def flush(self):
        self.stream.flush()

    def _control(self, seq: str):
        if self.use_ansi:
            self.stream.write(seq)
            self.stream.flush()

    def clear(self):
        self._control(CLEAR_SCREEN)

    def hide_cursor(self):
        self._control(HIDE_CURSOR)

    def show_cursor(self):
        self._control(SHOW_CURSOR)


class BufferSink:
    """In-memory sink for headless runs. Each flush closes one frame."""

    def __init__(self):
        self.frames = []
        self.cleared = 0
        self.cursor_visible = True
        self._pending = []

    def write(self, text: str):
        self._pending.append(text)

    def flush(self):
        if self._pending:
            self.frames.append(''.join(self._pending))
            self._pending.clear()

    def clear(self):
        self.cleared += 1

    def hide_cursor(self):
        self.cursor_visible = False

    def show_cursor(self):
        self.cursor_visible = True

