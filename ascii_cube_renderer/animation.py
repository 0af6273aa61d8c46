#
# PROJECT: ascii-cube-renderer
# MODULE: ascii_cube_renderer/animation.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import time
from typing import Callable, Optional

from .canvas import FrameBuffer
from .compositor import CURSOR_HOME, present
from .config import RenderConfig
from .display import TerminalSink
from .log import get_logger
from .rasterizer import Rasterizer
from .scene import SceneState
from .transform import Transform

logger = get_logger(__name__)


class CubeAnimation:
    """
    Owns the scene, the frame buffer and the sink, and drives the frame loop:
    reset, rasterize, present, advance angles, sleep.

    Pacing sleeps a fixed delay after each frame's work, so the real frame
    period is frame_delay plus render time.
    """

    def __init__(self, config: Optional[RenderConfig] = None, sink=None,
                 sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        self.config = config if config is not None else RenderConfig()
        self.sink = sink if sink is not None else TerminalSink(
            use_ansi=self.config.use_ansi)
        self.sleep = sleep
        self.clock = clock
        self.running = False

        cfg = self.config
        self.scene = SceneState.from_config(cfg)
        self.frame = FrameBuffer(cfg.width, cfg.height, cfg.background)
        self.rasterizer = Rasterizer.from_config(cfg)
        self.home = CURSOR_HOME if cfg.use_ansi else ''

        # ── Frame counters ──────────────────────────────────────────────
        self.frames_drawn = 0
        self.fps = 0
        self.frame_ms = 0.0
        self._fps_frames = 0
        self._last_fps_time = self.clock()

    def render_frame(self):
        """Draw the current scene into the frame buffer and return RasterStats."""
        self.frame.reset()
        self.rasterizer.use_scene(self.scene)
        transform = Transform.from_scene(self.scene)
        return self.rasterizer.render(self.frame, transform)

    def step(self) -> str:
        """Run one loop iteration without the trailing sleep. Returns the frame text."""
        start = self.clock()

        stats = self.render_frame()
        block = present(self.sink, self.frame, self.home)
        self.scene.advance(*self.config.rotation_step)

        now = self.clock()
        self.frame_ms = (now - start) * 1000
        self.frames_drawn += 1
        self._fps_frames += 1
        if now - self._last_fps_time >= 1.0:
            self.fps = self._fps_frames
            self._fps_frames = 0
            self._last_fps_time = now
            logger.debug("fps=%d frame=%.1fms written=%d clipped=%d rejected=%d",
                         self.fps, self.frame_ms, stats.written,
                         stats.clipped, stats.rejected)
        return block

    def stop(self):
        """Ask the loop to exit after the current frame."""
        self.running = False

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Set up the terminal and loop until stop() is called or max_frames
        frames have been drawn. With max_frames=None the loop only ends on
        stop() or an exception such as KeyboardInterrupt. The cursor is
        shown again on the way out. Returns the number of frames drawn.
        """
        cfg = self.config
        logger.info("starting %dx%d cube=%.1f distance=%.1f zoom=%.1f delay=%.3fs",
                    cfg.width, cfg.height, cfg.cube_half_extent,
                    cfg.camera_distance, cfg.zoom, cfg.frame_delay)

        self.sink.clear()
        self.sink.hide_cursor()
        self.running = True
        drawn = 0
        try:
            while self.running:
                if max_frames is not None and drawn >= max_frames:
                    break
                self.step()
                drawn += 1
                if max_frames is not None and drawn >= max_frames:
                    break
                self.sleep(cfg.frame_delay)
        finally:
            self.running = False
            self.sink.show_cursor()
            logger.info("stopped after %d frames", drawn)
        return drawn


def main(args) -> int:
    """Build a config from parsed CLI args and run the animation."""
    overrides = dict(
        width=args.width,
        height=args.height,
        cube_half_extent=args.size,
        camera_distance=args.distance,
        zoom=args.zoom,
        sample_step=args.step,
        rotation_step=(args.speed_a, args.speed_b, args.speed_c),
        frame_delay=args.delay / 1000.0,
        normalize_angles=not args.no_normalize,
    )
    if args.fit_terminal:
        # Terminal size wins over the width/height flags
        overrides.pop('width')
        overrides.pop('height')
    if args.no_ansi:
        overrides['use_ansi'] = False
    config = RenderConfig.detect_terminal(fit=args.fit_terminal, **overrides)

    app = CubeAnimation(config)
    return app.run(max_frames=args.frames)
