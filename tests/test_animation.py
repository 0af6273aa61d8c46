import pytest

from ascii_cube_renderer.animation import CubeAnimation
from ascii_cube_renderer.canvas import FrameBuffer
from ascii_cube_renderer.compositor import CURSOR_HOME, compose
from ascii_cube_renderer.config import RenderConfig
from ascii_cube_renderer.display import BufferSink
from ascii_cube_renderer.rasterizer import Rasterizer
from ascii_cube_renderer.transform import Transform


class _Sleeps:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def sleeps():
    return _Sleeps()


@pytest.mark.timeout(10)
def test_bounded_run(sink, sleeps):
    app = CubeAnimation(RenderConfig(), sink=sink, sleep=sleeps)
    drawn = app.run(max_frames=3)

    assert drawn == 3
    assert app.frames_drawn == 3
    assert len(sink.frames) == 3
    # Sleep follows every frame except the last one before exiting
    assert sleeps.calls == [0.016, 0.016]
    assert sink.cleared == 1
    assert sink.cursor_visible
    assert not app.running
    assert app.scene.angle_a == pytest.approx(0.15)
    assert app.scene.angle_c == pytest.approx(0.03)


@pytest.mark.timeout(10)
def test_frames_are_full_screen_blocks(sink, sleeps):
    app = CubeAnimation(RenderConfig(), sink=sink, sleep=sleeps)
    app.run(max_frames=2)

    for block in sink.frames:
        assert block.startswith(CURSOR_HOME)
        rows = block[len(CURSOR_HOME):].split('\n')
        assert rows[-1] == ''
        assert [len(r) for r in rows[:-1]] == [80] * 24
    assert sink.frames[0] != sink.frames[1]


@pytest.mark.timeout(10)
def test_first_frame_is_unrotated_cube(sink, sleeps):
    config = RenderConfig()
    app = CubeAnimation(config, sink=sink, sleep=sleeps)
    app.run(max_frames=1)

    expected = FrameBuffer(80, 24)
    Rasterizer.from_config(config).render(expected, Transform(0.0, 0.0, 0.0))
    assert sink.frames[0] == compose(expected)
    assert sleeps.calls == []


@pytest.mark.timeout(10)
def test_frame_storage_is_reused(sink, sleeps):
    app = CubeAnimation(RenderConfig(width=40, height=12), sink=sink, sleep=sleeps)
    depth, glyph = app.frame.depth, app.frame.glyph
    app.run(max_frames=4)
    assert app.frame.depth is depth
    assert app.frame.glyph is glyph
    assert len(depth) == len(glyph) == 40 * 12


@pytest.mark.timeout(10)
def test_stop_ends_the_loop(sink):
    app = CubeAnimation(RenderConfig(), sink=sink, sleep=lambda s: app.stop())
    assert app.run() == 1
    assert sink.cursor_visible


@pytest.mark.timeout(10)
def test_zero_frames_draws_nothing(sink, sleeps):
    app = CubeAnimation(RenderConfig(), sink=sink, sleep=sleeps)
    assert app.run(max_frames=0) == 0
    assert sink.frames == []
    assert sink.cursor_visible


class _BrokenSink(BufferSink):
    def write(self, text):
        raise OSError("display went away")


@pytest.mark.timeout(10)
def test_sink_failure_propagates_and_restores_cursor(sleeps):
    sink = _BrokenSink()
    app = CubeAnimation(RenderConfig(), sink=sink, sleep=sleeps)
    with pytest.raises(OSError, match="display went away"):
        app.run(max_frames=5)
    assert sink.cursor_visible
    assert not app.running


def test_no_ansi_omits_cursor_home(sink):
    app = CubeAnimation(RenderConfig(use_ansi=False), sink=sink, sleep=lambda s: None)
    block = app.step()
    assert not block.startswith(CURSOR_HOME)
    assert block.count('\n') == 24


def test_fps_counter_updates_once_per_second(sink):
    # Steps of 0.125s keep the clock arithmetic exact
    ticks = iter([0.125 * i for i in range(40)])
    app = CubeAnimation(RenderConfig(width=20, height=6, sample_step=4.0),
                        sink=sink, sleep=lambda s: None,
                        clock=lambda: next(ticks))
    for _ in range(3):
        app.step()
    assert app.fps == 0

    app.step()
    # Fourth frame ends at t=1.0
    assert app.fps == 4
    assert app.frame_ms == pytest.approx(125.0)

    for _ in range(3):
        app.step()
    assert app.fps == 4


def test_scene_geometry_drives_the_frame(sink):
    app = CubeAnimation(RenderConfig(), sink=sink, sleep=lambda s: None)
    before = app.step()

    app.scene.angle_a = app.scene.angle_b = app.scene.angle_c = 0.0
    app.scene.camera_distance = 300.0
    app.scene.zoom = 5.0
    app.scene.half_extent = 2.0
    after = app.step()

    assert after != before
    assert app.rasterizer.projector.distance == 300.0
    # A 4-unit cube seen from 300 units away covers only the centre cells
    assert app.frame.coverage() < 10
    assert app.frame.glyph[app.frame.index(40, 12)] != ' '
