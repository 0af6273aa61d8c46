from ascii_cube_renderer.canvas import FrameBuffer


def test_new_buffer_is_blank():
    fb = FrameBuffer(4, 3)
    assert len(fb) == 12
    assert fb.depth == [0.0] * 12
    assert fb.glyph == [' '] * 12


def test_index_is_row_major():
    fb = FrameBuffer(5, 4)
    assert fb.index(0, 0) == 0
    assert fb.index(4, 0) == 4
    assert fb.index(0, 1) == 5
    assert fb.index(2, 3) == 17


def test_set_and_get():
    fb = FrameBuffer(3, 2)
    fb.set(4, 0.25, '#')
    assert fb.get(4) == (0.25, '#')
    assert fb.row(1) == ' # '
    assert fb.coverage() == 1


def test_reset_clears_everything_and_reuses_storage():
    fb = FrameBuffer(6, 3, background='.')
    depth, glyph = fb.depth, fb.glyph
    for i in range(len(fb)):
        fb.set(i, 1.0 / (i + 1), '@')

    fb.reset()

    assert fb.depth is depth
    assert fb.glyph is glyph
    assert all(d == 0 for d in fb.depth)
    assert all(g == '.' for g in fb.glyph)
    assert len(fb.depth) == len(fb.glyph) == 18
    assert fb.coverage() == 0
