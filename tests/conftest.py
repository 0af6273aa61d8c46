"""
Shared pytest fixtures for renderer tests.
"""
import pytest

from ascii_cube_renderer.canvas import FrameBuffer
from ascii_cube_renderer.config import RenderConfig
from ascii_cube_renderer.display import BufferSink
from ascii_cube_renderer.projector import Projector
from ascii_cube_renderer.rasterizer import Rasterizer
from ascii_cube_renderer.transform import Transform


@pytest.fixture
def config():
    """Default 80x24 configuration."""
    return RenderConfig()


@pytest.fixture
def frame(config):
    return FrameBuffer(config.width, config.height, config.background)


@pytest.fixture
def projector(config):
    return Projector.from_config(config)


@pytest.fixture
def rasterizer(config):
    return Rasterizer.from_config(config)


@pytest.fixture
def identity():
    """Transform with all angles at zero."""
    return Transform(0.0, 0.0, 0.0)


@pytest.fixture
def sink():
    return BufferSink()
