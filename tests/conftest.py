"""
Shared fixtures for Rect Canvas Editor tests.

Provides engines, cameras and batch helpers.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widget tests run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

from models.transform import Camera, Vec2  # noqa: E402


def assert_vec2_approx(actual, expected, eps=1e-4):
    assert actual.x == pytest.approx(expected.x, abs=eps)
    assert actual.y == pytest.approx(expected.y, abs=eps)


@pytest.fixture
def engine():
    """Engine with the three default rects and the default camera"""
    from services.engine import Engine
    return Engine.with_default_document()


@pytest.fixture
def move_engine():
    """Default engine with selection moving enabled"""
    from services.engine import Engine, EngineSettings
    return Engine.with_default_document(EngineSettings(selection_move=True))


@pytest.fixture
def empty_engine():
    """Engine with no shapes"""
    from services.engine import Engine
    return Engine()


@pytest.fixture
def rect_ids(engine):
    """Ids of the default rects in paint order"""
    return [rect.id for rect in engine.document]


@pytest.fixture
def zoomed_camera():
    return Camera(pan=Vec2(10.0, 20.0), zoom=2.0)
