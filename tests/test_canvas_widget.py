"""
pytest-qt tests for the canvas host widget.

Mouse handlers are driven with hand-built QMouseEvents so the tests do not
depend on window focus or platform mouse tracking.
"""
import math

import pytest
from PyQt5.QtCore import QEvent, QPointF, Qt
from PyQt5.QtGui import QFocusEvent, QMouseEvent

from constants import CANVAS_BACKGROUND_COLOR, WHEEL_ZOOM_SENSITIVITY
from models.events import (
    Buttons, CameraPanByScreenDelta, CameraZoomAtScreenPoint,
    PointerCancel, PointerDown, PointerMove, PointerUp,
)
from models.transform import Vec2
from services.drag_state import Idle, Marquee


def mouse_event(kind, x, y, button=Qt.LeftButton, buttons=None, modifiers=Qt.NoModifier):
    if buttons is None:
        buttons = Qt.NoButton if kind == QEvent.MouseButtonRelease else button
    return QMouseEvent(kind, QPointF(x, y), button, buttons, modifiers)


def press(widget, x, y, button=Qt.LeftButton, modifiers=Qt.NoModifier):
    widget.mousePressEvent(mouse_event(QEvent.MouseButtonPress, x, y, button, modifiers=modifiers))


def drag_to(widget, x, y, buttons=Qt.LeftButton):
    widget.mouseMoveEvent(mouse_event(QEvent.MouseMove, x, y, Qt.NoButton, buttons))


def release(widget, x, y, button=Qt.LeftButton):
    widget.mouseReleaseEvent(mouse_event(QEvent.MouseButtonRelease, x, y, button))


@pytest.fixture
def canvas(qtbot):
    """Canvas over the default document, ticked manually"""
    from components.canvas_widget import CanvasWidget
    widget = CanvasWidget(auto_tick=False)
    qtbot.addWidget(widget)
    widget.resize(400, 300)
    return widget


# ══════════════════════════════════════════════════════════════════════════
# Input translation
# ══════════════════════════════════════════════════════════════════════════

class TestInputTranslation:

    def test_left_press_queues_pointer_down(self, canvas):
        press(canvas, 110, 120)
        assert canvas.pending_events == [PointerDown(screen_px=Vec2(110.0, 120.0), shift=False)]
        assert canvas.pointer_active

    def test_shift_modifier_is_forwarded(self, canvas):
        press(canvas, 110, 120, modifiers=Qt.ShiftModifier)
        assert canvas.pending_events[0].shift is True

    def test_move_and_release(self, canvas):
        press(canvas, 10, 10)
        drag_to(canvas, 40, 50)
        release(canvas, 40, 50)
        kinds = [type(ev) for ev in canvas.pending_events]
        assert kinds == [PointerDown, PointerMove, PointerUp]
        assert canvas.pending_events[1].buttons == Buttons.PRIMARY
        assert not canvas.pointer_active

    def test_move_without_press_is_ignored(self, canvas):
        drag_to(canvas, 40, 50, buttons=Qt.NoButton)
        assert canvas.pending_events == []

    def test_middle_drag_pans(self, canvas):
        press(canvas, 100, 100, button=Qt.MiddleButton)
        drag_to(canvas, 130, 90, buttons=Qt.MiddleButton)
        drag_to(canvas, 140, 90, buttons=Qt.MiddleButton)
        release(canvas, 140, 90, button=Qt.MiddleButton)
        assert canvas.pending_events == [
            CameraPanByScreenDelta(delta_px=Vec2(30.0, -10.0)),
            CameraPanByScreenDelta(delta_px=Vec2(10.0, 0.0)),
        ]
        assert not canvas.is_panning

    def test_right_button_is_not_a_pointer(self, canvas):
        press(canvas, 110, 120, button=Qt.RightButton)
        assert canvas.pending_events == []

    def test_wheel_zoom_multiplier(self, canvas):
        canvas.queue_wheel_zoom(Vec2(50.0, 60.0), 120)
        event = canvas.pending_events[0]
        assert isinstance(event, CameraZoomAtScreenPoint)
        assert event.pivot_px == Vec2(50.0, 60.0)
        assert event.zoom_multiplier == pytest.approx(math.exp(120 * WHEEL_ZOOM_SENSITIVITY))

    def test_wheel_backwards_zooms_out(self, canvas):
        canvas.queue_wheel_zoom(Vec2(0.0, 0.0), -120)
        assert canvas.pending_events[0].zoom_multiplier < 1.0

    def test_zero_wheel_delta_ignored(self, canvas):
        canvas.queue_wheel_zoom(Vec2(0.0, 0.0), 0)
        assert canvas.pending_events == []

    def test_focus_out_cancels_active_pointer(self, canvas):
        press(canvas, 10, 10)
        canvas.focusOutEvent(QFocusEvent(QEvent.FocusOut))
        assert canvas.pending_events[-1] == PointerCancel()
        assert not canvas.pointer_active

    def test_focus_out_when_idle_queues_nothing(self, canvas):
        canvas.focusOutEvent(QFocusEvent(QEvent.FocusOut))
        assert canvas.pending_events == []

    def test_leave_cancels_active_pointer(self, canvas):
        press(canvas, 10, 10)
        canvas.leaveEvent(QEvent(QEvent.Leave))
        assert canvas.pending_events == [PointerDown(screen_px=Vec2(10.0, 10.0)), PointerCancel()]
        assert not canvas.pointer_active

    def test_leave_after_release_queues_nothing(self, canvas):
        press(canvas, 10, 10)
        release(canvas, 10, 10)
        canvas.leaveEvent(QEvent(QEvent.Leave))
        assert not any(isinstance(ev, PointerCancel) for ev in canvas.pending_events)

    def test_leave_mid_marquee_returns_engine_to_idle(self, canvas):
        press(canvas, 50, 50)
        drag_to(canvas, 350, 260)
        canvas.tick_frame()
        canvas.leaveEvent(QEvent(QEvent.Leave))
        canvas.tick_frame()
        assert isinstance(canvas.engine.drag_state, Idle)
        assert canvas.engine.selected == [1, 2]


# ══════════════════════════════════════════════════════════════════════════
# Frame ticks
# ══════════════════════════════════════════════════════════════════════════

class TestFrameTick:

    def test_first_frame_is_primed(self, canvas):
        assert canvas.last_output is not None
        assert canvas.engine.frame == 1

    def test_tick_drains_queue(self, canvas):
        press(canvas, 110, 110)
        canvas.tick_frame()
        assert canvas.pending_events == []
        assert canvas.engine.selected == [1]

    def test_marquee_through_widget(self, canvas):
        press(canvas, 50, 50)
        drag_to(canvas, 350, 260)
        canvas.tick_frame()
        assert isinstance(canvas.engine.drag_state, Marquee)
        release(canvas, 350, 260)
        canvas.tick_frame()
        assert isinstance(canvas.engine.drag_state, Idle)
        assert canvas.engine.selected == [1, 2]

    def test_frame_ticked_signal(self, canvas, qtbot):
        canvas.queue_pan(Vec2(10.0, 0.0))
        with qtbot.waitSignal(canvas.frameTicked, timeout=1000) as blocker:
            canvas.tick_frame()
        output = blocker.args[0]
        assert output is canvas.last_output
        assert output.camera.pan == Vec2(-10.0, 0.0)

    def test_timer_drives_ticks(self, qtbot):
        from components.canvas_widget import CanvasWidget
        widget = CanvasWidget(frame_interval_ms=5)
        qtbot.addWidget(widget)
        qtbot.waitUntil(lambda: widget.engine.frame >= 3, timeout=2000)


# ══════════════════════════════════════════════════════════════════════════
# Painting
# ══════════════════════════════════════════════════════════════════════════

class TestPainting:

    @staticmethod
    def pixel(canvas, x, y):
        color = canvas.grab().toImage().pixelColor(x, y)
        return color.redF(), color.greenF(), color.blueF()

    def test_background_and_shape(self, canvas):
        assert self.pixel(canvas, 10, 10) == pytest.approx(CANVAS_BACKGROUND_COLOR[:3], abs=0.01)
        assert self.pixel(canvas, 150, 150) == pytest.approx((0.2, 0.7, 0.9), abs=0.01)

    def test_paint_follows_camera(self, canvas):
        canvas.queue_pan(Vec2(100.0, 100.0))
        canvas.tick_frame()
        # Dragging right/down by 100 px moves pan to (-100,-100); the first rect covers (200,200)..(320,280)
        assert canvas.engine.camera.pan == Vec2(-100.0, -100.0)
        assert self.pixel(canvas, 150, 150) == pytest.approx(CANVAS_BACKGROUND_COLOR[:3], abs=0.01)
        assert self.pixel(canvas, 250, 250) == pytest.approx((0.2, 0.7, 0.9), abs=0.01)

    def test_selection_outline_painted(self, canvas):
        press(canvas, 150, 150)
        canvas.tick_frame()
        assert self.pixel(canvas, 150, 100) == pytest.approx((0.95, 0.95, 0.95), abs=0.01)
