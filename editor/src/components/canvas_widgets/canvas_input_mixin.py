"""Mixin translating Qt mouse and wheel input into engine input events.

Provides:
- Pointer down/move/up for the left button (Shift = additive selection)
- Canvas panning with the middle button
- Wheel zoom anchored at the cursor
- PointerCancel when focus is lost or the pointer leaves mid-gesture

Nothing here touches engine state. Events are queued and handed to the
engine as one batch on the next frame tick.
"""
import math

from PyQt5.QtCore import Qt

from constants import WHEEL_ZOOM_SENSITIVITY
from models.events import (
	Buttons, CameraPanByScreenDelta, CameraZoomAtScreenPoint,
	PointerButton, PointerCancel, PointerDown, PointerMove, PointerUp,
)
from models.transform import Vec2


def qt_buttons_to_mask(qt_buttons):
	"""Qt.MouseButtons -> Buttons bit set"""
	mask = Buttons.NONE
	if qt_buttons & Qt.LeftButton:
		mask |= Buttons.PRIMARY
	if qt_buttons & Qt.RightButton:
		mask |= Buttons.SECONDARY
	if qt_buttons & Qt.MiddleButton:
		mask |= Buttons.AUXILIARY
	return mask


class CanvasInputMixin:
	"""Mixin providing input event translation for the canvas.

	Expected state variables (initialized by init_input_state):
	- pending_events: list of queued InputEvents
	- wheel_zoom_sensitivity: float
	- is_panning, pointer_active: bool
	- last_pan_pos: Vec2 or None
	"""

	def init_input_state(self, wheel_zoom_sensitivity=WHEEL_ZOOM_SENSITIVITY):
		self.pending_events = []
		self.wheel_zoom_sensitivity = wheel_zoom_sensitivity
		self.is_panning = False
		self.pointer_active = False
		self.last_pan_pos = None

	def take_pending_events(self):
		"""Hand over the queued batch and start a new one."""
		batch = self.pending_events
		self.pending_events = []
		return batch

	# ========================================
	# Queue helpers (also used directly by tests and tools)
	# ========================================

	def queue_pan(self, delta_px):
		self.pending_events.append(CameraPanByScreenDelta(delta_px=delta_px))

	def queue_wheel_zoom(self, pivot_px, angle_delta_y):
		"""One wheel step. Positive angle delta (wheel forward) zooms in."""
		if angle_delta_y == 0:
			return
		multiplier = math.exp(angle_delta_y * self.wheel_zoom_sensitivity)
		self.pending_events.append(
			CameraZoomAtScreenPoint(pivot_px=pivot_px, zoom_multiplier=multiplier)
		)

	def queue_pointer_cancel(self):
		if self.pointer_active:
			self.pointer_active = False
			self.pending_events.append(PointerCancel())

	# ========================================
	# Qt Event Handlers
	# ========================================

	def mousePressEvent(self, event):
		pos = _local_pos(event)
		if event.button() == Qt.MiddleButton:
			self.is_panning = True
			self.last_pan_pos = pos
			self.setCursor(Qt.ClosedHandCursor)
			event.accept()
			return

		if event.button() == Qt.LeftButton:
			self.pointer_active = True
			shift = bool(event.modifiers() & Qt.ShiftModifier)
			self.pending_events.append(
				PointerDown(screen_px=pos, shift=shift, button=PointerButton.PRIMARY)
			)
			event.accept()
			return

		super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		pos = _local_pos(event)
		if self.is_panning and self.last_pan_pos is not None:
			self.queue_pan(pos - self.last_pan_pos)
			self.last_pan_pos = pos
			event.accept()
			return

		if self.pointer_active:
			self.pending_events.append(
				PointerMove(screen_px=pos, buttons=qt_buttons_to_mask(event.buttons()))
			)
			event.accept()
			return

		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		pos = _local_pos(event)
		if self.is_panning and event.button() == Qt.MiddleButton:
			self.is_panning = False
			self.last_pan_pos = None
			self.setCursor(Qt.ArrowCursor)
			event.accept()
			return

		if self.pointer_active and event.button() == Qt.LeftButton:
			self.pointer_active = False
			self.pending_events.append(PointerUp(screen_px=pos, button=PointerButton.PRIMARY))
			event.accept()
			return

		super().mouseReleaseEvent(event)

	def wheelEvent(self, event):
		position = event.position()
		self.queue_wheel_zoom(Vec2(position.x(), position.y()), event.angleDelta().y())
		event.accept()

	def focusOutEvent(self, event):
		self.queue_pointer_cancel()
		self.is_panning = False
		self.last_pan_pos = None
		super().focusOutEvent(event)

	def leaveEvent(self, event):
		self.queue_pointer_cancel()
		super().leaveEvent(event)


def _local_pos(event):
	pos = event.localPos()
	return Vec2(pos.x(), pos.y())
