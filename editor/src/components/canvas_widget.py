"""Canvas widget hosting the interaction engine.

Owns no editor state of its own: it queues input events, ticks the engine
once per frame, and paints whatever the last EngineOutput describes.
"""
from PyQt5.QtCore import QRectF, QTimer, Qt, pyqtSignal
from PyQt5.QtGui import QColor, QPainter
from PyQt5.QtWidgets import QWidget

from components.canvas_widgets.canvas_input_mixin import CanvasInputMixin
from constants import CANVAS_BACKGROUND_COLOR, CANVAS_MIN_SIZE, FRAME_INTERVAL_MS, WHEEL_ZOOM_SENSITIVITY
from services.engine import Engine
from services.instance_buffer import pack_instances, project_to_screen
from utils.logger import loggerRaise


class CanvasWidget(CanvasInputMixin, QWidget):
	"""Frame-driven view of an Engine.

	Signals:
		frameTicked(object): emitted with the EngineOutput of every tick
	"""

	frameTicked = pyqtSignal(object)

	def __init__(self, engine=None, parent=None, frame_interval_ms=FRAME_INTERVAL_MS,
	             wheel_zoom_sensitivity=WHEEL_ZOOM_SENSITIVITY, auto_tick=True):
		super().__init__(parent)
		self.engine = engine if engine is not None else Engine.with_default_document()
		self.init_input_state(wheel_zoom_sensitivity)
		self.last_output = None

		self.setMinimumSize(*CANVAS_MIN_SIZE)
		self.setFocusPolicy(Qt.StrongFocus)
		self.setAttribute(Qt.WA_OpaquePaintEvent)

		self.frame_timer = QTimer(self)
		self.frame_timer.setInterval(frame_interval_ms)
		self.frame_timer.timeout.connect(self.tick_frame)
		if auto_tick:
			self.frame_timer.start()

		# Prime the first frame so there is always something to paint
		self.tick_frame()

	def tick_frame(self):
		"""Drain queued input into one engine tick and schedule a repaint."""
		batch = self.take_pending_events()
		try:
			output = self.engine.tick(batch)
		except Exception as e:
			loggerRaise(e, "The canvas engine failed to process input.", "Engine Error")
		self.last_output = output
		self.frameTicked.emit(output)
		self.update()
		return output

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			painter.fillRect(self.rect(), QColor.fromRgbF(*CANVAS_BACKGROUND_COLOR))
			output = self.last_output
			if output is None:
				return
			painter.setPen(Qt.NoPen)
			self._paint_instances(painter, output.render_scene.rects, output.camera)
			self._paint_instances(painter, output.overlay_scene.rects, output.camera)
		finally:
			painter.end()

	def _paint_instances(self, painter, rects, camera):
		screen = project_to_screen(pack_instances(rects), camera)
		for x, y, w, h, r, g, b, a in screen.tolist():
			painter.fillRect(QRectF(x, y, w, h), QColor.fromRgbF(r, g, b, a))
