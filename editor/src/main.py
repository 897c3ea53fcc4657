"""Rect Canvas Editor - desktop entry point.

Usage:
    python editor/src/main.py [-v] [--config-dir DIR]
"""
import sys
import os
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

from PyQt5.QtWidgets import QMainWindow, QApplication, QLabel

from components.canvas_widget import CanvasWidget
from main_window.config_mixin import ConfigMixin
from services.engine import Engine, EngineSettings
from utils.logger import set_main_window
from version import get_version

logger = logging.getLogger(__name__)


class MainWindow(ConfigMixin, QMainWindow):
    """Single canvas with a camera readout in the status bar."""

    def __init__(self, config_dir=None):
        super().__init__()
        self.init_config(config_dir)
        self._load_config()

        self.setWindowTitle(f"Rect Canvas Editor {get_version()}")
        self.resize(*self.config['window_size'])

        engine = Engine.with_default_document(
            EngineSettings(selection_move=self.config['selection_move'])
        )
        self.canvas = CanvasWidget(
            engine,
            parent=self,
            frame_interval_ms=self.config['frame_interval_ms'],
            wheel_zoom_sensitivity=self.config['wheel_zoom_sensitivity'],
        )
        self.setCentralWidget(self.canvas)

        self.camera_label = QLabel()
        self.statusBar().addPermanentWidget(self.camera_label)
        self.canvas.frameTicked.connect(self._on_frame)
        self._on_frame(self.canvas.last_output)

    def _on_frame(self, output):
        if output is None:
            return
        pan = output.camera.pan
        text = f"pan=({pan.x:.2f}, {pan.y:.2f}), zoom={output.camera.zoom:.3f}"
        if text != self.camera_label.text():
            self.camera_label.setText(text)

    def closeEvent(self, event):
        self.config['window_size'] = [self.width(), self.height()]
        self._save_config()
        super().closeEvent(event)


def main(argv=None):
    parser = argparse.ArgumentParser(description='Rect Canvas Editor')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging.')
    parser.add_argument('--config-dir', default=None, help='Directory holding config.json.')
    args, qt_args = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication([sys.argv[0]] + qt_args)
    window = MainWindow(config_dir=args.config_dir)
    set_main_window(window)
    window.show()
    logger.info("Started Rect Canvas Editor %s", get_version())
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
