"""UI components for Rect Canvas Editor

- canvas_widget: frame-driven host widget for the engine
- canvas_widgets: mixins used by the canvas widget
"""

from .canvas_widget import CanvasWidget

__all__ = [
    'CanvasWidget',
]
