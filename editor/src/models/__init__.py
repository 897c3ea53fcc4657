"""
Rect Canvas Editor - Data Models

Plain data owned by the engine: vectors and camera, colors, the shape
document, the selection, input events and per-tick output scenes.
"""

from .transform import Vec2, Camera
from .color import Color
from .document import NodeId, RectNode, Document, create_default_document
from .selection import Selection
from .scene import RectInstance, RenderScene, OverlayScene, CameraView, EngineOutput

__all__ = [
    'Vec2', 'Camera', 'Color',
    'NodeId', 'RectNode', 'Document', 'create_default_document',
    'Selection',
    'RectInstance', 'RenderScene', 'OverlayScene', 'CameraView', 'EngineOutput',
]
