"""Render-ready output of one engine tick.

Everything here is plain data: tuples of floats with no references back
into the Document, Camera or Selection that produced it.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from models.transform import Vec2


@dataclass(frozen=True)
class RectInstance:
    """One instanced quad in world units."""
    pos: Tuple[float, float]
    size: Tuple[float, float]
    color: Tuple[float, float, float, float]


@dataclass
class RenderScene:
    """Document shapes, one instance per shape, in paint order."""
    rects: List[RectInstance] = field(default_factory=list)

    def __len__(self):
        return len(self.rects)

    def __iter__(self):
        return iter(self.rects)


@dataclass
class OverlayScene:
    """Per-tick visual aids: selection outlines, handles, live marquee."""
    rects: List[RectInstance] = field(default_factory=list)

    def __len__(self):
        return len(self.rects)

    def __iter__(self):
        return iter(self.rects)


@dataclass(frozen=True)
class CameraView:
    """Snapshot of camera state handed to the renderer."""
    pan: Vec2
    zoom: float


@dataclass
class EngineOutput:
    camera: CameraView
    render_scene: RenderScene
    overlay_scene: OverlayScene
