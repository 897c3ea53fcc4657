"""Builds the per-tick render and overlay scenes.

Overlay sizes are specified in screen pixels and divided by zoom, so
outlines and handles keep a constant on-screen size at any zoom level.
"""
from constants import (
    MARQUEE_FILL_COLOR, MARQUEE_OUTLINE_COLOR, MARQUEE_OUTLINE_PX,
    SELECTION_HANDLE_COLOR, SELECTION_HANDLE_PX,
    SELECTION_OUTLINE_COLOR, SELECTION_OUTLINE_PX,
)
from models.document import Document
from models.scene import OverlayScene, RectInstance, RenderScene
from models.selection import Selection
from services.drag_state import DragState, Marquee
from services.hit_testing import region_from_corners


def build_render_scene(document: Document) -> RenderScene:
    """One instance per shape, in document (paint) order."""
    return RenderScene(rects=[
        RectInstance(
            pos=(rect.pos.x, rect.pos.y),
            size=(rect.size.x, rect.size.y),
            color=rect.color.to_tuple(),
        )
        for rect in document
    ])


def outline_instances(x, y, w, h, thickness, color):
    """Four edge strips lying inside the box: top, bottom, left, right."""
    return [
        RectInstance(pos=(x, y), size=(w, thickness), color=color),
        RectInstance(pos=(x, y + h - thickness), size=(w, thickness), color=color),
        RectInstance(pos=(x, y), size=(thickness, h), color=color),
        RectInstance(pos=(x + w - thickness, y), size=(thickness, h), color=color),
    ]


def corner_handle_instances(x, y, w, h, handle, color):
    """Square handles centered on the four corners: tl, tr, bl, br."""
    half = handle * 0.5
    return [
        RectInstance(pos=(cx - half, cy - half), size=(handle, handle), color=color)
        for cx, cy in ((x, y), (x + w, y), (x, y + h), (x + w, y + h))
    ]


def build_overlay_scene(document: Document, selection: Selection,
                        drag_state: DragState, zoom: float) -> OverlayScene:
    """Selection outlines and handles, plus the live marquee if one is being dragged.

    Selected ids missing from the document are skipped.
    """
    outline = SELECTION_OUTLINE_PX / zoom
    handle = SELECTION_HANDLE_PX / zoom
    rects = []

    for node_id in selection:
        rect = document.get(node_id)
        if rect is None:
            continue
        x, y = rect.pos
        w, h = rect.size
        rects.extend(outline_instances(x, y, w, h, outline, SELECTION_OUTLINE_COLOR))
        rects.extend(corner_handle_instances(x, y, w, h, handle, SELECTION_HANDLE_COLOR))

    if isinstance(drag_state, Marquee):
        region_min, region_max = region_from_corners(drag_state.start_world, drag_state.current_world)
        x, y = region_min
        w, h = region_max - region_min
        rects.append(RectInstance(pos=(x, y), size=(w, h), color=MARQUEE_FILL_COLOR))
        rects.extend(outline_instances(x, y, w, h, MARQUEE_OUTLINE_PX / zoom, MARQUEE_OUTLINE_COLOR))

    return OverlayScene(rects=rects)
