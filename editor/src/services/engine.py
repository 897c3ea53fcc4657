"""Engine: owns the editor state and turns one input batch into one frame.

tick(batch) runs the same three steps every frame:
1. Snapshot the document into a RenderScene
2. Fold every event, strictly in batch order, into camera/selection/drag state
3. Build the OverlayScene from the post-event state

Given the same starting state and batch the output is identical; nothing
here reads a clock or a random source.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from models.document import Document, create_default_document
from models.events import (
    CameraPanByScreenDelta, CameraZoomAtScreenPoint, InputEvent,
    PointerCancel, PointerDown, PointerMove, PointerUp,
)
from models.scene import CameraView, EngineOutput
from models.selection import Selection
from models.transform import Camera
from services.drag_machine import DragMachine
from services.drag_state import DragState
from services.hit_testing import check_collide_rects
from services.scene_builder import build_overlay_scene, build_render_scene

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Feature switches fixed for the engine's lifetime.

    selection_move: dragging a selected shape moves the whole selection.
        Off by default, in which case a press on a shape is click-only.
    """
    selection_move: bool = False


class Engine:
    """Single-threaded interaction core. The only writer of its document, camera and selection."""

    def __init__(self, document: Optional[Document] = None, camera: Optional[Camera] = None,
                 selection: Optional[Selection] = None, settings: Optional[EngineSettings] = None):
        self.document = document if document is not None else Document()
        self.camera = camera if camera is not None else Camera()
        self.selection = selection if selection is not None else Selection()
        self.settings = settings or EngineSettings()
        self.drag = DragMachine(
            self.document, self.camera, self.selection,
            selection_move=self.settings.selection_move,
        )
        self.frame = 0

    @classmethod
    def with_default_document(cls, settings: Optional[EngineSettings] = None) -> 'Engine':
        """Engine seeded with the three startup rects and the default camera."""
        return cls(document=create_default_document(), settings=settings)

    @property
    def drag_state(self) -> DragState:
        return self.drag.state

    @property
    def selected(self):
        """Selected ids as a plain list."""
        return self.selection.ids()

    def check_collide_rects(self, world):
        return check_collide_rects(self.document.rects, world)

    def apply_selection(self, hit, additive: bool) -> None:
        self.selection.apply(hit, additive)

    # ========================================
    # Frame pipeline
    # ========================================

    def tick(self, batch: Iterable[InputEvent]) -> EngineOutput:
        """Apply one ordered batch of events and return the frame's scenes."""
        revision_before = self.document.revision
        render_scene = build_render_scene(self.document)

        count = 0
        for event in batch:
            self.apply_event(event)
            count += 1

        if self.document.revision != revision_before:
            # Shapes moved during this batch; keep render scene and overlay in agreement
            render_scene = build_render_scene(self.document)

        overlay_scene = build_overlay_scene(
            self.document, self.selection, self.drag.state, self.camera.zoom,
        )

        self.frame += 1
        if count:
            logger.debug(
                "Frame %d: %d event(s), %d selected, drag=%s",
                self.frame, count, len(self.selection), type(self.drag.state).__name__,
            )

        return EngineOutput(
            camera=CameraView(pan=self.camera.pan, zoom=self.camera.zoom),
            render_scene=render_scene,
            overlay_scene=overlay_scene,
        )

    def apply_event(self, event: InputEvent) -> None:
        """Fold a single event into engine state."""
        if isinstance(event, CameraPanByScreenDelta):
            self.camera.pan_by_screen_delta(event.delta_px)
        elif isinstance(event, CameraZoomAtScreenPoint):
            self.camera.zoom_at_screen_point(event.pivot_px, event.zoom_multiplier)
        elif isinstance(event, PointerDown):
            self.drag.pointer_down(event.screen_px, event.shift)
        elif isinstance(event, PointerMove):
            self.drag.pointer_move(event.screen_px)
        elif isinstance(event, PointerUp):
            self.drag.pointer_up(event.screen_px)
        elif isinstance(event, PointerCancel):
            self.drag.pointer_cancel()
        else:
            raise TypeError(f"Unknown input event: {event!r}")
