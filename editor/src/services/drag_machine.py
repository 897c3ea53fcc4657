"""Pointer gesture state machine: click vs. marquee drag vs. selection move.

A press over empty space may become a marquee once the pointer travels
DRAG_THRESHOLD_PX in screen space; anything shorter is a plain click. A
press over a shape selects it immediately. With selection moving enabled,
dragging a selected shape past the same threshold translates the whole
selection.

Every handler covers all five states. States a handler has no use for
are explicit no-ops.
"""
import dataclasses
import logging

from constants import DRAG_THRESHOLD_SQ
from models.document import Document
from models.selection import Selection
from models.transform import Camera, Vec2
from services.drag_state import (
    IDLE, DragState, Idle, Marquee, PendingMarquee,
    PendingSelectionMove, SelectionMove,
)
from services.hit_testing import check_collide_rects, region_from_corners, rects_overlapping

logger = logging.getLogger(__name__)


def _unhandled(state):
    return TypeError(f"Unhandled drag state: {state!r}")


def passed_drag_threshold(start_screen: Vec2, screen_px: Vec2) -> bool:
    """True once the pointer has moved at least DRAG_THRESHOLD_PX from the press point."""
    return (screen_px - start_screen).length_squared() >= DRAG_THRESHOLD_SQ


class DragMachine:
    """Folds pointer events into DragState, Selection and (when moving) Document.

    The machine does not own the camera, document or selection; the engine
    hands it references at construction and remains their only other user.
    """

    def __init__(self, document: Document, camera: Camera, selection: Selection,
                 selection_move: bool = False):
        self.document = document
        self.camera = camera
        self.selection = selection
        self.selection_move = selection_move
        self.state: DragState = IDLE

    # ========================================
    # Event handlers
    # ========================================

    def pointer_down(self, screen_px: Vec2, shift: bool) -> None:
        """Start a new gesture, discarding whatever was in progress."""
        self._abandon()

        world = self.camera.screen_to_world(screen_px)
        hit = check_collide_rects(self.document.rects, world)

        if hit is None:
            # Marquees only start from empty space
            self._set_state(PendingMarquee(start_screen=screen_px, start_world=world, additive=shift))

        self.selection.apply(hit, shift)

        if hit is not None and self.selection_move and hit in self.selection:
            self._set_state(PendingSelectionMove(start_screen=screen_px, start_world=world))

    def pointer_move(self, screen_px: Vec2) -> None:
        state = self.state

        if isinstance(state, Idle):
            return

        if isinstance(state, PendingMarquee):
            if not passed_drag_threshold(state.start_screen, screen_px):
                return
            base = tuple(self.selection.snapshot()) if state.additive else ()
            self._set_state(Marquee(
                start_world=state.start_world,
                current_world=self.camera.screen_to_world(screen_px),
                additive=state.additive,
                base_selection=base,
            ))
            self._recompute_marquee_selection()
            return

        if isinstance(state, Marquee):
            self.state = dataclasses.replace(state, current_world=self.camera.screen_to_world(screen_px))
            self._recompute_marquee_selection()
            return

        if isinstance(state, PendingSelectionMove):
            if not passed_drag_threshold(state.start_screen, screen_px):
                return
            origins = []
            for node_id in self.selection:
                rect = self.document.get(node_id)
                if rect is not None:
                    origins.append((node_id, rect.pos))
            self._set_state(SelectionMove(
                start_world=state.start_world,
                current_world=self.camera.screen_to_world(screen_px),
                origins=tuple(origins),
            ))
            self._apply_selection_move()
            return

        if isinstance(state, SelectionMove):
            self.state = dataclasses.replace(state, current_world=self.camera.screen_to_world(screen_px))
            self._apply_selection_move()
            return

        raise _unhandled(state)

    def pointer_up(self, screen_px: Vec2) -> None:
        """Finish the gesture. Marquee and move gestures get one last update at the release point."""
        state = self.state

        if isinstance(state, Marquee):
            self.state = dataclasses.replace(state, current_world=self.camera.screen_to_world(screen_px))
            self._recompute_marquee_selection()
        elif isinstance(state, SelectionMove):
            self.state = dataclasses.replace(state, current_world=self.camera.screen_to_world(screen_px))
            self._apply_selection_move()
            logger.debug("Committed move of %d shape(s)", len(state.origins))
        elif not isinstance(state, (Idle, PendingMarquee, PendingSelectionMove)):
            raise _unhandled(state)

        self._set_state(IDLE)

    def pointer_cancel(self) -> None:
        """Drop the gesture without touching the selection. An uncommitted move is rolled back."""
        self._abandon()

    # ========================================
    # Internals
    # ========================================

    def _set_state(self, state: DragState) -> None:
        if type(state) is not type(self.state):
            logger.debug("Drag state %s -> %s", type(self.state).__name__, type(state).__name__)
        self.state = state

    def _abandon(self) -> None:
        state = self.state
        if isinstance(state, SelectionMove):
            for node_id, origin in state.origins:
                self.document.move_rect(node_id, origin)
            logger.debug("Rolled back move of %d shape(s)", len(state.origins))
        elif not isinstance(state, (Idle, PendingMarquee, Marquee, PendingSelectionMove)):
            raise _unhandled(state)
        self._set_state(IDLE)

    def _recompute_marquee_selection(self) -> None:
        """Rebuild the selection from scratch for the current marquee region.

        Starts from the snapshot taken when the marquee began (additive) or
        from nothing, then appends every overlapping shape not already present.
        """
        state = self.state
        region_min, region_max = region_from_corners(state.start_world, state.current_world)
        working = list(state.base_selection) if state.additive else []
        for node_id in rects_overlapping(self.document.rects, region_min, region_max):
            if node_id not in working:
                working.append(node_id)
        self.selection.replace(working)

    def _apply_selection_move(self) -> None:
        state = self.state
        delta = state.current_world - state.start_world
        for node_id, origin in state.origins:
            self.document.move_rect(node_id, origin + delta)
