"""Pointer gesture states.

Exactly one of these is active at a time. The set is closed: every
consumer dispatches over all five variants, and tests/test_drag_machine.py
checks that DRAG_STATE_TYPES still lists exactly these.
"""
from dataclasses import dataclass
from typing import Tuple, Union

from models.document import NodeId
from models.transform import Vec2


@dataclass(frozen=True)
class Idle:
    """No pointer gesture in progress."""


@dataclass(frozen=True)
class PendingMarquee:
    """Pressed over empty space, not yet past the drag threshold."""
    start_screen: Vec2
    start_world: Vec2
    additive: bool


@dataclass(frozen=True)
class Marquee:
    """Rubber-band selection in progress.

    base_selection is the selection captured when the marquee started; it
    is unioned into every recompute when additive is set.
    """
    start_world: Vec2
    current_world: Vec2
    additive: bool
    base_selection: Tuple[NodeId, ...] = ()


@dataclass(frozen=True)
class PendingSelectionMove:
    """Pressed over a selected shape, not yet past the drag threshold."""
    start_screen: Vec2
    start_world: Vec2


@dataclass(frozen=True)
class SelectionMove:
    """Dragging the selected shapes.

    origins holds each moved shape's position at drag start; positions are
    always recomputed as origin + delta so no error accumulates.
    """
    start_world: Vec2
    current_world: Vec2
    origins: Tuple[Tuple[NodeId, Vec2], ...]


DragState = Union[Idle, PendingMarquee, Marquee, PendingSelectionMove, SelectionMove]

DRAG_STATE_TYPES = (Idle, PendingMarquee, Marquee, PendingSelectionMove, SelectionMove)

IDLE = Idle()
