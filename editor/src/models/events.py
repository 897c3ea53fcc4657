"""Input events consumed by Engine.tick.

The embedding layer delivers one ordered batch per frame. Each event type
carries a ``TAG`` matching its wire name in the decoded batch.
"""
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from models.transform import Vec2


class PointerButton(IntEnum):
    """Which button changed state (DOM PointerEvent.button numbering)."""
    PRIMARY = 0
    AUXILIARY = 1
    SECONDARY = 2


class Buttons(IntFlag):
    """Buttons held during a move (DOM PointerEvent.buttons bit layout)."""
    NONE = 0
    PRIMARY = 1
    SECONDARY = 2
    AUXILIARY = 4


class InputEvent:
    """Base for every event in a batch."""
    TAG = ''


@dataclass(frozen=True)
class CameraPanByScreenDelta(InputEvent):
    TAG = 'camera_pan_by_screen_delta'
    delta_px: Vec2


@dataclass(frozen=True)
class CameraZoomAtScreenPoint(InputEvent):
    TAG = 'camera_zoom_at_screen_point'
    pivot_px: Vec2
    zoom_multiplier: float


@dataclass(frozen=True)
class PointerDown(InputEvent):
    TAG = 'pointer_down'
    screen_px: Vec2
    shift: bool = False
    button: PointerButton = PointerButton.PRIMARY


@dataclass(frozen=True)
class PointerMove(InputEvent):
    TAG = 'pointer_move'
    screen_px: Vec2
    buttons: Buttons = Buttons.NONE


@dataclass(frozen=True)
class PointerUp(InputEvent):
    TAG = 'pointer_up'
    screen_px: Vec2
    button: PointerButton = PointerButton.PRIMARY


@dataclass(frozen=True)
class PointerCancel(InputEvent):
    TAG = 'pointer_cancel'


EVENT_TYPES = {
    cls.TAG: cls
    for cls in (
        CameraPanByScreenDelta,
        CameraZoomAtScreenPoint,
        PointerDown,
        PointerMove,
        PointerUp,
        PointerCancel,
    )
}
