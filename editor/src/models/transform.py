"""Camera and vector types for screen/world coordinate conversion.

Two coordinate spaces exist:
- Screen space: viewport pixels, origin at the canvas top-left, Y-down
- World space: the document's own units, independent of the viewport

A Vec2 does not know which space it lives in. Crossing between spaces
only happens through Camera.screen_to_world / Camera.world_to_screen.
"""
import logging
from dataclasses import dataclass, field

from constants import DEFAULT_PAN, DEFAULT_ZOOM, ZOOM_EPSILON, ZOOM_MAX, ZOOM_MIN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector for coordinate pairs.

    Arithmetic is elementwise. Scalars broadcast to both components.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return Vec2(self.x + other, self.y + other)

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return Vec2(self.x - other, self.y - other)

    def __mul__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def __neg__(self):
        return Vec2(-self.x, -self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def to_tuple(self):
        return (self.x, self.y)


def _default_pan() -> Vec2:
    return Vec2(*DEFAULT_PAN)


@dataclass
class Camera:
    """Pan/zoom transform between screen pixels and world units.

    pan is the world point drawn at the screen origin. zoom is screen
    pixels per world unit and always stays within [ZOOM_MIN, ZOOM_MAX].
    """
    pan: Vec2 = field(default_factory=_default_pan)
    zoom: float = DEFAULT_ZOOM

    def __post_init__(self):
        self.zoom = _clamp_zoom(self.zoom)

    def screen_to_world(self, screen_px: Vec2) -> Vec2:
        return self.pan + screen_px / self.zoom

    def world_to_screen(self, world: Vec2) -> Vec2:
        return (world - self.pan) * self.zoom

    def pan_by_screen_delta(self, delta_px: Vec2) -> None:
        """Grab-and-drag panning: moving the pointer right/down slides the world right/down."""
        self.pan = self.pan - delta_px / self.zoom

    def zoom_at_screen_point(self, pivot_px: Vec2, zoom_multiplier: float) -> None:
        """Scale zoom by zoom_multiplier, keeping the world point under pivot_px fixed.

        The new zoom is clamped to [ZOOM_MIN, ZOOM_MAX]. When clamping leaves
        the zoom unchanged the call is a no-op, so pan never drifts while
        pinned at a limit.
        """
        old_zoom = self.zoom
        new_zoom = _clamp_zoom(old_zoom * zoom_multiplier)

        if abs(new_zoom - old_zoom) < ZOOM_EPSILON:
            logger.debug("Zoom pinned at %s, ignoring multiplier %s", old_zoom, zoom_multiplier)
            return

        world_under_cursor = self.screen_to_world(pivot_px)
        self.zoom = new_zoom
        self.pan = world_under_cursor - pivot_px / new_zoom

    def copy(self) -> 'Camera':
        return Camera(pan=self.pan, zoom=self.zoom)


def _clamp_zoom(zoom: float) -> float:
    return max(ZOOM_MIN, min(ZOOM_MAX, float(zoom)))
