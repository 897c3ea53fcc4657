"""Document model: the ordered collection of rectangle shapes.

Sequence order is paint order. The last rect is drawn on top and is also
the first candidate when hit-testing.
"""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from constants import DEFAULT_RECTS
from models.color import Color
from models.transform import Vec2

logger = logging.getLogger(__name__)


class NodeId(int):
    """Opaque shape identifier, unique within one Document and never reused."""

    def __repr__(self):
        return f"NodeId({int(self)})"


@dataclass
class RectNode:
    """Axis-aligned rectangle in world units. pos is the top-left corner."""
    id: NodeId
    pos: Vec2
    size: Vec2
    color: Color

    @property
    def min(self) -> Vec2:
        return self.pos

    @property
    def max(self) -> Vec2:
        return self.pos + self.size


class Document:
    """Owns the shapes and the monotonic id counter.

    Only the engine mutates a Document. Every mutation bumps ``revision``
    so callers can tell whether shapes changed during a tick.
    """

    def __init__(self):
        self.next_id = 1
        self.rects: List[RectNode] = []
        self.revision = 0

    def alloc_id(self) -> NodeId:
        """Hand out the next id. Ids only ever increase."""
        node_id = NodeId(self.next_id)
        self.next_id += 1
        return node_id

    def add_rect(self, pos: Vec2, size: Vec2, color: Color) -> NodeId:
        """Append a rect on top of the paint order and return its new id."""
        if size.x < 0 or size.y < 0:
            raise ValueError(f"Rect size must be non-negative, got {size}")
        node = RectNode(id=self.alloc_id(), pos=pos, size=size, color=color)
        self.rects.append(node)
        self.revision += 1
        logger.debug("Added rect %s at %s size %s", node.id, pos, size)
        return node.id

    def get(self, node_id) -> Optional[RectNode]:
        for rect in self.rects:
            if rect.id == node_id:
                return rect
        return None

    def index_of(self, node_id) -> int:
        """Paint-order index of a rect, or -1 if not in the document."""
        for idx, rect in enumerate(self.rects):
            if rect.id == node_id:
                return idx
        return -1

    def move_rect(self, node_id, pos: Vec2) -> bool:
        """Set a rect's top-left position. Returns False for unknown ids."""
        rect = self.get(node_id)
        if rect is None:
            return False
        if rect.pos != pos:
            rect.pos = pos
            self.revision += 1
        return True

    def __iter__(self) -> Iterator[RectNode]:
        return iter(self.rects)

    def __len__(self):
        return len(self.rects)


def create_default_document() -> Document:
    """Document seeded with the startup rectangles from constants.DEFAULT_RECTS."""
    doc = Document()
    for pos, size, color in DEFAULT_RECTS:
        doc.add_rect(Vec2(*pos), Vec2(*size), Color.from_tuple(color))
    return doc
