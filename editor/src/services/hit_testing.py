"""Point and region queries against document rects (world space)."""
from typing import Iterable, List, Optional, Sequence

from models.document import NodeId, RectNode
from models.transform import Vec2


def check_collide_rects(rects: Sequence[RectNode], world: Vec2) -> Optional[NodeId]:
	"""Return the id of the topmost rect containing the world point, or None.

	Rects are walked in reverse paint order so the last-drawn shape wins
	where shapes overlap. Bounds are inclusive on all four edges.
	"""
	for rect in reversed(rects):
		min_x, min_y = rect.pos
		max_x = min_x + rect.size.x
		max_y = min_y + rect.size.y
		if min_x <= world.x <= max_x and min_y <= world.y <= max_y:
			return rect.id
	return None


def region_from_corners(a: Vec2, b: Vec2):
	"""Normalize two arbitrary corners into (min, max)."""
	return (
		Vec2(min(a.x, b.x), min(a.y, b.y)),
		Vec2(max(a.x, b.x), max(a.y, b.y)),
	)


def rect_overlaps_region(rect: RectNode, region_min: Vec2, region_max: Vec2) -> bool:
	"""Half-open overlap test: touching edges do not count."""
	rect_max = rect.pos + rect.size
	return (
		rect.pos.x < region_max.x and rect_max.x > region_min.x
		and rect.pos.y < region_max.y and rect_max.y > region_min.y
	)


def rects_overlapping(rects: Iterable[RectNode], region_min: Vec2, region_max: Vec2) -> List[NodeId]:
	"""Ids of every rect overlapping the region, in paint order."""
	return [rect.id for rect in rects if rect_overlaps_region(rect, region_min, region_max)]
