"""
Tests for the Document model, Color and hit testing.

Covers:
- Monotonic id allocation
- Default document contents and paint order
- Rect lookup and moves (revision tracking)
- Color construction and conversion
- Point hit testing (topmost wins, inclusive edges)
- Region overlap (half-open)
"""
import pytest

from models.color import Color
from models.document import Document, NodeId, create_default_document
from models.transform import Vec2
from services.hit_testing import (
    check_collide_rects, rect_overlaps_region, rects_overlapping, region_from_corners,
)

RED = Color(1.0, 0.0, 0.0)


# ══════════════════════════════════════════════════════════════════════════
# Document
# ══════════════════════════════════════════════════════════════════════════

class TestDocument:

    def test_new_document_is_empty(self):
        doc = Document()
        assert len(doc) == 0
        assert doc.next_id == 1

    def test_ids_are_monotonic(self):
        doc = Document()
        ids = [doc.alloc_id() for _ in range(5)]
        assert ids == [1, 2, 3, 4, 5]
        assert doc.next_id == 6

    def test_add_rect_appends_on_top(self):
        doc = Document()
        a = doc.add_rect(Vec2(0, 0), Vec2(10, 10), RED)
        b = doc.add_rect(Vec2(5, 5), Vec2(10, 10), RED)
        assert [r.id for r in doc] == [a, b]
        assert doc.index_of(b) == 1

    def test_node_id_is_int(self):
        doc = Document()
        node_id = doc.add_rect(Vec2(0, 0), Vec2(1, 1), RED)
        assert isinstance(node_id, NodeId)
        assert node_id == 1

    def test_negative_size_rejected(self):
        doc = Document()
        with pytest.raises(ValueError):
            doc.add_rect(Vec2(0, 0), Vec2(-1, 5), RED)

    def test_zero_size_allowed(self):
        doc = Document()
        doc.add_rect(Vec2(0, 0), Vec2(0, 0), RED)
        assert len(doc) == 1

    def test_get_unknown_id(self):
        doc = create_default_document()
        assert doc.get(999) is None
        assert doc.index_of(999) == -1

    def test_move_rect_bumps_revision(self):
        doc = create_default_document()
        rev = doc.revision
        first = doc.rects[0].id
        assert doc.move_rect(first, Vec2(0.0, 0.0))
        assert doc.get(first).pos == Vec2(0.0, 0.0)
        assert doc.revision == rev + 1

    def test_move_rect_to_same_position_keeps_revision(self):
        doc = create_default_document()
        rev = doc.revision
        first = doc.rects[0]
        doc.move_rect(first.id, first.pos)
        assert doc.revision == rev

    def test_move_unknown_rect(self):
        doc = create_default_document()
        assert not doc.move_rect(999, Vec2(0, 0))


class TestDefaultDocument:

    def test_three_rects_in_order(self):
        doc = create_default_document()
        assert [(r.pos, r.size) for r in doc] == [
            (Vec2(100.0, 100.0), Vec2(120.0, 80.0)),
            (Vec2(300.0, 220.0), Vec2(140.0, 80.0)),
            (Vec2(600.0, 900.0), Vec2(200.0, 100.0)),
        ]

    def test_ids_start_at_one(self):
        doc = create_default_document()
        assert [r.id for r in doc] == [1, 2, 3]
        assert doc.next_id == 4

    def test_colors(self):
        doc = create_default_document()
        assert doc.rects[0].color.to_tuple() == pytest.approx((0.2, 0.7, 0.9, 1.0))


# ══════════════════════════════════════════════════════════════════════════
# Color
# ══════════════════════════════════════════════════════════════════════════

class TestColor:

    def test_clamps_components(self):
        assert Color(2.0, -1.0, 0.5, 3.0).to_tuple() == (1.0, 0.0, 0.5, 1.0)

    def test_alpha_defaults_to_opaque(self):
        assert Color(0.1, 0.2, 0.3).a == 1.0

    def test_from_hex(self):
        assert Color.from_hex('#FF0000').to_tuple() == (1.0, 0.0, 0.0, 1.0)
        assert Color.from_hex('00ff0080').to_uint8() == (0, 255, 0, 128)

    @pytest.mark.parametrize("bad", ['#FFF', 'GGGGGG', '', '#1234567'])
    def test_from_hex_rejects_garbage(self, bad):
        with pytest.raises(ValueError):
            Color.from_hex(bad)

    def test_to_hex(self):
        assert Color.from_uint8(255, 128, 0).to_hex() == '#FF8000FF'

    def test_from_tuple_length_checked(self):
        with pytest.raises(ValueError):
            Color.from_tuple((1.0, 0.0))

    def test_with_alpha(self):
        assert RED.with_alpha(0.25).to_tuple() == (1.0, 0.0, 0.0, 0.25)

    def test_equality(self):
        assert Color(0.5, 0.5, 0.5) == Color(0.5, 0.5, 0.5, 1.0)


# ══════════════════════════════════════════════════════════════════════════
# Hit testing
# ══════════════════════════════════════════════════════════════════════════

class TestHitTesting:

    def test_hit_test_picks_topmost_rect(self):
        doc = create_default_document()
        assert check_collide_rects(doc.rects, Vec2(610.0, 910.0)) == doc.rects[2].id

    def test_overlap_resolves_to_last_inserted(self):
        doc = Document()
        bottom = doc.add_rect(Vec2(0, 0), Vec2(100, 100), RED)
        top = doc.add_rect(Vec2(50, 50), Vec2(100, 100), RED)
        assert check_collide_rects(doc.rects, Vec2(75, 75)) == top
        assert check_collide_rects(doc.rects, Vec2(25, 25)) == bottom

    def test_miss_returns_none(self):
        doc = create_default_document()
        assert check_collide_rects(doc.rects, Vec2(0.0, 0.0)) is None

    def test_empty_document(self):
        assert check_collide_rects([], Vec2(0.0, 0.0)) is None

    @pytest.mark.parametrize("point", [
        Vec2(100.0, 100.0),  # top-left corner
        Vec2(220.0, 180.0),  # bottom-right corner
        Vec2(220.0, 140.0),  # right edge
        Vec2(160.0, 100.0),  # top edge
    ])
    def test_edges_are_inclusive(self, point):
        doc = create_default_document()
        assert check_collide_rects(doc.rects, point) == doc.rects[0].id

    def test_just_outside_misses(self):
        doc = create_default_document()
        assert check_collide_rects(doc.rects, Vec2(220.01, 140.0)) is None


class TestRegionOverlap:

    def test_region_from_corners_normalizes(self):
        lo, hi = region_from_corners(Vec2(10, -5), Vec2(-3, 8))
        assert lo == Vec2(-3, -5)
        assert hi == Vec2(10, 8)

    def test_partial_overlap_counts(self):
        doc = create_default_document()
        rect = doc.rects[0]  # (100,100) .. (220,180)
        assert rect_overlaps_region(rect, Vec2(200, 160), Vec2(300, 300))

    def test_touching_edge_does_not_count(self):
        doc = create_default_document()
        rect = doc.rects[0]
        assert not rect_overlaps_region(rect, Vec2(220, 100), Vec2(300, 180))
        assert not rect_overlaps_region(rect, Vec2(0, 0), Vec2(100, 100))

    def test_rects_overlapping_paint_order(self):
        doc = create_default_document()
        ids = rects_overlapping(doc.rects, Vec2(0, 0), Vec2(1000, 1000))
        assert ids == [1, 2, 3]

    def test_degenerate_region_in_empty_space(self):
        doc = create_default_document()
        assert rects_overlapping(doc.rects, Vec2(50, 50), Vec2(50, 50)) == []

    def test_degenerate_region_inside_rect(self):
        doc = create_default_document()
        assert rects_overlapping(doc.rects, Vec2(150, 150), Vec2(150, 150)) == [1]
