"""Tests for frame ordering and slot mapping."""

from spritelab.sprites.constants import FRAME_COUNT
from spritelab.sprites.detection import BoundingBox
from spritelab.sprites.layout import group_rows, map_slots, sort_boxes


def box_at(x, center_y, h=10, w=10):
    """Box of height h whose vertical centre is center_y."""
    return BoundingBox(x, int(center_y - h / 2), w, h)


class TestSortBoxes:
    """Tests for row-major sorting."""

    def test_same_row_sorted_left_to_right(self):
        right = BoundingBox(200, 50, 100, 100)
        left = BoundingBox(50, 50, 100, 100)
        assert sort_boxes([right, left]) == [left, right]

    def test_centres_23_apart_share_a_row(self):
        """Within tolerance, x decides the order."""
        upper_right = box_at(100, center_y=5)
        lower_left = box_at(0, center_y=28)
        assert sort_boxes([upper_right, lower_left]) == [lower_left, upper_right]

    def test_centres_24_apart_are_separate_rows(self):
        """At the tolerance, the upper row comes first."""
        upper_right = box_at(100, center_y=5)
        lower_left = box_at(0, center_y=29)
        assert sort_boxes([lower_left, upper_right]) == [upper_right, lower_left]

    def test_two_rows_of_five(self):
        top = [BoundingBox(x, 70, 60, 60) for x in (70, 270, 470, 670, 870)]
        bottom = [BoundingBox(x, 270, 60, 60) for x in (70, 270, 470, 670, 870)]
        shuffled = [bottom[3], top[4], top[0], bottom[0], top[2], bottom[1], top[1], bottom[4], top[3], bottom[2]]

        assert sort_boxes(shuffled) == top + bottom

    def test_slight_misalignment_within_row(self):
        """Generator jitter of a few pixels keeps boxes in one row."""
        a = BoundingBox(300, 100, 50, 50)
        b = BoundingBox(100, 108, 50, 50)
        c = BoundingBox(200, 95, 50, 50)
        assert sort_boxes([a, b, c]) == [b, c, a]

    def test_empty(self):
        assert sort_boxes([]) == []

    def test_is_deterministic(self):
        boxes = [box_at(x, cy) for x, cy in [(5, 10), (50, 12), (20, 100), (0, 101)]]
        assert sort_boxes(boxes) == sort_boxes(list(reversed(boxes)))


class TestGroupRows:
    """Tests for visual row grouping."""

    def test_rows_anchor_to_first_box(self):
        """Rows do not chain: each box is compared to the row's first box."""
        rows = group_rows([box_at(0, 10), box_at(20, 30), box_at(40, 50)])
        assert [len(r) for r in rows] == [2, 1]


class TestMapSlots:
    """Tests for the fixed slot layout."""

    def test_always_24_slots(self):
        assert len(map_slots([])) == FRAME_COUNT
        boxes = [BoundingBox(i * 10, 0, 8, 8) for i in range(30)]
        assert len(map_slots(boxes)) == FRAME_COUNT

    def test_idle_and_walk_mapping(self):
        """0-3 -> idle slots, 5-10 -> walk slots, index 4 skipped."""
        boxes = [BoundingBox(i * 10, 0, 8, 8) for i in range(12)]
        slots = map_slots(boxes)

        assert slots[0:4] == boxes[0:4]
        assert slots[4:10] == boxes[5:11]
        assert boxes[4] not in slots
        assert boxes[11] not in slots
        assert all(s is None for s in slots[10:])

    def test_two_boxes_fill_first_two_slots(self):
        boxes = [BoundingBox(50, 50, 100, 100), BoundingBox(200, 50, 100, 100)]
        slots = map_slots(boxes)

        assert slots[0] == boxes[0]
        assert slots[1] == boxes[1]
        assert all(s is None for s in slots[2:])

    def test_ten_boxes_leave_last_walk_slot_blank(self):
        """Sorted index 10 does not exist, so slot 9 is blank."""
        boxes = [BoundingBox(i * 10, 0, 8, 8) for i in range(10)]
        slots = map_slots(boxes)

        assert all(s is not None for s in slots[0:9])
        assert slots[9] is None

    def test_five_boxes_leave_walk_blank(self):
        boxes = [BoundingBox(i * 10, 0, 8, 8) for i in range(5)]
        slots = map_slots(boxes)

        assert slots[0:4] == boxes[0:4]
        assert all(s is None for s in slots[4:])
