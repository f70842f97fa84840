"""
test_collision.py
-----------------
AABB overlap rules: inclusive edges, symmetry, degenerate boxes.
"""

import pytest
from types import SimpleNamespace

from invaders.systems.collision import collision


def box(x, y, w, h):
    return SimpleNamespace(x=x, y=y, w=w, h=h)


class TestCollision:

    def test_overlapping_boxes_collide(self):
        assert collision(box(0, 0, 10, 10), box(5, 5, 10, 10))

    @pytest.mark.parametrize("other", [box(9, 0, 10, 10), box(0, 9, 10, 10), box(9, 9, 10, 10)])
    def test_sharing_the_last_pixel_counts_as_overlap(self, other):
        assert collision(box(0, 0, 10, 10), other)

    @pytest.mark.parametrize("other", [box(10, 0, 10, 10), box(0, 10, 10, 10), box(-10, 0, 10, 10)])
    def test_adjacent_boxes_do_not_collide(self, other):
        assert not collision(box(0, 0, 10, 10), other)

    def test_is_symmetric(self):
        a, b = box(3, 4, 5, 6), box(7, 9, 2, 2)
        assert collision(a, b) == collision(b, a)

    def test_contained_box_collides(self):
        assert collision(box(0, 0, 100, 100), box(40, 40, 3, 14))

    def test_zero_sized_box_never_collides(self):
        assert not collision(box(0, 0, 0, 0), box(0, 0, 10, 10))
