"""
collision.py
------------
Axis-aligned bounding-box overlap test.

Boxes are inclusive: an entity at x with width w covers pixels x .. x+w-1.
Two boxes overlap unless one's far edge lies strictly before the other's
near edge on either axis. The test is symmetric in its arguments.
"""


def collision(a, b) -> bool:
    return not (
        a.y + a.h - 1 < b.y
        or a.y > b.y + b.h - 1
        or a.x + a.w - 1 < b.x
        or a.x > b.x + b.w - 1
    )
