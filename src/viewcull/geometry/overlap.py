"""Overlap and containment tests against the viewport.

All comparisons are inclusive: a shape exactly tangent to the viewport
boundary counts as visible.
"""

from __future__ import annotations

from viewcull.geometry.primitives import Point, Rect


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles share at least one point.

    Args:
        a: First rectangle.
        b: Second rectangle.

    Returns:
        True if the rectangles overlap or touch.
    """
    return (
        a.min_x <= b.max_x
        and a.max_x >= b.min_x
        and a.min_y <= b.max_y
        and a.max_y >= b.min_y
    )


def point_in_padded_rect(point: Point, viewport: Rect, padding: float) -> bool:
    """Check whether a point, grown into a square of half-size padding, meets a rect.

    Point-like elements (symbols, text, marks) are drawn with a footprint
    the anchor alone does not describe; padding stands in for that footprint.

    Args:
        point: Element anchor position.
        viewport: Document-space viewport.
        padding: Tolerance in document units.

    Returns:
        True if the padded point overlaps the viewport.
    """
    return (
        point.x + padding >= viewport.min_x
        and point.x - padding <= viewport.max_x
        and point.y + padding >= viewport.min_y
        and point.y - padding <= viewport.max_y
    )
