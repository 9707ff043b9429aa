"""Bounding boxes for element shapes.

Curved shapes (arcs, curves) and dimension annotations are bounded by the
hull of their three defining points rather than the true curve extremum.
The hull may over-include an element that is just off screen; it must
never be tighter than the drawn geometry, so callers can rely on it to
never drop a visible element.
"""

from __future__ import annotations

from viewcull.geometry.primitives import Point, Rect


def segment_bounds(a: Point, b: Point) -> Rect:
    """Bound a two-point shape (line, arrow).

    Args:
        a: First endpoint.
        b: Second endpoint.

    Returns:
        Per-axis min/max of the two points.
    """
    # min/max ordering holds by construction, skip validation on the hot path
    return Rect.model_construct(
        min_x=min(a.x, b.x),
        min_y=min(a.y, b.y),
        max_x=max(a.x, b.x),
        max_y=max(a.y, b.y),
    )


def three_point_bounds(a: Point, b: Point, c: Point) -> Rect:
    """Bound a three-point shape (arc, curve, dimension annotation).

    Args:
        a: First point (typically start).
        b: Second point (through point, or end for dimensions).
        c: Third point (end, or label anchor for dimensions).

    Returns:
        Per-axis min/max of the three points.
    """
    return Rect.model_construct(
        min_x=min(a.x, b.x, c.x),
        min_y=min(a.y, b.y, c.y),
        max_x=max(a.x, b.x, c.x),
        max_y=max(a.y, b.y, c.y),
    )
