"""Geometry module for viewcull.

This package provides document-space primitives, per-shape bounding,
overlap tests, and the camera transforms that turn a stage and a view
state into a document-space viewport.

Key Components:
    - Primitives: Point and Rect models in document coordinates
    - Bounds: Conservative AABBs for two- and three-point shapes
    - Overlap: Inclusive rect overlap and padded point containment
    - Transforms: Screen <-> document conversions and the viewport rect

Example:
    from viewcull.geometry import Point, Rect, rects_overlap, segment_bounds

    viewport = Rect(min_x=0, min_y=0, max_x=200, max_y=200)
    bounds = segment_bounds(Point(x=50, y=50), Point(x=150, y=50))
    rects_overlap(bounds, viewport)  # True
"""

from viewcull.geometry.bounds import segment_bounds, three_point_bounds
from viewcull.geometry.overlap import point_in_padded_rect, rects_overlap
from viewcull.geometry.primitives import Point, Rect
from viewcull.geometry.transforms import (
    DEFAULT_MARGIN_PX,
    CameraState,
    doc_to_screen,
    screen_to_doc,
    viewport_doc_rect,
)

__all__ = [
    "DEFAULT_MARGIN_PX",
    "CameraState",
    "Point",
    "Rect",
    "doc_to_screen",
    "point_in_padded_rect",
    "rects_overlap",
    "screen_to_doc",
    "segment_bounds",
    "three_point_bounds",
    "viewport_doc_rect",
]
