"""Camera transforms between screen space and document space.

The camera maps a document point ``p`` to the screen point
``p * zoom + pan``. Screen coordinates are stage pixels; document
coordinates are document units. One document unit spans ``zoom`` pixels.

Transform Direction Conventions:
    - doc_to_screen: Multiply by zoom, then add pan
    - screen_to_doc: Subtract pan, then divide by zoom
"""

from __future__ import annotations

from typing import Protocol

from viewcull.geometry.primitives import Point, Rect

DEFAULT_MARGIN_PX = 200.0

__all__ = [
    "DEFAULT_MARGIN_PX",
    "CameraState",
    "doc_to_screen",
    "screen_to_doc",
    "viewport_doc_rect",
]


class CameraState(Protocol):
    """Minimal camera fields needed by the transforms.

    ``zoom`` must be positive; the camera controller keeps it so.
    """

    @property
    def zoom(self) -> float: ...

    @property
    def pan(self) -> Point: ...


def doc_to_screen(point: Point, view: CameraState) -> Point:
    """Transform a document point to stage pixels."""
    return Point(x=point.x * view.zoom + view.pan.x, y=point.y * view.zoom + view.pan.y)


def screen_to_doc(point: Point, view: CameraState) -> Point:
    """Transform a stage pixel position to document coordinates."""
    return Point(
        x=(point.x - view.pan.x) / view.zoom,
        y=(point.y - view.pan.y) / view.zoom,
    )


def viewport_doc_rect(
    view: CameraState,
    stage_width: float,
    stage_height: float,
    margin_px: float = DEFAULT_MARGIN_PX,
) -> Rect:
    """Compute the document-space rectangle visible on the stage.

    The margin is given in screen pixels and converted to document units,
    so the buffer around the stage looks the same at every zoom level and
    elements do not pop in at the edge while panning.

    Args:
        view: Camera state (positive zoom, screen-space pan).
        stage_width: Stage width in pixels.
        stage_height: Stage height in pixels.
        margin_px: Screen-space buffer added on every side.

    Returns:
        Viewport rectangle in document coordinates, expanded by the margin.

    Raises:
        ValueError: If a stage dimension or the margin is negative.
    """
    if stage_width < 0 or stage_height < 0:
        raise ValueError(
            f"Stage dimensions must be non-negative, got {stage_width}x{stage_height}"
        )
    if margin_px < 0:
        raise ValueError(f"Margin must be non-negative, got {margin_px}")

    zoom = view.zoom
    pan = view.pan
    margin_doc = margin_px / zoom
    # Ordered for any positive zoom
    return Rect.model_construct(
        min_x=-pan.x / zoom - margin_doc,
        min_y=-pan.y / zoom - margin_doc,
        max_x=(stage_width - pan.x) / zoom + margin_doc,
        max_y=(stage_height - pan.y) / zoom + margin_doc,
    )
