"""Viewport filtering of document snapshots.

Each element collection is reduced to the entries whose shape test passes
against a document-space viewport:

    lines, arrows        segment bounds overlap the viewport
    arcs, curves         three-point hull overlaps the viewport
    dimension texts      hull of start, end and label anchor overlaps
    symbols, texts,      anchor, padded by the category padding for the
    construction marks   current annotation scale, meets the viewport

Legend and general-note placements are never culled: there are few of
them and their footprint depends on their content.

Filtering is stable and pure. The result is a new Project built with
shallow copies, so untouched parts of the input (settings, view, metadata,
legend, general notes) are shared rather than cloned.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from viewcull.core.padding import DEFAULT_PADDING_POLICY, PaddingPolicy
from viewcull.document.types import (
    ArcElement,
    ArrowElement,
    CurveElement,
    DimensionTextElement,
    LineElement,
    MarkElement,
    Project,
    SymbolElement,
    TextElement,
)
from viewcull.geometry import (
    Rect,
    point_in_padded_rect,
    rects_overlap,
    segment_bounds,
    three_point_bounds,
)

T = TypeVar("T")


def line_in_viewport(el: LineElement, viewport: Rect) -> bool:
    return rects_overlap(segment_bounds(el.start, el.end), viewport)


def arrow_in_viewport(el: ArrowElement, viewport: Rect) -> bool:
    return rects_overlap(segment_bounds(el.tail, el.head), viewport)


def arc_in_viewport(el: ArcElement, viewport: Rect) -> bool:
    return rects_overlap(three_point_bounds(el.start, el.through, el.end), viewport)


def curve_in_viewport(el: CurveElement, viewport: Rect) -> bool:
    return rects_overlap(three_point_bounds(el.start, el.through, el.end), viewport)


def dimension_text_in_viewport(el: DimensionTextElement, viewport: Rect) -> bool:
    return rects_overlap(three_point_bounds(el.start, el.end, el.position), viewport)


def symbol_in_viewport(el: SymbolElement, viewport: Rect, padding: float) -> bool:
    return point_in_padded_rect(el.position, viewport, padding)


def text_in_viewport(el: TextElement, viewport: Rect, padding: float) -> bool:
    return point_in_padded_rect(el.position, viewport, padding)


def mark_in_viewport(el: MarkElement, viewport: Rect, padding: float) -> bool:
    return point_in_padded_rect(el.position, viewport, padding)


def _keep(items: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T, ...]:
    return tuple(item for item in items if predicate(item))


def filter_project_by_viewport(
    project: Project,
    viewport: Rect,
    annotation_scale: float,
    policy: PaddingPolicy = DEFAULT_PADDING_POLICY,
) -> Project:
    """Reduce a snapshot to the elements that meet the viewport.

    Args:
        project: Source snapshot. Never mutated.
        viewport: Document-space viewport, usually from viewport_doc_rect().
        annotation_scale: Positive annotation scale factor.
        policy: Base paddings for point-like categories.

    Returns:
        A new Project with culled element collections. Legend and
        general-note placements are carried over as-is.

    Raises:
        ValueError: If annotation_scale is not positive.
    """
    padding = policy.for_scale(annotation_scale)
    elements = project.elements

    return project.model_copy(
        update={
            "elements": elements.model_copy(
                update={
                    "lines": _keep(
                        elements.lines, lambda el: line_in_viewport(el, viewport)
                    ),
                    "arcs": _keep(
                        elements.arcs, lambda el: arc_in_viewport(el, viewport)
                    ),
                    "curves": _keep(
                        elements.curves, lambda el: curve_in_viewport(el, viewport)
                    ),
                    "symbols": _keep(
                        elements.symbols,
                        lambda el: symbol_in_viewport(el, viewport, padding.symbol),
                    ),
                    "texts": _keep(
                        elements.texts,
                        lambda el: text_in_viewport(el, viewport, padding.text),
                    ),
                    "arrows": _keep(
                        elements.arrows, lambda el: arrow_in_viewport(el, viewport)
                    ),
                    "dimension_texts": _keep(
                        elements.dimension_texts,
                        lambda el: dimension_text_in_viewport(el, viewport),
                    ),
                }
            ),
            "construction": project.construction.model_copy(
                update={
                    "marks": _keep(
                        project.construction.marks,
                        lambda el: mark_in_viewport(el, viewport, padding.mark),
                    ),
                }
            ),
        }
    )
