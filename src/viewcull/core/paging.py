"""Page scoping of document snapshots.

A document spans the pages of its background PDF. Only entries on the
page shown by the stage are candidates for rendering. Entries without an
explicit page belong to page 1.
"""

from __future__ import annotations

from typing import TypeVar

from viewcull.document.types import Element, Project, normalize_page

E = TypeVar("E", bound=Element)


def _on_page(entries: tuple[E, ...], page: int) -> tuple[E, ...]:
    return tuple(
        entry
        for entry in entries
        if (entry.page if entry.page is not None else 1) == page
    )


def filter_project_by_page(project: Project, page: float) -> Project:
    """Keep only the entries placed on one page.

    Unlike viewport culling, page scoping also applies to legend and
    general-note placements.

    Args:
        project: Source snapshot. Never mutated.
        page: Requested page. Non-finite values select page 1; others are
            truncated toward zero and clamped to at least 1.

    Returns:
        A new Project whose collections hold only entries on that page.
    """
    safe_page = normalize_page(page)
    elements = project.elements

    return project.model_copy(
        update={
            "elements": elements.model_copy(
                update={
                    "lines": _on_page(elements.lines, safe_page),
                    "arcs": _on_page(elements.arcs, safe_page),
                    "curves": _on_page(elements.curves, safe_page),
                    "symbols": _on_page(elements.symbols, safe_page),
                    "texts": _on_page(elements.texts, safe_page),
                    "arrows": _on_page(elements.arrows, safe_page),
                    "dimension_texts": _on_page(elements.dimension_texts, safe_page),
                }
            ),
            "construction": project.construction.model_copy(
                update={"marks": _on_page(project.construction.marks, safe_page)}
            ),
            "legend": project.legend.model_copy(
                update={"placements": _on_page(project.legend.placements, safe_page)}
            ),
            "general_notes": project.general_notes.model_copy(
                update={
                    "placements": _on_page(project.general_notes.placements, safe_page)
                }
            ),
        }
    )
