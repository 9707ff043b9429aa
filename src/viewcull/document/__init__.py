"""Document snapshot layer for viewcull.

Pydantic models for the read-only snapshot consumed by the culling engine,
plus JSON load/dump helpers.

Example:
    from viewcull.document import load_project

    project = load_project("sketch.json")
    print(project.view.zoom, len(project.elements.lines))
"""

from viewcull.document.exceptions import DocumentError, DocumentLoadError
from viewcull.document.loader import dump_project, load_project
from viewcull.document.types import (
    ArcElement,
    ArrowElement,
    Construction,
    CurveElement,
    DesignScale,
    DimensionTextElement,
    Element,
    Elements,
    GeneralNotePlacement,
    GeneralNotes,
    Legend,
    LegendPlacement,
    LineElement,
    MarkElement,
    Project,
    ProjectSettings,
    SymbolElement,
    TextElement,
    ViewState,
    normalize_page,
)

__all__ = [
    "ArcElement",
    "ArrowElement",
    "Construction",
    "CurveElement",
    "DesignScale",
    "DimensionTextElement",
    "DocumentError",
    "DocumentLoadError",
    "Element",
    "Elements",
    "GeneralNotePlacement",
    "GeneralNotes",
    "Legend",
    "LegendPlacement",
    "LineElement",
    "MarkElement",
    "Project",
    "ProjectSettings",
    "SymbolElement",
    "TextElement",
    "ViewState",
    "dump_project",
    "load_project",
    "normalize_page",
]
