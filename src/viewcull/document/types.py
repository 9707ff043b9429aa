"""Document snapshot models.

The document is an immutable snapshot handed to the culling engine by the
model layer. Only geometric fields (``start``/``end``/``through``/
``position``/``tail``/``head``) and the optional ``page`` are interpreted;
every other field (color, wire class, text content, layer, ...) is kept as
an opaque extra and passed through unchanged.

JSON snapshots use camelCase keys (``dimensionTexts``, ``generalNotes``,
``currentPage``); Python attributes are snake_case.
"""

from __future__ import annotations

import math
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from viewcull.geometry.primitives import Point

DesignScale = Literal["small", "medium", "large"]


def normalize_page(page: float) -> int:
    """Coerce a page number to a valid 1-based page.

    Non-finite values select page 1; others are truncated toward zero and
    clamped to at least 1.
    """
    if not math.isfinite(page):
        return 1
    return max(1, math.trunc(page))


class DocumentModel(BaseModel):
    """Base for all snapshot models: frozen, camelCase, opaque extras kept."""

    model_config = ConfigDict(
        frozen=True,
        extra="allow",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ViewState(DocumentModel):
    """Camera state owned by the pan/zoom controller.

    Attributes:
        current_page: Page shown on the stage (1-based). Numeric values are
            normalized with ``normalize_page``.
        zoom: Screen pixels per document unit. Must be positive.
        pan: Screen-space translation applied after zoom, in screen pixels.
    """

    current_page: int = Field(1, ge=1)
    zoom: float = Field(1.0, gt=0, description="Pixels per document unit")
    pan: Point = Field(
        default_factory=lambda: Point(x=0, y=0),
        description="Stage offset in screen pixels",
    )

    @field_validator("current_page", mode="before")
    @classmethod
    def _normalize_current_page(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return normalize_page(value)
        return value


class Element(DocumentModel):
    """Common fields for every placed element."""

    id: str
    page: int | None = None


class LineElement(Element):
    start: Point
    end: Point


class ArcElement(Element):
    start: Point
    through: Point
    end: Point


class CurveElement(Element):
    start: Point
    through: Point
    end: Point


class SymbolElement(Element):
    position: Point


class TextElement(Element):
    position: Point


class ArrowElement(Element):
    tail: Point
    head: Point


class DimensionTextElement(Element):
    """Dimension annotation: measured segment plus label anchor."""

    start: Point
    end: Point
    position: Point


class MarkElement(Element):
    """Construction mark left by the measure tool."""

    position: Point


class LegendPlacement(Element):
    position: Point


class GeneralNotePlacement(Element):
    position: Point


class Elements(DocumentModel):
    """Render-ordered element collections. Tuple order is z-order."""

    lines: tuple[LineElement, ...] = ()
    arcs: tuple[ArcElement, ...] = ()
    curves: tuple[CurveElement, ...] = ()
    symbols: tuple[SymbolElement, ...] = ()
    texts: tuple[TextElement, ...] = ()
    arrows: tuple[ArrowElement, ...] = ()
    dimension_texts: tuple[DimensionTextElement, ...] = ()


class Construction(DocumentModel):
    marks: tuple[MarkElement, ...] = ()


class Legend(DocumentModel):
    placements: tuple[LegendPlacement, ...] = ()


class GeneralNotes(DocumentModel):
    placements: tuple[GeneralNotePlacement, ...] = ()


class ProjectSettings(DocumentModel):
    """Document display settings. Only the design scale is interpreted."""

    design_scale: DesignScale | None = None


class Project(DocumentModel):
    """A complete document snapshot.

    Top-level fields other than the ones declared here (schema version,
    project metadata, PDF and scale state, layer toggles) are opaque extras.
    """

    view: ViewState = Field(default_factory=ViewState)
    settings: ProjectSettings = Field(default_factory=ProjectSettings)
    elements: Elements = Field(default_factory=Elements)
    construction: Construction = Field(default_factory=Construction)
    legend: Legend = Field(default_factory=Legend)
    general_notes: GeneralNotes = Field(default_factory=GeneralNotes)

    @property
    def document_id(self) -> str | None:
        """Return the project metadata id, if the snapshot carries one."""
        meta: Any = (self.model_extra or {}).get("projectMeta")
        if isinstance(meta, dict):
            value = meta.get("id")
            return str(value) if value is not None else None
        return None

    def collection_sizes(self) -> dict[str, int]:
        """Count entries in every element collection."""
        return {
            "lines": len(self.elements.lines),
            "arcs": len(self.elements.arcs),
            "curves": len(self.elements.curves),
            "symbols": len(self.elements.symbols),
            "texts": len(self.elements.texts),
            "arrows": len(self.elements.arrows),
            "dimension_texts": len(self.elements.dimension_texts),
            "marks": len(self.construction.marks),
            "legend_placements": len(self.legend.placements),
            "general_note_placements": len(self.general_notes.placements),
        }
