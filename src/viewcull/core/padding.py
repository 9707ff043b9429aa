"""Annotation-scale padding policy for point-like elements.

Symbols, text and construction marks are drawn at a size that follows the
document's annotation scale, not the zoom. Their culling tolerance must
scale the same way, otherwise a large symbol whose anchor sits just off
screen is dropped while part of its glyph is still visible.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field

from viewcull.config import Settings

# Base padding at annotation scale 1, in document units
SYMBOL_PADDING_BASE = 50.0
TEXT_PADDING_BASE = 40.0
MARK_PADDING_BASE = 20.0

DESIGN_SCALE_FACTORS: dict[str, float] = {
    "small": 1.0,
    "medium": 1.5,
    "large": 2.0,
}


def annotation_scale_factor(design_scale: str | None) -> float:
    """Map a document design scale to its annotation scale factor.

    Args:
        design_scale: "small", "medium" or "large". None or an unknown
            value falls back to "small".

    Returns:
        Multiplier applied to annotation sizes (1.0, 1.5 or 2.0).
    """
    if not design_scale:
        return DESIGN_SCALE_FACTORS["small"]
    return DESIGN_SCALE_FACTORS.get(design_scale, DESIGN_SCALE_FACTORS["small"])


class Padding(BaseModel, frozen=True):
    """Effective per-category padding for one annotation scale.

    Attributes:
        symbol: Tolerance for symbols, in document units.
        text: Tolerance for text labels.
        mark: Tolerance for construction marks.
    """

    symbol: float
    text: float
    mark: float


class PaddingPolicy(BaseModel, frozen=True):
    """Base padding per point-like category at annotation scale 1.

    Example:
        >>> PaddingPolicy().for_scale(2.0).symbol
        100.0
    """

    symbol_base: float = Field(SYMBOL_PADDING_BASE, ge=0)
    text_base: float = Field(TEXT_PADDING_BASE, ge=0)
    mark_base: float = Field(MARK_PADDING_BASE, ge=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build a policy from configured base paddings."""
        return cls(
            symbol_base=settings.SYMBOL_PADDING_BASE,
            text_base=settings.TEXT_PADDING_BASE,
            mark_base=settings.MARK_PADDING_BASE,
        )

    def for_scale(self, annotation_scale: float) -> Padding:
        """Scale every base padding linearly.

        Args:
            annotation_scale: Positive annotation scale factor.

        Returns:
            Effective padding for each category.

        Raises:
            ValueError: If annotation_scale is not positive.
        """
        if annotation_scale <= 0:
            raise ValueError(
                f"annotation_scale must be positive, got {annotation_scale}"
            )
        return Padding(
            symbol=self.symbol_base * annotation_scale,
            text=self.text_base * annotation_scale,
            mark=self.mark_base * annotation_scale,
        )


DEFAULT_PADDING_POLICY = PaddingPolicy()
