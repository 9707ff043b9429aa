"""Geometry primitives for viewcull.

This module provides immutable Pydantic models for representing points and
axis-aligned rectangles. Shapes and viewports are expressed in document
coordinates: floating point document units, independent of screen pixels
and camera state, and possibly negative.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator


class Point(BaseModel, frozen=True):
    """A 2D point or offset.

    Element geometry is in document units; a camera pan uses the same type
    in screen pixels. x increases rightward and y increases downward.

    Attributes:
        x: Horizontal position.
        y: Vertical position.
    """

    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])


class Rect(BaseModel, frozen=True):
    """An axis-aligned rectangle (AABB) in document coordinates.

    Bounds are inclusive on every side. Degenerate rectangles (zero width
    or height, e.g. the bounds of a single point) are valid.

    Attributes:
        min_x: Left edge.
        min_y: Top edge.
        max_x: Right edge (>= min_x).
        max_y: Bottom edge (>= min_y).
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @model_validator(mode="after")
    def _validate_order(self) -> Self:
        """Reject inverted rectangles."""
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                "Rect bounds are inverted: "
                f"x=[{self.min_x}, {self.max_x}], y=[{self.min_y}, {self.max_y}]"
            )
        return self

    @property
    def width(self) -> float:
        """Return the horizontal extent."""
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        """Return the vertical extent."""
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        """Return the center point."""
        return Point(
            x=(self.min_x + self.max_x) / 2,
            y=(self.min_y + self.max_y) / 2,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @classmethod
    def from_tuple(cls, bbox: tuple[float, float, float, float]) -> Self:
        """Create Rect from (min_x, min_y, max_x, max_y) tuple."""
        return cls(min_x=bbox[0], min_y=bbox[1], max_x=bbox[2], max_y=bbox[3])
