"""Core culling engine for viewcull.

Key Components:
    - PaddingPolicy: Annotation-scale padding for point-like elements
    - filter_project_by_viewport: Pure per-collection viewport filter
    - filter_project_by_page: Page scoping of a snapshot
    - ViewportCuller: Per-frame pipeline (page scope, viewport, filter)
"""

from viewcull.core.culling import filter_project_by_viewport
from viewcull.core.engine import ViewportCuller
from viewcull.core.padding import (
    DEFAULT_PADDING_POLICY,
    DESIGN_SCALE_FACTORS,
    MARK_PADDING_BASE,
    SYMBOL_PADDING_BASE,
    TEXT_PADDING_BASE,
    Padding,
    PaddingPolicy,
    annotation_scale_factor,
)
from viewcull.core.paging import filter_project_by_page

__all__ = [
    "DEFAULT_PADDING_POLICY",
    "DESIGN_SCALE_FACTORS",
    "MARK_PADDING_BASE",
    "SYMBOL_PADDING_BASE",
    "TEXT_PADDING_BASE",
    "Padding",
    "PaddingPolicy",
    "ViewportCuller",
    "annotation_scale_factor",
    "filter_project_by_page",
    "filter_project_by_viewport",
]
