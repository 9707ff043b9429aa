"""Per-frame culling pipeline for viewcull.

This module turns the document snapshot held by the editor and the
measured stage size into the snapshot the renderer draws, combining page
scoping, the viewport transform and viewport filtering.

Unmeasured Stage:
    Before the stage has been laid out its width or height is 0. A
    viewport computed from it would cull everything, so the page-scoped
    snapshot is returned unculled instead.
"""

from __future__ import annotations

from viewcull.config import settings
from viewcull.core.culling import filter_project_by_viewport
from viewcull.core.padding import PaddingPolicy, annotation_scale_factor
from viewcull.core.paging import filter_project_by_page
from viewcull.document.types import Project
from viewcull.geometry import Rect, viewport_doc_rect
from viewcull.utils.logging import get_logger

logger = get_logger(__name__)


class ViewportCuller:
    """Computes the visible subset of a snapshot for one frame.

    The culler only holds immutable configuration (padding policy and
    screen margin); each call is independent and side-effect free apart
    from a debug log event, so one instance can serve any number of
    stages and threads.

    Algorithm:
        1. Page scope: keep entries on ``view.current_page``.
        2. Viewport: invert the camera over the stage, plus margin.
        3. Filter: cull each collection with the annotation scale derived
           from ``settings.design_scale``.

    Example:
        >>> culler = ViewportCuller()
        >>> visible = culler.visible_project(project, 1280, 800)
        >>> len(visible.elements.lines) <= len(project.elements.lines)
        True
    """

    __slots__ = ("_margin_px", "_policy")

    def __init__(
        self,
        policy: PaddingPolicy | None = None,
        margin_px: float | None = None,
    ) -> None:
        """Initialize the culler.

        Args:
            policy: Base paddings for point-like elements. Defaults to the
                configured SYMBOL/TEXT/MARK_PADDING_BASE settings.
            margin_px: Screen-space margin around the stage. Defaults to
                settings.VIEWPORT_MARGIN_PX.

        Raises:
            ValueError: If margin_px is negative.
        """
        margin = settings.VIEWPORT_MARGIN_PX if margin_px is None else margin_px
        if margin < 0:
            raise ValueError(f"margin_px must be non-negative, got {margin}")
        self._policy = policy or PaddingPolicy.from_settings(settings)
        self._margin_px = margin

    @property
    def policy(self) -> PaddingPolicy:
        return self._policy

    @property
    def margin_px(self) -> float:
        return self._margin_px

    def viewport(
        self, project: Project, stage_width: float, stage_height: float
    ) -> Rect:
        """Return the document-space viewport for the snapshot's camera."""
        return viewport_doc_rect(
            project.view, stage_width, stage_height, self._margin_px
        )

    def visible_project(
        self,
        project: Project,
        stage_width: float,
        stage_height: float,
    ) -> Project:
        """Reduce a snapshot to what the stage can show.

        Args:
            project: Full editor snapshot.
            stage_width: Stage width in pixels (0 if not yet measured).
            stage_height: Stage height in pixels (0 if not yet measured).

        Returns:
            Page-scoped snapshot, viewport-culled when the stage has a size.

        Raises:
            ValueError: If a stage dimension is negative.
        """
        if stage_width < 0 or stage_height < 0:
            raise ValueError(
                "Stage dimensions must be non-negative, "
                f"got {stage_width}x{stage_height}"
            )

        page = project.view.current_page
        scoped = filter_project_by_page(project, page)

        if stage_width == 0 or stage_height == 0:
            logger.debug(
                "Stage not measured, skipping viewport cull",
                page=page,
                stage_width=stage_width,
                stage_height=stage_height,
            )
            return scoped

        viewport = self.viewport(scoped, stage_width, stage_height)
        scale = annotation_scale_factor(project.settings.design_scale)
        visible = filter_project_by_viewport(scoped, viewport, scale, self._policy)

        kept = sum(visible.collection_sizes().values())
        total = sum(scoped.collection_sizes().values())
        logger.debug(
            "Viewport culled",
            page=page,
            viewport=viewport.to_tuple(),
            annotation_scale=scale,
            kept=kept,
            culled=total - kept,
        )
        return visible
