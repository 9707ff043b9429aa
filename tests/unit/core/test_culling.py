"""Tests for viewport filtering of document snapshots."""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from viewcull.core import PaddingPolicy, filter_project_by_viewport
from viewcull.document import (
    ArcElement,
    ArrowElement,
    Construction,
    CurveElement,
    DimensionTextElement,
    Elements,
    GeneralNotePlacement,
    GeneralNotes,
    Legend,
    LegendPlacement,
    LineElement,
    MarkElement,
    Project,
    SymbolElement,
    TextElement,
)
from viewcull.geometry import Point, Rect


def _p(x: float, y: float) -> Point:
    return Point(x=x, y=y)


def _line(id_: str, start: tuple[float, float], end: tuple[float, float]) -> LineElement:
    return LineElement(id=id_, start=_p(*start), end=_p(*end), color="green")


def _symbol(id_: str, x: float, y: float) -> SymbolElement:
    return SymbolElement(id=id_, position=_p(x, y), symbolType="air_terminal")


def _project(**collections: Any) -> Project:
    marks = collections.pop("marks", ())
    return Project(elements=Elements(**collections), construction=Construction(marks=marks))


class TestExtentElements:
    def test_keeps_line_inside(self, viewport: Rect) -> None:
        project = _project(lines=(_line("in", (50, 50), (150, 50)),))
        assert len(filter_project_by_viewport(project, viewport, 1).elements.lines) == 1

    def test_removes_line_outside(self, viewport: Rect) -> None:
        project = _project(lines=(_line("out", (500, 500), (600, 500)),))
        assert filter_project_by_viewport(project, viewport, 1).elements.lines == ()

    def test_keeps_partially_overlapping_line(self, viewport: Rect) -> None:
        project = _project(lines=(_line("partial", (180, 100), (300, 100)),))
        assert len(filter_project_by_viewport(project, viewport, 1).elements.lines) == 1

    def test_keeps_line_crossing_without_endpoints_inside(self, viewport: Rect) -> None:
        project = _project(lines=(_line("across", (-100, 100), (300, 100)),))
        assert len(filter_project_by_viewport(project, viewport, 1).elements.lines) == 1

    def test_keeps_line_tangent_to_max_x(self, viewport: Rect) -> None:
        project = _project(lines=(_line("edge", (200, 50), (260, 80)),))
        assert len(filter_project_by_viewport(project, viewport, 1).elements.lines) == 1

    def test_arrows_use_tail_and_head(self, viewport: Rect) -> None:
        project = _project(
            arrows=(
                ArrowElement(id="in", tail=_p(10, 10), head=_p(30, 10)),
                ArrowElement(id="out", tail=_p(500, 500), head=_p(550, 500)),
            )
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert [el.id for el in filtered.elements.arrows] == ["in"]


class TestCurvedElements:
    def test_arcs_and_curves_use_three_point_hull(self, viewport: Rect) -> None:
        project = _project(
            arcs=(
                ArcElement(id="arc-in", start=_p(10, 10), through=_p(50, 50), end=_p(90, 10)),
                ArcElement(
                    id="arc-out", start=_p(400, 400), through=_p(450, 450), end=_p(500, 400)
                ),
            ),
            curves=(
                CurveElement(
                    id="curve-in", start=_p(20, 20), through=_p(60, 60), end=_p(100, 20)
                ),
            ),
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert [el.id for el in filtered.elements.arcs] == ["arc-in"]
        assert [el.id for el in filtered.elements.curves] == ["curve-in"]

    def test_through_point_alone_keeps_arc(self, viewport: Rect) -> None:
        """Endpoints off screen, bulge on screen: the hull keeps it."""
        project = _project(
            arcs=(
                ArcElement(
                    id="bulge", start=_p(-300, 100), through=_p(100, 100), end=_p(-300, 150)
                ),
            )
        )
        assert len(filter_project_by_viewport(project, viewport, 1).elements.arcs) == 1

    def test_dimension_texts_include_label_anchor(self, viewport: Rect) -> None:
        project = _project(
            dimension_texts=(
                DimensionTextElement(
                    id="dt-in", start=_p(50, 50), end=_p(150, 50), position=_p(100, 30)
                ),
                DimensionTextElement(
                    id="dt-out", start=_p(400, 400), end=_p(500, 400), position=_p(450, 380)
                ),
                DimensionTextElement(
                    id="dt-label-only",
                    start=_p(400, 400),
                    end=_p(500, 400),
                    position=_p(150, 150),
                ),
            )
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert [el.id for el in filtered.elements.dimension_texts] == [
            "dt-in",
            "dt-label-only",
        ]


class TestPointLikeElements:
    def test_symbol_padding_keeps_nearby_symbol(self, viewport: Rect) -> None:
        # 240 - 50 = 190 <= 200
        project = _project(symbols=(_symbol("near", 240, 100),))
        assert len(filter_project_by_viewport(project, viewport, 1).elements.symbols) == 1

    def test_symbol_padding_scales_with_annotation_scale(self, viewport: Rect) -> None:
        project = _project(symbols=(_symbol("far", 350, 100),))
        # scale 1: 350 - 50 = 300 > 200
        assert filter_project_by_viewport(project, viewport, 1).elements.symbols == ()
        # scale 4: 350 - 200 = 150 <= 200
        assert len(filter_project_by_viewport(project, viewport, 4).elements.symbols) == 1

    def test_text_padding(self, viewport: Rect) -> None:
        project = _project(
            texts=(
                TextElement(id="near", position=_p(240, 100), text="a"),
                TextElement(id="far", position=_p(241, 100), text="b"),
            )
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert [el.id for el in filtered.elements.texts] == ["near"]

    def test_mark_padding(self, viewport: Rect) -> None:
        project = _project(
            marks=(
                MarkElement(id="near", position=_p(-20, -20)),
                MarkElement(id="far", position=_p(-21, 100)),
            )
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert [el.id for el in filtered.construction.marks] == ["near"]

    def test_custom_policy(self, viewport: Rect) -> None:
        project = _project(symbols=(_symbol("near", 240, 100),))
        tight = PaddingPolicy(symbol_base=10)
        assert filter_project_by_viewport(project, viewport, 1, tight).elements.symbols == ()

    def test_removes_everything_far_away(self, viewport: Rect) -> None:
        project = _project(
            lines=(_line("l", (500, 500), (600, 500)),),
            symbols=(_symbol("s", 500, 500),),
            texts=(TextElement(id="t", position=_p(500, 500), text="Far away"),),
            arrows=(ArrowElement(id="a", tail=_p(500, 500), head=_p(550, 500)),),
            marks=(MarkElement(id="m", position=_p(500, 500)),),
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert all(count == 0 for count in filtered.collection_sizes().values())


class TestSnapshotContract:
    def test_legend_and_general_notes_always_kept(self, viewport: Rect) -> None:
        project = Project(
            legend=Legend(placements=(LegendPlacement(id="legend-far", position=_p(5000, 5000)),)),
            general_notes=GeneralNotes(
                placements=(GeneralNotePlacement(id="notes-far", position=_p(5000, 5000)),)
            ),
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert len(filtered.legend.placements) == 1
        assert len(filtered.general_notes.placements) == 1

    def test_preserves_order(self, viewport: Rect) -> None:
        project = _project(
            lines=(
                _line("l1", (10, 10), (50, 10)),
                _line("l2", (300, 300), (400, 300)),
                _line("l3", (80, 80), (120, 120)),
            )
        )
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert [el.id for el in filtered.elements.lines] == ["l1", "l3"]

    def test_shares_untouched_structures(
        self, viewport: Rect, snapshot_data: dict[str, Any]
    ) -> None:
        project = Project.model_validate(snapshot_data)
        filtered = filter_project_by_viewport(project, viewport, 1)
        assert filtered is not project
        assert filtered.settings is project.settings
        assert filtered.view is project.view
        assert filtered.legend is project.legend
        assert filtered.general_notes is project.general_notes
        assert filtered.model_extra == project.model_extra
        assert filtered.elements.lines[0] is project.elements.lines[0]

    def test_does_not_mutate_input(
        self, viewport: Rect, snapshot_data: dict[str, Any]
    ) -> None:
        project = Project.model_validate(snapshot_data)
        before = project.model_dump()
        filter_project_by_viewport(project, viewport, 1)
        assert project.model_dump() == before

    def test_opaque_fields_survive(
        self, viewport: Rect, snapshot_data: dict[str, Any]
    ) -> None:
        project = Project.model_validate(snapshot_data)
        kept = filter_project_by_viewport(project, viewport, 1).elements.symbols[0]
        assert kept.model_extra is not None
        assert kept.model_extra["symbolType"] == "air_terminal"

    def test_repeat_calls_are_equal(
        self, viewport: Rect, snapshot_data: dict[str, Any]
    ) -> None:
        project = Project.model_validate(snapshot_data)
        assert filter_project_by_viewport(
            project, viewport, 1.5
        ) == filter_project_by_viewport(project, viewport, 1.5)


coords = st.floats(min_value=-1000, max_value=1000, allow_nan=False)
points = st.builds(Point, x=coords, y=coords)
lines = st.lists(
    st.builds(LineElement, id=st.uuids().map(str), start=points, end=points),
    max_size=20,
)
symbols = st.lists(
    st.builds(SymbolElement, id=st.uuids().map(str), position=points), max_size=20
)
viewports = st.tuples(coords, coords, coords, coords).map(
    lambda t: Rect(
        min_x=min(t[0], t[2]), min_y=min(t[1], t[3]), max_x=max(t[0], t[2]), max_y=max(t[1], t[3])
    )
)
scales = st.floats(min_value=0.1, max_value=8, allow_nan=False)


class TestFilterProperties:
    @settings(max_examples=50)
    @given(lines=lines, symbols=symbols, vp=viewports, scale=scales)
    def test_idempotent(
        self,
        lines: list[LineElement],
        symbols: list[SymbolElement],
        vp: Rect,
        scale: float,
    ) -> None:
        project = _project(lines=tuple(lines), symbols=tuple(symbols))
        once = filter_project_by_viewport(project, vp, scale)
        assert filter_project_by_viewport(once, vp, scale) == once

    @settings(max_examples=50)
    @given(lines=lines, vp=viewports)
    def test_result_is_ordered_subsequence(
        self, lines: list[LineElement], vp: Rect
    ) -> None:
        project = _project(lines=tuple(lines))
        kept = filter_project_by_viewport(project, vp, 1).elements.lines
        it = iter(project.elements.lines)
        assert all(any(el is src for src in it) for el in kept)
