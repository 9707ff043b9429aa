"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator
from typing import Any

import pytest

from viewcull.config import Settings
from viewcull.geometry import Rect
from viewcull.utils.logging import clear_render_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset correlation context between tests."""
    clear_render_context()
    yield
    clear_render_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def viewport() -> Rect:
    """The 200x200 document viewport used across culling tests."""
    return Rect(min_x=0, min_y=0, max_x=200, max_y=200)


@pytest.fixture
def snapshot_data() -> dict[str, Any]:
    """A camelCase snapshot with one visible and one far-away entry per kind."""
    return {
        "schemaVersion": "1.4.0",
        "projectMeta": {"id": "proj-1", "name": "Culling Fixture"},
        "view": {"currentPage": 1, "zoom": 1, "pan": {"x": 0, "y": 0}, "byPage": {}},
        "settings": {"designScale": "small", "activeColor": "green"},
        "elements": {
            "lines": [
                {
                    "id": "line-in",
                    "start": {"x": 50, "y": 50},
                    "end": {"x": 150, "y": 50},
                    "color": "green",
                    "class": "class1",
                },
                {
                    "id": "line-out",
                    "start": {"x": 5000, "y": 5000},
                    "end": {"x": 5100, "y": 5000},
                    "color": "green",
                    "class": "class1",
                },
                {
                    "id": "line-page2",
                    "start": {"x": 10, "y": 10},
                    "end": {"x": 20, "y": 10},
                    "page": 2,
                    "color": "red",
                    "class": "class2",
                },
            ],
            "arcs": [
                {
                    "id": "arc-in",
                    "start": {"x": 10, "y": 10},
                    "through": {"x": 50, "y": 50},
                    "end": {"x": 90, "y": 10},
                    "color": "green",
                    "class": "class1",
                }
            ],
            "curves": [],
            "symbols": [
                {
                    "id": "sym-in",
                    "symbolType": "air_terminal",
                    "position": {"x": 100, "y": 100},
                    "color": "green",
                    "class": "class1",
                },
                {
                    "id": "sym-out",
                    "symbolType": "ground_rod",
                    "position": {"x": 5000, "y": 5000},
                    "color": "red",
                    "class": "class1",
                },
            ],
            "texts": [
                {
                    "id": "text-in",
                    "position": {"x": 20, "y": 20},
                    "text": "Roof",
                    "color": "blue",
                    "layer": "annotation",
                }
            ],
            "arrows": [
                {
                    "id": "arrow-out",
                    "tail": {"x": 5000, "y": 5000},
                    "head": {"x": 5050, "y": 5000},
                    "color": "green",
                    "layer": "annotation",
                }
            ],
            "dimensionTexts": [
                {
                    "id": "dt-in",
                    "start": {"x": 50, "y": 50},
                    "end": {"x": 150, "y": 50},
                    "position": {"x": 100, "y": 30},
                    "layer": "annotation",
                }
            ],
        },
        "construction": {"marks": [{"id": "mark-in", "position": {"x": 5, "y": 5}}]},
        "legend": {
            "items": [],
            "placements": [
                {"id": "legend-far", "position": {"x": 5000, "y": 5000}, "editedLabels": {}}
            ],
            "customSuffixes": {},
        },
        "generalNotes": {
            "notes": ["All work per NFPA 780"],
            "notesByPage": {},
            "placements": [{"id": "notes-far", "position": {"x": 5000, "y": 5000}}],
        },
    }
