"""CLI module for viewcull.

Provides the command-line interface for culling document snapshots.
"""

from __future__ import annotations

from viewcull.cli.main import app

__all__ = ["app"]
