"""Shared utilities for viewcull."""
