"""viewcull: viewport culling for a paginated vector sketch editor.

Reduces a read-only document snapshot to the elements that overlap the
current camera viewport, so the renderer only draws what can be seen.
"""

__version__ = "0.1.0"
