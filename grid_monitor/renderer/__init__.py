"""Rendering subpackage.

Turns the draw instructions found in the view tree into Pillow images:

* :func:`~grid_monitor.renderer.pattern.render_blocks` paints blocks at grid
    offsets scaled by a cell size, colored by block type.
* :class:`~grid_monitor.renderer.pattern.PatternCanvas` owns the raster surface
    of one task detail panel and redraws it from a
    :class:`~grid_monitor.overlay.layout.PatternDrawing`.
"""

from .pattern import BlockDrawFn, PatternCanvas, block_color, render_blocks

__all__ = ["BlockDrawFn", "PatternCanvas", "block_color", "render_blocks"]
