"""
hivmap plotting package.

Submodules:
    - plot.surface: Drawing surface contract and backends
    - plot.layers: Individual drawing passes
    - plot.render: Pass ordering and the render entry point
    - plot.export: PNG and PDF writers

Example imports:
    from hivmap.plot import render, save_png
    from hivmap.plot.surface import RecordingSurface
"""

# =============================================================================
# SURFACES (from surface)
# =============================================================================

from .surface import (
    DrawingSurface,
    DrawOp,
    MatplotlibSurface,
    RecordingSurface,
)


# =============================================================================
# DRAWING PASSES (from layers)
# =============================================================================

from .layers import (
    draw_axis,
    draw_background,
    draw_breakpoints,
    draw_connectors,
    draw_gene_blocks,
    draw_gene_labels,
    draw_legend,
    draw_subtype_overlays,
    legend_entries,
    overlap_span,
)


# =============================================================================
# RENDER ENGINE AND EXPORT (from render, export)
# =============================================================================

from .render import RENDER_PASSES, RenderContext, render
from .export import render_figure, save_pdf, save_png


__all__ = [
    # Surfaces
    "DrawingSurface",
    "DrawOp",
    "MatplotlibSurface",
    "RecordingSurface",
    # Passes
    "draw_axis",
    "draw_background",
    "draw_breakpoints",
    "draw_connectors",
    "draw_gene_blocks",
    "draw_gene_labels",
    "draw_legend",
    "draw_subtype_overlays",
    "legend_entries",
    "overlap_span",
    # Render / export
    "RENDER_PASSES",
    "RenderContext",
    "render",
    "render_figure",
    "save_pdf",
    "save_png",
]
