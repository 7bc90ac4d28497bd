"""
Drawing passes for the recombination map.

Each pass takes ``(surface, ctx)`` and paints one layer. Passes set every
piece of drawing state they rely on, so they can run in any surface state;
their relative order is fixed by ``hivmap.plot.render.RENDER_PASSES``.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..breakpoints import calculate_breakpoints
from ..default import (
    AXIS_COLOR,
    AXIS_FONT_SIZE,
    AXIS_LABEL_COLOR,
    BACKGROUND_COLOR,
    BREAKPOINT_COLOR,
    BREAKPOINT_FONT_SIZE,
    CONNECTOR_COLOR,
    CONNECTOR_WIDTH,
    GENE_LABEL_FONT_SIZE,
    LEGEND_FONT_SIZE,
    LEGEND_OUTLINE_COLOR,
    LEGEND_OUTLINE_WIDTH,
    OUTLINE_COLOR,
    OUTLINE_WIDTH,
    OVERLAY_ALPHA,
    TEXT_COLOR,
)
from ..genome import ConnectorVertex
from ..parser import SubtypeRegion
from .surface import DrawingSurface

if TYPE_CHECKING:
    from .render import RenderContext

# Breakpoint ticks sit just above the first gene row
TICK_RISE = 11
TICK_LENGTH = 8
TICK_LABEL_GAP = 3
TICK_LABEL_DX = 4

AXIS_GAP = 10
AXIS_TICK_LENGTH = 5
AXIS_LABEL_DY = 15

LEGEND_BOTTOM_OFFSET = 30
LEGEND_TEXT_DX = 20
LEGEND_TEXT_DY = 12


# =============================================================================
# GEOMETRY HELPERS
# =============================================================================

def overlap_span(
    start_a: int, end_a: int, start_b: int, end_b: int
) -> Optional[Tuple[int, int]]:
    """
    Intersection of two intervals, or None when it has no positive width.

    Touching intervals such as [100, 200] and [200, 300] do not overlap.
    """
    lo = max(start_a, start_b)
    hi = min(end_a, end_b)
    if lo < hi:
        return lo, hi
    return None


def legend_entries(regions: Sequence[SubtypeRegion]) -> List[Tuple[str, str]]:
    """Distinct ``(subtype, color)`` pairs in order of first appearance."""
    seen = {}
    for region in regions:
        if region.subtype not in seen:
            seen[region.subtype] = region.color
    return list(seen.items())


def _vertex_y(vertex: ConnectorVertex, ctx: RenderContext) -> float:
    y = ctx.config.row_y(vertex.row)
    if vertex.anchor == "center":
        y += ctx.config.gene_row_height / 2
    return y + vertex.offset


def _set_text(surface: DrawingSurface, size: float, color: str, align: str = "center") -> None:
    surface.font_size = size
    surface.fill_style = color
    surface.text_align = align
    surface.text_baseline = "middle"


# =============================================================================
# PASSES
# =============================================================================

def draw_background(surface: DrawingSurface, ctx: RenderContext) -> None:
    """Opaque canvas fill so raster output has no transparent pixels."""
    surface.fill_style = BACKGROUND_COLOR
    surface.fill_rect(0, 0, ctx.config.width, ctx.config.height)


def draw_gene_blocks(surface: DrawingSurface, ctx: RenderContext) -> None:
    h = ctx.config.gene_row_height
    for gene in ctx.gene_map:
        x, w = ctx.scale.span(gene.start, gene.end)
        y = ctx.config.row_y(gene.row)
        surface.fill_style = gene.background_color
        surface.fill_rect(x, y, w, h)
        if gene.outlined:
            surface.stroke_style = OUTLINE_COLOR
            surface.line_width = OUTLINE_WIDTH
            surface.stroke_rect(x, y, w, h)


def draw_subtype_overlays(surface: DrawingSurface, ctx: RenderContext) -> None:
    """One translucent rectangle per (region, overlapping gene) pair."""
    h = ctx.config.gene_row_height
    surface.global_alpha = OVERLAY_ALPHA
    for region in ctx.regions:
        for gene in ctx.gene_map:
            span = overlap_span(region.start, region.end, gene.start, gene.end)
            if span is None:
                continue
            x, w = ctx.scale.span(*span)
            surface.fill_style = region.color
            surface.fill_rect(x, ctx.config.row_y(gene.row), w, h)


def draw_gene_labels(surface: DrawingSurface, ctx: RenderContext) -> None:
    _set_text(surface, GENE_LABEL_FONT_SIZE, TEXT_COLOR)
    for gene in ctx.gene_map:
        if not gene.name:
            continue
        x, w = ctx.scale.span(gene.start, gene.end)
        y = ctx.config.row_y(gene.row) + ctx.config.gene_row_height / 2
        surface.fill_text(gene.name, x + w / 2, y)


def draw_connectors(surface: DrawingSurface, ctx: RenderContext) -> None:
    """Spliced-transcript polylines (tat, rev) with their labels."""
    surface.stroke_style = CONNECTOR_COLOR
    surface.line_width = CONNECTOR_WIDTH
    _set_text(surface, GENE_LABEL_FONT_SIZE, TEXT_COLOR)
    for connector in ctx.connectors:
        points = [(ctx.scale(v.position), _vertex_y(v, ctx)) for v in connector.vertices]
        surface.begin_path()
        surface.move_to(*points[0])
        for x, y in points[1:]:
            surface.line_to(x, y)
        surface.stroke()

        a, b = connector.label_span
        label_x = (ctx.scale(a) + ctx.scale(b)) / 2 + connector.label_dx
        label_y = points[1][1] + connector.label_dy
        surface.fill_text(connector.name, label_x, label_y)


def draw_breakpoints(surface: DrawingSurface, ctx: RenderContext) -> None:
    """Ticks above the top gene row with vertical position labels."""
    tick_top = ctx.config.row_y(1) - TICK_RISE
    label_y = tick_top - TICK_LABEL_GAP

    surface.stroke_style = BREAKPOINT_COLOR
    surface.line_width = CONNECTOR_WIDTH
    _set_text(surface, BREAKPOINT_FONT_SIZE, TEXT_COLOR, align="left")
    for bp in calculate_breakpoints(ctx.regions):
        x = ctx.scale(bp.position)
        surface.begin_path()
        surface.move_to(x, tick_top)
        surface.line_to(x, tick_top + TICK_LENGTH)
        surface.stroke()

        surface.save()
        surface.translate(x + TICK_LABEL_DX, label_y)
        surface.rotate(-math.pi / 2)
        surface.fill_text(str(bp.display_value), 0, 0)
        surface.restore()


def draw_axis(surface: DrawingSurface, ctx: RenderContext) -> None:
    config = ctx.config
    lowest_row = max(gene.row for gene in ctx.gene_map)
    axis_y = config.row_y(lowest_row) + config.gene_row_height + AXIS_GAP
    left, right = config.x_range

    surface.stroke_style = AXIS_COLOR
    surface.line_width = CONNECTOR_WIDTH
    surface.begin_path()
    surface.move_to(left, axis_y)
    surface.line_to(right, axis_y)
    surface.stroke()

    _set_text(surface, AXIS_FONT_SIZE, AXIS_LABEL_COLOR)
    for value in config.axis_ticks():
        x = ctx.scale(value)
        surface.begin_path()
        surface.move_to(x, axis_y)
        surface.line_to(x, axis_y + AXIS_TICK_LENGTH)
        surface.stroke()
        surface.fill_text(str(value), x, axis_y + AXIS_LABEL_DY)


def draw_legend(surface: DrawingSurface, ctx: RenderContext) -> None:
    """Color swatches left to right, one per distinct subtype."""
    config = ctx.config
    size = config.legend_swatch_size
    y = config.height - LEGEND_BOTTOM_OFFSET

    surface.stroke_style = LEGEND_OUTLINE_COLOR
    surface.line_width = LEGEND_OUTLINE_WIDTH
    for i, (subtype, color) in enumerate(legend_entries(ctx.regions)):
        x = config.margins.left + i * config.legend_spacing
        surface.fill_style = color
        surface.fill_rect(x, y, size, size)
        surface.stroke_rect(x, y, size, size)
        _set_text(surface, LEGEND_FONT_SIZE, TEXT_COLOR, align="left")
        surface.fill_text(subtype, x + LEGEND_TEXT_DX, y + LEGEND_TEXT_DY)
