"""
Render engine: runs the drawing passes over a surface in z-order.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ..default import DEFAULT_CONFIG, RenderConfig
from ..genome import CONNECTORS, GENE_MAP, Connector, GeneFeature
from ..parser import SubtypeRegion
from ..scale import LinearScale, make_x_scale
from .layers import (
    draw_axis,
    draw_background,
    draw_breakpoints,
    draw_connectors,
    draw_gene_blocks,
    draw_gene_labels,
    draw_legend,
    draw_subtype_overlays,
)
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

RenderPass = Callable[[DrawingSurface, "RenderContext"], None]

# Bottom layer first; every pass paints over the ones before it.
RENDER_PASSES: Tuple[RenderPass, ...] = (
    draw_background,
    draw_gene_blocks,
    draw_subtype_overlays,
    draw_gene_labels,
    draw_connectors,
    draw_breakpoints,
    draw_axis,
    draw_legend,
)


@dataclass(frozen=True)
class RenderContext:
    """Read-only inputs shared by all passes of one render."""

    config: RenderConfig
    scale: LinearScale
    regions: Tuple[SubtypeRegion, ...]
    gene_map: Tuple[GeneFeature, ...] = GENE_MAP
    connectors: Tuple[Connector, ...] = CONNECTORS


def render(
    surface: DrawingSurface,
    regions: Sequence[SubtypeRegion],
    config: Optional[RenderConfig] = None,
    gene_map: Sequence[GeneFeature] = GENE_MAP,
    connectors: Sequence[Connector] = CONNECTORS,
    passes: Sequence[RenderPass] = RENDER_PASSES,
) -> None:
    """
    Draw the recombination map onto ``surface``.

    Parameters
    ----------
    surface : DrawingSurface
        Target surface; it is the only state this function modifies.
    regions : sequence of SubtypeRegion
        Parsed regions in input order.
    config : RenderConfig, optional
        Layout geometry. Defaults to ``DEFAULT_CONFIG``.
    gene_map, connectors : sequences, optional
        Static map content. Default to the HXB2 gene map.
    passes : sequence of callables, optional
        Drawing passes, bottom layer first. Each runs between
        ``surface.save()`` and ``surface.restore()``.
    """
    config = config or DEFAULT_CONFIG
    ctx = RenderContext(
        config=config,
        scale=make_x_scale(config),
        regions=tuple(regions),
        gene_map=tuple(gene_map),
        connectors=tuple(connectors),
    )
    logger.debug("Rendering %d regions in %d passes", len(ctx.regions), len(passes))
    for draw_pass in passes:
        surface.save()
        try:
            draw_pass(surface, ctx)
        finally:
            surface.restore()
