"""
PNG and PDF output.

Each save function performs its own render pass onto a fresh matplotlib
surface, so raster and vector files share geometry but no drawing state.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from matplotlib.figure import Figure

from ..default import DEFAULT_CONFIG, RenderConfig
from ..parser import SubtypeRegion
from .render import render
from .surface import MatplotlibSurface

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def render_figure(
    regions: Sequence[SubtypeRegion],
    config: Optional[RenderConfig] = None,
) -> Figure:
    """Render the map onto a new matplotlib Figure sized to the canvas."""
    config = config or DEFAULT_CONFIG
    surface = MatplotlibSurface(config.width, config.height, dpi=config.dpi)
    render(surface, regions, config)
    return surface.figure


def _prepare(path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def save_png(
    regions: Sequence[SubtypeRegion],
    path: PathLike,
    config: Optional[RenderConfig] = None,
) -> Path:
    """
    Write the map as a PNG of ``width x height`` pixels.

    The file carries a ``config.png_dpi`` resolution tag while keeping the
    canvas pixel size.
    """
    config = config or DEFAULT_CONFIG
    path = _prepare(path)
    fig = render_figure(regions, config)
    fig.savefig(
        path,
        format="png",
        dpi=config.dpi,
        pil_kwargs={"dpi": (config.png_dpi, config.png_dpi)},
    )
    logger.info("[PNG] saved (%g DPI): %s", config.png_dpi, path)
    return path


def save_pdf(
    regions: Sequence[SubtypeRegion],
    path: PathLike,
    config: Optional[RenderConfig] = None,
) -> Path:
    """Write the map as a single-page vector PDF."""
    config = config or DEFAULT_CONFIG
    path = _prepare(path)
    fig = render_figure(regions, config)
    # No creation date, so identical input gives identical bytes
    fig.savefig(path, format="pdf", dpi=config.dpi, metadata={"CreationDate": None})
    logger.info("[PDF] saved: %s", path)
    return path
