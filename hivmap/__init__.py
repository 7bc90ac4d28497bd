"""
hivmap: HIV-1 recombination map renderer.
"""

__version__ = "0.1.0"

# =============================================================================
# INPUT AND COLORS
# =============================================================================

from .colors import (
    DEFAULT_SUBTYPE_COLORS,
    FALLBACK_COLORS,
    ColorRegistry,
)

from .parser import (
    SubtypeRegion,
    RegionParser,
    RegionInputError,
    MissingHeaderError,
    NoRegionsError,
    parse_regions,
    read_regions,
)


# =============================================================================
# LAYOUT
# =============================================================================

from .default import DEFAULT_CONFIG, Margins, RenderConfig
from .genome import CONNECTORS, GENE_MAP, Connector, ConnectorVertex, GeneFeature
from .scale import LinearScale, make_x_scale
from .breakpoints import Breakpoint, calculate_breakpoints


# =============================================================================
# RENDERING
# =============================================================================

from .plot import (
    DrawingSurface,
    MatplotlibSurface,
    RecordingSurface,
    RENDER_PASSES,
    render,
    render_figure,
    save_pdf,
    save_png,
)


__all__ = [
    # Input and colors
    "DEFAULT_SUBTYPE_COLORS",
    "FALLBACK_COLORS",
    "ColorRegistry",
    "SubtypeRegion",
    "RegionParser",
    "RegionInputError",
    "MissingHeaderError",
    "NoRegionsError",
    "parse_regions",
    "read_regions",
    # Layout
    "DEFAULT_CONFIG",
    "Margins",
    "RenderConfig",
    "CONNECTORS",
    "GENE_MAP",
    "Connector",
    "ConnectorVertex",
    "GeneFeature",
    "LinearScale",
    "make_x_scale",
    "Breakpoint",
    "calculate_breakpoints",
    # Rendering
    "DrawingSurface",
    "MatplotlibSurface",
    "RecordingSurface",
    "RENDER_PASSES",
    "render",
    "render_figure",
    "save_pdf",
    "save_png",
]
