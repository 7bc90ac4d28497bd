"""
default.py — Default layout parameters for hivmap

Provides the fixed 900x300 canvas geometry, the HXB2-length genomic axis
and the fonts and colors used by every drawing pass.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


# Font family chain, first installed family wins
FONT_FAMILY = ("Liberation Sans", "Arial", "sans-serif")

## Font sizes in canvas pixels
GENE_LABEL_FONT_SIZE = 12
BREAKPOINT_FONT_SIZE = 11
AXIS_FONT_SIZE = 10
LEGEND_FONT_SIZE = 11

# Pass colors
BACKGROUND_COLOR = "white"
TEXT_COLOR = "#333333"
CONNECTOR_COLOR = "#666666"
BREAKPOINT_COLOR = "#333333"
AXIS_COLOR = "#bdc3c7"
AXIS_LABEL_COLOR = "#7f8c8d"
OUTLINE_COLOR = "#000000"
LEGEND_OUTLINE_COLOR = "#999999"

OVERLAY_ALPHA = 0.8
OUTLINE_WIDTH = 0.2
CONNECTOR_WIDTH = 1.0
LEGEND_OUTLINE_WIDTH = 0.5


@dataclass(frozen=True)
class Margins:
    """Canvas margins in pixels."""
    top: float = 60
    right: float = 50
    bottom: float = 80
    left: float = 50


@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable canvas and axis geometry.

    Attributes
    ----------
    width, height : int
        Canvas size in pixels.
    margins : Margins
        Space reserved around the drawing area.
    gene_row_height, gene_row_gap : float
        Height of one gene row and the gap between rows.
    gene_row_top_pad : float
        Distance from the top margin to the first gene row.
    axis_range : (int, int)
        Genomic domain mapped onto ``x_range``.
    axis_tick_step : int
        Spacing of the round-number axis ticks.
    legend_spacing, legend_swatch_size : float
        Horizontal pitch of legend entries and the swatch edge length.
    dpi : float
        Canvas pixels per inch for the matplotlib backends.
    png_dpi : float
        Resolution tag written into PNG output.
    """
    width: int = 900
    height: int = 300
    margins: Margins = field(default_factory=Margins)
    gene_row_height: float = 25
    gene_row_gap: float = 10
    gene_row_top_pad: float = 20
    axis_range: Tuple[int, int] = (0, 9719)
    axis_tick_step: int = 1000
    legend_spacing: float = 80
    legend_swatch_size: float = 15
    dpi: float = 100
    png_dpi: float = 300

    @property
    def x_range(self) -> Tuple[float, float]:
        """Pixel span covered by the genomic axis."""
        return (self.margins.left, self.width - self.margins.right)

    def row_y(self, row: int) -> float:
        """Top edge of gene row ``row`` (1-based)."""
        return (
            self.margins.top
            + self.gene_row_top_pad
            + (row - 1) * (self.gene_row_height + self.gene_row_gap)
        )

    def axis_ticks(self) -> List[int]:
        """Round-number tick positions plus the exact upper bound of the domain."""
        lo, hi = self.axis_range
        ticks = list(range(lo, hi, self.axis_tick_step))
        ticks.append(hi)
        return ticks


DEFAULT_CONFIG = RenderConfig()
