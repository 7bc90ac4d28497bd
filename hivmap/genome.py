"""
genome.py — Static HIV-1 gene map

Gene and LTR intervals on the HXB2 reference (9719 bp), laid out on three
display rows, plus the spliced tat/rev transcripts drawn as connector lines
between exons.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# ---------------------------------------------------------------------------
# Gene features
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneFeature:
    """
    One block of the gene map.

    Attributes
    ----------
    name : str
        Display label; empty for unlabeled exons.
    start, end : int
        Genomic interval on the reference.
    row : int
        Display row, 1..3 from the top.
    background_color : str
        Fill color of the block.
    outlined : bool
        Draw a thin outline around the block.
    """

    name: str
    start: int
    end: int
    row: int
    background_color: str = "#CCCCCC"
    outlined: bool = False


GENE_MAP: Tuple[GeneFeature, ...] = (
    # Row 1
    GeneFeature("5' LTR", 1, 634, 1),
    GeneFeature("gag", 790, 2292, 1),
    GeneFeature("vif", 5041, 5619, 1),
    GeneFeature("", 8379, 8469, 1),
    GeneFeature("nef", 8797, 9417, 1, "#FFFFFF", outlined=True),
    # Row 2
    GeneFeature("", 5831, 6045, 2, "#FFB6C1"),
    GeneFeature("vpu", 6062, 6310, 2),
    GeneFeature("", 8379, 8653, 2),
    GeneFeature("3' LTR", 9086, 9719, 2, "#FFFFFF", outlined=True),
    # Row 3
    GeneFeature("pol", 2085, 5096, 3),
    GeneFeature("vpr", 5559, 5850, 3),
    GeneFeature("", 5970, 6045, 3),
    GeneFeature("env", 6225, 8795, 3),
)


# ---------------------------------------------------------------------------
# Transcript connectors
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConnectorVertex:
    """
    A connector vertex anchored to a gene row.

    The canvas y is the row's top edge (``anchor="top"``) or vertical center
    (``anchor="center"``), shifted by ``offset`` pixels.
    """

    position: int
    row: int
    anchor: str = "top"
    offset: float = 0.0


@dataclass(frozen=True)
class Connector:
    """
    A labeled polyline joining the exons of a spliced transcript.

    The label is centered between the x positions of ``label_span``, moved
    right by ``label_dx``, and sits ``label_dy`` pixels from the second vertex.
    """

    name: str
    vertices: Tuple[ConnectorVertex, ...]
    label_span: Tuple[int, int]
    label_dx: float = 0.0
    label_dy: float = -5.0


CONNECTORS: Tuple[Connector, ...] = (
    Connector(
        "tat",
        (
            ConnectorVertex(6045, 2, "top", -5),
            ConnectorVertex(6045, 1, "center"),
            ConnectorVertex(8379, 1, "center"),
        ),
        label_span=(6045, 8379),
    ),
    Connector(
        "rev",
        (
            ConnectorVertex(6045, 3, "top"),
            ConnectorVertex(6045, 3, "top", -5),
            ConnectorVertex(7200, 3, "top", -5),
            ConnectorVertex(8379, 2, "center"),
        ),
        label_span=(6045, 7200),
        label_dx=30,
    ),
)
