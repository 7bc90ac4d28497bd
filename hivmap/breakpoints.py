"""
breakpoints.py — Breakpoint positions annotated above the gene map

Only the outer bounds of the region set are annotated: the start of the
earliest region and, when there is more than one region, the end of the
region that starts last. Junctions between adjacent regions are not ticked.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .parser import SubtypeRegion


@dataclass(frozen=True)
class Breakpoint:
    """A tick position with its printed value."""

    position: int
    display_value: int
    is_first: bool = False
    is_last: bool = False


def calculate_breakpoints(regions: Sequence[SubtypeRegion]) -> List[Breakpoint]:
    """
    Derive the annotated breakpoints of a region set.

    Parameters
    ----------
    regions : sequence of SubtypeRegion
        Regions in any order; the input is not modified.

    Returns
    -------
    list of Breakpoint
        Empty for no regions, one entry for a single region, otherwise
        exactly two entries (first start, last end).
    """
    if not regions:
        return []

    ordered = sorted(regions, key=lambda r: r.start)
    first, last = ordered[0], ordered[-1]
    points = [Breakpoint(first.start, first.start, is_first=True)]
    if len(ordered) > 1:
        points.append(Breakpoint(last.end, last.end, is_last=True))
    return points
