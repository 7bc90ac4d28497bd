"""
parser.py — Recombination region input parser

Input files are plain UTF-8 text in a FASTA-like layout:

    # comment lines are ignored anywhere
    >sample_name
    100   500   B
    500   1000  A1
    1000  790   CRF 01_AE

Nothing before the first '>' line is read. Each data line holds two
integer positions (either order) followed by a free-text subtype label.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .colors import ColorRegistry

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
HEADER_MARKER = ">"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class RegionInputError(ValueError):
    """Input text did not yield any drawable region."""


class MissingHeaderError(RegionInputError):
    """No header line was found, so nothing was parsed."""

    def __init__(self, source: str = "input"):
        super().__init__(
            f"No line starting with '{HEADER_MARKER}' was found in {source}; "
            "nothing was parsed."
        )


class NoRegionsError(RegionInputError):
    """A header was found but no valid data line followed it."""

    def __init__(self, source: str = "input"):
        super().__init__(
            f"No valid regions were parsed after the '{HEADER_MARKER}' header in {source}."
        )


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

def leading_int(token: str) -> Optional[int]:
    """
    Integer prefix of ``token``, or None if it does not start with one.

    Trailing text is ignored, so ``"1.5"`` gives 1 and ``"100bp"`` gives 100.
    """
    match = _LEADING_INT.match(token)
    if match is None:
        return None
    return int(match.group(1))


# ---------------------------------------------------------------------------
# Regions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SubtypeRegion:
    """
    A genomic interval assigned to one subtype.

    Attributes
    ----------
    start, end : int
        Interval bounds with ``start <= end``.
    subtype : str
        Subtype or recombinant label as written in the input.
    color : str
        Display color resolved through a ``ColorRegistry``.
    """

    start: int
    end: int
    subtype: str
    color: str


class RegionParser:
    """
    Line-oriented parser producing ``SubtypeRegion`` lists.

    Parameters
    ----------
    registry : ColorRegistry, optional
        Color source for region labels. A fresh registry is created if
        omitted.

    Attributes
    ----------
    header_seen : bool
        Whether the last ``parse`` call encountered a header line.
    """

    def __init__(self, registry: Optional[ColorRegistry] = None):
        self.registry = registry if registry is not None else ColorRegistry()
        self.header_seen = False

    def parse(self, text: str) -> List[SubtypeRegion]:
        """
        Parse annotation text into regions, in file order.

        Short lines are skipped with a warning; lines with non-integer
        positions or an empty label are skipped silently. Returns an empty
        list (with a warning) when no header line is present.
        """
        self.header_seen = False
        regions: List[SubtypeRegion] = []

        for lineno, raw in enumerate((text or "").splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith(COMMENT_MARKER):
                continue

            if line.startswith(HEADER_MARKER):
                self.header_seen = True
                logger.info("Found sequence header: %s", line)
                continue

            if not self.header_seen:
                continue

            region = self._parse_data_line(line, lineno)
            if region is not None:
                regions.append(region)

        if not self.header_seen:
            logger.warning(
                "No line starting with '%s' found; no data was parsed.", HEADER_MARKER
            )
        return regions

    def _parse_data_line(self, line: str, lineno: int) -> Optional[SubtypeRegion]:
        fields = line.split()
        if len(fields) < 3:
            logger.warning("Line %d has an invalid format (ignored): %r", lineno, line)
            return None

        a, b = leading_int(fields[0]), leading_int(fields[1])
        if a is None or b is None:
            logger.debug("Line %d: non-integer position, skipped", lineno)
            return None

        subtype = " ".join(fields[2:])
        if not subtype:
            logger.debug("Line %d: empty subtype label, skipped", lineno)
            return None

        start, end = (a, b) if a <= b else (b, a)
        return SubtypeRegion(start, end, subtype, self.registry.color_for(subtype))


def parse_regions(
    text: str,
    registry: Optional[ColorRegistry] = None,
) -> List[SubtypeRegion]:
    """Parse annotation text with a one-off ``RegionParser``."""
    return RegionParser(registry).parse(text)


def read_regions(
    path: Union[str, Path],
    registry: Optional[ColorRegistry] = None,
) -> List[SubtypeRegion]:
    """
    Read and parse an annotation file.

    Raises
    ------
    MissingHeaderError
        If the file has no header line.
    NoRegionsError
        If the header is present but no region could be parsed.
    OSError
        If the file cannot be read.
    """
    path = Path(path)
    parser = RegionParser(registry)
    regions = parser.parse(path.read_text(encoding="utf-8"))
    if not parser.header_seen:
        raise MissingHeaderError(str(path))
    if not regions:
        raise NoRegionsError(str(path))
    return regions
