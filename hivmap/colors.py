"""
Subtype color constants and the per-render color registry.

Known HIV-1 subtype and CRF labels map to fixed colors; any other label is
given the next color from a small fallback palette, cycling when the palette
runs out.
"""

from typing import Dict, Mapping, Optional, Sequence


# =============================================================================
# SUBTYPE COLORS
# =============================================================================

DEFAULT_SUBTYPE_COLORS = {
    "A": "#FF0000",
    "A1": "#FF5700",
    "A2": "#FF7E5E",
    "B": "#3F98F2",
    "C": "#9D6039",
    "D": "#E3A1C9",
    "E": "#FFFF64",
    "F": "#BEE120",
    "F1": "#C5CAFF",
    "F2": "#97D7FF",
    "G": "#4FAE57",
    "H": "#FFD700",
    "J": "#20D7CF",
    "J1": "#FFB600",
    "J2": "#FFD700",
    "K": "#7C45D9",
    "01": "#7C45D9",   # CRF01_AE
    "02": "#D7B320",   # CRF02_AG
    "?": "#DCDCDC",    # unassigned
    "U": "#DCDCDC",    # unclassified
}


# =============================================================================
# FALLBACK PALETTE
# =============================================================================

FALLBACK_COLORS = (
    "#FF6347",  # tomato
    "#20B2AA",  # light sea green
    "#DDA0DD",  # plum
    "#F0E68C",  # khaki
    "#BC8F8F",  # rosy brown
    "#4682B4",  # steel blue
    "#D2691E",  # chocolate
    "#6B8E23",  # olive drab
    "#CD5C5C",  # indian red
    "#708090",  # slate gray
)


class ColorRegistry:
    """
    Label -> color lookup with stable fallback assignment.

    A registry lives for one parse/render session. Default labels always
    resolve to their fixed color; every other label takes the next fallback
    color the first time it is seen and keeps it for the rest of the session.

    Parameters
    ----------
    defaults : mapping, optional
        Fixed label -> color table. Defaults to ``DEFAULT_SUBTYPE_COLORS``.
    fallback : sequence of str, optional
        Cyclic palette for unknown labels. Defaults to ``FALLBACK_COLORS``.

    Examples
    --------
    >>> registry = ColorRegistry()
    >>> registry.color_for("B")
    '#3F98F2'
    >>> registry.color_for("X1") == registry.color_for("X1")
    True
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, str]] = None,
        fallback: Optional[Sequence[str]] = None,
    ):
        self.defaults: Dict[str, str] = dict(
            DEFAULT_SUBTYPE_COLORS if defaults is None else defaults
        )
        self.fallback = tuple(FALLBACK_COLORS if fallback is None else fallback)
        if not self.fallback:
            raise ValueError("Fallback palette must contain at least one color.")
        self.assigned: Dict[str, str] = {}
        self._cursor = 0

    def color_for(self, label: str) -> str:
        """Return the display color for a subtype label."""
        if label in self.defaults:
            return self.defaults[label]
        if label in self.assigned:
            return self.assigned[label]
        color = self.fallback[self._cursor % len(self.fallback)]
        self.assigned[label] = color
        self._cursor += 1
        return color

    __call__ = color_for

    def reset(self) -> None:
        """Forget all fallback assignments and rewind the palette cursor."""
        self.assigned.clear()
        self._cursor = 0
