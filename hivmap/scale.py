"""
Linear genomic-position to canvas-x mapping.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .default import DEFAULT_CONFIG, RenderConfig


@dataclass(frozen=True)
class LinearScale:
    """
    Affine map from ``domain`` onto ``range_``, without clamping.

    Positions outside the domain extrapolate past the range ends.

    Examples
    --------
    >>> scale = LinearScale((0, 100), (50, 250))
    >>> scale(50)
    150.0
    """

    domain: Tuple[float, float]
    range_: Tuple[float, float]

    def __post_init__(self):
        if self.domain[1] == self.domain[0]:
            raise ValueError(f"Scale domain must have nonzero width, got {self.domain}")

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range_
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def span(self, start: float, end: float) -> Tuple[float, float]:
        """Return ``(x, width)`` of the interval ``[start, end]``."""
        x0 = self(start)
        return x0, self(end) - x0


def make_x_scale(config: Optional[RenderConfig] = None) -> LinearScale:
    """Scale from the config's genomic axis onto its usable canvas width."""
    config = config or DEFAULT_CONFIG
    return LinearScale(tuple(config.axis_range), config.x_range)
