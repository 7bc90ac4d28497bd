"""
Immediate-mode drawing surfaces.

``DrawingSurface`` mirrors the subset of the HTML canvas 2D context that the
renderer needs: mutable fill/stroke/text state, a current transform with
save/restore scoping, rectangles, polyline paths and text. Geometry is
converted to device coordinates here; a backend only has to implement three
primitives (fill a polygon, stroke a polyline, place a text run).

Backends:
    - MatplotlibSurface: draws onto a matplotlib Figure (PNG/PDF output)
    - RecordingSurface: keeps every primitive as a DrawOp record
"""

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from matplotlib.figure import Figure
from matplotlib.lines import Line2D
from matplotlib.patches import Polygon

from ..default import FONT_FAMILY

Point = Tuple[float, float]

_STATE_ATTRS = (
    "fill_style",
    "stroke_style",
    "line_width",
    "global_alpha",
    "font_size",
    "font_family",
    "text_align",
    "text_baseline",
)


# =============================================================================
# BASE SURFACE
# =============================================================================

class DrawingSurface:
    """
    Canvas-style drawing state machine.

    Parameters
    ----------
    width, height : float
        Canvas size in pixels. The origin is the top-left corner and y
        grows downward.
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.global_alpha = 1.0
        self.font_size = 10.0
        self.font_family: Tuple[str, ...] = FONT_FAMILY
        self.text_align = "start"
        self.text_baseline = "alphabetic"

        self._matrix = np.eye(3)
        self._stack: List[tuple] = []
        self._subpaths: List[List[Point]] = []

    # ------------------------------------------------------------------
    # State and transform
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Push the drawing state and current transform."""
        state = {name: getattr(self, name) for name in _STATE_ATTRS}
        self._stack.append((state, self._matrix.copy()))

    def restore(self) -> None:
        """Pop the most recently saved state. No-op on an empty stack."""
        if not self._stack:
            return
        state, matrix = self._stack.pop()
        for name, value in state.items():
            setattr(self, name, value)
        self._matrix = matrix

    def translate(self, tx: float, ty: float) -> None:
        self._matrix = self._matrix @ np.array(
            [[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]]
        )

    def rotate(self, angle: float) -> None:
        """Rotate by ``angle`` radians (clockwise on screen, as on a canvas)."""
        c, s = math.cos(angle), math.sin(angle)
        self._matrix = self._matrix @ np.array(
            [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]
        )

    def to_device(self, points: Sequence[Point]) -> List[Point]:
        """Apply the current transform to user-space points."""
        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        homog = np.hstack([pts, np.ones((len(pts), 1))])
        out = homog @ self._matrix.T
        return [(float(x), float(y)) for x, y in out[:, :2]]

    @property
    def rotation(self) -> float:
        """Rotation of the current transform in degrees."""
        return math.degrees(math.atan2(self._matrix[1, 0], self._matrix[0, 0]))

    # ------------------------------------------------------------------
    # Rectangles
    # ------------------------------------------------------------------

    @staticmethod
    def _rect_corners(x: float, y: float, w: float, h: float) -> List[Point]:
        return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._fill_polygon(
            self.to_device(self._rect_corners(x, y, w, h)),
            self.fill_style,
            self.global_alpha,
        )

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        self._stroke_path(
            self.to_device(self._rect_corners(x, y, w, h)),
            True,
            self.stroke_style,
            self.line_width,
            self.global_alpha,
        )

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(self.to_device([(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].extend(self.to_device([(x, y)]))

    def stroke(self) -> None:
        """Stroke every subpath of the current path with at least one segment."""
        for points in self._subpaths:
            if len(points) > 1:
                self._stroke_path(
                    list(points), False, self.stroke_style,
                    self.line_width, self.global_alpha,
                )

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def fill_text(self, text: str, x: float, y: float) -> None:
        (dx, dy), = self.to_device([(x, y)])
        self._draw_text(text, dx, dy, self.rotation)

    # ------------------------------------------------------------------
    # Backend primitives
    # ------------------------------------------------------------------

    def _fill_polygon(self, points: List[Point], color: str, alpha: float) -> None:
        raise NotImplementedError

    def _stroke_path(
        self,
        points: List[Point],
        closed: bool,
        color: str,
        width: float,
        alpha: float,
    ) -> None:
        raise NotImplementedError

    def _draw_text(self, text: str, x: float, y: float, angle: float) -> None:
        """Place ``text`` at device point (x, y) using the current text state."""
        raise NotImplementedError


# =============================================================================
# RECORDING BACKEND
# =============================================================================

@dataclass(frozen=True)
class DrawOp:
    """One device-space drawing primitive."""

    kind: str  # "fill", "stroke" or "text"
    points: Tuple[Point, ...]
    color: str
    alpha: float = 1.0
    line_width: float = 0.0
    closed: bool = False
    text: str = ""
    angle: float = 0.0
    font_size: float = 0.0
    align: str = ""
    baseline: str = ""


class RecordingSurface(DrawingSurface):
    """Surface that records primitives in ``ops`` instead of drawing them."""

    def __init__(self, width: float, height: float):
        super().__init__(width, height)
        self.ops: List[DrawOp] = []

    def _fill_polygon(self, points, color, alpha):
        self.ops.append(DrawOp("fill", tuple(points), color, alpha))

    def _stroke_path(self, points, closed, color, width, alpha):
        self.ops.append(
            DrawOp("stroke", tuple(points), color, alpha, line_width=width, closed=closed)
        )

    def _draw_text(self, text, x, y, angle):
        self.ops.append(
            DrawOp(
                "text",
                ((x, y),),
                self.fill_style,
                self.global_alpha,
                text=text,
                angle=angle,
                font_size=self.font_size,
                align=self.text_align,
                baseline=self.text_baseline,
            )
        )

    def of_kind(self, kind: str) -> List[DrawOp]:
        return [op for op in self.ops if op.kind == kind]

    def texts(self) -> List[str]:
        return [op.text for op in self.ops if op.kind == "text"]


# =============================================================================
# MATPLOTLIB BACKEND
# =============================================================================

_HA = {"start": "left", "left": "left", "center": "center", "end": "right", "right": "right"}
_VA = {
    "alphabetic": "baseline",
    "ideographic": "baseline",
    "middle": "center",
    "top": "top",
    "hanging": "top",
    "bottom": "bottom",
}


class MatplotlibSurface(DrawingSurface):
    """
    Surface drawing onto a matplotlib Figure in canvas pixel coordinates.

    The figure holds one full-bleed axes with x in [0, width] and y in
    [height, 0], so data units are canvas pixels. Each primitive gets a
    larger zorder than the last, which keeps painter's order regardless of
    artist type.

    Parameters
    ----------
    width, height : float
        Canvas size in pixels.
    dpi : float
        Figure resolution; pixel line widths and font sizes are converted to
        points with ``72 / dpi``.
    """

    def __init__(self, width: float, height: float, dpi: float = 100):
        super().__init__(width, height)
        self.dpi = dpi
        self.figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.ax = self.figure.add_axes((0, 0, 1, 1))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()
        self._z = 0

    def _px_to_pt(self, px: float) -> float:
        return px * 72.0 / self.dpi

    def _next_z(self) -> int:
        self._z += 1
        return self._z

    def _fill_polygon(self, points, color, alpha):
        self.ax.add_patch(
            Polygon(
                points,
                closed=True,
                facecolor=color,
                edgecolor="none",
                linewidth=0,
                alpha=alpha,
                zorder=self._next_z(),
            )
        )

    def _stroke_path(self, points, closed, color, width, alpha):
        if closed:
            points = list(points) + [points[0]]
        xs, ys = zip(*points)
        self.ax.add_line(
            Line2D(
                xs,
                ys,
                color=color,
                linewidth=self._px_to_pt(width),
                alpha=alpha,
                solid_capstyle="butt",
                solid_joinstyle="miter",
                zorder=self._next_z(),
            )
        )

    def _draw_text(self, text, x, y, angle):
        self.ax.text(
            x,
            y,
            text,
            color=self.fill_style,
            alpha=self.global_alpha,
            fontsize=self._px_to_pt(self.font_size),
            fontfamily=list(self.font_family),
            ha=_HA.get(self.text_align, "left"),
            va=_VA.get(self.text_baseline, "baseline"),
            rotation=-angle,
            rotation_mode="anchor",
            zorder=self._next_z(),
        )
