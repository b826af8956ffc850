"""Leaf-node 2D affine transform helpers. No engine imports."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Affine:
    """2D affine transform stored as a 3x3 homogeneous matrix."""

    matrix: NDArray[np.float64] = field(default_factory=lambda: np.eye(3))

    @classmethod
    def translate(cls, tx: float, ty: float) -> Affine:
        m = np.eye(3)
        m[0, 2] = tx
        m[1, 2] = ty
        return cls(m)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> Affine:
        m = np.eye(3)
        m[0, 0] = sx
        m[1, 1] = sx if sy is None else sy
        return cls(m)

    def then(self, other: Affine) -> Affine:
        """Transform that applies ``self`` first, then ``other``."""
        return Affine(other.matrix @ self.matrix)

    def apply(self, points: NDArray[np.float64] | tuple[float, float]) -> NDArray[np.float64]:
        """Map a point or an Nx2 array of points."""
        pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
        homogeneous = np.hstack([pts, np.ones((len(pts), 1))])
        mapped = (self.matrix @ homogeneous.T).T[:, :2]
        return mapped[0] if np.ndim(points) == 1 else mapped

    @property
    def coefficients(self) -> tuple[float, float, float, float, float, float]:
        """SVG ``matrix(a b c d e f)`` coefficients."""
        m = self.matrix
        return (
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    def to_svg(self, precision: int = 6) -> str:
        return "matrix({})".format(" ".join(_fmt(c, precision) for c in self.coefficients))


def _fmt(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def fit_center(
    viewbox: tuple[float, float, float, float],
    center: tuple[float, float],
    scale: float,
) -> Affine:
    """Move the viewbox origin to 0, scale, then centre the scaled box on ``center``."""
    vx, vy, vw, vh = viewbox
    cx, cy = center
    return (
        Affine.translate(-vx, -vy)
        .then(Affine.scale(scale))
        .then(Affine.translate(cx - scale * vw / 2, cy - scale * vh / 2))
    )
