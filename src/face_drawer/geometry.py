"""Points, rectangles and exact geometric predicates.

Coordinates are plain Python integers, so ``orient`` and ``in_circle`` are
evaluated exactly no matter how far out the triangulation scaffold lies.
"""

__all__ = ["Point", "Rect", "Triangle", "orient", "in_circle", "triangle_area2"]

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Tuple

import numpy as np


class Point(NamedTuple):
    x: int
    y: int


Triangle = Tuple[Point, Point, Point]


@dataclass(frozen=True)
class Rect:
    """Axis aligned rectangle ``(x, y, width, height)``.

    ``contains`` is half-open, like a pixel grid: ``x <= px < x + width``.
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, point: Tuple[int, int]) -> bool:
        return self.x <= point[0] < self.right and self.y <= point[1] < self.bottom

    def covers(self, point: Tuple[int, int]) -> bool:
        """Closed containment, the far edges included."""
        return self.x <= point[0] <= self.right and self.y <= point[1] <= self.bottom

    @classmethod
    def from_image(cls, image: np.ndarray) -> "Rect":
        """Rectangle spanning the pixel domain of an image array."""
        if not isinstance(image, np.ndarray) or image.ndim < 2:
            raise TypeError("image must be a numpy array with at least two dimensions")
        h, w = image.shape[:2]
        return cls(0, 0, int(w), int(h))

    @classmethod
    def bounding(cls, points: Iterable[Tuple[int, int]]) -> "Rect":
        """Smallest closed box around ``points``. Raises ``ValueError`` if empty."""
        pts = list(points)
        if not pts:
            raise ValueError("cannot bound an empty point set")
        xs = [p[0] for p in pts]
        ys = [p[1] for p in pts]
        return cls(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def union(self, other: "Rect") -> "Rect":
        x0, y0 = min(self.x, other.x), min(self.y, other.y)
        x1, y1 = max(self.right, other.right), max(self.bottom, other.bottom)
        return Rect(x0, y0, x1 - x0, y1 - y0)


def orient(a: Tuple[int, int], b: Tuple[int, int], c: Tuple[int, int]) -> int:
    """Twice the signed area of ``abc``; positive when counter-clockwise in math axes."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def triangle_area2(tri: Triangle) -> int:
    return abs(orient(*tri))


def in_circle(a: Tuple[int, int], b: Tuple[int, int], c: Tuple[int, int], p: Tuple[int, int]) -> int:
    """Sign of the empty-circumcircle determinant.

    For a counter-clockwise triangle ``abc`` the result is positive when ``p``
    lies strictly inside its circumcircle, zero on the circle, negative outside.
    """
    adx, ady = a[0] - p[0], a[1] - p[1]
    bdx, bdy = b[0] - p[0], b[1] - p[1]
    cdx, cdy = c[0] - p[0], c[1] - p[1]
    ad = adx * adx + ady * ady
    bd = bdx * bdx + bdy * bdy
    cd = cdx * cdx + cdy * cdy
    return adx * (bdy * cd - bd * cdy) - ady * (bdx * cd - bd * cdx) + ad * (bdx * cdy - bdy * cdx)
