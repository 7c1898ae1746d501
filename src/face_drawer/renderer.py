__all__ = ["MeshRenderer"]

from fractions import Fraction
from typing import Iterable, Optional, Tuple

import cv2
import numpy as np

from .config import DrawStyle
from .geometry import Triangle
from .logging_utils import get_logger

logger = get_logger(__name__)

# cv2 draws with int32 coordinates
_COORD_LIMIT = 2**30


def _representable(*points: Tuple[int, int]) -> bool:
    return all(-_COORD_LIMIT < c < _COORD_LIMIT for p in points for c in p)


_Segment = Tuple[Tuple[int, int], Tuple[int, int]]


def _shrink(p1: Tuple[int, int], p2: Tuple[int, int], lo: int, hi: int) -> Optional[_Segment]:
    """Clip a segment to the square ``[lo, hi]^2`` (Liang-Barsky, exact).

    Returns None when no part of the segment lies inside the square.
    """
    x1, y1 = p1
    dx, dy = p2[0] - x1, p2[1] - y1
    t0, t1 = Fraction(0), Fraction(1)
    for d, q in ((-dx, x1 - lo), (dx, hi - x1), (-dy, y1 - lo), (dy, hi - y1)):
        if d == 0:
            if q < 0:
                return None
            continue
        t = Fraction(q, d)
        if d < 0:
            t0 = max(t0, t)
        else:
            t1 = min(t1, t)
        if t0 > t1:
            return None
    a = (round(x1 + t0 * dx), round(y1 + t0 * dy))
    b = (round(x1 + t1 * dx), round(y1 + t1 * dy))
    return a, b


class MeshRenderer:
    """Draws landmark dots and triangle edges onto an image.

    The image is borrowed: it is modified in place and never kept. cv2 clips
    everything outside the image, so out of range coordinates are no-ops.
    Lines with an endpoint beyond the int32 range are clipped to the image
    before drawing, so the part crossing the image is still drawn.
    """

    def __init__(self, style: Optional[DrawStyle] = None) -> None:
        self.style = style or DrawStyle()

    @staticmethod
    def _check(image: np.ndarray) -> None:
        if not isinstance(image, np.ndarray):
            raise TypeError("image must be a numpy array")

    def draw_point(self, image: np.ndarray, point: Tuple[int, int]) -> None:
        if not _representable(point):
            logger.debug("Point %s is outside the drawable range", point)
            return
        center = (int(point[0]), int(point[1]))
        cv2.circle(image, center, self.style.dot_radius, self.style.dot_color, -1)

    def draw_line(self, image: np.ndarray, p1: Tuple[int, int], p2: Tuple[int, int]) -> None:
        p1, p2 = (int(p1[0]), int(p1[1])), (int(p2[0]), int(p2[1]))
        if not _representable(p1, p2):
            segment = _shrink(p1, p2, 1 - _COORD_LIMIT, _COORD_LIMIT - 1)
            if segment is None:
                return
            # keep a margin so the stroke width near the border is not cut
            margin = self.style.line_thickness + 2
            height, width = image.shape[:2]
            visible, p1, p2 = cv2.clipLine((-margin, -margin, width + 2 * margin, height + 2 * margin), *segment)
            if not visible:
                logger.debug("Line %s-%s does not cross the image", *segment)
                return
        cv2.line(
            image,
            tuple(p1),
            tuple(p2),
            self.style.line_color,
            self.style.line_thickness,
            self.style.line_type,
        )

    def draw_points(self, image: np.ndarray, points: Iterable[Tuple[int, int]]) -> None:
        self._check(image)
        for point in points:
            self.draw_point(image, point)

    def draw_triangles(self, image: np.ndarray, triangles: Iterable[Triangle]) -> None:
        """Draw the three edges of every triangle.

        Edges shared by two triangles are drawn once for each of them.
        """
        self._check(image)
        for p1, p2, p3 in triangles:
            self.draw_line(image, p1, p2)
            self.draw_line(image, p2, p3)
            self.draw_line(image, p3, p1)

    def render(self, image: np.ndarray, points: Iterable[Tuple[int, int]], triangles: Iterable[Triangle]) -> None:
        """Draw the dots first, then the mesh edges on top."""
        self.draw_points(image, points)
        self.draw_triangles(image, triangles)
