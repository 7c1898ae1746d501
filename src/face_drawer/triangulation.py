"""Incremental Delaunay triangulation bounded by a rectangle.

Points are inserted one at a time with the Bowyer-Watson construction: the
triangle containing the new point is located by a linear scan, the cavity of
triangles whose circumcircle strictly contains the point is grown by walking
the face adjacency, and the cavity boundary is re-fanned around the point.

The construction is seeded with a scaffold super-triangle whose corners lie
far outside the domain. Its distance grows with the cube of the domain size:
at that distance every circumcircle of real points and every hull edge of the
real points behaves as if the scaffold were at infinity, so the triangles with
three real vertices form a Delaunay triangulation of the inserted points that
covers their convex hull exactly. All predicates run on Python integers and
are exact.

Location costs O(n) per insertion, the cavity update is O(1) expected for
well-distributed points, so a full run is O(n^2) in the worst case and close
to linear in cavity work otherwise.
"""

__all__ = ["PlanarTriangulator", "triangulate"]

from typing import Callable, Dict, List, Optional, Sequence, Set, Tuple

import numpy as np

from .exceptions import InvalidBounds, PointOutOfBounds
from .geometry import Point, Rect, Triangle, in_circle, orient
from .logging_utils import get_logger

logger = get_logger(__name__)

# vertex indices 0, 1, 2 are the scaffold corners
_SCAFFOLD = 3


class PlanarTriangulator:
    """Incremental triangulation of points inside a rectangle.

    The instance owns its working structure; it is meant for a single point
    set and discarded once ``triangles`` has been read.

    Args:
        rect (Rect): The valid domain, usually the image rectangle.
        extent (Optional[Rect], optional): Additional area the scaffold has to
            enclose, e.g. the bounding box of landmarks that leave the image.
            Defaults to None.

    Raises:
        InvalidBounds: If rect has a non-positive width or height
    """

    def __init__(self, rect: Rect, extent: Optional[Rect] = None) -> None:
        if not isinstance(rect, Rect):
            raise TypeError("rect must be a Rect")
        if rect.width <= 0 or rect.height <= 0:
            raise InvalidBounds("Rectangle must have a positive size", context={"rect": rect})

        self.rect = rect
        self.domain = rect if extent is None else rect.union(extent)

        d = self.domain
        size = max(d.width, d.height, 1)
        far = 16 * (size + 1) ** 3
        self.__vertices: List[Point] = [
            Point(d.x - far, d.y - far),
            Point(d.x + 2 * size + 3 * far, d.y - far),
            Point(d.x - far, d.y + 2 * size + 3 * far),
        ]
        self.__index: Dict[Point, int] = {}

        # triangle id -> counter-clockwise vertex indices, ids grow with creation
        self.__triangles: Dict[int, Tuple[int, int, int]] = {}
        # directed edge (u, v) -> id of the triangle having it counter-clockwise
        self.__edges: Dict[Tuple[int, int], int] = {}
        self.__next_id = 0
        self.__add_triangle(0, 1, 2)

    def __len__(self) -> int:
        return len(self.__vertices) - _SCAFFOLD

    def __add_triangle(self, a: int, b: int, c: int) -> None:
        tid = self.__next_id
        self.__next_id += 1
        self.__triangles[tid] = (a, b, c)
        self.__edges[(a, b)] = tid
        self.__edges[(b, c)] = tid
        self.__edges[(c, a)] = tid

    def __remove_triangle(self, tid: int) -> None:
        a, b, c = self.__triangles.pop(tid)
        for edge in ((a, b), (b, c), (c, a)):
            if self.__edges.get(edge) == tid:
                del self.__edges[edge]

    def __locate(self, p: Point) -> int:
        v = self.__vertices
        for tid, (a, b, c) in self.__triangles.items():
            if orient(v[a], v[b], p) >= 0 and orient(v[b], v[c], p) >= 0 and orient(v[c], v[a], p) >= 0:
                return tid
        # unreachable for points inside the scaffold
        raise PointOutOfBounds(p, self.domain)

    def __cavity(self, start: int, p: Point) -> Set[int]:
        v = self.__vertices
        cavity = {start}
        stack = [start]
        while stack:
            a, b, c = self.__triangles[stack.pop()]
            for u, w in ((a, b), (b, c), (c, a)):
                nid = self.__edges.get((w, u))
                if nid is None or nid in cavity:
                    continue
                na, nb, nc = self.__triangles[nid]
                if in_circle(v[na], v[nb], v[nc], p) > 0:
                    cavity.add(nid)
                    stack.append(nid)
        return cavity

    def insert(self, point: Tuple[int, int]) -> bool:
        """Insert a point and restore the empty-circumcircle property.

        Args:
            point (Tuple[int, int]): Integer pixel coordinates

        Raises:
            PointOutOfBounds: If the point is outside the scaffold's domain

        Returns:
            bool: False if the point was already present and got skipped
        """
        p = Point(int(point[0]), int(point[1]))
        if not self.domain.covers(p):
            raise PointOutOfBounds(p, self.domain)
        if p in self.__index:
            logger.debug("Skipping duplicate point %s", p)
            return False

        start = self.__locate(p)
        cavity = self.__cavity(start, p)

        # boundary edges of the cavity, in a stable order
        boundary = []
        for tid in sorted(cavity):
            a, b, c = self.__triangles[tid]
            for u, w in ((a, b), (b, c), (c, a)):
                if self.__edges.get((w, u)) not in cavity:
                    boundary.append((u, w))

        for tid in sorted(cavity):
            self.__remove_triangle(tid)

        pi = len(self.__vertices)
        self.__vertices.append(p)
        self.__index[p] = pi
        for u, w in boundary:
            self.__add_triangle(u, w, pi)
        return True

    def triangles(self) -> List[Triangle]:
        """Triangles without scaffold vertices, in creation order."""
        v = self.__vertices
        return [
            (v[a], v[b], v[c])
            for a, b, c in self.__triangles.values()
            if a >= _SCAFFOLD and b >= _SCAFFOLD and c >= _SCAFFOLD
        ]

    def as_array(self) -> np.ndarray:
        """Triangles as an ``(M, 3, 2)`` int32 array."""
        tris = self.triangles()
        if not tris:
            return np.empty((0, 3, 2), dtype=np.int32)
        return np.array(tris, dtype=np.int32)


def triangulate(
    points: Sequence[Tuple[int, int]],
    rect: Rect,
    on_insert: Optional[Callable[[Point], None]] = None,
) -> List[Triangle]:
    """Delaunay triangulation of ``points`` inside ``rect``.

    The scaffold encloses the rectangle and the points together, so landmarks
    outside the image are triangulated as well and left to the bounds filter.

    Args:
        points (Sequence[Tuple[int, int]]): Points in insertion order
        rect (Rect): The valid domain
        on_insert (Optional[Callable[[Point], None]], optional): Called with every
            input point, in order, as it is inserted. Defaults to None.

    Raises:
        InvalidBounds: If rect has a non-positive width or height

    Returns:
        List[Triangle]: The triangles over the real points
    """
    pts: List[Point] = [Point(int(x), int(y)) for x, y in points]
    extent = Rect.bounding(pts) if pts else None
    triangulator = PlanarTriangulator(rect, extent=extent)
    for p in pts:
        if on_insert is not None:
            on_insert(p)
        triangulator.insert(p)
    return triangulator.triangles()
