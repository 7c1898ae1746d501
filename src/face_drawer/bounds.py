__all__ = ["filter_triangles"]

from typing import Iterable, List

from .geometry import Rect, Triangle


def filter_triangles(triangles: Iterable[Triangle], rect: Rect) -> List[Triangle]:
    """Keep the triangles whose three vertices all lie inside ``rect``.

    Containment is half-open and all-or-nothing per triangle, no clipping is
    done. The input order is preserved.
    """
    return [tri for tri in triangles if all(rect.contains(p) for p in tri)]
