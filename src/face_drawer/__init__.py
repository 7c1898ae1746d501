"""Overlay the Delaunay mesh of facial landmarks onto still frames."""

import logging

from .bounds import filter_triangles
from .config import DrawerConfig, DrawStyle
from .core import FaceDrawer, load_image, save_image
from .exceptions import (
    ArgumentError,
    FaceDrawerError,
    ImageUnavailable,
    ImageWriteError,
    InvalidBounds,
    LandmarksUnavailable,
    MalformedInput,
    PointOutOfBounds,
)
from .geometry import Point, Rect
from .landmarks import DEFAULT_LANDMARKS, H5LandmarkSource, LandmarkSource, StaticLandmarkSource
from .logging_utils import configure_logging, get_logger
from .parser import format_points, parse_points
from .renderer import MeshRenderer
from .triangulation import PlanarTriangulator, triangulate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FaceDrawer",
    "DrawerConfig",
    "DrawStyle",
    "MeshRenderer",
    "PlanarTriangulator",
    "Point",
    "Rect",
    "triangulate",
    "filter_triangles",
    "parse_points",
    "format_points",
    "load_image",
    "save_image",
    "LandmarkSource",
    "StaticLandmarkSource",
    "H5LandmarkSource",
    "DEFAULT_LANDMARKS",
    "configure_logging",
    "get_logger",
    "FaceDrawerError",
    "MalformedInput",
    "InvalidBounds",
    "PointOutOfBounds",
    "ImageUnavailable",
    "ImageWriteError",
    "LandmarksUnavailable",
    "ArgumentError",
]
