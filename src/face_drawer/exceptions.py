"""Exception hierarchy for the face drawing pipeline.

Every error carries an optional ``context`` dict that is folded into the
message, and an optional ``cause`` for the low-level error it replaces.
"""

from __future__ import annotations

from typing import Any, Optional

__all__ = [
    "FaceDrawerError",
    "MalformedInput",
    "InvalidBounds",
    "PointOutOfBounds",
    "ImageUnavailable",
    "ImageWriteError",
    "LandmarksUnavailable",
    "ArgumentError",
]


class FaceDrawerError(Exception):
    """Base class for all errors raised by ``face_drawer``."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        self.context = context or {}
        self.cause = cause

        full_message = message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            full_message = f"{message} [{context_str}]"

        if cause:
            full_message = f"{full_message} (caused by: {cause})"

        super().__init__(full_message)


class MalformedInput(FaceDrawerError):
    """The coordinate string does not follow the point list grammar."""

    def __init__(self, reason: str, position: int, text: str = "", cause: Optional[Exception] = None):
        self.position = position
        snippet = text[max(0, position - 8) : position + 8]
        super().__init__(reason, context={"position": position, "near": repr(snippet)}, cause=cause)


class InvalidBounds(FaceDrawerError):
    """A rectangle with non-positive size was given to the triangulator."""


class PointOutOfBounds(InvalidBounds):
    """A point lies outside the area covered by the triangulation scaffold."""

    def __init__(self, point: Any, domain: Any):
        super().__init__("Point outside of triangulation domain", context={"point": point, "domain": domain})


class ImageUnavailable(FaceDrawerError):
    """The source image is missing or could not be decoded."""

    def __init__(self, path: Any):
        self.path = path
        super().__init__("Could not read image", context={"path": path})


class ImageWriteError(FaceDrawerError):
    """The drawn image could not be encoded or written."""

    def __init__(self, path: Any, cause: Optional[Exception] = None):
        self.path = path
        super().__init__("Could not write image", context={"path": path}, cause=cause)


class LandmarksUnavailable(FaceDrawerError):
    """No coordinate string is available for a frame."""

    def __init__(self, frame_id: int, source: Any, cause: Optional[Exception] = None):
        self.frame_id = frame_id
        super().__init__("No landmarks for frame", context={"frame_id": frame_id, "source": source}, cause=cause)


class ArgumentError(FaceDrawerError):
    """Invalid or excessive command line arguments."""
