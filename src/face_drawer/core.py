__all__ = ["FaceDrawer", "load_image", "save_image"]

import time
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import cv2
import numpy as np

from .bounds import filter_triangles
from .config import DrawerConfig
from .exceptions import (
    ImageUnavailable,
    ImageWriteError,
    InvalidBounds,
    LandmarksUnavailable,
    MalformedInput,
)
from .geometry import Rect, Triangle
from .landmarks import LandmarkSource, StaticLandmarkSource
from .logging_utils import get_logger
from .parser import parse_points
from .renderer import MeshRenderer
from .triangulation import triangulate

logger = get_logger(__name__)


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Read a color image.

    Raises:
        ImageUnavailable: If the file is missing or cannot be decoded
    """
    image = cv2.imread(str(path), cv2.IMREAD_COLOR)
    if image is None or image.size == 0:
        raise ImageUnavailable(path)
    return image


def save_image(path: Union[str, Path], image: np.ndarray) -> Path:
    """Write an image, the format follows the file extension.

    Raises:
        ImageWriteError: If cv2 cannot encode or write the file
    """
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise ImageWriteError(path, cause=e) from e
    if not ok:
        raise ImageWriteError(path)
    return Path(path)


class FaceDrawer:
    """Overlays the Delaunay mesh of facial landmarks onto video frames.

    Frames are still images inside one directory, addressed by a numeric frame
    id. For each frame the landmark string is parsed, triangulated within the
    image rectangle, filtered to the triangles inside the image and drawn.

    The class should be instantiated once and reused for all frames. It holds
    no state between frames apart from its configuration.

    Args:
        config (Optional[DrawerConfig], optional): Drawing and file naming settings. Defaults to None.
        landmarks (Optional[LandmarkSource], optional): Where the coordinate strings come from.
            Defaults to the fixed reference face.
    """

    def __init__(self, config: Optional[DrawerConfig] = None, landmarks: Optional[LandmarkSource] = None) -> None:
        self.config = config or DrawerConfig()
        self.landmarks = landmarks or StaticLandmarkSource()
        self.renderer = MeshRenderer(self.config.style)

    def draw(self, image: np.ndarray, points: Sequence[Tuple[int, int]]) -> List[Triangle]:
        """Draws the landmarks and their mesh onto the image.

        The image is modified in place.

        Args:
            image (np.ndarray): The image to draw on
            points (Sequence[Tuple[int, int]]): The landmarks in insertion order

        Raises:
            TypeError: If the image is not a numpy array
            InvalidBounds: If the image has no pixels

        Returns:
            List[Triangle]: The triangles that were drawn
        """
        if not isinstance(image, np.ndarray):
            raise TypeError("image must be a numpy array")

        rect = Rect.from_image(image)
        if self.config.draw_points_on_insert:
            triangles = triangulate(points, rect, on_insert=lambda p: self.renderer.draw_point(image, p))
        else:
            triangles = triangulate(points, rect)
            self.renderer.draw_points(image, points)

        inside = filter_triangles(triangles, rect)
        self.renderer.draw_triangles(image, inside)
        logger.debug("Drew %d points and %d of %d triangles", len(points), len(inside), len(triangles))
        return inside

    def input_path(self, directory: Union[str, Path], frame_id: int) -> Path:
        return Path(directory) / self.config.input_name.format(frame_id=frame_id)

    def output_path(self, directory: Union[str, Path], frame_id: int) -> Path:
        return Path(directory) / self.config.output_name.format(frame_id=frame_id)

    def process_frame(self, directory: Union[str, Path], frame_id: int) -> Optional[Path]:
        """Draws the mesh onto one frame and writes the result next to it.

        Failures are contained to the frame: they are logged and the frame is
        skipped, so a range of frames keeps going.

        Args:
            directory (Union[str, Path]): The frame directory
            frame_id (int): The frame to process

        Returns:
            Optional[Path]: The written image, None if the frame was skipped
        """
        start_time = time.perf_counter()
        image_path = self.input_path(directory, frame_id)

        try:
            image = load_image(image_path)
            text = self.landmarks.get(frame_id)
            points = parse_points(text, flush_trailing=self.config.flush_trailing_pair)
            self.draw(image, points)
            result_path = save_image(self.output_path(directory, frame_id), image)
        except (ImageUnavailable, LandmarksUnavailable) as e:
            logger.warning("Skipping frame %d after %.4fs: %s", frame_id, time.perf_counter() - start_time, e)
            return None
        except (MalformedInput, InvalidBounds, ImageWriteError) as e:
            logger.error("Failed frame %d after %.4fs: %s", frame_id, time.perf_counter() - start_time, e)
            return None

        elapsed = time.perf_counter() - start_time
        logger.info("Overwrote points for image %d at %s in %.4fs", frame_id, image_path, elapsed)
        return result_path

    def process_range(self, directory: Union[str, Path], start: int, end: int) -> List[Path]:
        """Processes the frames ``start`` up to but excluding ``end``, one after the other."""
        if end <= start:
            logger.warning("Empty frame range [%d, %d)", start, end)
            return []

        written = []
        for frame_id in range(start, end):
            result = self.process_frame(directory, frame_id)
            if result is not None:
                written.append(result)
        logger.info("Processed %d of %d frames", len(written), end - start)
        return written
