"""Configuration values for drawing and frame processing."""

from __future__ import annotations

__all__ = ["DrawStyle", "DrawerConfig"]

from dataclasses import dataclass, field
from typing import Tuple

import cv2

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class DrawStyle:
    """Colors and sizes of the overlay.

    Colors are given in the channel order of the target buffer (BGR for
    images read with ``cv2.imread``) and handed to cv2 unchanged.
    """

    dot_color: Color = (180, 244, 66)
    line_color: Color = (15, 100, 15)
    dot_radius: int = 5
    line_thickness: int = 2
    line_type: int = cv2.LINE_AA

    def __post_init__(self) -> None:
        for name in ("dot_color", "line_color"):
            color = getattr(self, name)
            if len(color) != 3 or any(not 0 <= int(c) <= 255 for c in color):
                raise ValueError(f"{name} must be three values between 0 and 255")
        if self.dot_radius < 0:
            raise ValueError("dot_radius must not be negative")
        if self.line_thickness <= 0:
            raise ValueError("line_thickness must be positive")


@dataclass
class DrawerConfig:
    """Frame processing settings.

    Attributes:
        style (DrawStyle): Overlay colors and sizes.
        input_name (str): File name template of the input frame inside the frame
            directory, formatted with ``frame_id``.
        output_name (str): File name template of the drawn frame, formatted the same way.
        draw_points_on_insert (bool): Draw every landmark while it is inserted into
            the triangulation instead of in a second pass. The output is identical.
        flush_trailing_pair (bool): Keep a last coordinate pair that is not followed
            by a comma.
    """

    style: DrawStyle = field(default_factory=DrawStyle)
    input_name: str = "{frame_id}.png"
    output_name: str = "drawn_{frame_id}.png"
    draw_points_on_insert: bool = True
    flush_trailing_pair: bool = True

    def __post_init__(self) -> None:
        for name in ("input_name", "output_name"):
            if "{frame_id}" not in getattr(self, name):
                raise ValueError(f"{name} must contain a '{{frame_id}}' placeholder")
        if self.input_name == self.output_name:
            raise ValueError("input_name and output_name must differ")
