import logging

import cv2
import numpy as np
import pytest

# large enough for every landmark of the reference face
FRAME_SHAPE = (1400, 900, 3)


def blank_frame(shape=FRAME_SHAPE, value=0):
    return np.full(shape, value, dtype=np.uint8)


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers, level and propagation set by ``configure_logging`` during a test."""
    log = logging.getLogger("face_drawer")
    handlers, level, propagate = list(log.handlers), log.level, log.propagate
    try:
        yield
    finally:
        for h in list(log.handlers):
            if h not in handlers:
                log.removeHandler(h)
        for h in handlers:
            if h not in log.handlers:
                log.addHandler(h)
        log.setLevel(level)
        log.propagate = propagate


@pytest.fixture
def frame_dir(tmp_path):
    """Directory holding the frames 0.png and 1.png."""
    for frame_id in (0, 1):
        assert cv2.imwrite(str(tmp_path / f"{frame_id}.png"), blank_frame(value=40 * (frame_id + 1)))
    return tmp_path


@pytest.fixture
def random_points():
    rng = np.random.default_rng(7)
    raw = rng.integers(0, 400, size=(80, 2)).tolist()
    seen = set()
    points = []
    for x, y in raw:
        if (x, y) not in seen:
            seen.add((x, y))
            points.append((int(x), int(y)))
    return points
