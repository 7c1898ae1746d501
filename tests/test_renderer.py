import numpy as np
import pytest

from face_drawer import DrawStyle, MeshRenderer, Rect, triangulate


class RecordingRenderer(MeshRenderer):
    def __init__(self, style=None):
        super().__init__(style)
        self.points = []
        self.lines = []

    def draw_point(self, image, point):
        self.points.append(tuple(point))
        super().draw_point(image, point)

    def draw_line(self, image, p1, p2):
        self.lines.append((tuple(p1), tuple(p2)))
        super().draw_line(image, p1, p2)


def test_square_draws_shared_edge_twice():
    square = [(0, 0), (10, 0), (10, 10), (0, 10)]
    tris = triangulate(square, Rect(0, 0, 10, 10))
    renderer = RecordingRenderer()
    image = np.zeros((20, 20, 3), dtype=np.uint8)

    renderer.render(image, square, tris)

    assert len(renderer.points) == 4
    assert len(renderer.lines) == 6
    undirected = [frozenset(line) for line in renderer.lines]
    assert sorted(undirected.count(e) for e in set(undirected)) == [1, 1, 1, 1, 2]


def test_empty_input_leaves_image_untouched():
    image = np.full((30, 30, 3), 17, dtype=np.uint8)
    renderer = RecordingRenderer()
    renderer.render(image, [], [])
    assert renderer.points == [] and renderer.lines == []
    assert (image == 17).all()


def test_dot_is_filled_with_dot_color():
    style = DrawStyle()
    image = np.zeros((50, 50, 3), dtype=np.uint8)
    MeshRenderer(style).draw_points(image, [(25, 25)])
    assert tuple(image[25, 25]) == style.dot_color
    assert tuple(image[25, 25 + style.dot_radius - 1]) == style.dot_color
    assert not image[25, 25 + style.dot_radius + 2].any()


def test_line_is_drawn():
    image = np.zeros((50, 50, 3), dtype=np.uint8)
    renderer = MeshRenderer()
    renderer.draw_line(image, (5, 20), (40, 20))
    assert image[20, 20].any()
    assert not image[40, 20].any()


def test_custom_style():
    style = DrawStyle(dot_color=(0, 0, 255), dot_radius=2)
    image = np.zeros((10, 10, 3), dtype=np.uint8)
    MeshRenderer(style).draw_point(image, (5, 5))
    assert tuple(image[5, 5]) == (0, 0, 255)


def test_out_of_range_is_a_no_op():
    image = np.zeros((20, 20, 3), dtype=np.uint8)
    renderer = MeshRenderer()
    renderer.draw_points(image, [(-100, -100), (10**12, 5)])
    renderer.draw_line(image, (-50, -50), (-10, -60))
    renderer.draw_line(image, (-(10**15), -30), (10**15, -30))
    renderer.draw_line(image, (10**15, 0), (10**15 + 5, 10**15))
    assert not image.any()


def test_far_endpoint_line_is_clipped_not_dropped():
    image = np.zeros((20, 20, 3), dtype=np.uint8)
    MeshRenderer().draw_line(image, (0, 0), (10**15, 10**15))
    assert image[5, 5].any()
    assert image[15, 15].any()
    assert not image[2, 17].any()


def test_far_horizontal_line_matches_short_one():
    clipped = np.zeros((20, 20, 3), dtype=np.uint8)
    short = np.zeros((20, 20, 3), dtype=np.uint8)
    MeshRenderer().draw_line(clipped, (-(10**12), 10), (10**12, 10))
    MeshRenderer().draw_line(short, (-100, 10), (100, 10))
    assert clipped[10].all()
    np.testing.assert_array_equal(clipped[10], short[10])


def test_rejects_non_arrays():
    with pytest.raises(TypeError):
        MeshRenderer().draw_points([[0, 0]], [(1, 1)])
    with pytest.raises(TypeError):
        MeshRenderer().draw_triangles(None, [])


@pytest.mark.parametrize(
    "kwargs",
    [{"dot_radius": -1}, {"line_thickness": 0}, {"dot_color": (1, 2)}, {"line_color": (0, 0, 256)}],
)
def test_style_validation(kwargs):
    with pytest.raises(ValueError):
        DrawStyle(**kwargs)
