import sys

import pytest

from face_drawer import DEFAULT_LANDMARKS, FaceDrawerError, MalformedInput, Point, format_points, parse_points


def test_parse_pairs():
    assert parse_points("1 1,2 2,3 1") == [Point(1, 1), Point(2, 2), Point(3, 1)]


def test_parse_truncates_instead_of_rounding():
    points = parse_points("260.940343 888.611127,0.99 5.5,")
    assert points == [Point(260, 888), Point(0, 5)]
    assert all(isinstance(c, int) for p in points for c in p)


def test_parse_empty_string():
    assert parse_points("") == []
    assert parse_points("  \n") == []


def test_trailing_comma_is_accepted():
    assert parse_points("1 1,2 2,") == [Point(1, 1), Point(2, 2)]
    assert parse_points("1 1,2 2,", flush_trailing=False) == [Point(1, 1), Point(2, 2)]


def test_trailing_pair_flushed_by_default():
    assert parse_points("1 1,2 2") == [Point(1, 1), Point(2, 2)]


def test_trailing_pair_dropped_in_legacy_mode():
    assert parse_points("1 1,2 2", flush_trailing=False) == [Point(1, 1)]
    assert parse_points("7 8", flush_trailing=False) == []


def test_count_matches_number_of_pairs():
    pairs = DEFAULT_LANDMARKS.split(",")
    points = parse_points(DEFAULT_LANDMARKS)
    assert len(points) == len(pairs) == 68
    for point, pair in zip(points, pairs):
        x, y = pair.split(" ")
        assert point == (int(x.split(".")[0]), int(y.split(".")[0]))


def test_trailing_newline_is_ignored():
    assert parse_points("3 4,5 6\n") == [Point(3, 4), Point(5, 6)]


def test_malformed_letters():
    with pytest.raises(MalformedInput) as info:
        parse_points("1 1,abc 2")
    assert info.value.position == 4
    assert isinstance(info.value, FaceDrawerError)


@pytest.mark.parametrize(
    "text",
    [
        "1 1,2",
        "1 1, 2 2",
        "1..2 3,",
        ".5 1,",
        "5. 1,",
        "1 2 3,",
        "-1 2,",
        ",1 1",
        "1,1 1",
        "1 1,,2 2",
        "1 1;2 2",
        "1\t1",
    ],
)
def test_malformed_inputs(text):
    with pytest.raises(MalformedInput):
        parse_points(text)


def test_ends_after_x_coordinate():
    with pytest.raises(MalformedInput):
        parse_points("1 1,2 ")  # stripped to "1 1,2"
    with pytest.raises(MalformedInput):
        parse_points("1 1,2  ", flush_trailing=False)


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"), reason="no integer digit limit")
def test_overlong_number_is_malformed():
    text = "1" * 5000 + " 1,2 2"
    with pytest.raises(MalformedInput) as info:
        parse_points(text)
    assert info.value.position == 0
    assert isinstance(info.value.__cause__, ValueError)


def test_non_string_rejected():
    with pytest.raises(TypeError):
        parse_points(b"1 1")


def test_format_points():
    points = [Point(3, 4), Point(10, 0)]
    assert format_points(points) == "3 4,10 0"
    assert parse_points(format_points(points)) == points
