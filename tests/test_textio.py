import io

import pytest

from cg2d.errors import MalformedInput
from cg2d.geom import Pt
from cg2d.textio import HULL_HEADER, format_hull, read_points


def test_read_points_line_per_point():
    text = "3\n0 0\n1.5 -2\n1e3 4\n"
    assert read_points(io.StringIO(text)) == [Pt(0, 0), Pt(1.5, -2), Pt(1000, 4)]


def test_read_points_ignores_line_layout():
    text = "2 0\n0\n  1\n1 trailing tokens are ignored"
    assert read_points(io.StringIO(text)) == [Pt(0, 0), Pt(1, 1)]


def test_read_zero_points():
    assert read_points(io.StringIO("0\n")) == []


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "missing point count"),
        ("abc", "not an integer"),
        ("2.5\n", "not an integer"),
        ("-1\n", "non-negative"),
        ("2\n0 0\n1\n", "point 2: missing y"),
        ("1\nx 0\n", "point 1: cannot parse x"),
        ("1\n0 nan\n", "must be finite"),
    ],
)
def test_malformed_input(text, message):
    with pytest.raises(MalformedInput, match=message):
        read_points(io.StringIO(text))


def test_prompts_are_written_before_each_value():
    prompt = io.StringIO()
    read_points(io.StringIO("2\n0 0\n1 1\n"), prompt=prompt)
    assert prompt.getvalue() == (
        "Enter the number of points: "
        "Enter coordinates for point 1 (x y): "
        "Enter coordinates for point 2 (x y): "
    )


def test_format_hull():
    out = format_hull([Pt(0, 0), Pt(1.5, -2), Pt(1234567.0, 0.1)])
    assert out.splitlines() == [
        HULL_HEADER,
        "(0, 0)",
        "(1.5, -2)",
        "(1.23457e+06, 0.1)",
    ]


def test_format_empty_hull_is_header_only():
    assert format_hull([]) == HULL_HEADER + "\n"
