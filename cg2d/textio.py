from __future__ import annotations
import logging
from math import isfinite
from typing import Iterator, List, Optional, Sequence, TextIO

from .geom import Pt
from .errors import MalformedInput

logger = logging.getLogger(__name__)

HULL_HEADER = "Points forming the convex hull:"


def _tokens(stream: TextIO) -> Iterator[str]:
    # рядок за рядком, щоб інтерактивні підказки йшли перед кожним читанням
    for line in stream:
        yield from line.split()


def _prompt(out: Optional[TextIO], text: str) -> None:
    if out is not None:
        out.write(text)
        out.flush()


def _parse_count(tok: Optional[str]) -> int:
    if tok is None:
        raise MalformedInput("missing point count")
    try:
        n = int(tok)
    except ValueError:
        raise MalformedInput(f"point count is not an integer: {tok!r}") from None
    if n < 0:
        raise MalformedInput(f"point count must be non-negative, got {n}")
    return n


def _parse_coord(tok: Optional[str], index: int, axis: str) -> float:
    if tok is None:
        raise MalformedInput(f"point {index + 1}: missing {axis} coordinate")
    try:
        value = float(tok)
    except ValueError:
        raise MalformedInput(f"point {index + 1}: cannot parse {axis} coordinate {tok!r}") from None
    if not isfinite(value):
        raise MalformedInput(f"point {index + 1}: {axis} coordinate must be finite, got {tok!r}")
    return value


def read_points(stream: TextIO, prompt: Optional[TextIO] = None) -> List[Pt]:
    """
    Читає кількість точок n, потім n пар "x y".
    Роздільники: будь-які пробільні символи, переноси рядків не важливі.
    Якщо задано prompt, перед кожним значенням туди пишеться підказка.
    """
    tokens = _tokens(stream)

    _prompt(prompt, "Enter the number of points: ")
    n = _parse_count(next(tokens, None))

    points: List[Pt] = []
    for i in range(n):
        _prompt(prompt, f"Enter coordinates for point {i + 1} (x y): ")
        x = _parse_coord(next(tokens, None), i, "x")
        y = _parse_coord(next(tokens, None), i, "y")
        points.append(Pt(x, y))

    logger.info("Loaded %s points", len(points))
    return points


def format_hull(hull: Sequence[Pt]) -> str:
    lines = [HULL_HEADER]
    for p in hull:
        lines.append(f"({p.x:g}, {p.y:g})")
    return "\n".join(lines) + "\n"


def write_hull(stream: TextIO, hull: Sequence[Pt]) -> None:
    stream.write(format_hull(hull))
