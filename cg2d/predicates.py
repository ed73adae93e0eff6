# cg2d/predicates.py
from __future__ import annotations
from typing import Sequence
from .geom import Pt, sub, cross, norm
from .errors import DegenerateSegment, EmptyRange

def orient2d(a: Pt, b: Pt, p: Pt) -> float:
    """>0 якщо p ліворуч від a->b, <0 якщо праворуч, 0 на прямій."""
    return cross(sub(b, a), sub(p, a))

def distance_to_line(a: Pt, b: Pt, p: Pt) -> float:
    """
    Відстань від p до нескінченної прямої через a і b:
      |cross(b-a, a-p)| / |b-a|
    Для a == b пряма не визначена -> DegenerateSegment.
    """
    ab = sub(b, a)
    length = norm(ab)
    if length == 0.0:
        raise DegenerateSegment(f"zero-length segment at ({a.x}, {a.y})")
    return abs(cross(ab, sub(a, p))) / length

def farthest_point(points: Sequence[Pt], a: int, b: int, left: int, right: int) -> int:
    """
    Індекс точки з points[left..right] (включно), найвіддаленішої від прямої
    points[a]-points[b]. При рівних відстанях береться перша за індексом.
    """
    if left > right:
        raise EmptyRange(f"empty search range [{left}, {right}]")
    pa, pb = points[a], points[b]
    best_i = left
    best_d = distance_to_line(pa, pb, points[left])
    for i in range(left + 1, right + 1):
        d = distance_to_line(pa, pb, points[i])
        if d > best_d:
            best_d = d
            best_i = i
    return best_i
