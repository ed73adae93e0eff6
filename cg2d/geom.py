from __future__ import annotations
from dataclasses import dataclass
from math import sqrt
from typing import Iterable, List, Tuple

EPS = 1e-10  # відносний допуск: частка розміру набору точок

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    """z-компонента векторного добутку (a.x, a.y, 0) x (b.x, b.y, 0)."""
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return sqrt(dot(a, a))

def lex_key(p: Pt) -> Tuple[float, float]:
    return (p.x, p.y)

def to_points(points: Iterable[Tuple[float, float]]) -> List[Pt]:
    """Пари чисел (або вже готові Pt) -> список Pt."""
    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            out.append(p)
        else:
            x, y = p
            out.append(Pt(float(x), float(y)))
    return out

def unique_points(points: Iterable[Tuple[float, float]], scale: float = 1e9) -> List[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for p in to_points(points):
        key = (int(round(p.x*scale)), int(round(p.y*scale)))
        if key not in seen:
            seen[key] = p
    return list(seen.values())

def extent(points: Iterable[Pt]) -> float:
    """Більша сторона охопного прямокутника; 0.0 для порожнього набору."""
    xs: List[float] = []
    ys: List[float] = []
    for p in points:
        xs.append(p.x); ys.append(p.y)
    if not xs:
        return 0.0
    return max(max(xs) - min(xs), max(ys) - min(ys))
