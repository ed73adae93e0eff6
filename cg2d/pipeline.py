from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .geom import Pt, EPS, extent, lex_key, norm, sub, to_points, unique_points
from .hull import ConvexHull2D, PointLike
from .predicates import orient2d

logger = logging.getLogger(__name__)

BACKENDS = ("internal", "scipy")


def convex_hull(
    points: Iterable[PointLike],
    backend: str = "internal",
    dedup: bool = False,
    eps: float = EPS,
) -> Tuple[List[Pt], List[Pt]]:
    """
    Повний пайплайн:
      - за потреби прибирає дублікати точок (dedup=True);
      - будує опуклу оболонку нашим QuickHull (backend="internal")
        або через SciPy/Qhull (backend="scipy") для звірки.

    Повертає:
      pts : список Pt, над яким рахували;
      hull: вершини оболонки проти годинникової стрілки від найлівішої точки.
    """
    pts: List[Pt] = unique_points(points) if dedup else to_points(points)

    name = backend.lower()
    if name == "internal":
        hull = ConvexHull2D(pts, eps).vertices()
    elif name == "scipy":
        hull = _scipy_hull(pts, eps)
    else:
        raise ValueError(f"Невідомий backend: {backend}")

    logger.info("backend=%s: %s points, %s hull vertices", name, len(pts), len(hull))
    return pts, hull


def _scipy_hull(pts: List[Pt], eps: float) -> List[Pt]:
    try:
        import numpy as np
        from scipy.spatial import ConvexHull
    except ImportError as e:
        raise RuntimeError(
            "backend='scipy', але NumPy/SciPy не встановлено. "
            "Встанови scipy або використай backend='internal'."
        ) from e

    # Qhull не будує оболонку для < 3 різних або колінеарних точок, це рахуємо самі
    if len(set(pts)) < 2:
        return []
    u = min(pts, key=lex_key)
    v = max(pts, key=lex_key)
    limit = eps * extent(pts) * norm(sub(v, u))  # той самий відносний допуск, що й у ConvexHull2D
    if all(abs(orient2d(u, v, p)) <= limit for p in pts):
        return [u, v]

    arr = np.array([(p.x, p.y) for p in pts], dtype=float)
    qh = ConvexHull(arr)
    order = [int(i) for i in qh.vertices]  # у 2D проти годинникової стрілки

    # почати з найлівішої вершини, як internal
    start = min(range(len(order)), key=lambda k: lex_key(pts[order[k]]))
    order = order[start:] + order[:start]
    return [pts[i] for i in order]
