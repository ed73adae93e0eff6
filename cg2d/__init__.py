"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: опукла оболонка QuickHull (in-place) + звірка з SciPy/Qhull.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, unique_points
from cg2d.errors import CG2DError, MalformedInput, DegenerateSegment, EmptyRange
from cg2d.predicates import orient2d, distance_to_line, farthest_point
from cg2d.hull import ConvexHull2D, quickhull
from cg2d.pipeline import convex_hull

__all__ = [
    "Pt", "EPS", "unique_points",
    "CG2DError", "MalformedInput", "DegenerateSegment", "EmptyRange",
    "orient2d", "distance_to_line", "farthest_point",
    "ConvexHull2D", "quickhull", "convex_hull", "__version__",
]
