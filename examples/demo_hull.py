from cg2d.geom import unique_points
from cg2d.hull import ConvexHull2D
from cg2d.textio import format_hull

if __name__ == "__main__":
    raw = [
        (0,0), (1,0), (1,1), (0,1),
        (0.5,0.5), (0.2,0.8), (0.8,0.2), (0.5,0), (1,1)
    ]
    pts = unique_points(raw)
    hull = ConvexHull2D(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("AREA:", hull.area())

    print(format_hull(hull.vertices()), end="")
