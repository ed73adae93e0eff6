from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Tuple, Union

from .geom import Pt, EPS, extent, lex_key, norm, sub, to_points
from .predicates import orient2d, farthest_point

logger = logging.getLogger(__name__)

PointLike = Union[Pt, Tuple[float, float]]

# Задачі робочого стеку:
#   ("side", left, right, a, b): вершини праворуч від P[a]->P[b] серед P[left..right]
#   ("emit", i)                : додати P[i] до оболонки
SideTask = Tuple[str, int, int, int, int]
EmitTask = Tuple[str, int]
Task = Union[SideTask, EmitTask]


class ConvexHull2D:
    """
    QuickHull на площині, in-place над буфером точок.

    Вхід: точки Pt або пари (x, y), будь-яка кількість.
    Вихід: self.hull, вершини оболонки проти годинникової стрілки, починаючи з
    найлівішої (з найлівіших найнижчої). Точки на ребрах і дублікати не входять.
    Менше двох різних точок -> порожня оболонка.

    eps відносний: точка "зовні" ребра, якщо її відстань до прямої більша за
    eps * extent(points), тож результат не залежить від масштабу координат.
    """

    def __init__(self, points: Iterable[PointLike], eps: float = EPS):
        self.P: List[Pt] = to_points(points)  # буфер, переставляється на місці
        self.eps = eps
        self.tol = eps * extent(self.P)  # абсолютний допуск відстані
        self.hull: List[Pt] = []
        self._build()
        logger.debug("quickhull: %s points -> %s vertices", len(self.P), len(self.hull))

    # ---------------- Публічний API ----------------
    def vertices(self) -> List[Pt]:
        return self.hull[:]

    def area(self) -> float:
        """Площа многокутника оболонки (формула шнурків)."""
        H = self.hull
        if len(H) < 3:
            return 0.0
        s = 0.0
        for i in range(len(H)):
            p, q = H[i], H[(i + 1) % len(H)]
            s += p.x*q.y - q.x*p.y
        return abs(s) * 0.5

    # ---------------- Внутрішні методи ----------------
    def _swap(self, i: int, j: int) -> None:
        P = self.P
        P[i], P[j] = P[j], P[i]

    def _partition(self, left: int, right: int, a: int, b: int) -> int:
        """
        Перенести на початок P[left..right] точки строго праворуч від P[a]->P[b].
        Повертає індекс першої точки після них.
        """
        pa, pb = self.P[a], self.P[b]
        limit = -self.tol * norm(sub(pb, pa))  # orient2d = відстань * |b-a|
        store = left
        for i in range(left, right + 1):
            if orient2d(pa, pb, self.P[i]) < limit:
                self._swap(i, store)
                store += 1
        return store

    def _build(self) -> None:
        n = len(self.P)
        if n < 2:
            return

        # 1) крайні точки: u з мінімальним (x, y), v з максимальним; при рівності перша за індексом
        iu = min(range(n), key=lambda i: lex_key(self.P[i]))
        iv = max(range(n), key=lambda i: lex_key(self.P[i]))
        if self.P[iu] == self.P[iv]:
            return  # усі точки збігаються, пряму не побудувати

        # 2) u -> перша позиція, v -> остання
        self._swap(0, iu)
        if iv == 0:
            iv = iu
        self._swap(n - 1, iv)

        # 3) розбити решту: спершу нижче u->v, потім вище; колінеарні відкидаються
        lower_end = self._partition(1, n - 2, 0, n - 1)
        upper_end = self._partition(lower_end, n - 2, n - 1, 0)

        # 4) u, нижній ланцюг, v, верхній ланцюг (стек у зворотному порядку)
        self.hull.append(self.P[0])
        stack: List[Task] = [
            ("side", lower_end, upper_end - 1, n - 1, 0),
            ("emit", n - 1),
            ("side", 1, lower_end - 1, 0, n - 1),
        ]
        while stack:
            task = stack.pop()
            if task[0] == "emit":
                self.hull.append(self.P[task[1]])
                continue
            _, left, right, a, b = task
            if left > right:
                continue
            # найвіддаленіша точка w є вершиною оболонки; паркуємо її в останній комірці
            far = farthest_point(self.P, a, b, left, right)
            self._swap(far, right)
            w = right
            split = self._partition(left, right - 1, a, w)
            end = self._partition(split, right - 1, w, b)
            # P[end..right-1] лежать у трикутнику (a, w, b), більше не розглядаються
            stack.append(("side", split, end - 1, w, b))
            stack.append(("emit", w))
            stack.append(("side", left, split - 1, a, w))

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка результату:
          - кожна вершина є точкою входу;
          - жодна точка входу не лежить строго зовні ребра оболонки;
          - усі повороти строго ліві (опуклість, без колінеарних вершин);
          - вершини не повторюються.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        H = self.hull
        inputs = set(self.P)
        foreign = [p for p in H if p not in inputs]

        outside: List[Pt] = []
        if len(H) == 2:
            a, b = H
            limit = self.tol * norm(sub(b, a))
            outside = [p for p in self.P if abs(orient2d(a, b, p)) > limit]
        elif len(H) >= 3:
            for p in self.P:
                for i in range(len(H)):
                    a, b = H[i], H[(i + 1) % len(H)]
                    if orient2d(a, b, p) < -self.tol * norm(sub(b, a)):
                        outside.append(p)
                        break

        bad_turns: List[int] = []
        if len(H) >= 3:
            for i in range(len(H)):
                a, b = H[i - 1], H[(i + 1) % len(H)]
                if orient2d(a, H[i], b) <= self.tol * norm(sub(b, a)):
                    bad_turns.append(i)

        counts: Dict[Pt, int] = {}
        for p in H:
            counts[p] = counts.get(p, 0) + 1
        duplicates = [p for p, k in counts.items() if k > 1]

        return {
            "vertices": len(H),
            "foreign_vertices": foreign,
            "outside_points": outside,
            "bad_turns": bad_turns,
            "duplicate_vertices": duplicates,
        }


def quickhull(points: Iterable[PointLike], eps: float = EPS) -> List[Pt]:
    """Опукла оболонка як список вершин (див. ConvexHull2D)."""
    return ConvexHull2D(points, eps).vertices()
