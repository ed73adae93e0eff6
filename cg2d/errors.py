"""Винятки cg2d."""


class CG2DError(Exception):
    """Базовий виняток бібліотеки."""


class MalformedInput(CG2DError, ValueError):
    """Кількість точок або координату не вдалось прочитати."""


class DegenerateSegment(CG2DError, ValueError):
    """Відстань до прямої, заданої двома однаковими точками."""


class EmptyRange(CG2DError, IndexError):
    """Пошук по порожньому діапазону індексів (помилка виклику, не вводу)."""
