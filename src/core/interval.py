# core/interval.py
import math

class Interval:
    """
    A real interval [start, end]. Hit tests use the strict surrounds() check,
    so a value sitting exactly on either bound is outside.
    """
    def __init__(self, start: float = math.inf, end: float = -math.inf):
        self.start = start
        self.end = end

    def size(self) -> float:
        return self.end - self.start

    def contains(self, x: float) -> bool:
        return self.start <= x <= self.end

    def surrounds(self, x: float) -> bool:
        return self.start < x < self.end

    def clamp(self, x: float) -> float:
        if x < self.start:
            return self.start
        if x > self.end:
            return self.end
        return x

    def __repr__(self) -> str:
        return f"Interval({self.start}, {self.end})"
