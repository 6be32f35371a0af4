# core/interval.py
import math

class Interval:
    """
    A closed range [min, max] of real numbers. Used to bound the valid ray
    parameter during intersection search and to clamp color channels.
    The default interval is empty. Intervals are read-only.
    """
    __slots__ = ("_min", "_max")

    def __init__(self, min: float = math.inf, max: float = -math.inf):
        self._min = min
        self._max = max

    @property
    def min(self) -> float:
        return self._min

    @property
    def max(self) -> float:
        return self._max

    def size(self) -> float:
        return self.max - self.min

    def contains(self, x: float) -> bool:
        """Inclusive membership test."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """Exclusive membership test."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"

EMPTY = Interval(math.inf, -math.inf)
UNIVERSE = Interval(-math.inf, math.inf)
