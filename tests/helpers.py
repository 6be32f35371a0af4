"""Shared test helpers."""

import itertools

from core.vector import Vector3


class SequenceRng:
    """Stand-in for random.Random that replays a fixed cycle of values."""

    def __init__(self, values):
        self._values = itertools.cycle(values)

    def random(self):
        return next(self._values)

    def uniform(self, a, b):
        return a + (b - a) * self.random()


def assert_vec_close(a: Vector3, b: Vector3, tol: float = 1e-9):
    assert abs(a.x - b.x) < tol and abs(a.y - b.y) < tol and abs(a.z - b.z) < tol, f"{a} != {b}"
