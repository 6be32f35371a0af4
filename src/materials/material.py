# materials/material.py
import random
from typing import NamedTuple, Optional
from core.ray import Ray
from core.vector import Color
from geometry.hittable import HitRecord

class ScatterResult(NamedTuple):
    """Outcome of a scatter event: how much light survives and where it goes."""
    attenuation: Color
    scattered: Ray

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    Materials are immutable and may be shared by many primitives.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterResult, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
