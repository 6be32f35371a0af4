# materials/metal.py
import random
from typing import Optional
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Metal(Material):
    """
    Metal material with reflective properties. Fuzz values above 1 are
    clamped to 1.
    """
    def __init__(self, albedo: Color, fuzz: float):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterResult(self.albedo, scattered)

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
