# src/materials/dielectric.py
import math
import random
from core.ray import Ray
from core.vector import Color
from core.utils import reflect, refract
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

class Dielectric(Material):
    """
    Clear dielectric (glass, water, ...). Each sample randomly reflects or
    refracts according to the Schlick reflectance, so averaging many samples
    gives the Fresnel blend.
    """
    def __init__(self, refractive_index: float):
        if not refractive_index > 0:
            raise ValueError(f"Refractive index must be positive, got {refractive_index}")
        self.refractive_index = refractive_index

    def refraction_ratio(self, rec: HitRecord) -> float:
        # Entering the material from outside vs. leaving it
        return 1.0 / self.refractive_index if rec.front_face else self.refractive_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> ScatterResult:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        ratio = self.refraction_ratio(rec)

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        # Total internal reflection
        cannot_refract = ratio * sin_theta > 1.0

        if cannot_refract or reflectance(cos_theta, ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return ScatterResult(attenuation, Ray(rec.p, direction))

    def __repr__(self) -> str:
        return f"Dielectric({self.refractive_index})"

def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation for reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
