# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.interval import Interval
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if not (radius > 0 and math.isfinite(radius)):
            raise ValueError(f"Sphere radius must be a positive finite number, got {radius}")
        self._center = center
        self._radius = float(radius)
        self._material = material

    @property
    def center(self) -> Vector3:
        return self._center

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def material(self):
        return self._material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        oc = self._center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self._radius * self._radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrt_d = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrt_d) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_d) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self._center) / self._radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self._material
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self._center!r}, {self._radius}, {self._material!r})"
