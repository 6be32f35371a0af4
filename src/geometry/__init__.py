# geometry/__init__.py
from geometry.hittable import HitRecord, Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "Sphere", "HittableList"]
