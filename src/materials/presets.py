# materials/presets.py
import random
from core.vector import Color
from core.utils import random_double
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def random(rng: random.Random) -> Metal:
        """Metal with albedo in [0.5, 1) and fuzz in [0, 0.5)."""
        return Metal(Color.random(rng, 0.5, 1), random_double(rng, 0, 0.5))

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

class ColorPresets:
    """Common color presets for materials."""

    WHITE = Color(1.0, 1.0, 1.0)
    SKY_BLUE = Color(0.5, 0.7, 1.0)
    GRAY = Color(0.5, 0.5, 0.5)
    BROWN = Color(0.4, 0.2, 0.1)
    BLACK = Color(0.0, 0.0, 0.0)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

    @staticmethod
    def random_matte(rng: random.Random) -> Lambertian:
        """Matte material whose albedo is the product of two random colors."""
        return Lambertian(Color.random(rng) * Color.random(rng))
