# camera/camera.py
import math
import random
import sys
from typing import Iterator, Optional, Tuple
import numpy as np
from core.vector import Vector3, Color
from core.ray import Ray
from core.interval import Interval
from core.utils import degrees_to_radians, random_double, random_in_unit_disk

# Rays start slightly off the surface to avoid self-intersection ("shadow acne")
HIT_T_MIN = 0.0001

class Camera:
    """
    Pinhole/thin-lens camera that generates sampling rays for each pixel and
    estimates the radiance along them.

    Configuration lives in plain attributes. Derived viewport state is
    computed by initialize() and recomputed automatically whenever the
    configuration changes.
    """
    UNCONFIGURED = "unconfigured"
    INITIALIZED = "initialized"
    RENDERING = "rendering"
    DONE = "done"

    def __init__(self, aspect_ratio: float = 1.0, image_width: int = 100,
                 samples_per_pixel: int = 10, max_depth: int = 10,
                 vfov: float = 90.0,
                 lookfrom: Optional[Vector3] = None,
                 lookat: Optional[Vector3] = None,
                 vup: Optional[Vector3] = None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0,
                 verbose: bool = False):
        self.aspect_ratio = aspect_ratio        # Ratio of image width over height
        self.image_width = image_width          # Rendered image width in pixels
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth              # Max number of ray bounces
        self.vfov = vfov                        # Vertical field of view, degrees
        self.lookfrom = lookfrom if lookfrom is not None else Vector3(0, 0, -1)
        self.lookat = lookat if lookat is not None else Vector3(0, 0, 0)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.defocus_angle = defocus_angle      # Cone angle of rays through each pixel, degrees
        self.focus_dist = focus_dist            # Distance to the plane of perfect focus
        self.verbose = verbose

        self.state = Camera.UNCONFIGURED
        self._configured_for = None

    def _config_key(self) -> Tuple:
        return (self.aspect_ratio, self.image_width, self.samples_per_pixel,
                self.max_depth, self.vfov, tuple(self.lookfrom), tuple(self.lookat),
                tuple(self.vup), self.defocus_angle, self.focus_dist)

    def validate(self):
        """Raise ValueError for a configuration that cannot produce an image."""
        if not self.image_width >= 1:
            raise ValueError(f"image_width must be at least 1, got {self.image_width}")
        if not self.aspect_ratio > 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if not self.samples_per_pixel >= 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {self.samples_per_pixel}")
        if not self.max_depth >= 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if not 0 < self.vfov < 180:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {self.vfov}")
        if not self.focus_dist > 0:
            raise ValueError(f"focus_dist must be positive, got {self.focus_dist}")
        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be different points")
        if self.vup.cross(view).near_zero():
            raise ValueError("vup must not be parallel to the viewing direction")

    def initialize(self):
        """Derives the viewport geometry from the current configuration."""
        self.validate()

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.center = self.lookfrom

        # Determine viewport dimensions
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis of the camera frame
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center - self.w * self.focus_dist
                               - viewport_u / 2 - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

        self._configured_for = self._config_key()
        self.state = Camera.INITIALIZED

    def _ensure_initialized(self):
        if self._configured_for != self._config_key():
            self.initialize()

    def get_ray(self, i: int, j: int, rng: random.Random) -> Ray:
        """
        Randomly sampled ray through pixel (i, j), originating from the
        defocus disk (or the camera center when defocus is disabled).
        """
        self._ensure_initialized()
        return self._sample_ray(i, j, rng)

    def _sample_ray(self, i: int, j: int, rng: random.Random) -> Ray:
        # Assumes derived state is current
        pixel_center = self.pixel00_loc + self.pixel_delta_u * i + self.pixel_delta_v * j
        pixel_sample = pixel_center + self.pixel_sample_square(rng)

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    def pixel_sample_square(self, rng: random.Random) -> Vector3:
        """Random offset within the square surrounding a pixel at the origin."""
        px = random_double(rng, -0.5, 0.5)
        py = random_double(rng, -0.5, 0.5)
        return self.pixel_delta_u * px + self.pixel_delta_v * py

    def defocus_disk_sample(self, rng: random.Random) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def ray_color(self, ray: Ray, depth: int, world, rng: random.Random) -> Color:
        """
        Estimates the light arriving along ray by following it through the scene.
        """
        # Out of bounces, no more light is gathered
        if depth <= 0:
            return Color(0.0, 0.0, 0.0)

        rec = world.hit(ray, Interval(HIT_T_MIN, math.inf))
        if rec is None:
            return background(ray)

        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return Color(0.0, 0.0, 0.0)
        return result.attenuation * self.ray_color(result.scattered, depth - 1, world, rng)

    def pixel_color(self, i: int, j: int, world, rng: random.Random) -> Color:
        """Sum (not average) of samples_per_pixel radiance estimates for one pixel."""
        self._ensure_initialized()
        return self._pixel_sum(i, j, world, rng)

    def _pixel_sum(self, i: int, j: int, world, rng: random.Random) -> Color:
        color = Color(0.0, 0.0, 0.0)
        for _ in range(self.samples_per_pixel):
            color = color + self.ray_color(self._sample_ray(i, j, rng), self.max_depth, world, rng)
        return color

    def render_rows(self, world, rng: random.Random) -> Iterator[Tuple[int, np.ndarray]]:
        """
        Yields (j, row) for each scanline, top to bottom. Each row holds the
        accumulated linear colors of its pixels, left to right.
        """
        self.initialize()
        return self._rows(world, rng)

    def _rows(self, world, rng: random.Random) -> Iterator[Tuple[int, np.ndarray]]:
        self.state = Camera.RENDERING
        finished = False
        try:
            for j in range(self.image_height):
                if self.verbose:
                    print(f"\rScanlines remaining: {self.image_height - j} ", end="",
                          file=sys.stderr, flush=True)
                row = np.zeros((self.image_width, 3), dtype=np.float64)
                for i in range(self.image_width):
                    c = self._pixel_sum(i, j, world, rng)
                    row[i] = (c.x, c.y, c.z)
                yield j, row
            finished = True
        finally:
            # An abandoned render leaves the camera ready for another one
            self.state = Camera.DONE if finished else Camera.INITIALIZED
        if self.verbose:
            print("\rDone.                 ", file=sys.stderr)

    def render(self, world, rng: random.Random) -> np.ndarray:
        """
        Renders the whole image. Returns an (image_height, image_width, 3)
        buffer of per-pixel color sums, not yet divided by the sample count.
        """
        rows = self.render_rows(world, rng)
        accumulation_buffer = np.zeros((self.image_height, self.image_width, 3), dtype=np.float64)
        for j, row in rows:
            accumulation_buffer[j] = row
        return accumulation_buffer

def background(ray: Ray) -> Color:
    """Sky gradient: white at the horizon blending to blue overhead."""
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return Color(1.0, 1.0, 1.0) * (1.0 - a) + Color(0.5, 0.7, 1.0) * a
