# renderer/raytracer.py
import random
import sys
import time
from typing import Optional, TextIO
import numpy as np
from camera.camera import Camera
from renderer.image_writer import save_image, write_ppm

DEFAULT_SEED = 42

class Renderer:
    """
    Runs one full, seeded render of a scene through a camera and keeps the
    resulting accumulation buffer for output.

    All random draws of a render come from a single random.Random created
    from the seed, so the same seed, camera and world always produce the
    same pixel sums.
    """
    def __init__(self, camera: Camera, seed: Optional[int] = DEFAULT_SEED):
        self.camera = camera
        self.seed = seed
        self.accumulation_buffer: Optional[np.ndarray] = None
        self.render_time = 0.0

    def render(self, world) -> np.ndarray:
        rng = random.Random(self.seed)
        start = time.perf_counter()
        self.accumulation_buffer = self.camera.render(world, rng)
        self.render_time = time.perf_counter() - start
        if self.camera.verbose:
            height, width, _ = self.accumulation_buffer.shape
            print(f"Rendered {width}x{height} at {self.camera.samples_per_pixel} spp "
                  f"in {self.render_time:.2f}s", file=sys.stderr)
        return self.accumulation_buffer

    def _require_buffer(self) -> np.ndarray:
        if self.accumulation_buffer is None:
            raise RuntimeError("Nothing rendered yet; call render() first")
        return self.accumulation_buffer

    def write(self, out: TextIO):
        """Write the last render as a P3 PPM stream."""
        write_ppm(out, self._require_buffer(), self.camera.samples_per_pixel)

    def save(self, path: str):
        save_image(path, self._require_buffer(), self.camera.samples_per_pixel)
