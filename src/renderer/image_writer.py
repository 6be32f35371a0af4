# renderer/image_writer.py
import os
from typing import TextIO
import numpy as np
from PIL import Image
from core.vector import Color
from renderer.tone_mapping import color_to_bytes, to_8bit

def write_color(out: TextIO, pixel_sum: Color, samples_per_pixel: int):
    """Write one accumulated pixel as an 'R G B' line."""
    r, g, b = color_to_bytes(pixel_sum, samples_per_pixel)
    out.write(f"{r} {g} {b}\n")

def write_ppm_header(out: TextIO, width: int, height: int):
    out.write(f"P3\n{width} {height}\n255\n")

def write_ppm(out: TextIO, accumulated: np.ndarray, samples_per_pixel: int):
    """
    Serialize an accumulation buffer as a plain-text (P3) PPM image, rows top
    to bottom, one triplet per pixel.
    """
    height, width, _ = accumulated.shape
    write_ppm_header(out, width, height)
    pixels = to_8bit(accumulated, samples_per_pixel)
    for row in pixels:
        out.writelines(f"{r} {g} {b}\n" for r, g, b in row)

def save_image(path: str, accumulated: np.ndarray, samples_per_pixel: int):
    """
    Save an accumulation buffer to disk. '.ppm' files are written as plain
    text; any other extension goes through Pillow.

    Raises:
        ValueError: If Pillow does not know the file extension
    """
    ext = os.path.splitext(path)[1].lower()
    if ext == ".ppm":
        with open(path, "w", encoding="ascii") as f:
            write_ppm(f, accumulated, samples_per_pixel)
        return
    image = Image.fromarray(to_8bit(accumulated, samples_per_pixel))
    image.save(path)
