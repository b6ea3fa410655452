# renderer/output.py
import os
from typing import TextIO
import numpy as np
from PIL import Image

def write_ppm(stream: TextIO, width: int, height: int, pixels: np.ndarray):
    """
    Write pixels as an ASCII PPM (P3) image, one "r g b" line per pixel.
    """
    if len(pixels) != width * height:
        raise ValueError(f"expected {width * height} pixels, got {len(pixels)}")
    stream.write(f"P3\n{width} {height}\n255\n")
    for r, g, b in pixels:
        stream.write(f"{r} {g} {b}\n")

def save_ppm(path: str, width: int, height: int, pixels: np.ndarray):
    with open(path, "w") as f:
        write_ppm(f, width, height, pixels)

def save_image(path: str, width: int, height: int, pixels: np.ndarray):
    """
    Save the pixel buffer. .ppm files are written as ASCII P3; any other
    extension is encoded by Pillow.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        save_ppm(path, width, height, pixels)
        return
    image = Image.fromarray(np.asarray(pixels, dtype=np.uint8).reshape(height, width, 3))
    image.save(path)
