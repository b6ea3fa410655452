# renderer/raytracer.py
import math
import random
import numpy as np
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Hittable
from camera.camera import Camera
from renderer.scheduler import (DEFAULT_CHUNK_SIZE, Pixel, default_workers,
                                enumerate_pixels, partition, render_chunks)
from renderer.tone_mapping import to_rgb8

# Lower bound of the hit interval; ignores self-intersection ("shadow acne")
# of a scattered ray with the surface it just left.
T_MIN = 0.001

WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)

def ray_color(ray: Ray, depth: int, world: Hittable, rng) -> Vector3:
    """
    Returns the color seen along the ray. If the ray hits an object, the material
    scatter is computed recursively for at most 'depth' more bounces.
    """
    if depth <= 0:
        return Vector3(0, 0, 0)  # No more light is gathered.

    found = world.hit(ray, Interval(T_MIN, math.inf))
    if found is not None:
        rec, material = found
        scatter_result = material.scatter(ray, rec, rng)
        if scatter_result is not None:
            attenuation, scattered = scatter_result
            return attenuation * ray_color(scattered, depth - 1, world, rng)
        return Vector3(0, 0, 0)

    # Background gradient, white at the bottom to blue at the top.
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - a) + SKY_BLUE * a

class Renderer:
    """
    Renders a scene through a camera into an 8-bit pixel buffer using a pool
    of worker threads.

    With seed=None every pixel draws from the shared ``random`` module, so
    images differ between runs. With a seed each pixel gets its own
    generator derived from (seed, index) and the result no longer depends on
    the number of workers or the order chunks finish in. An explicit
    ``entropy`` provider overrides both and is shared by all workers, so it
    has to be thread-safe.
    """
    def __init__(self, camera: Camera, world: Hittable,
                 chunk_size: int = DEFAULT_CHUNK_SIZE, workers: int = None,
                 seed: int = None, entropy=None, verbose: bool = False):
        self.camera = camera
        self.world = world
        self.chunk_size = chunk_size
        self.workers = workers if workers is not None else default_workers()
        self.seed = seed
        self.entropy = entropy
        self.verbose = verbose

    @property
    def width(self) -> int:
        return self.camera.image_width

    @property
    def height(self) -> int:
        return self.camera.image_height

    def rng_for(self, index: int):
        """Entropy provider for the pixel at buffer position index."""
        if self.entropy is not None:
            return self.entropy
        if self.seed is None:
            return random
        return random.Random(self.seed * 1_000_003 + index)

    def pixel_color(self, row: int, column: int, rng) -> tuple:
        """Average samples_per_pixel path samples and map them to 8-bit RGB."""
        cam = self.camera
        color = Vector3(0, 0, 0)
        for _ in range(cam.samples_per_pixel):
            ray = cam.get_ray(column, row, rng)
            color = color + ray_color(ray, cam.max_depth, self.world, rng)
        return to_rgb8(color * cam.pixel_sample_scale)

    def shade(self, pixel: Pixel) -> tuple:
        return self.pixel_color(pixel.row, pixel.column, self.rng_for(pixel.index))

    def render(self) -> np.ndarray:
        """
        Render the full image. Returns a (width * height, 3) uint8 array in
        row-major order, top row first.
        """
        chunks = partition(enumerate_pixels(self.width, self.height), self.chunk_size)
        if self.verbose:
            print("\n=== Rendering ===")
            print(f"Resolution: {self.width}x{self.height}")
            print(f"Samples per pixel: {self.camera.samples_per_pixel}")
            print(f"Max depth: {self.camera.max_depth}")
            print(f"Workers: {self.workers}, chunks: {len(chunks)}")
        pixels = render_chunks(chunks, self.shade, self.width * self.height,
                               workers=self.workers, verbose=self.verbose)
        if self.verbose:
            print("Done")
        return pixels
