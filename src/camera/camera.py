# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    Positionable thin-lens camera. Everything is derived once in the
    constructor; a camera is never modified while rendering, so one instance
    is shared by all workers.

    vfov and defocus_angle are in degrees. Image row 0 is the top of the frame.
    """
    def __init__(self, aspect_ratio: float = 16.0 / 9.0, image_width: int = 400,
                 samples_per_pixel: int = 10, max_depth: int = 10,
                 vfov: float = 90.0,
                 lookfrom: Vector3 = None, lookat: Vector3 = None, vup: Vector3 = None,
                 defocus_angle: float = 0.0, focus_dist: float = 10.0):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if image_width < 1:
            raise ValueError(f"image_width must be at least 1, got {image_width}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be at least 1, got {samples_per_pixel}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")

        self.aspect_ratio = aspect_ratio
        self.image_width = image_width
        self.image_height = max(1, int(image_width / aspect_ratio))
        self.samples_per_pixel = samples_per_pixel
        self.pixel_sample_scale = 1.0 / samples_per_pixel
        self.max_depth = max_depth
        self.vfov = vfov
        self.lookfrom = lookfrom if lookfrom is not None else Vector3(0, 0, 0)
        self.lookat = lookat if lookat is not None else Vector3(0, 0, -1)
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        view = self.lookfrom - self.lookat
        if view.near_zero():
            raise ValueError(f"lookfrom and lookat must differ, both are {self.lookfrom!r}")
        if self.vup.cross(view).near_zero():
            raise ValueError(f"vup {self.vup!r} must not be parallel to the view direction")
        self.defocus_angle = defocus_angle
        self.focus_dist = focus_dist
        self.update_camera()

    def update_camera(self):
        """Computes the basis vectors, the pixel grid and the defocus disk."""
        self.center = self.lookfrom

        h = math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_height = 2.0 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal basis: w points backwards, u right, v up
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Viewport edges; v is flipped so rows grow downwards
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               self.w * self.focus_dist -
                               viewport_u / 2 -
                               viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: float, j: float, rng) -> Ray:
        """
        Generates a sample ray through pixel column i, row j. The sample point
        is jittered inside the pixel square; with a positive defocus angle the
        origin is drawn from the defocus disk.
        """
        offset_x = rng.random() - 0.5
        offset_y = rng.random() - 0.5
        pixel_sample = (self.pixel00_loc +
                        self.pixel_delta_u * (i + offset_x) +
                        self.pixel_delta_v * (j + offset_y))

        if self.defocus_angle <= 0:
            ray_origin = self.center
        else:
            ray_origin = self.defocus_disk_sample(rng)

        return Ray(ray_origin, pixel_sample - ray_origin)

    def defocus_disk_sample(self, rng) -> Vector3:
        """Returns a random point on the camera's defocus disk."""
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y
