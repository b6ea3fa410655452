# geometry/sphere.py
import math
from typing import Optional, Tuple
from core.interval import Interval
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = max(0.0, radius)
        self.material = material

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[Tuple[HitRecord, "Material"]]:
        # A point sphere has no surface normal
        if self.radius == 0:
            return None

        # With oc pointing from the ray origin to the center the quadratic is
        # a*t^2 - 2*h*t + c = 0, so the roots are (h -/+ sqrt(h*h - a*c)) / a.
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (h - sqrt_disc) / a
        if not ray_t.surrounds(root):
            root = (h + sqrt_disc) / a
            if not ray_t.surrounds(root):
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec, self.material

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
