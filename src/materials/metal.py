# materials/metal.py
from typing import Optional, Tuple
from core.ray import Ray
from core.vector import Vector3
from core.utils import reflect, random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material

class Metal(Material):
    """
    Metal material with reflective properties. fuzz perturbs the mirror
    direction and is clamped to [0, 1].
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = max(0.0, min(fuzz, 1.0))

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[Tuple[Vector3, Ray]]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected.normalize() + random_unit_vector(rng) * self.fuzz
        scattered = Ray(rec.p, direction)

        if scattered.direction.dot(rec.normal) > 0:
            return self.albedo, scattered

        return None  # Fuzzed below the surface: absorbed

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
