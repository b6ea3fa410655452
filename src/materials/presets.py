# materials/presets.py
from core.vector import Vector3
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def bronze_mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=1.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def air_bubble() -> Dielectric:
        """Air inside glass, used for hollow spheres."""
        return Dielectric(1.0 / 1.5)

class ColorPresets:
    """Common color presets for materials."""

    BROWN = Vector3(0.4, 0.2, 0.1)
    BLUE = Vector3(0.1, 0.2, 0.5)
    OLIVE = Vector3(0.8, 0.8, 0.0)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
