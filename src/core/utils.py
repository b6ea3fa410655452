# core/utils.py
# Random helpers take an rng: anything with a random() method in [0, 1).
import math
from core.vector import Vector3

def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0

def random_double(rng, lo: float = 0.0, hi: float = 1.0) -> float:
    """
    Returns a uniform float in [lo, hi).
    """
    return lo + (hi - lo) * rng.random()

def random_vector(rng, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    """
    Returns a vector with each component uniform in [lo, hi).
    """
    return Vector3(random_double(rng, lo, hi),
                   random_double(rng, lo, hi),
                   random_double(rng, lo, hi))

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).

    Candidates are drawn from the [-1, 1) cube and kept when they fall inside
    the unit ball. The tiny lower bound rejects points whose squared length
    underflows to zero.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        len_sq = p.length_squared()
        if 1e-160 < len_sq <= 1.0:
            return p / math.sqrt(len_sq)

def random_in_unit_disk(rng) -> Vector3:
    """
    Returns a random point inside the unit disk in the z=0 plane.
    """
    while True:
        p = Vector3(random_double(rng, -1.0, 1.0),
                    random_double(rng, -1.0, 1.0),
                    0.0)
        if p.length_squared() < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    # abs() keeps rounding error from producing the root of a negative number.
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def reflectance(cosine: float, refraction_ratio: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - refraction_ratio) / (1.0 + refraction_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
