"""Tests for Ray, Interval, Sphere intersection and the HittableList scene."""

import math

import pytest

from conftest import assert_vec_close
from core.interval import Interval
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord, Hittable
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.metal import Metal

EVERYWHERE = Interval(0.001, math.inf)


class TestRayAndInterval:

    def test_ray_at(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 2, 3)
        assert ray.at(1.5) == Vector3(1, 2, 0)

    def test_surrounds_is_strict(self):
        interval = Interval(0.0, 1.0)
        assert interval.surrounds(0.5)
        assert not interval.surrounds(0.0)
        assert not interval.surrounds(1.0)
        assert interval.contains(1.0)

    def test_clamp(self):
        interval = Interval(0.0, 0.999)
        assert interval.clamp(-3) == 0.0
        assert interval.clamp(0.5) == 0.5
        assert interval.clamp(7) == 0.999

    def test_default_interval_is_empty(self):
        interval = Interval()
        assert interval.size() < 0
        assert not interval.contains(0.0)


class TestHitRecord:

    def test_front_face_keeps_outward_normal(self):
        rec = HitRecord()
        rec.set_face_normal(Ray(Vector3(0, 0, 5), Vector3(0, 0, -1)), Vector3(0, 0, 1))
        assert rec.front_face
        assert rec.normal == Vector3(0, 0, 1)

    def test_back_face_flips_normal(self):
        rec = HitRecord()
        rec.set_face_normal(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), Vector3(0, 0, -1))
        assert not rec.front_face
        assert rec.normal == Vector3(0, 0, 1)

    def test_base_hittable_is_abstract(self):
        with pytest.raises(NotImplementedError):
            Hittable().hit(Ray(Vector3(), Vector3(0, 0, -1)), EVERYWHERE)


class TestSphere:

    @pytest.mark.parametrize("distance,radius", [(5.0, 1.0), (10.0, 2.5), (3.0, 0.5)])
    def test_hit_from_outside(self, gray, distance, radius):
        sphere = Sphere(Vector3(0, 0, 0), radius, gray)
        ray = Ray(Vector3(0, 0, distance), Vector3(0, 0, -1))

        found = sphere.hit(ray, EVERYWHERE)

        assert found is not None
        rec, material = found
        assert rec.t == pytest.approx(distance - radius)
        assert_vec_close(rec.p, (0, 0, radius))
        assert_vec_close(rec.normal, (0, 0, 1))
        assert rec.normal.length() == pytest.approx(1.0)
        assert rec.front_face
        assert material is gray

    def test_normal_is_parallel_to_hit_point_offset(self, gray):
        center = Vector3(1, -2, -7)
        sphere = Sphere(center, 2.0, gray)
        ray = Ray(Vector3(0, 0, 0), Vector3(0.2, -0.3, -1))

        rec, _ = sphere.hit(ray, EVERYWHERE)

        offset = (rec.p - center).normalize()
        assert_vec_close(rec.normal, offset)
        assert (rec.p - center).length() == pytest.approx(2.0)

    def test_unnormalized_direction(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        rec, _ = sphere.hit(Ray(Vector3(0, 0, 5), Vector3(0, 0, -2)), EVERYWHERE)
        assert rec.t == pytest.approx(2.0)
        assert rec.normal.length() == pytest.approx(1.0)

    def test_miss(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        ray = Ray(Vector3(0, 1.5, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, EVERYWHERE) is None

    def test_sphere_behind_ray_is_missed(self, gray):
        sphere = Sphere(Vector3(0, 0, 5), 1.0, gray)
        assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), EVERYWHERE) is None

    def test_hit_from_inside_uses_far_root(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        rec, _ = sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), EVERYWHERE)
        assert rec.t == pytest.approx(1.0)
        assert not rec.front_face
        assert_vec_close(rec.normal, (0, 0, 1))

    def test_root_on_interval_bound_is_not_a_hit(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        # Near root is exactly 4, far root 6: both outside (0.001, 4).
        assert sphere.hit(ray, Interval(0.001, 4.0)) is None

    def test_near_root_outside_range_falls_back_to_far_root(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), 1.0, gray)
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        rec, _ = sphere.hit(ray, Interval(4.5, 10.0))
        assert rec.t == pytest.approx(6.0)
        assert not rec.front_face

    def test_negative_radius_is_clamped(self, gray):
        sphere = Sphere(Vector3(0, 0, 0), -2.0, gray)
        assert sphere.radius == 0.0

    @pytest.mark.parametrize("radius", [0.0, -0.5])
    def test_point_sphere_is_never_hit(self, radius, gray):
        sphere = Sphere(Vector3(0, 0, -2), radius, gray)
        # Aimed straight through the center
        assert sphere.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), EVERYWHERE) is None

    def test_point_sphere_leaves_scene_intact(self, gray):
        world = HittableList([Sphere(Vector3(0, 0, -2), -0.5, gray),
                              Sphere(Vector3(0, 0, -4), 1.0, gray)])
        rec, _ = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), EVERYWHERE)
        assert rec.t == pytest.approx(3.0)


class TestHittableList:

    def test_empty_scene_misses(self):
        assert HittableList().hit(Ray(Vector3(), Vector3(0, 0, -1)), EVERYWHERE) is None

    def test_nearest_hit_wins_in_any_order(self):
        near_mat = Lambertian(Vector3(1, 0, 0))
        far_mat = Lambertian(Vector3(0, 0, 1))
        near = Sphere(Vector3(0, 0, -2), 0.5, near_mat)
        far = Sphere(Vector3(0, 0, -6), 0.5, far_mat)
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))

        for objects in ([near, far], [far, near]):
            rec, material = HittableList(objects).hit(ray, EVERYWHERE)
            assert rec.t == pytest.approx(1.5)
            assert material is near_mat

    def test_exact_tie_keeps_first_examined(self):
        first = Lambertian(Vector3(1, 1, 1))
        second = Metal(Vector3(1, 1, 1), 0.0)
        world = HittableList([
            Sphere(Vector3(0, 0, -3), 1.0, first),
            Sphere(Vector3(0, 0, -3), 1.0, second),
        ])
        _, material = world.hit(Ray(Vector3(0, 0, 0), Vector3(0, 0, -1)), EVERYWHERE)
        assert material is first

    def test_respects_caller_upper_bound(self, small_scene):
        ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, -1))
        assert small_scene.hit(ray, Interval(0.001, 0.4)) is None
        rec, _ = small_scene.hit(ray, Interval(0.001, math.inf))
        assert rec.t == pytest.approx(0.5)

    def test_add_clear_len(self, gray):
        world = HittableList()
        world.add(Sphere(Vector3(0, 0, -1), 0.5, gray))
        world.add(Sphere(Vector3(0, 0, -3), 0.5, gray))
        assert len(world) == 2
        world.clear()
        assert len(world) == 0
