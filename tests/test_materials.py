"""Tests for the diffuse, metal and dielectric scattering models."""

import math

import pytest

from core.vector import Vector3, Color
from core.ray import Ray
from core.utils import reflect
from geometry.hittable import HitRecord
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric, reflectance
from materials.presets import MetalPresets, DielectricPresets, ColorPresets
from helpers import SequenceRng, assert_vec_close


def make_hit(normal=None, front_face=True, p=None, material=None):
    normal = normal if normal is not None else Vector3(0, 1, 0)
    p = p if p is not None else Vector3(0, 0, 0)
    return HitRecord(p=p, normal=normal, t=1.0, front_face=front_face, material=material)


def random_hit(rng):
    """An incoming ray and a hit record with the normal facing the ray."""
    direction = Vector3.random(rng, -1, 1)
    ray = Ray(Vector3(0, 0, 0), direction)
    rec = HitRecord(p=Vector3.random(rng, -1, 1), t=1.0)
    rec.set_face_normal(ray, Vector3.random(rng, -1, 1).normalize())
    return ray, rec


MATERIALS = [
    Lambertian(Color(0.8, 0.3, 0.3)),
    Metal(Color(0.8, 0.8, 0.8), 0.3),
    Metal(Color(0.8, 0.6, 0.2), 1.0),
    Dielectric(1.5),
    Dielectric(1 / 1.33),
]


@pytest.mark.parametrize("material", MATERIALS, ids=repr)
def test_scatter_never_returns_zero_length_direction(material, rng):
    for _ in range(300):
        ray, rec = random_hit(rng)
        result = material.scatter(ray, rec, rng)
        if result is None:
            continue
        assert result.scattered.direction.length() > 0
        assert result.scattered.origin is rec.p


class TestLambertian:
    def test_always_scatters_with_albedo(self, rng):
        albedo = Color(0.1, 0.2, 0.3)
        material = Lambertian(albedo)
        for _ in range(100):
            ray, rec = random_hit(rng)
            result = material.scatter(ray, rec, rng)
            assert result is not None
            assert result.attenuation == albedo

    def test_degenerate_direction_falls_back_to_normal(self):
        # Unit-sphere sample (0, -0.5, 0) normalises to exactly -normal
        rng = SequenceRng([0.5, 0.25, 0.5])
        rec = make_hit(normal=Vector3(0, 1, 0))
        result = Lambertian(Color(0.5, 0.5, 0.5)).scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
        assert result.scattered.direction == Vector3(0, 1, 0)

    def test_scatters_into_normal_hemisphere(self, rng):
        material = Lambertian(Color(0.5, 0.5, 0.5))
        rec = make_hit(normal=Vector3(0, 1, 0))
        for _ in range(200):
            result = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
            assert result.scattered.direction.y >= 0


class TestMetal:
    def test_fuzz_is_clamped(self):
        assert Metal(Color(1, 1, 1), 3.0).fuzz == 1
        assert Metal(Color(1, 1, 1), 0.4).fuzz == 0.4

    def test_zero_fuzz_is_a_pure_mirror(self, centered_rng):
        material = Metal(Color(0.9, 0.9, 0.9), 0.0)
        incoming = Ray(Vector3(-1, 1, 0), Vector3(2, -1, 0))
        rec = make_hit(normal=Vector3(0, 1, 0))
        result = material.scatter(incoming, rec, centered_rng)
        expected = reflect(incoming.direction.normalize(), rec.normal)
        assert_vec_close(result.scattered.direction, expected)
        assert result.attenuation == Color(0.9, 0.9, 0.9)

    def test_zero_fuzz_ignores_random_source(self, rng):
        material = Metal(Color(0.9, 0.9, 0.9), 0.0)
        incoming = Ray(Vector3(0, 1, 0), Vector3(1, -3, 0.5))
        rec = make_hit(normal=Vector3(0, 1, 0))
        expected = reflect(incoming.direction.normalize(), rec.normal)
        for _ in range(20):
            assert_vec_close(material.scatter(incoming, rec, rng).scattered.direction, expected)

    def test_absorbs_when_perturbed_below_surface(self):
        # Grazing reflection (almost tangent) pushed under the surface by a
        # fuzz sample pointing straight down
        material = Metal(Color(0.9, 0.9, 0.9), 1.0)
        rng = SequenceRng([0.5, 0.25, 0.5])
        incoming = Ray(Vector3(-1, 0.01, 0), Vector3(1, -0.01, 0))
        rec = make_hit(normal=Vector3(0, 1, 0))
        assert material.scatter(incoming, rec, rng) is None

    def test_scattered_rays_leave_the_surface(self, rng):
        material = Metal(Color(0.9, 0.9, 0.9), 0.8)
        rec = make_hit(normal=Vector3(0, 1, 0))
        incoming = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        for _ in range(200):
            result = material.scatter(incoming, rec, rng)
            if result is not None:
                assert result.scattered.direction.dot(rec.normal) > 0


class TestDielectric:
    def test_refraction_ratio_depends_on_face(self):
        glass = Dielectric(1.5)
        assert glass.refraction_ratio(make_hit(front_face=True)) == pytest.approx(1 / 1.5)
        assert glass.refraction_ratio(make_hit(front_face=False)) == pytest.approx(1.5)

    def test_rejects_non_positive_index(self):
        with pytest.raises(ValueError):
            Dielectric(0.0)

    def test_never_absorbs_and_is_white(self, rng):
        glass = Dielectric(1.5)
        for _ in range(200):
            ray, rec = random_hit(rng)
            result = glass.scatter(ray, rec, rng)
            assert result is not None
            assert result.attenuation == Color(1.0, 1.0, 1.0)

    def test_total_internal_reflection(self):
        # Leaving glass at a steep angle cannot refract
        glass = Dielectric(1.5)
        rec = make_hit(normal=Vector3(0, -1, 0), front_face=False)
        incoming = Ray(Vector3(0, 0, 0), Vector3(1, 0.2, 0))
        rng = SequenceRng([0.999])
        result = glass.scatter(incoming, rec, rng)
        expected = reflect(incoming.direction.normalize(), rec.normal)
        assert_vec_close(result.scattered.direction, expected)

    def test_random_draw_chooses_between_reflect_and_refract(self):
        glass = Dielectric(1.5)
        rec = make_hit(normal=Vector3(0, 1, 0), front_face=True)
        incoming = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        # Head-on reflectance is 0.04
        reflected = glass.scatter(incoming, rec, SequenceRng([0.01]))
        refracted = glass.scatter(incoming, rec, SequenceRng([0.5]))
        assert_vec_close(reflected.scattered.direction, Vector3(0, 1, 0))
        assert_vec_close(refracted.scattered.direction, Vector3(0, -1, 0))

    def test_reflect_fraction_matches_schlick(self, rng):
        glass = Dielectric(1.5)
        rec = make_hit(normal=Vector3(0, 1, 0), front_face=True)
        incoming = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        n = 4000
        reflections = sum(1 for _ in range(n) if glass.scatter(incoming, rec, rng).scattered.direction.y > 0)
        expected = reflectance(math.cos(math.pi / 4), 1 / 1.5)
        assert reflections / n == pytest.approx(expected, abs=0.02)


def test_schlick_reflectance_at_normal_incidence():
    assert reflectance(1.0, 1.5) == pytest.approx(0.04)
    assert reflectance(0.0, 1.5) == pytest.approx(1.0)


def test_make_hit_defaults_are_fresh():
    first = make_hit()
    first.normal.y = -1
    assert make_hit().normal == Vector3(0, 1, 0)


def test_presets():
    assert DielectricPresets.glass().refractive_index == 1.5
    assert MetalPresets.mirror().fuzz == 0.0
    assert isinstance(ColorPresets.matte(ColorPresets.GRAY), Lambertian)
