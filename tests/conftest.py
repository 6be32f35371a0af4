"""Pytest configuration and shared fixtures."""

import random

import pytest

from core.vector import Vector3, Color
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.dielectric import Dielectric
from camera.camera import Camera
from helpers import SequenceRng


@pytest.fixture
def rng():
    """Seeded random source so every test run draws the same numbers."""
    return random.Random(1234)


@pytest.fixture
def centered_rng():
    """Random source whose unit-sphere samples are all the zero vector."""
    return SequenceRng([0.5])


@pytest.fixture
def gray():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def ground_world(gray):
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, gray))
    return world


@pytest.fixture
def three_sphere_world(gray):
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, gray))
    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))
    return world


@pytest.fixture
def small_camera():
    return Camera(
        aspect_ratio=2.0,
        image_width=8,
        samples_per_pixel=2,
        max_depth=5,
        vfov=40,
        lookfrom=Vector3(0, 2, 10),
        lookat=Vector3(0, 1, 0),
        vup=Vector3(0, 1, 0),
    )


@pytest.fixture
def down_camera():
    """Camera five units above the origin looking straight down."""
    return Camera(
        aspect_ratio=1.0,
        image_width=6,
        samples_per_pixel=1,
        max_depth=1,
        vfov=90,
        lookfrom=Vector3(0, 5, 0),
        lookat=Vector3(0, 0, 0),
        vup=Vector3(0, 0, -1),
    )
