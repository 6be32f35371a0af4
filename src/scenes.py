# scenes.py
import random
from typing import Callable, Dict, Tuple
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from materials.presets import MetalPresets, DielectricPresets, ColorPresets

def add_ground(world: HittableList):
    world.add(Sphere(Vector3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

def add_feature_spheres(world: HittableList):
    """Three large spheres, one of each material, side by side."""
    world.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

def final_scene(rng: random.Random) -> Tuple[HittableList, Camera]:
    """
    Ground plane covered by a grid of small random spheres, plus three large
    ones. Viewed at a low angle with a shallow depth of field.
    """
    world = HittableList()
    add_ground(world)

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())

            # Keep clear of the large metal sphere
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                material = ColorPresets.random_matte(rng)
            elif choose_mat < 0.95:
                material = MetalPresets.random(rng)
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    add_feature_spheres(world)

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=1200,
        samples_per_pixel=500,
        max_depth=50,
        vfov=20,
        lookfrom=Vector3(13, 2, 3),
        lookat=Vector3(0, 0, 0),
        vup=Vector3(0, 1, 0),
        defocus_angle=0.6,
        focus_dist=10.0,
    )
    return world, camera

def demo_scene(rng: random.Random) -> Tuple[HittableList, Camera]:
    """Ground and the three feature spheres only; renders quickly."""
    world = HittableList()
    add_ground(world)
    add_feature_spheres(world)

    camera = Camera(
        aspect_ratio=16.0 / 9.0,
        image_width=400,
        samples_per_pixel=50,
        max_depth=20,
        vfov=30,
        lookfrom=Vector3(0, 2, 12),
        lookat=Vector3(0, 1, 0),
        vup=Vector3(0, 1, 0),
    )
    return world, camera

SCENES: Dict[str, Callable[[random.Random], Tuple[HittableList, Camera]]] = {
    "final": final_scene,
    "demo": demo_scene,
}
