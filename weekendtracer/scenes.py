"""
Ready-made scenes and cameras for the command line and for tests.
"""

from __future__ import annotations
import logging

import numpy as np

from .vec3 import Colour, Direction, Point
from .materials import Dielectric, Lambert, Material, Metal
from .objects import Object
from .scene import Scene
from .camera import Camera

logger = logging.getLogger(__name__)


def _random_small_sphere_material() -> Material:
    choose = np.random.random()
    if choose < 0.85:
        return Lambert(Colour.new_random() * Colour.new_random())
    if choose < 0.9:
        albedo = Colour.new_random() / 2.0 + 0.5
        return Metal(albedo, float(np.random.random()) / 2.0)
    return Dielectric(1.5)


def make_book_scene() -> Scene:
    """The classic cover scene: a ground sphere, a field of small random
    spheres and three large glass, diffuse and metal spheres."""
    scene = Scene()
    scene.add_object(Object.new_sphere(Point(0, -1000, 0), 1000, Lambert(Colour(0.5, 0.5, 0.5))))

    keep_clear = Point(4, 0.2, 0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Point(a + 0.9 * np.random.random(), 0.2, b + 0.9 * np.random.random())
            if center.point_towards(keep_clear).length() > 0.9:
                scene.add_object(Object.new_sphere(center, 0.2, _random_small_sphere_material()))

    scene.add_object(Object.new_sphere(Point(0, 1, 0), 1.0, Dielectric(1.5)))
    scene.add_object(Object.new_sphere(Point(-4, 1, 0), 1.0, Lambert(Colour(0.4, 0.2, 0.1))))
    scene.add_object(Object.new_sphere(Point(4, 1, 0), 1.0, Metal(Colour(0.7, 0.6, 0.5), 0.0)))

    logger.debug("Built book scene with %d objects", len(scene))
    return scene


def make_single_sphere_scene() -> Scene:
    """A grey diffuse sphere resting on a large ground sphere."""
    return Scene([
        Object.new_sphere(Point(0, 0, -1), 0.5, Lambert(Colour(0.5, 0.5, 0.5))),
        Object.new_sphere(Point(0, -100.5, -1), 100, Lambert(Colour(0.8, 0.8, 0.0))),
    ])


def book_camera(width: int, height: int, samples: int, depth: int) -> Camera:
    """Camera at (13, 2, 3) looking at the origin, focused 10 units away."""
    center = Point(13, 2, 3)
    forward = center.point_towards(Point(0, 0, 0))
    left = Direction(0, 1, 0).cross(forward)
    up = forward.cross(left)
    return (
        Camera.builder()
        .input_position(center, forward, up)
        .input_sensor(width, height, samples, depth)
        .input_lens(10.0, 0.125, 20.0)
        .build()
    )


def single_sphere_camera(width: int, height: int, samples: int, depth: int) -> Camera:
    """Pinhole camera at the origin looking down -Z."""
    return (
        Camera.builder()
        .input_position(Point(0, 0, 0), Direction(0, 0, -1), Direction(0, 1, 0))
        .input_sensor(width, height, samples, depth)
        .input_lens(1.0, 0.0, 90.0)
        .build()
    )
