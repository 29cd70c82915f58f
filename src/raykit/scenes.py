# -*- encoding: utf-8 -*-

from raykit.colors import Color
from raykit.geometry import Point
from raykit.materials import Lambertian, Metallic
from raykit.shapes import Sphere
from raykit.world import World


def demo_world() -> World:
    """Build the demo scene: three small spheres resting on a huge one acting as the ground

    The scene is meant to be observed by a :class:`.PerspectiveCamera` placed at the origin. The two metallic
    spheres on the sides share the same material object."""
    ground = Lambertian(albedo=Color(0.8, 0.8, 0.0))
    matte = Lambertian(albedo=Color(0.8, 0.3, 0.3))
    mirror = Metallic(albedo=Color(0.8, 0.6, 0.2))

    world = World()
    world.add_shape(Sphere(center=Point(0.0, 0.0, -1.0), radius=0.5, material=matte))
    world.add_shape(Sphere(center=Point(0.0, -100.5, -1.0), radius=100.0, material=ground))
    world.add_shape(Sphere(center=Point(1.0, 0.0, -1.0), radius=0.5, material=mirror))
    world.add_shape(Sphere(center=Point(-1.0, 0.0, -1.0), radius=0.5, material=mirror))

    return world
