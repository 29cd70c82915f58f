# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the “Software”), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software. THE
# SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS
# OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from math import sqrt

from raykit.colors import WHITE
from raykit.geometry import Point
from raykit.hitrecord import HitRecord, Intersection
from raykit.materials import Material, Lambertian
from raykit.ray import Ray

# Shared by every sphere created without an explicit material
DEFAULT_MATERIAL = Lambertian(albedo=WHITE)


class Shape:
    """Anything a ray can hit

    This is an abstract class, and you should only use it to derive
    concrete classes. Be sure to redefine the method
    :meth:`.Shape.ray_intersection`.

    Implementations must not modify their own state while answering a
    query, so that the same shape can be tested by several threads at
    once.
    """

    def ray_intersection(self, ray: Ray, t_min: float, t_max: float) -> Intersection:
        """Compute the intersection between a ray and this shape

        Only hits whose distance `t` lies strictly within the open
        interval `(t_min, t_max)` are considered. Return a
        :class:`.HitRecord`, or `None` if no such hit exists.
        """
        raise NotImplementedError(
            "Shape.ray_intersection is an abstract method and cannot be called directly"
        )


class Sphere(Shape):
    """A sphere with arbitrary center and radius

    With the default parameters, this is a unit sphere centered on the
    origin of the axes, made of a white diffuse material."""

    def __init__(self, center: Point = Point(), radius: float = 1.0, material: Material = DEFAULT_MATERIAL):
        if radius <= 0.0:
            raise ValueError(f"the radius of a sphere must be positive, got {radius}")

        self.center = center
        self.radius = radius
        self.material = material

    def _hit_record(self, ray: Ray, t: float) -> HitRecord:
        position = ray.at(t)
        return HitRecord(
            t=t,
            position=position,
            normal=(position - self.center) / self.radius,
            material=self.material,
        )

    def ray_intersection(self, ray: Ray, t_min: float, t_max: float) -> Intersection:
        """Checks if a ray intersects the sphere

        The direction of `ray` must not be a null vector. A ray that is
        exactly tangent to the sphere does not hit it.
        """
        oc = ray.origin - self.center
        a = ray.dir.squared_norm()
        assert a > 0.0, "the direction of a ray must not be a null vector"

        # Half-b form of the quadratic a·t² + 2b·t + c = 0
        b = oc.dot(ray.dir)
        c = oc.squared_norm() - self.radius * self.radius

        delta = b * b - a * c
        if delta <= 0.0:
            return None

        sqrt_delta = sqrt(delta)

        # The nearest root wins if it is acceptable
        for t in ((-b - sqrt_delta) / a, (-b + sqrt_delta) / a):
            if t_min < t < t_max:
                return self._hit_record(ray, t)

        return None

    def __repr__(self):
        return f"Sphere(center={self.center}, radius={self.radius}, material={self.material})"
