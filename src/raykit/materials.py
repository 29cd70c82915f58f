# -*- encoding: utf-8 -*-
#
# The MIT License (MIT)
#
# Copyright © 2021 Maurizio Tomasi
#
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
# documentation files (the “Software”), to deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all copies or substantial portions of
# the Software. THE SOFTWARE IS PROVIDED “AS IS”, WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT
# LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT
# SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
# CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

from dataclasses import dataclass
from typing import Union

from raykit.colors import Color, BLACK
from raykit.geometry import random_in_unit_sphere
from raykit.hitrecord import Intersection
from raykit.pcg import PCG
from raykit.ray import Ray


@dataclass(frozen=True)
class ScatterResult:
    """The outcome of a ray hitting a material

    -   `attenuation`: a :class:`.Color` telling how much of the light travelling along the scattered ray is
        carried back along the incident ray, channel by channel
    -   `scattered`: the :class:`.Ray` leaving the surface, or ``None`` if the incident ray was absorbed

    The attenuation is only meaningful when `scattered` is not ``None``."""
    attenuation: Color
    scattered: Union[Ray, None]

    @property
    def absorbed(self) -> bool:
        return self.scattered is None


def _check_albedo(albedo: Color):
    for name, value in (("r", albedo.r), ("g", albedo.g), ("b", albedo.b)):
        if value < 0.0:
            raise ValueError(f"invalid albedo, component {name} = {value} is negative")


class Material:
    """A surface material

    This is an abstract class: derived classes must redefine :meth:`.Material.scatter`. Materials are meant
    to be created once while the world is built and shared among any number of shapes; they must not change
    once tracing has started."""

    def scatter(self, pcg: PCG, incident: Ray, intersection: Intersection) -> ScatterResult:
        """Compute how `incident` leaves the surface after the hit described by `intersection`

        The generator `pcg` is the only source of randomness a material may use. Passing ``None`` as the
        intersection (i.e., a miss) is not an error: the result is an absorbed ray."""
        raise NotImplementedError("Material.scatter is an abstract method and cannot be called directly")


class Lambertian(Material):
    """An ideal diffuse material

    The scattered direction points from the hit position towards a random point in the unit ball centered on
    the tip of the normal. A Lambertian surface never absorbs a ray: the light lost at each bounce is entirely
    accounted for by the albedo."""

    def __init__(self, albedo: Color = Color(1.0, 1.0, 1.0)):
        _check_albedo(albedo)
        self.albedo = albedo

    def scatter(self, pcg: PCG, incident: Ray, intersection: Intersection) -> ScatterResult:
        if not intersection:
            return ScatterResult(attenuation=BLACK, scattered=None)

        target = intersection.position + intersection.normal + random_in_unit_sphere(pcg)
        return ScatterResult(
            attenuation=self.albedo,
            scattered=Ray(origin=intersection.position, dir=target - intersection.position),
        )

    def __repr__(self):
        return f"Lambertian(albedo={self.albedo})"


class Metallic(Material):
    """A perfect mirror

    The incident direction is normalized and reflected about the normal. If the reflected ray does not point
    away from the surface, the ray is absorbed."""

    def __init__(self, albedo: Color = Color(1.0, 1.0, 1.0)):
        _check_albedo(albedo)
        self.albedo = albedo

    def scatter(self, pcg: PCG, incident: Ray, intersection: Intersection) -> ScatterResult:
        # Mirror reflection is deterministic, so `pcg` is not used here
        if not intersection:
            return ScatterResult(attenuation=BLACK, scattered=None)

        reflected = incident.dir.normalize().reflect(intersection.normal)
        if reflected.dot(intersection.normal) > 0.0:
            scattered = Ray(origin=intersection.position, dir=reflected)
        else:
            scattered = None

        return ScatterResult(attenuation=self.albedo, scattered=scattered)

    def __repr__(self):
        return f"Metallic(albedo={self.albedo})"
