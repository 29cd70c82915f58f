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
from typing import TYPE_CHECKING, Union

from raykit.geometry import Point, Vec

if TYPE_CHECKING:
    from raykit.materials import Material


@dataclass(frozen=True)
class HitRecord:
    """
    A class holding information about a ray-shape intersection

    The parameters defined in this dataclass are the following:

    -   `t`: a floating-point value specifying the distance from the origin of the ray where the hit happened,
        in units of the length of the ray's direction. It always lies strictly within the `(t_min, t_max)`
        interval of the query that produced the record
    -   `position`: a :class:`.Point` object holding the world coordinates of the hit point, equal to ``ray.at(t)``
    -   `normal`: a :class:`.Vec` object with unit length, perpendicular to the surface and pointing outwards
    -   `material`: the :class:`.Material` of the shape that was hit. This is a reference to the very object
        held by the shape, never a copy

    A hit record carries everything a material needs to scatter the ray, so shading never has to look
    anything up in the world.
    """
    t: float
    position: Point
    normal: Vec
    material: "Material"

    def is_close(self, other: Union["HitRecord", None], epsilon=1e-5) -> bool:
        """Check whether two `HitRecord` represent the same hit event or not"""
        if not other:
            return False

        return (
                (abs(self.t - other.t) < epsilon) and
                self.position.is_close(other.position, epsilon=epsilon) and
                self.normal.is_close(other.normal, epsilon=epsilon) and
                (self.material is other.material)
        )


# The result of an intersection test: either a `HitRecord` or `None` if the ray missed
Intersection = Union[HitRecord, None]
