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

from typing import List

from raykit.hitrecord import Intersection
from raykit.ray import Ray
from raykit.shapes import Shape


class World(Shape):
    """A class holding a list of shapes, which make a «world»

    You can add shapes to a world using :meth:`.World.add_shape`. Typically, you call
    :meth:`.World.ray_intersection` to find the closest shape hit by a ray. Since a world is a
    :class:`.Shape` too, worlds can be nested.

    Shapes should only be added while the scene is being built: the world is read-only while tracing.
    """

    shapes: List[Shape]

    def __init__(self):
        self.shapes = []

    def add_shape(self, shape: Shape):
        """Append a new shape to this world"""
        self.shapes.append(shape)

    def __len__(self):
        return len(self.shapes)

    def ray_intersection(self, ray: Ray, t_min: float, t_max: float) -> Intersection:
        """Return the closest hit among all the shapes in the world, or `None`

        Each shape is queried with the distance of the closest hit found so far as its upper bound. When two
        shapes are hit at exactly the same distance, the one added first wins."""
        closest: Intersection = None
        closest_so_far = t_max

        for shape in self.shapes:
            intersection = shape.ray_intersection(ray, t_min, closest_so_far)

            if not intersection:
                # The ray missed this shape, skip to the next one
                continue

            if intersection.t < closest_so_far:
                closest_so_far = intersection.t
                closest = intersection

        return closest
