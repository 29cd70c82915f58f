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

import math

from raykit.geometry import Point, Vec
from raykit.ray import Ray


class Camera:
    """An abstract class representing an observer

    The only concrete subclass is :class:`.PerspectiveCamera`.
    """

    def fire_ray(self, u: float, v: float) -> Ray:
        """Fire a ray through the camera.

        This is an abstract method. You should redefine it in derived classes.

        Fire a ray that goes through the screen at the position (u, v). The exact meaning
        of these coordinates depend on the projection used by the camera.
        """
        raise NotImplementedError(f"Camera.fire_ray(u={u}, v={v}) is not implemented")


class PerspectiveCamera(Camera):
    """A camera implementing a perspective 3D → 2D projection

    The observer sits at `origin` and looks towards the negative z axis, with the y axis pointing up. The
    screen is a rectangle perpendicular to the z axis, at distance `screen_distance` from the observer; it
    spans the range [−aspect_ratio, +aspect_ratio] along x and [−1, +1] along y.
    """

    def __init__(self, origin: Point = Point(), screen_distance=1.0, aspect_ratio=2.0):
        """Create a new perspective camera

        The parameter `screen_distance` tells how much far from the eye of the observer is the screen,
        and it influences the so-called «aperture» (the field-of-view angle along the horizontal direction).
        The parameter `aspect_ratio` defines how larger than the height is the image: it should match the
        ratio between the width and the height of the image being rendered."""
        self.origin = origin
        self.screen_distance = screen_distance
        self.aspect_ratio = aspect_ratio

    def fire_ray(self, u: float, v: float) -> Ray:
        """Shoot a ray through the camera's screen

        The coordinates (u, v) specify the point on the screen where the ray crosses it. Coordinates (0, 0) represent
        the bottom-left corner, (0, 1) the top-left corner, (1, 0) the bottom-right corner, and (1, 1) the top-right
        corner, as in the following diagram::

            (0, 1)                          (1, 1)
               +------------------------------+
               |                              |
               |                              |
               |                              |
               +------------------------------+
            (0, 0)                          (1, 0)

        The direction of the ray is not normalized: ``ray.at(1.0)`` lies on the screen.
        """
        direction = Vec(
            (2 * u - 1) * self.aspect_ratio,
            2 * v - 1,
            -self.screen_distance,
        )
        return Ray(origin=self.origin, dir=direction)

    def aperture_deg(self) -> float:
        """Compute the aperture of the camera in degrees

        The aperture is the angle of the field-of-view along the horizontal direction (x axis)"""
        return 2.0 * math.degrees(math.atan(self.aspect_ratio / self.screen_distance))
