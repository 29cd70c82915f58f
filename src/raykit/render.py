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

from math import inf
from typing import Union

from raykit.colors import Color, WHITE, BLACK
from raykit.pcg import PCG
from raykit.ray import Ray
from raykit.world import World

SKY_BLUE = Color(0.5, 0.7, 1.0)


class Renderer:
    """A class implementing a solver of the rendering equation.

    This is an abstract class; you should use a derived concrete class."""

    def __init__(self, world: World, background_color: Color = BLACK):
        self.world = world
        self.background_color = background_color

    def __call__(self, ray: Ray) -> Color:
        """Estimate the radiance along a ray"""
        raise NotImplementedError("Unable to call Renderer.__call__, it is an abstract method")


class OnOffRenderer(Renderer):
    """A on/off renderer

    This renderer is mostly useful for debugging purposes, as it is really fast, but it produces boring images."""

    def __init__(self, world: World, background_color: Color = BLACK, color=WHITE, t_min: float = 1e-3):
        super().__init__(world, background_color)
        self.color = color
        self.t_min = t_min

    def __call__(self, ray: Ray) -> Color:
        return self.color if self.world.ray_intersection(ray, self.t_min, inf) else self.background_color


def sky_color(ray: Ray) -> Color:
    """Return the radiance coming from the sky along a ray that hit nothing

    The sky fades linearly from white (looking down) to light blue (looking up)."""
    s = 0.5 * (ray.dir.normalize().y + 1.0)
    return WHITE * (1.0 - s) + SKY_BLUE * s


class PathTracer(Renderer):
    """A simple path-tracing renderer

    At each hit the material of the shape decides whether the ray is scattered or absorbed; the radiance
    carried by the scattered ray is multiplied by the attenuation returned by the material. Rays that escape
    the world pick up the color of the sky.

    Paths are cut after `max_depth` bounces. The lower bound `t_min` of every intersection query is slightly
    larger than zero, so that a scattered ray does not hit the surface it has just left again.
    """

    def __init__(self, world: World, pcg: Union[PCG, None] = None, max_depth: int = 50, t_min: float = 1e-3):
        super().__init__(world, background_color=BLACK)
        self.pcg = pcg if pcg is not None else PCG()
        self.max_depth = max_depth
        self.t_min = t_min

    def radiance(self, ray: Ray, depth: int = 0) -> Color:
        """Estimate the radiance along `ray`, which has already bounced `depth` times

        The path is followed bounce after bounce, multiplying the attenuations met along the way, so that
        `max_depth` is not limited by the interpreter's recursion limit."""
        throughput = WHITE
        while True:
            hit_record = self.world.ray_intersection(ray, self.t_min, inf)
            if not hit_record:
                return throughput * sky_color(ray)

            if depth >= self.max_depth:
                return BLACK

            result = hit_record.material.scatter(self.pcg, ray, hit_record)
            if result.absorbed:
                return BLACK

            throughput = throughput * result.attenuation
            ray = result.scattered
            depth += 1

    def __call__(self, ray: Ray) -> Color:
        return self.radiance(ray)
