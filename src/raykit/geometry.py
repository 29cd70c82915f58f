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
from dataclasses import dataclass

from raykit.misc import are_close
from raykit.pcg import PCG


def _are_xyz_close(a, b, epsilon=1e-5):
    # Duck typing: works for any pair of objects with x, y, z fields
    return (are_close(a.x, b.x, epsilon=epsilon) and
            are_close(a.y, b.y, epsilon=epsilon) and
            are_close(a.z, b.z, epsilon=epsilon))


def _add_xyz(a, b, return_type):
    return return_type(a.x + b.x, a.y + b.y, a.z + b.z)


def _sub_xyz(a, b, return_type):
    return return_type(a.x - b.x, a.y - b.y, a.z - b.z)


def _mul_scalar_xyz(scalar, xyz, return_type):
    return return_type(scalar * xyz.x, scalar * xyz.y, scalar * xyz.z)


@dataclass(frozen=True)
class Vec:
    """A 3D vector

    This class has three floating-point fields: `x`, `y`, and `z`. Vectors are immutable: every operation
    returns a new object, so the same vector can be shared freely between rays, hit records and materials."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_close(self, other, epsilon=1e-5) -> bool:
        """Return True if the object and `other` have roughly the same direction and length"""
        assert isinstance(other, Vec)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def __add__(self, other):
        """Sum two vectors, or one vector and one point"""
        if isinstance(other, Vec):
            return _add_xyz(self, other, Vec)
        elif isinstance(other, Point):
            return _add_xyz(self, other, Point)
        else:
            raise TypeError(f"Unable to run Vec.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract one vector from another"""
        if isinstance(other, Vec):
            return _sub_xyz(self, other, Vec)
        else:
            raise TypeError(f"Unable to run Vec.__sub__ on a {type(self)} and a {type(other)}.")

    def __mul__(self, scalar):
        """Compute the product between a vector and a scalar"""
        return _mul_scalar_xyz(scalar=scalar, xyz=self, return_type=Vec)

    def __rmul__(self, scalar):
        return self * scalar

    def __truediv__(self, scalar):
        """Divide each component of the vector by a scalar"""
        return Vec(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self):
        """Return the reversed vector"""
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other) -> float:
        """Compute the dot product between two vectors"""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def squared_norm(self) -> float:
        """Return the squared norm (Euclidean length) of a vector

        This is faster than `Vec.norm` if you just need the squared norm."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def norm(self) -> float:
        """Return the norm (Euclidean length) of a vector"""
        return math.sqrt(self.squared_norm())

    def normalize(self):
        """Return a vector with the same direction and unit length

        The vector must not be null."""
        return self / self.norm()

    def reflect(self, normal):
        """Reflect the vector about `normal`, which must have unit length

        The result is ``v - 2 (v·n) n``: the component along the normal is flipped, the tangential one is kept."""
        return self - normal * (2.0 * self.dot(normal))


@dataclass(frozen=True)
class Point:
    """A point in 3D space

    This class has three floating-point fields: `x`, `y`, and `z`."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def is_close(self, other, epsilon=1e-5) -> bool:
        """Return True if the object and `other` have roughly the same position"""
        assert isinstance(other, Point)
        return _are_xyz_close(self, other, epsilon=epsilon)

    def __add__(self, other):
        """Sum a point and a vector"""
        if isinstance(other, Vec):
            return _add_xyz(self, other, Point)
        else:
            raise TypeError(f"Unable to run Point.__add__ on a {type(self)} and a {type(other)}.")

    def __sub__(self, other):
        """Subtract a vector from a point, or compute the vector joining two points"""
        if isinstance(other, Vec):
            return _sub_xyz(self, other, Point)
        elif isinstance(other, Point):
            return _sub_xyz(self, other, Vec)
        else:
            raise TypeError(f"Unable to run Point.__sub__ on a {type(self)} and a {type(other)}.")


VEC_X = Vec(1.0, 0.0, 0.0)
VEC_Y = Vec(0.0, 1.0, 0.0)
VEC_Z = Vec(0.0, 0.0, 1.0)


def random_in_unit_sphere(pcg: PCG) -> Vec:
    """Return a random vector uniformly distributed within the unit ball

    Candidates are drawn uniformly from the cube [-1, 1]³ and discarded until one falls strictly inside the
    ball. There is no upper bound on the number of attempts; on average 6/π ≈ 1.9 candidates are needed."""
    while True:
        candidate = Vec(pcg.uniform(-1.0, 1.0), pcg.uniform(-1.0, 1.0), pcg.uniform(-1.0, 1.0))
        if candidate.squared_norm() < 1.0:
            return candidate
