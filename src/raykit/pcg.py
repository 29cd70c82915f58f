# -*- encoding: utf-8 -*-

from dataclasses import dataclass


# Python integers are unbounded, so the 64-bit state and the 32-bit output
# of the generator must be masked explicitly after every operation.

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_UINT32_MASK = 0xFFFFFFFF


def to_uint64(x: int) -> int:
    """Clip an integer so that it occupies 64 bits"""
    return x & _UINT64_MASK


def to_uint32(x: int) -> int:
    """Clip an integer so that it occupies 32 bits"""
    return x & _UINT32_MASK


@dataclass
class PCG:
    """PCG32 uniform pseudo-random number generator

    Every object that needs random numbers (the diffuse material, the image tracer) receives a `PCG`
    instance as a parameter instead of relying on a process-wide source. Two generators created with
    the same `init_state` and `init_seq` produce the same sequence, which makes renders reproducible.

    A `PCG` object is not thread-safe: give each tracing thread its own generator, e.g. by varying
    `init_seq`."""

    state: int = 0
    inc: int = 0

    def __init__(self, init_state=42, init_seq=54):
        self.state = 0
        self.inc = (init_seq << 1) | 1
        self.random()
        self.state += init_state
        self.random()

    def random(self) -> int:
        """Return a new 32-bit unsigned random number and advance the internal state"""
        oldstate = self.state
        self.state = to_uint64(oldstate * 6364136223846793005 + self.inc)

        xorshifted = to_uint32(((oldstate >> 18) ^ oldstate) >> 27)
        rot = oldstate >> 59

        return to_uint32((xorshifted >> rot) | (xorshifted << ((-rot) & 31)))

    def random_float(self) -> float:
        """Return a new random number uniformly distributed over [0, 1]"""
        return self.random() / _UINT32_MASK

    def uniform(self, low: float, high: float) -> float:
        """Return a new random number uniformly distributed over [low, high]"""
        return low + (high - low) * self.random_float()
