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

import struct
from enum import Enum

from PIL import Image

from raykit.colors import Color


class Endianness(Enum):
    """Kinds of byte/bit endianness"""
    LITTLE_ENDIAN = 1
    BIG_ENDIAN = 2


# "<": little endian
# ">": big endian
# "fff": three single-precision floating point values (32 bit each)
_RGB_STRUCT_FORMAT = {
    Endianness.LITTLE_ENDIAN: "<fff",
    Endianness.BIG_ENDIAN: ">fff",
}


def _clamp(x: float) -> float:
    return min(max(x, 0.0), 1.0)


class HdrImage:
    """A High-Dynamic-Range 2D image

    This class has the following members:

    -   `width` (int): number of columns in the 2D matrix of colors
    -   `height` (int): number of rows in the 2D matrix of colors
    -   `pixels` (list of `Color`): the 2D matrix, represented as a 1D list in row-major order
    """

    def __init__(self, width=0, height=0):
        """Create a black image with the specified resolution"""
        (self.width, self.height) = (width, height)
        self.pixels = [Color() for _ in range(self.width * self.height)]

    def valid_coordinates(self, x: int, y: int) -> bool:
        """Return True if ``(x, y)`` are coordinates within the 2D matrix"""
        return (0 <= x < self.width) and (0 <= y < self.height)

    def pixel_offset(self, x: int, y: int) -> int:
        """Return the position in the 1D array of the specified pixel"""
        return y * self.width + x

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the `Color` value for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y), f"invalid pixel coordinates ({x}, {y})"
        return self.pixels[self.pixel_offset(x, y)]

    def set_pixel(self, x: int, y: int, new_color: Color):
        """Set the new color for a pixel in the image

        The pixel at the top-left corner has coordinates (0, 0)."""
        assert self.valid_coordinates(x, y), f"invalid pixel coordinates ({x}, {y})"
        self.pixels[self.pixel_offset(x, y)] = new_color

    def write_pfm(self, stream, endianness=Endianness.LITTLE_ENDIAN):
        """Write the image in a PFM file

        The `stream` parameter must be a binary I/O stream. The parameter `endianness` specifies the byte
        endianness to be used in the file."""
        endianness_str = "-1.0" if endianness == Endianness.LITTLE_ENDIAN else "1.0"
        stream.write(f"PF\n{self.width} {self.height}\n{endianness_str}\n".encode("ascii"))

        # PFM files store rows from the bottom to the top
        format_str = _RGB_STRUCT_FORMAT[endianness]
        for y in reversed(range(self.height)):
            for x in range(self.width):
                color = self.get_pixel(x, y)
                stream.write(struct.pack(format_str, color.r, color.g, color.b))

    def clamp_image(self):
        """Force the R, G, B components of every pixel into the range [0, 1]"""
        self.pixels = [Color(_clamp(pix.r), _clamp(pix.g), _clamp(pix.b)) for pix in self.pixels]

    def write_ldr_image(self, stream, format: str, gamma=2.0):
        """Save the image in a LDR format

        Each component is raised to the power ``1 / gamma`` and converted to an 8-bit integer. Before calling
        this function, call ``HdrImage.clamp_image`` to be sure that the R, G, and B values of the colors in the
        image are all in the range [0, 1].
        """
        img = Image.new("RGB", (self.width, self.height))

        for y in range(self.height):
            for x in range(self.width):
                cur_color = self.get_pixel(x, y)
                img.putpixel(xy=(x, y), value=(
                    int(255.99 * cur_color.r ** (1 / gamma)),
                    int(255.99 * cur_color.g ** (1 / gamma)),
                    int(255.99 * cur_color.b ** (1 / gamma)),
                ))

        img.save(stream, format=format)
