#!/usr/bin/env python3

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

import logging
from dataclasses import dataclass
from math import sqrt
from time import process_time

import click

from raykit.camera import PerspectiveCamera
from raykit.hdrimages import HdrImage
from raykit.imagetracer import ImageTracer
from raykit.pcg import PCG
from raykit.render import OnOffRenderer, PathTracer, Renderer
from raykit.scenes import demo_world

logger = logging.getLogger(__name__)


@dataclass
class Parameters:
    width: int = 200
    height: int = 100
    samples_per_side: int = 0
    max_depth: int = 50
    init_state: int = 45
    init_seq: int = 54
    algorithm: str = "pathtracing"
    pfm_output: str = ""
    png_output: str = "output.png"
    gamma: float = 2.0


RENDERERS = ["onoff", "pathtracing"]


def build_renderer(params: Parameters, world) -> Renderer:
    if params.algorithm == "onoff":
        logger.info("Using on/off renderer")
        return OnOffRenderer(world=world)

    logger.info("Using a path tracer (max depth %d)", params.max_depth)
    return PathTracer(
        world=world,
        pcg=PCG(init_state=params.init_state, init_seq=params.init_seq),
        max_depth=params.max_depth,
    )


def render_image(params: Parameters) -> HdrImage:
    """Render the demo scene according to `params` and return the HDR image"""
    image = HdrImage(params.width, params.height)
    camera = PerspectiveCamera(aspect_ratio=params.width / params.height)
    tracer = ImageTracer(
        image=image,
        camera=camera,
        samples_per_side=params.samples_per_side,
        pcg=PCG(init_state=params.init_state, init_seq=params.init_seq + 1),
    )
    renderer = build_renderer(params, demo_world())

    def log_progress(row, col):
        logger.info("Rendering row %d/%d", row + 1, image.height)

    logger.info("Generating a %d×%d image", image.width, image.height)
    start_time = process_time()
    tracer.fire_all_rays(renderer, callback=log_progress)
    logger.info("Rendering completed in %.1f s", process_time() - start_time)

    return image


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Print debugging messages.")
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.command("render")
@click.option("--width", type=click.IntRange(min=1), default=200, help="Width of the image to render")
@click.option("--height", type=click.IntRange(min=1), default=100, help="Height of the image to render")
@click.option('--algorithm', type=click.Choice(RENDERERS), default="pathtracing")
@click.option(
    "--pfm-output",
    type=str,
    default="",
    help="Name of the PFM file to create (no PFM file is written if empty)",
)
@click.option(
    "--png-output",
    type=str,
    default="output.png",
    help="Name of the PNG file to create",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=0),
    default=50,
    help="Maximum number of bounces of each ray (only applicable with --algorithm=pathtracing)."
)
@click.option(
    "--init-state",
    type=int,
    help="Initial seed for the random number generator (positive number).",
    default=45,
)
@click.option(
    "--init-seq",
    type=int,
    help="Identifier of the sequence produced by the random number generator (positive number).",
    default=54
)
@click.option(
    "--samples-per-pixel",
    type=click.IntRange(min=0),
    help="Number of samples per pixel (must be a perfect square, e.g., 16).",
    default=1,
)
@click.option(
    "--gamma",
    type=click.FloatRange(min=0.0, min_open=True),
    default=2.0,
    help="Exponent for gamma-correction (positive number)",
)
def render(width, height, algorithm, pfm_output, png_output, max_depth, init_state, init_seq,
           samples_per_pixel, gamma):
    """Render the demo scene and save it as a PNG image"""
    samples_per_side = int(sqrt(samples_per_pixel))
    if samples_per_side ** 2 != samples_per_pixel:
        raise click.BadParameter(
            f"the number of samples per pixel ({samples_per_pixel}) must be a perfect square",
            param_hint="--samples-per-pixel",
        )

    params = Parameters(
        width=width,
        height=height,
        # A single sample per pixel goes through the pixel's center
        samples_per_side=samples_per_side if samples_per_side > 1 else 0,
        max_depth=max_depth,
        init_state=init_state,
        init_seq=init_seq,
        algorithm=algorithm,
        pfm_output=pfm_output,
        png_output=png_output,
        gamma=gamma,
    )

    image = render_image(params)

    if params.pfm_output:
        with open(params.pfm_output, "wb") as outf:
            image.write_pfm(outf)
        logger.info("HDR image written to %s", params.pfm_output)

    image.clamp_image()
    with open(params.png_output, "wb") as outf:
        image.write_ldr_image(outf, "PNG", gamma=params.gamma)
    logger.info("PNG image written to %s", params.png_output)


cli.add_command(render)

if __name__ == "__main__":
    cli()
