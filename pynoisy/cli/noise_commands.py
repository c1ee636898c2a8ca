"""
Noise Image CLI Commands for pynoisy

Command line interface for generating noise images and saving them as PNG.

Author: B.G.
"""

import sys

import click

import pynoisy as pn
from pynoisy import constants as cte


@click.command()
@click.option(
    "-o",
    "--output",
    type=click.Path(),
    default=cte.DEFAULT_OUTPUT,
    show_default=True,
    help="Output filename, '.png' is appended",
)
@click.option("-W", "--width", type=int, default=cte.DEFAULT_WIDTH, show_default=True,
              help="Image width in pixels")
@click.option("-H", "--height", type=int, default=cte.DEFAULT_HEIGHT, show_default=True,
              help="Image height in pixels")
@click.option("-m", "--mode", default=cte.MODE_WHITE, show_default=True,
              help="Noise mode: 'color', 'white' or 'simplex'")
@click.option("--color1", default=cte.DEFAULT_COLOR1, show_default=True,
              help="First color (white) or background (simplex), as #RRGGBB")
@click.option("--color2", default=cte.DEFAULT_COLOR2, show_default=True,
              help="Second color (white) or foreground (simplex), as #RRGGBB")
@click.option("--chance", type=float, default=cte.DEFAULT_CHANCE, show_default=True,
              help="Probability of color1 in white mode")
@click.option("--scale", type=float, default=cte.DEFAULT_SCALE, show_default=True,
              help="Feature scale in simplex mode (larger is smoother)")
@click.option("--seed", type=int, default=None,
              help="Seed for reproducible output")
@click.option("--arch", type=click.Choice(["cpu", "cuda"]), default="cpu",
              show_default=True, help="Taichi backend")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noisy(output, width, height, mode, color1, color2, chance, scale, seed, arch, verbose):
    """
    Generate a noise image and save it as PNG.

    Three modes are available: 'color' fills every channel with random
    bytes, 'white' picks COLOR1 or COLOR2 for each pixel (COLOR1 with
    probability CHANCE), and 'simplex' blends COLOR1 into COLOR2 with
    fractal simplex noise.

    Examples:

        # 512x512 black and white noise
        pynoisy -o static

        # Sparse red dots on black
        pynoisy -m white --color1 "#FF0000" --color2 "#000000" --chance 0.05

        # Smooth clouds, reproducible
        pynoisy -m simplex --color1 "#1E3C78" --color2 "#FFFFFF" --scale 4 --seed 7

        # Full color noise on the GPU
        pynoisy -m color --arch cuda -W 2048 -H 2048 -o rainbow
    """
    try:
        config = pn.build_config(width, height, mode, color1, color2, chance, scale)

        if verbose:
            click.echo(f"Initialising Taichi ({arch})...")
        pn.init(arch)

        if verbose:
            click.echo(f"Generating {width}x{height} {config.mode} noise...")

        generator = pn.Noisy(config, output, pn.NoiseContext(seed=seed))

        if verbose:
            click.echo(f"Saving PNG to '{output}.png'...")

        path = generator.save_as_png()
        click.echo(f"Saved {width}x{height} {config.mode} noise to '{path}'")

    except (pn.NoisyError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    noisy()
