"""CLI commands for Gaussian blur and sharpening."""

import sys

import click

import pyfastresample as pfr

from .common import load_buffer, save_buffer, setup_logging, verbose_option, workers_option

sigma_option = click.option(
    "--sigma",
    "-s",
    default=1.0,
    show_default=True,
    type=float,
    help="Gaussian standard deviation in pixels",
)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_image", type=click.Path(dir_okay=False))
@sigma_option
@workers_option
@verbose_option
def blur_image(input_image, output_image, sigma, workers, verbose):
    """Blur INPUT_IMAGE with a Gaussian and save to OUTPUT_IMAGE."""
    setup_logging(verbose)
    try:
        if verbose:
            click.echo(f"Blurring '{input_image}' -> '{output_image}' with sigma={sigma}")
        result = pfr.blur(load_buffer(input_image), sigma, workers=workers)
        save_buffer(result, output_image)
        if verbose:
            click.echo("Blur completed successfully!")
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_image", type=click.Path(dir_okay=False))
@sigma_option
@workers_option
@verbose_option
def sharpen_image(input_image, output_image, sigma, workers, verbose):
    """Sharpen INPUT_IMAGE with an unsharp mask and save to OUTPUT_IMAGE."""
    setup_logging(verbose)
    try:
        if verbose:
            click.echo(f"Sharpening '{input_image}' -> '{output_image}' with sigma={sigma}")
        result = pfr.sharpen(load_buffer(input_image), sigma, workers=workers)
        save_buffer(result, output_image)
        if verbose:
            click.echo("Sharpen completed successfully!")
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["blur_image", "sharpen_image"]
