"""CLI commands for image resampling using PyFastResample's rastermanip utilities."""

import sys

import click

import pyfastresample as pfr

from .common import filter_option, load_buffer, save_buffer, setup_logging, verbose_option, workers_option


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_image", type=click.Path(dir_okay=False))
@click.option("--width", "-W", default=0, show_default=True, type=int,
              help="Target width (0 keeps the aspect ratio)")
@click.option("--height", "-H", default=0, show_default=True, type=int,
              help="Target height (0 keeps the aspect ratio)")
@filter_option
@workers_option
@verbose_option
def resize_image(input_image, output_image, width, height, filter_name, workers, verbose):
    """Resize INPUT_IMAGE to the given size and save to OUTPUT_IMAGE."""
    setup_logging(verbose)
    try:
        src = load_buffer(input_image)
        if verbose:
            click.echo(
                f"Resizing '{input_image}' ({src.width}x{src.height}) -> "
                f"{width}x{height} using filter='{filter_name}'"
            )
        result = pfr.resize(src, width, height, filter=filter_name, workers=workers)
        save_buffer(result, output_image)
        if verbose:
            click.echo(f"Wrote {result.width}x{result.height} image to '{output_image}'")
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_image", type=click.Path(dir_okay=False))
@click.argument("max_width", type=int)
@click.argument("max_height", type=int)
@filter_option
@workers_option
@verbose_option
def fit_image(input_image, output_image, max_width, max_height, filter_name, workers, verbose):
    """Shrink INPUT_IMAGE to fit within MAX_WIDTH x MAX_HEIGHT and save to OUTPUT_IMAGE."""
    setup_logging(verbose)
    try:
        src = load_buffer(input_image)
        if verbose:
            click.echo(
                f"Fitting '{input_image}' ({src.width}x{src.height}) into "
                f"{max_width}x{max_height} using filter='{filter_name}'"
            )
        result = pfr.fit(src, max_width, max_height, filter=filter_name, workers=workers)
        save_buffer(result, output_image)
        if verbose:
            click.echo(f"Wrote {result.width}x{result.height} image to '{output_image}'")
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_image", type=click.Path(dir_okay=False))
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.option(
    "--anchor",
    "-a",
    type=click.Choice([a.value for a in pfr.Anchor], case_sensitive=False),
    default=pfr.Anchor.CENTER.value,
    show_default=True,
    help="Where to crop after scaling",
)
@filter_option
@workers_option
@verbose_option
def thumbnail_image(input_image, output_image, width, height, anchor, filter_name, workers, verbose):
    """Scale and crop INPUT_IMAGE to exactly WIDTH x HEIGHT and save to OUTPUT_IMAGE."""
    setup_logging(verbose)
    try:
        src = load_buffer(input_image)
        if verbose:
            click.echo(
                f"Thumbnailing '{input_image}' ({src.width}x{src.height}) -> "
                f"{width}x{height} anchored at '{anchor}' using filter='{filter_name}'"
            )
        result = pfr.fill(src, width, height, anchor=pfr.Anchor(anchor.lower()),
                          filter=filter_name, workers=workers)
        save_buffer(result, output_image)
        if verbose:
            click.echo("Thumbnail completed successfully!")
    except (OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["resize_image", "fit_image", "thumbnail_image"]
