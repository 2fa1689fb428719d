"""Helpers shared by the PyFastResample command line tools."""

import logging
import sys
from pathlib import Path

import click
from PIL import Image

from ..filters import filter_names
from ..image import PixelBuffer

# Formats without an alpha channel
_OPAQUE_SUFFIXES = {".jpg", ".jpeg", ".jfif"}


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def load_buffer(path) -> PixelBuffer:
    """Read an image file into an RGBA PixelBuffer."""
    with Image.open(path) as img:
        return PixelBuffer.from_pil(img)


def save_buffer(buffer: PixelBuffer, path) -> None:
    """Write a PixelBuffer, dropping alpha for formats that cannot store it."""
    img = buffer.to_pil()
    if Path(path).suffix.lower() in _OPAQUE_SUFFIXES:
        img = img.convert("RGB")
    img.save(path)


filter_option = click.option(
    "--filter",
    "-f",
    "filter_name",
    type=click.Choice(filter_names(), case_sensitive=False),
    default="lanczos",
    show_default=True,
    help="Resampling filter",
)

workers_option = click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads (default: PYFASTRESAMPLE_WORKERS or CPU count)",
)

verbose_option = click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")


__all__ = ["setup_logging", "load_buffer", "save_buffer", "filter_option", "workers_option", "verbose_option"]
