"""Unit tests for the PixelBuffer container."""

import numpy as np
import pytest
from PIL import Image

from pyfastresample import Anchor, InvalidDimension, PixelBuffer
from pyfastresample.image import new


@pytest.mark.unit
def test_new_fill_and_store_length():
    buf = new(5, 3, fill=(1, 2, 3, 4))
    assert buf.size == (5, 3)
    assert buf.pixels.size == 5 * 3 * 4
    assert buf.pixel(4, 2) == (1, 2, 3, 4)


@pytest.mark.unit
def test_rgb_fill_is_opaque():
    assert new(2, 2, fill=(9, 8, 7)).pixel(0, 0) == (9, 8, 7, 255)


@pytest.mark.unit
@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 2), (2.5, 2)])
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimension):
        PixelBuffer.new(width, height)


@pytest.mark.unit
def test_invalid_fill_colour():
    with pytest.raises(ValueError):
        new(2, 2, fill=(300, 0, 0, 0))
    with pytest.raises(ValueError):
        new(2, 2, fill=(1, 2))


@pytest.mark.unit
def test_from_array_shapes():
    gray = np.array([[0, 128], [255, 64]], dtype=np.uint8)
    buf = PixelBuffer.from_array(gray)
    assert buf.pixel(1, 0) == (128, 128, 128, 255)

    rgb = np.zeros((2, 3, 3), dtype=np.uint8)
    rgb[..., 2] = 77
    assert PixelBuffer.from_array(rgb).pixel(2, 1) == (0, 0, 77, 255)

    with pytest.raises(ValueError):
        PixelBuffer.from_array(np.zeros((2, 2, 2), dtype=np.uint8))


@pytest.mark.unit
def test_from_array_copies_input():
    data = np.zeros((2, 2, 4), dtype=np.uint8)
    buf = PixelBuffer.from_array(data)
    data[0, 0, 0] = 99
    assert buf.pixel(0, 0)[0] == 0


@pytest.mark.unit
def test_from_bytes_roundtrip_and_length_check():
    raw = bytes(range(2 * 2 * 4))
    buf = PixelBuffer.from_bytes(2, 2, raw)
    assert buf.to_bytes() == raw
    assert buf.pixel(1, 0) == (4, 5, 6, 7)
    with pytest.raises(ValueError):
        PixelBuffer.from_bytes(2, 2, raw[:-1])


@pytest.mark.unit
def test_views_are_read_only(sample_image):
    with pytest.raises(ValueError):
        sample_image.pixels[0] = 1
    with pytest.raises(ValueError):
        sample_image.array[0, 0, 0] = 1


@pytest.mark.unit
def test_clone_is_independent(sample_image):
    copy = sample_image.clone()
    assert copy == sample_image
    assert copy is not sample_image
    assert not np.shares_memory(copy.array, sample_image.array)


@pytest.mark.unit
def test_pixel_bounds(sample_image):
    with pytest.raises(IndexError):
        sample_image.pixel(sample_image.width, 0)


@pytest.mark.unit
def test_pil_bridge():
    img = Image.new("RGB", (4, 3), (10, 20, 30))
    buf = PixelBuffer.from_pil(img)
    assert buf.size == (4, 3)
    assert buf.pixel(3, 2) == (10, 20, 30, 255)

    back = buf.to_pil()
    assert back.mode == "RGBA"
    assert back.size == (4, 3)
    assert back.getpixel((0, 0)) == (10, 20, 30, 255)


@pytest.mark.unit
def test_crop():
    data = np.arange(4 * 3 * 4, dtype=np.uint8).reshape(3, 4, 4)
    buf = PixelBuffer.from_array(data)
    part = buf.crop(1, 1, 2, 2)
    np.testing.assert_array_equal(part.to_array(), data[1:3, 1:3])
    with pytest.raises(InvalidDimension):
        buf.crop(3, 0, 2, 2)


@pytest.mark.unit
@pytest.mark.parametrize(
    "anchor,x0,y0",
    [
        (Anchor.TOP_LEFT, 0, 0),
        (Anchor.TOP, 2, 0),
        (Anchor.TOP_RIGHT, 4, 0),
        (Anchor.LEFT, 0, 1),
        (Anchor.CENTER, 2, 1),
        (Anchor.RIGHT, 4, 1),
        (Anchor.BOTTOM_LEFT, 0, 3),
        (Anchor.BOTTOM, 2, 3),
        (Anchor.BOTTOM_RIGHT, 4, 3),
    ],
)
def test_crop_anchor_placement(anchor, x0, y0):
    data = np.zeros((5, 6, 4), dtype=np.uint8)
    data[..., 0] = np.arange(6)[None, :]
    data[..., 1] = np.arange(5)[:, None]
    part = PixelBuffer.from_array(data).crop_anchor(2, 2, anchor)
    assert part.pixel(0, 0)[:2] == (x0, y0)


@pytest.mark.unit
def test_crop_anchor_clips_to_source():
    buf = new(3, 2)
    assert buf.crop_anchor(10, 10, "center").size == (3, 2)
