import numpy as np
import pytest

from raster_toolkit.core import InvalidArgumentError, Pixel
from raster_toolkit.core.buffers import array_to_image, image_to_array


def test_image_to_array_is_height_width_channels(wide_image):
    arr = image_to_array(wide_image)
    assert arr.shape == (2, 4, 3)
    assert arr.dtype == np.uint8
    assert arr[1, 3].tolist() == [150, 100, 25]


def test_array_to_image_inverts_image_to_array(wide_image):
    assert array_to_image(image_to_array(wide_image)) == wide_image


def test_gray_and_alpha_buffers_become_rgb():
    gray = np.array([[7, 8]], dtype=np.uint8)
    image = array_to_image(gray)
    assert (image.width, image.height) == (2, 1)
    assert image.pixel_at(1, 0) == Pixel(8, 8, 8)

    rgba = np.array([[[1, 2, 3, 4]]], dtype=np.uint8)
    assert array_to_image(rgba).pixel_at(0, 0) == Pixel(1, 2, 3)


def test_float_buffers_are_normalized():
    arr = np.array([[[1.0, 0.5, -1.0]]], dtype=np.float32)
    assert array_to_image(arr).pixel_at(0, 0) == Pixel(255, 127, 0)


@pytest.mark.parametrize("arr", [None, np.zeros((0, 3, 3)), np.zeros(5)])
def test_rejects_unusable_buffers(arr):
    with pytest.raises(InvalidArgumentError):
        array_to_image(arr)
