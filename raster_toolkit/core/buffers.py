"""
Conversion between Image grids and numpy pixel buffers.

Buffers follow the (height, width, channels) layout used by OpenImageIO.
"""

import numpy as np

from .errors import InvalidArgumentError
from .image import Image
from .types import Pixel


def image_to_array(image: Image) -> np.ndarray:
    """Return an (H, W, 3) uint8 buffer holding the image's pixels."""
    buf = np.zeros((image.height, image.width, 3), dtype=np.uint8)
    for x, y in image.coordinates():
        buf[y, x] = image.pixel_at(x, y).as_tuple()
    return buf


def array_to_image(pixels: np.ndarray) -> Image:
    """
    Build an Image from an (H, W) or (H, W, C) buffer.

    Single-channel and two-channel (gray + alpha) data are replicated to RGB;
    channels beyond the third are dropped. Float buffers are treated as
    normalized [0, 1] data.
    """
    if pixels is None:
        raise InvalidArgumentError("Pixel buffer must not be None")

    arr = np.asarray(pixels)
    if arr.ndim == 2:
        arr = arr[:, :, np.newaxis]
    if arr.ndim != 3 or arr.shape[0] == 0 or arr.shape[1] == 0 or arr.shape[2] == 0:
        raise InvalidArgumentError(f"Unsupported pixel buffer shape: {arr.shape}")

    if np.issubdtype(arr.dtype, np.floating):
        arr = np.clip(arr, 0.0, 1.0) * 255.0

    if arr.shape[2] < 3:
        arr = np.repeat(arr[:, :, :1], 3, axis=2)
    else:
        arr = arr[:, :, :3]

    rows = arr.astype(np.int64).tolist()
    height, width = arr.shape[0], arr.shape[1]
    grid = [
        [Pixel(*rows[y][x]) for y in range(height)]
        for x in range(width)
    ]
    return Image(grid)
