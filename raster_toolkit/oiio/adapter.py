"""
OpenImageIO adapter for reading and writing raster formats.

Handles API differences across OIIO versions and normalizes every input
to 8-bit RGB.
"""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

import OpenImageIO as oiio

from ..core import Image, InvalidArgumentError, require_present
from ..core.buffers import array_to_image, image_to_array
from ..formats.base import ImageFile
from ..logger import get_logger

_logger = get_logger("oiio")

# Extensions routed through the generic OpenImageIO handler; PPM has its own
OIIO_EXTENSIONS = ("png", "jpg", "jpeg", "bmp", "tif", "tiff", "tga", "exr")


class OiioAdapter:
    """Thin wrapper for robust OIIO bindings."""

    @staticmethod
    def read_image(filepath: Union[str, Path]) -> Image:
        """Read the first subimage of a file as an 8-bit RGB Image.

        Samples of any bit depth are rescaled to 0-255 by OIIO.
        """
        path = Path(filepath)
        if not path.is_file():
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        inp = oiio.ImageInput.open(str(path))
        if not inp:
            raise InvalidArgumentError(f"Cannot decode {path}: {OiioAdapter._last_error()}")
        try:
            pixels = inp.read_image("uint8")
            if pixels is None:
                raise InvalidArgumentError(f"read_image failed for {path}: {inp.geterror()}")
        finally:
            inp.close()

        return array_to_image(pixels)

    @staticmethod
    def write_image(
        filepath: Union[str, Path],
        image: Image,
        attributes: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Write image as 8-bit RGB; the format follows the file extension.

        attributes are set on the output ImageSpec, e.g. {"pnm:binary": 0}.
        """
        output_path_str = str(Path(filepath).resolve()).replace("\\", "/")
        pixel_data = image_to_array(image)

        out_spec = oiio.ImageSpec(image.width, image.height, 3, "uint8")
        for name, value in (attributes or {}).items():
            out_spec.attribute(name, value)

        out = oiio.ImageOutput.create(output_path_str)
        if not out:
            raise RuntimeError(f"ImageOutput.create failed: {OiioAdapter._last_error()}")
        try:
            if not out.open(output_path_str, out_spec):
                raise RuntimeError(f"out.open failed: OIIO error: {out.geterror()}")
            if not out.write_image(pixel_data):
                raise RuntimeError(f"write_image failed: OIIO error: {out.geterror()}")
        finally:
            out.close()

    @staticmethod
    def get_oiio_version() -> str:
        """Return OIIO version string."""
        return str(getattr(oiio, "__version__", "unknown"))

    @staticmethod
    def _last_error() -> str:
        return oiio.geterror() if hasattr(oiio, "geterror") else "unknown error"


class OiioImageFile(ImageFile):
    """ImageFile handler backed by OpenImageIO.

    attributes are passed to every export, for format-specific options.
    """

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None):
        self.attributes = dict(attributes or {})

    def import_file(self, path: Union[str, Path]) -> Image:
        image = OiioAdapter.read_image(require_present(path, "path"))
        _logger.debug("read %s (%dx%d)", path, image.width, image.height)
        return image

    def export_file(self, path: Union[str, Path], image: Image) -> None:
        OiioAdapter.write_image(
            require_present(path, "path"),
            require_present(image, "image"),
            self.attributes,
        )
        _logger.debug("wrote %s (%dx%d)", path, image.width, image.height)
