"""OpenImageIO-backed file handlers."""

from .adapter import OIIO_EXTENSIONS, OiioAdapter, OiioImageFile
from .ppm import P3, P6, VARIANTS, PpmFile

__all__ = ["OIIO_EXTENSIONS", "OiioAdapter", "OiioImageFile", "P3", "P6", "VARIANTS", "PpmFile"]
