"""
Portable Pixmap (PPM) handler.

OIIO's PNM plugin reads P3 (ASCII) and P6 (binary) at any maxval. Export
is 8-bit, in the variant chosen at construction.
"""

from ..core import InvalidArgumentError
from .adapter import OiioImageFile

P3 = "P3"
P6 = "P6"
VARIANTS = (P3, P6)

# OIIO PNM output writes ASCII when 0, binary when 1
PNM_BINARY_ATTRIBUTE = "pnm:binary"


class PpmFile(OiioImageFile):
    """PPM handler. variant selects the format written on export."""

    def __init__(self, variant: str = P3):
        variant = (variant or "").upper()
        if variant not in VARIANTS:
            raise InvalidArgumentError(f"Unsupported PPM variant: {variant!r}")
        self.variant = variant
        super().__init__({PNM_BINARY_ATTRIBUTE: 1 if variant == P6 else 0})
