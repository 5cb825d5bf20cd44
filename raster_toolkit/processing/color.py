"""
Color-matrix engine.

Each output pixel depends only on the same input pixel, so the image is
transformed in place without a snapshot.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..core import Image, InvalidConfigurationError, Pixel, require_present
from ..core.validation import ValidationEngine, errors_only, format_issues


@dataclass(frozen=True)
class ColorMatrix:
    """Immutable 3x3 matrix mapping (R, G, B) to (R, G, B)."""
    rows: Tuple[Tuple[float, float, float], ...]

    def __post_init__(self):
        errors = errors_only(ValidationEngine.validate_color_matrix(self.rows))
        if errors:
            raise InvalidConfigurationError(f"Invalid color matrix: {format_issues(errors)}")
        object.__setattr__(
            self, "rows", tuple(tuple(float(v) for v in row) for row in self.rows)
        )

    def transform(self, red: float, green: float, blue: float) -> Tuple[float, float, float]:
        """Multiply the matrix by the (red, green, blue) column vector."""
        return tuple(
            m0 * red + m1 * green + m2 * blue
            for m0, m1, m2 in self.rows
        )


def as_color_matrix(rows: Sequence[Sequence[float]]) -> ColorMatrix:
    return rows if isinstance(rows, ColorMatrix) else ColorMatrix(rows)


def transform_colors(image: Image, matrix: ColorMatrix) -> None:
    """Replace every pixel with matrix * pixel, truncated and clamped."""
    require_present(image, "image")
    for x, y in image.coordinates():
        pixel = image.pixel_at(x, y)
        red, green, blue = matrix.transform(pixel.red, pixel.green, pixel.blue)
        image.replace_pixel(x, y, Pixel(int(red), int(green), int(blue)))
