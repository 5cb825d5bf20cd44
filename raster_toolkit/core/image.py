"""
Mutable raster image made of Pixel values.

The grid is column-major: grid[x][y], with width the number of columns
and height the number of rows.
"""

from typing import Iterator, List, Sequence, Tuple

from .errors import InvalidArgumentError, OutOfBoundsError
from .types import Pixel
from .validation import ValidationEngine, errors_only, format_issues


class Image:
    """A width x height grid of pixels, addressable by (x, y)."""

    def __init__(self, grid: Sequence[Sequence[Pixel]]):
        errors = errors_only(ValidationEngine.validate_grid(grid))
        if errors:
            raise InvalidArgumentError(f"Invalid pixel grid: {format_issues(errors)}")
        self._grid: List[List[Pixel]] = [list(column) for column in grid]

    @classmethod
    def filled(cls, width: int, height: int, pixel: Pixel) -> "Image":
        """Create an image with every cell set to pixel."""
        if width < 1 or height < 1:
            raise InvalidArgumentError(f"Image dimensions must be positive, got {width}x{height}")
        return cls([[pixel] * height for _ in range(width)])

    @property
    def width(self) -> int:
        return len(self._grid)

    @property
    def height(self) -> int:
        return len(self._grid[0])

    def pixel_at(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y)."""
        self._check_bounds(x, y)
        return self._grid[x][y]

    def replace_pixel(self, x: int, y: int, pixel: Pixel) -> None:
        """Overwrite the pixel at (x, y) in place."""
        self._check_bounds(x, y)
        if not isinstance(pixel, Pixel):
            raise InvalidArgumentError(f"Expected a Pixel, got {pixel!r}")
        self._grid[x][y] = pixel

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Iterate every (x, y) in column-major order."""
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def copy(self) -> "Image":
        """Create a snapshot that shares no grid storage with this image."""
        # Pixels are immutable, so copying the columns is a deep copy
        return Image(self._grid)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside image of size {self.width}x{self.height}"
            )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
