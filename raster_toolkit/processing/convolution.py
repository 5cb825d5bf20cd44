"""
Convolution engine.

Every output pixel is a weighted sum over the neighborhood of the same
coordinate in the *input*, so the pass is split in two: filtered pixels
are computed from an untouched snapshot, then written back to the live
image. Neighbors that fall off the canvas count as black.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..core import BLACK, Image, InvalidConfigurationError, OutOfBoundsError, Pixel, require_present
from ..core.types import ValidationSeverity
from ..core.validation import ValidationEngine, errors_only, format_issues
from ..logger import get_logger

_logger = get_logger("convolution")


@dataclass(frozen=True)
class Kernel:
    """Immutable square weight matrix with an odd side length."""
    weights: Tuple[Tuple[float, ...], ...]

    def __post_init__(self):
        issues = ValidationEngine.validate_kernel(self.weights)
        errors = errors_only(issues)
        if errors:
            raise InvalidConfigurationError(f"Invalid kernel: {format_issues(errors)}")
        for issue in issues:
            if issue.severity == ValidationSeverity.WARNING:
                _logger.warning("%s", issue)
        object.__setattr__(
            self, "weights", tuple(tuple(float(w) for w in row) for row in self.weights)
        )

    @property
    def size(self) -> int:
        return len(self.weights)

    @property
    def center(self) -> int:
        return self.size // 2


def as_kernel(weights: Sequence[Sequence[float]]) -> Kernel:
    return weights if isinstance(weights, Kernel) else Kernel(weights)


def convolve(image: Image, kernel: Kernel) -> None:
    """Filter image in place with kernel."""
    require_present(image, "image")

    # Phase 1: read-only pass over a snapshot
    snapshot = image.copy()
    filtered: List[List[Pixel]] = [
        [_filter_pixel(snapshot, kernel, x, y) for y in range(snapshot.height)]
        for x in range(snapshot.width)
    ]

    # Phase 2: replace
    for x, y in image.coordinates():
        image.replace_pixel(x, y, filtered[x][y])


def _neighbor(image: Image, x: int, y: int) -> Pixel:
    try:
        return image.pixel_at(x, y)
    except OutOfBoundsError:
        return BLACK


def _filter_pixel(image: Image, kernel: Kernel, x: int, y: int) -> Pixel:
    center = kernel.center
    red = green = blue = 0.0
    for i, row in enumerate(kernel.weights):
        for j, weight in enumerate(row):
            neighbor = _neighbor(image, x + i - center, y + j - center)
            red += weight * neighbor.red
            green += weight * neighbor.green
            blue += weight * neighbor.blue
    return Pixel(int(red), int(green), int(blue))
