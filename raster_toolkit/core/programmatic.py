"""
Programmatic image creators.

A creator is a zero-argument factory: its parameters are fixed at
construction and create() builds a fresh Image on every call.
"""

from abc import ABC, abstractmethod
from math import isqrt

from .errors import InvalidArgumentError
from .image import Image
from .types import Pixel
from .validation import require_present


class ProgrammaticCreator(ABC):
    """Produces a synthetic Image."""

    @abstractmethod
    def create(self) -> Image:
        ...


class Checkerboard(ProgrammaticCreator):
    """
    Square checkerboard of two alternating colors.

    Args:
        size: Requested side length in pixels. Rounded down so every square
            has the same whole-pixel size.
        num_squares: Requested number of squares. Rounded down to the
            nearest perfect square so the board is square.
        first_color: Color of the top-left square.
        second_color: The alternating color.
    """

    def __init__(self, size: int, num_squares: int, first_color: Pixel, second_color: Pixel):
        if size < 1 or num_squares < 1:
            raise InvalidArgumentError("Numerical arguments must be positive")

        self.squares_per_side = isqrt(num_squares)
        if size < self.squares_per_side:
            raise InvalidArgumentError(
                f"Size {size} is too small for {self.squares_per_side} squares per side"
            )

        self.size = size
        self.num_squares = num_squares
        self.first_color = require_present(first_color, "first_color")
        self.second_color = require_present(second_color, "second_color")

    @property
    def square_size(self) -> int:
        return self.size // self.squares_per_side

    @property
    def side_length(self) -> int:
        """Actual side length of the generated board, in pixels."""
        return self.square_size * self.squares_per_side

    def create(self) -> Image:
        square = self.square_size
        side = self.side_length
        grid = []
        for x in range(side):
            column = []
            for y in range(side):
                if (x // square + y // square) % 2 == 0:
                    column.append(self.first_color)
                else:
                    column.append(self.second_color)
            grid.append(column)
        return Image(grid)
