"""
Core data types for Raster Toolkit.

Value types use @dataclass and Enum for structured, immutable representations.
No loose tuples or dicts at the internal API boundary.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Tuple

from .errors import InvalidArgumentError


class ValidationSeverity(Enum):
    """Validation issue severity."""
    ERROR = auto()
    WARNING = auto()


class OperationId(Enum):
    """Closed set of operations the processing engine knows how to apply."""
    SEPIA = "sepia"
    MONOCHROME = "monochrome"
    SHARPEN = "sharpen"
    BLUR = "blur"

    @classmethod
    def parse(cls, value) -> "OperationId":
        """Resolve a member or a case-insensitive name to an OperationId."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unknown operation: {value!r}")


def _clamp_channel(value) -> int:
    value = int(value)
    if value < Pixel.MIN_VALUE:
        return Pixel.MIN_VALUE
    if value > Pixel.MAX_VALUE:
        return Pixel.MAX_VALUE
    return value


@dataclass(frozen=True)
class Pixel:
    """
    Immutable RGB color value.

    Channels are truncated to int and saturated into [0, 255] on
    construction; out-of-range input never raises.
    """
    red: int
    green: int
    blue: int

    MIN_VALUE: ClassVar[int] = 0
    MAX_VALUE: ClassVar[int] = 255

    def __post_init__(self):
        object.__setattr__(self, "red", _clamp_channel(self.red))
        object.__setattr__(self, "green", _clamp_channel(self.green))
        object.__setattr__(self, "blue", _clamp_channel(self.blue))

    def as_tuple(self) -> Tuple[int, int, int]:
        """Return (red, green, blue)."""
        return self.red, self.green, self.blue


BLACK = Pixel(0, 0, 0)


@dataclass
class ValidationIssue:
    """A validation problem."""
    severity: ValidationSeverity
    code: str
    message: str
    context: dict = field(default_factory=dict)

    def __str__(self) -> str:
        return f"[{self.severity.name}] {self.code}: {self.message}"
