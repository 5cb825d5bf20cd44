"""Core data types, validation and error taxonomy for Raster Toolkit."""

from .errors import InvalidArgumentError, OutOfBoundsError, InvalidConfigurationError
from .types import BLACK, OperationId, Pixel, ValidationIssue, ValidationSeverity
from .validation import ValidationEngine, require_present
from .image import Image
from .programmatic import Checkerboard, ProgrammaticCreator

__all__ = [
    "InvalidArgumentError",
    "OutOfBoundsError",
    "InvalidConfigurationError",
    "BLACK",
    "OperationId",
    "Pixel",
    "ValidationIssue",
    "ValidationSeverity",
    "ValidationEngine",
    "require_present",
    "Image",
    "Checkerboard",
    "ProgrammaticCreator",
]
