"""
Processing system for Raster Toolkit.

Provides color-matrix and convolution operations that mutate images in
place, a read-only registry of the built-in operations, and the executor
that dispatches to them.
"""

from .color import ColorMatrix, transform_colors
from .convolution import Kernel, convolve
from .operations import (
    ImageOperation,
    ColorTransformOperation,
    ConvolutionOperation,
    SepiaOperation,
    MonochromeOperation,
    BlurOperation,
    SharpenOperation,
)
from .operations import (
    build_registry,
    get_operation,
    get_operations_by_category,
    get_all_categories,
    OPERATION_REGISTRY,
)
from .executor import ProcessingExecutor

__all__ = [
    "ColorMatrix",
    "Kernel",
    "transform_colors",
    "convolve",
    "ImageOperation",
    "ColorTransformOperation",
    "ConvolutionOperation",
    "ProcessingExecutor",
    # Helpers
    "build_registry",
    "get_operation",
    "get_operations_by_category",
    "get_all_categories",
    "OPERATION_REGISTRY",
    # Operations
    "SepiaOperation",
    "MonochromeOperation",
    "BlurOperation",
    "SharpenOperation",
]
