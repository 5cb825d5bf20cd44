"""
Operation definitions for the processing engine.

Each operation is an immutable pairing of an OperationId with the data it
needs: a color matrix for per-pixel transforms or a kernel for
neighborhood convolutions. Operations mutate images in place via apply().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping

from ..core import Image, InvalidArgumentError, InvalidConfigurationError, OperationId
from .color import ColorMatrix, as_color_matrix, transform_colors
from .convolution import Kernel, as_kernel, convolve


COLOR_TRANSFORMS = "Color Transforms"
FILTERING = "Filtering"


@dataclass(frozen=True)
class ImageOperation(ABC):
    """Base class for all image operations."""
    operation_id: OperationId
    name: str
    category: str

    @abstractmethod
    def apply(self, image: Image) -> None:
        """Mutate image in place."""
        ...


@dataclass(frozen=True)
class ColorTransformOperation(ImageOperation):
    """Per-pixel linear color transform."""
    matrix: ColorMatrix

    def __post_init__(self):
        object.__setattr__(self, "matrix", as_color_matrix(self.matrix))

    def apply(self, image: Image) -> None:
        transform_colors(image, self.matrix)


@dataclass(frozen=True)
class ConvolutionOperation(ImageOperation):
    """Per-pixel weighted sum over an odd x odd neighborhood."""
    kernel: Kernel

    def __post_init__(self):
        # Even or non-square kernels fail here, once, not on every apply()
        object.__setattr__(self, "kernel", as_kernel(self.kernel))

    def apply(self, image: Image) -> None:
        convolve(image, self.kernel)


# ============================================================================
# OPERATION IMPLEMENTATIONS
# ============================================================================

SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# Rec. 709 luma weights, repeated so all three channels carry the luma
MONOCHROME_MATRIX = (
    (0.2126, 0.7152, 0.0722),
    (0.2126, 0.7152, 0.0722),
    (0.2126, 0.7152, 0.0722),
)

BLUR_KERNEL = (
    (1 / 16, 1 / 8, 1 / 16),
    (1 / 8, 1 / 4, 1 / 8),
    (1 / 16, 1 / 8, 1 / 16),
)

SHARPEN_KERNEL = (
    (-1 / 8, -1 / 8, -1 / 8, -1 / 8, -1 / 8),
    (-1 / 8, 1 / 4, 1 / 4, 1 / 4, -1 / 8),
    (-1 / 8, 1 / 4, 1.0, 1 / 4, -1 / 8),
    (-1 / 8, 1 / 4, 1 / 4, 1 / 4, -1 / 8),
    (-1 / 8, -1 / 8, -1 / 8, -1 / 8, -1 / 8),
)


class SepiaOperation(ColorTransformOperation):
    """Warm brown sepia tone."""

    def __init__(self):
        super().__init__(
            operation_id=OperationId.SEPIA,
            name="Sepia",
            category=COLOR_TRANSFORMS,
            matrix=SEPIA_MATRIX,
        )


class MonochromeOperation(ColorTransformOperation):
    """Grayscale by luma."""

    def __init__(self):
        super().__init__(
            operation_id=OperationId.MONOCHROME,
            name="Monochrome",
            category=COLOR_TRANSFORMS,
            matrix=MONOCHROME_MATRIX,
        )


class BlurOperation(ConvolutionOperation):
    """3x3 Gaussian-style blur."""

    def __init__(self):
        super().__init__(
            operation_id=OperationId.BLUR,
            name="Blur",
            category=FILTERING,
            kernel=BLUR_KERNEL,
        )


class SharpenOperation(ConvolutionOperation):
    """5x5 sharpen."""

    def __init__(self):
        super().__init__(
            operation_id=OperationId.SHARPEN,
            name="Sharpen",
            category=FILTERING,
            kernel=SHARPEN_KERNEL,
        )


# ============================================================================
# REGISTRY
# ============================================================================

def build_registry(operations: Iterable[ImageOperation]) -> Mapping[OperationId, ImageOperation]:
    """Build a read-only registry. Each OperationId may be registered once."""
    registry = {}
    for operation in operations:
        if operation.operation_id in registry:
            raise InvalidConfigurationError(
                f"Operation registered twice: {operation.operation_id.value}"
            )
        registry[operation.operation_id] = operation
    return MappingProxyType(registry)


def default_operations() -> List[ImageOperation]:
    return [SepiaOperation(), MonochromeOperation(), SharpenOperation(), BlurOperation()]


# Registry of all available operations
OPERATION_REGISTRY = build_registry(default_operations())


def get_operation(
    operation_id, registry: Mapping[OperationId, ImageOperation] = OPERATION_REGISTRY
) -> ImageOperation:
    """Look up an operation by id or name in registry."""
    op_id = OperationId.parse(operation_id)
    operation = registry.get(op_id)
    if operation is None:
        raise InvalidArgumentError(f"No operation registered for {op_id.value}")
    return operation


def get_operations_by_category(category: str) -> List[ImageOperation]:
    """Get all operations in a specific category."""
    return [op for op in OPERATION_REGISTRY.values() if op.category == category]


def get_all_categories() -> List[str]:
    """Get all operation categories in order."""
    categories = []
    seen = set()
    for op in OPERATION_REGISTRY.values():
        if op.category not in seen:
            categories.append(op.category)
            seen.add(op.category)

    # Return in preferred order, then any others
    preferred_order = [COLOR_TRANSFORMS, FILTERING]
    result = [cat for cat in preferred_order if cat in categories]
    result.extend(cat for cat in categories if cat not in result)
    return result
