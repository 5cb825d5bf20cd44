"""
Processing executor - resolves operations and applies them to images.

This module is the single entry point the model layer uses to run an
operation: it validates inputs, resolves the operation from a read-only
registry and applies it in place.
"""

from typing import Mapping, Optional

from ..core import Image, OperationId, require_present
from ..logger import get_logger
from .operations import OPERATION_REGISTRY, ImageOperation, get_operation

_logger = get_logger("executor")


class ProcessingExecutor:
    """Executes registered operations on Image objects."""

    def __init__(self, registry: Optional[Mapping[OperationId, ImageOperation]] = None):
        self.registry = OPERATION_REGISTRY if registry is None else registry

    def execute(self, image: Image, operation_id) -> Image:
        """
        Apply a single operation to image.

        Args:
            image: Image to mutate in place
            operation_id: OperationId member or its name (e.g. "blur")

        Returns:
            The same image, after mutation
        """
        require_present(image, "image")
        require_present(operation_id, "operation_id")

        operation = self.resolve(operation_id)
        _logger.debug("applying %s to %r", operation.name, image)
        operation.apply(image)
        return image

    def resolve(self, operation_id) -> ImageOperation:
        """Return the registered operation for operation_id."""
        return get_operation(operation_id, self.registry)
