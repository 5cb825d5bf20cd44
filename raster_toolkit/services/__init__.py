"""Services module initialization."""
from .settings import Settings
from .image_model import ImageProcessingModel

__all__ = ["Settings", "ImageProcessingModel"]
