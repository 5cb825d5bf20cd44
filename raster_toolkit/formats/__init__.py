"""File format handler contract."""

from .base import ImageFile

__all__ = ["ImageFile"]
