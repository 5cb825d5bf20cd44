"""Import/export contract for file format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from ..core import Image


class ImageFile(ABC):
    """Reads and writes Image objects in one file format."""

    @abstractmethod
    def import_file(self, path: Union[str, Path]) -> Image:
        ...

    @abstractmethod
    def export_file(self, path: Union[str, Path], image: Image) -> None:
        ...
