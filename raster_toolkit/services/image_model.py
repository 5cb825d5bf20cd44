"""
Image processing model.

The model-facing surface used by a command layer: apply operations,
create programmatic images and move images in and out of files. File
handlers are selected by extension.
"""

from pathlib import Path
from typing import Dict, List, Optional, Union

from ..core import Image, InvalidArgumentError, require_present
from ..core.programmatic import ProgrammaticCreator
from ..core.types import ValidationSeverity
from ..core.validation import ValidationEngine, errors_only, format_issues
from ..formats import ImageFile
from ..logger import get_logger, parse_level, setup_logger
from ..oiio import OIIO_EXTENSIONS, OiioImageFile, PpmFile
from ..processing import ProcessingExecutor
from .settings import Settings

_logger = get_logger("model")


class ImageProcessingModel:
    """Processes images with registered operations and file handlers."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        executor: Optional[ProcessingExecutor] = None,
    ):
        self.settings = settings if settings is not None else Settings()
        self.executor = executor if executor is not None else ProcessingExecutor()
        self.files: Dict[str, ImageFile] = self._build_file_registry()

    def configure_logging(self) -> None:
        """Apply the saved log level to the project logger. Call from an entry point."""
        setup_logger(parse_level(self.settings.get_log_level()))

    def apply_operation(self, image: Image, operation_id) -> Image:
        """Apply the operation named by operation_id to image in place."""
        return self.executor.execute(image, operation_id)

    def create_programmatic_image(self, creator: ProgrammaticCreator) -> Image:
        """Build an image with a programmatic creator."""
        return require_present(creator, "creator").create()

    def import_image(self, filename: Union[str, Path]) -> Image:
        """Load an image; the handler is chosen by file extension."""
        path = Path(require_present(filename, "filename"))
        image = self._handler_for(path).import_file(path)
        self.settings.set_import_dir(path.resolve().parent)
        _logger.info("imported %s (%dx%d)", path, image.width, image.height)
        return image

    def export_image(self, filename: Union[str, Path], image: Image) -> None:
        """Save an image; the handler is chosen by file extension."""
        path = Path(require_present(filename, "filename"))
        require_present(image, "image")
        handler = self._handler_for(path)

        issues = ValidationEngine.validate_export_path(path)
        errors = errors_only(issues)
        if errors:
            raise InvalidArgumentError(f"Cannot export: {format_issues(errors)}")
        for issue in issues:
            if issue.severity == ValidationSeverity.WARNING:
                _logger.warning("%s", issue)

        path.parent.mkdir(parents=True, exist_ok=True)
        handler.export_file(path, image)
        self.settings.set_export_dir(path.resolve().parent)
        _logger.info("exported %s (%dx%d)", path, image.width, image.height)

    def supported_extensions(self) -> List[str]:
        return sorted(self.files)

    def _build_file_registry(self) -> Dict[str, ImageFile]:
        """Map each supported extension to its handler."""
        files: Dict[str, ImageFile] = {"ppm": PpmFile(self.settings.get_ppm_variant())}
        oiio_file = OiioImageFile()
        for ext in OIIO_EXTENSIONS:
            files[ext] = oiio_file
        return files

    def _handler_for(self, path: Path) -> ImageFile:
        extension = path.suffix.lower().lstrip(".")
        if not extension:
            raise InvalidArgumentError(f"File name has no extension: {path}")
        handler = self.files.get(extension)
        if handler is None:
            raise InvalidArgumentError(f"Unsupported file extension: .{extension}")
        return handler
