"""
Validation engine for Raster Toolkit.

Structured validation rules for pixel grids, kernels and color matrices.
Returns ValidationIssue list; ERROR severity blocks construction.
"""

import math
from pathlib import Path
from typing import Any, List, Sequence

from .errors import InvalidArgumentError
from .types import Pixel, ValidationIssue, ValidationSeverity


def require_present(value: Any, name: str) -> Any:
    """Return value unchanged, or raise InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value


def errors_only(issues: List[ValidationIssue]) -> List[ValidationIssue]:
    """Filter an issue list down to blocking errors."""
    return [i for i in issues if i.severity == ValidationSeverity.ERROR]


def format_issues(issues: List[ValidationIssue]) -> str:
    return "; ".join(str(i) for i in issues)


class ValidationEngine:
    """Validates pixel grids and operation parameters."""

    @staticmethod
    def validate_grid(grid: Sequence[Sequence[Pixel]]) -> List[ValidationIssue]:
        """
        Validate a column-major pixel grid (grid[x][y]).

        Returns list of ValidationIssue; an Image cannot be built if any ERROR present.
        """
        issues = []

        if grid is None or len(grid) == 0:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="EMPTY_GRID",
                    message="Image must have at least one column.",
                )
            )
            return issues

        height = len(grid[0])
        if height == 0:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="EMPTY_COLUMN",
                    message="Image must have at least one row.",
                )
            )
            return issues

        # Every column must share the height of the first
        for x, column in enumerate(grid):
            if column is None or len(column) != height:
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="RAGGED_GRID",
                        message=f"Column {x} does not have height {height}.",
                        context={"column": x, "expected_height": height},
                    )
                )
                continue

            for y, pixel in enumerate(column):
                if not isinstance(pixel, Pixel):
                    issues.append(
                        ValidationIssue(
                            severity=ValidationSeverity.ERROR,
                            code="INVALID_PIXEL",
                            message=f"Cell ({x}, {y}) is not a Pixel: {pixel!r}",
                            context={"x": x, "y": y},
                        )
                    )

        return issues

    @staticmethod
    def validate_kernel(weights: Sequence[Sequence[float]]) -> List[ValidationIssue]:
        """Validate a convolution kernel: square, odd side length, numeric."""
        issues = []

        size = len(weights) if weights is not None else 0
        if size == 0:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="EMPTY_KERNEL",
                    message="Kernel must have at least one row.",
                )
            )
            return issues

        if size % 2 == 0:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="EVEN_KERNEL",
                    message=f"Kernel side length must be odd, got {size}.",
                    context={"size": size},
                )
            )

        for i, row in enumerate(weights):
            if len(row) != size:
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="NON_SQUARE_KERNEL",
                        message=f"Kernel row {i} has {len(row)} weights, expected {size}.",
                        context={"row": i},
                    )
                )
            issues.extend(ValidationEngine._validate_numbers(row, f"Kernel row {i}"))

        # A kernel summing to zero is legal (edge detection) but blackens flat areas
        if not issues and sum(sum(row) for row in weights) == 0:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="ZERO_SUM_KERNEL",
                    message="Kernel weights sum to zero.",
                )
            )

        return issues

    @staticmethod
    def validate_color_matrix(rows: Sequence[Sequence[float]]) -> List[ValidationIssue]:
        """Validate a 3x3 color matrix."""
        issues = []

        if rows is None or len(rows) != 3 or any(len(row) != 3 for row in rows):
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="INVALID_MATRIX_SHAPE",
                    message="Color matrix must be 3x3.",
                )
            )
            return issues

        for i, row in enumerate(rows):
            issues.extend(ValidationEngine._validate_numbers(row, f"Matrix row {i}"))

        return issues

    @staticmethod
    def validate_export_path(path: Path) -> List[ValidationIssue]:
        """Validate an export target path."""
        issues = []

        if path.exists() and path.is_dir():
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    code="PATH_IS_DIRECTORY",
                    message=f"Export target is a directory: {path}",
                    context={"path": str(path)},
                )
            )
        elif path.exists():
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.WARNING,
                    code="OVERWRITE",
                    message=f"Export target exists and will be overwritten: {path}",
                    context={"path": str(path)},
                )
            )

        return issues

    @staticmethod
    def _validate_numbers(values: Sequence[Any], label: str) -> List[ValidationIssue]:
        issues = []
        for value in values:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="NON_NUMERIC_WEIGHT",
                        message=f"{label} contains a non-numeric value: {value!r}",
                    )
                )
            elif not math.isfinite(value):
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.ERROR,
                        code="NON_FINITE_WEIGHT",
                        message=f"{label} contains a non-finite value: {value!r}",
                    )
                )
        return issues
