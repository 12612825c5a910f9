"""Validation of wave descriptors and sample data.

Descriptors may be built with missing or suspicious fields. These functions
run right before serialization and decide whether the wave can be written.
Errors block output; warnings only flag text Igor may misread.
"""

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from igortext.format.types import WaveDescriptor

# Igor 8 and later allow wave names up to 255 bytes
MAX_WAVE_NAME_BYTES = 255


class ValidationError(Exception):
    """Error during wave validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


@dataclass
class ValidationResult:
    """Result of validation with optional warnings."""

    valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(valid=False, errors=errors, warnings=warnings or [])


def validate_descriptor(descriptor: WaveDescriptor) -> ValidationResult:
    """Validate a wave descriptor for serialization.

    This rejects:
    - a missing or empty wave name

    And warns about:
    - single quotes or line breaks in the name
    - double quotes or line breaks in the unit names
    - names longer than Igor's name limit
    - non-finite scale values

    Args:
        descriptor: The descriptor about to be written.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    name = descriptor.name
    if not name:
        errors.append("empty wave name: the wave name must not be empty")
    else:
        if "'" in name:
            warnings.append(f"wave name {name!r} contains a single quote and will not parse in Igor")
        if _has_line_break(name):
            warnings.append(f"wave name {name!r} contains a line break")
        name_bytes = len(name.encode("utf-8"))
        if name_bytes > MAX_WAVE_NAME_BYTES:
            warnings.append(
                f"wave name is {name_bytes} bytes long, Igor allows at most {MAX_WAVE_NAME_BYTES}"
            )

    for axis, unit in (("x", descriptor.x_unit_name), ("y", descriptor.y_unit_name)):
        if not unit:
            continue
        if '"' in unit:
            warnings.append(f"{axis} unit {unit!r} contains a double quote")
        if _has_line_break(unit):
            warnings.append(f"{axis} unit {unit!r} contains a line break")

    for axis, scale in (("x", descriptor.x_scale), ("y", descriptor.y_scale)):
        if not (math.isfinite(scale.start) and math.isfinite(scale.delta)):
            warnings.append(
                f"{axis} scale ({scale.start}, {scale.delta}) has non-finite values"
            )

    if errors:
        return ValidationResult.failure(errors, warnings)
    return ValidationResult.success(warnings)


def validate_sample_shape(data: Any) -> ValidationResult:
    """Check that array data is one-dimensional.

    Only numpy arrays are inspected; other iterables are consumed lazily by
    the writer and cannot be checked up front.
    """
    if isinstance(data, np.ndarray) and data.ndim != 1:
        return ValidationResult.failure(
            [f"wave data must be one-dimensional, got shape {data.shape}"]
        )
    return ValidationResult.success()


def _has_line_break(text: str) -> bool:
    """Check whether text contains a carriage return or line feed."""
    return "\n" in text or "\r" in text
