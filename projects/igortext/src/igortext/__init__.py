"""igortext - Igor Text wave export toolkit.

This package writes one-dimensional numeric data, together with its wave
name, axis scaling and unit labels, as Igor Text (ITX) files.

Example Usage
-------------
>>> from igortext import Scale, WaveDescriptor, save_itx
>>> import numpy as np
>>>
>>> wavelengths = Scale.from_start_and_end(400.0, 700.0, 300)
>>> descriptor = WaveDescriptor(name="absorbance", x_unit_name="nm", x_scale=wavelengths)
>>>
>>> save_itx("absorbance.itx", descriptor, np.random.rand(300))  # doctest: +SKIP
"""

# Re-export format module for convenience
from igortext.format import (
    Scale,
    SinkWriteError,
    ValidationError,
    ValidationResult,
    WaveDescriptor,
    format_number,
    infer_x_scale,
    load_npy_samples,
    load_text_samples,
    save_itx,
    serialize_to,
    serialize_to_string,
    validate_descriptor,
)

__all__ = [
    # Types
    "Scale",
    "WaveDescriptor",
    # Writer
    "serialize_to_string",
    "serialize_to",
    "save_itx",
    "format_number",
    "SinkWriteError",
    # Validation
    "validate_descriptor",
    "ValidationResult",
    "ValidationError",
    # Importers
    "load_text_samples",
    "load_npy_samples",
    "infer_x_scale",
]
