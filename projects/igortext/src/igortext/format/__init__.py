"""Igor Text wave format module.

This module provides functionality for writing one-dimensional numeric data
as Igor Text (ITX) files that Igor Pro loads as double-precision waves.

Format Overview
---------------
An ITX file is plain, line-oriented text:

    +----------------------------------------------------------+
    | IGOR                                                     |
    +----------------------------------------------------------+
    | WAVES/D 'name'                                           |
    | BEGIN                                                    |
    |   one sample per line, shortest round-trip decimal text  |
    | END                                                      |
    +----------------------------------------------------------+
    | X SetScale/P x start,delta,"unit", 'name';               |
    |   SetScale y start,delta,"unit", 'name'                  |
    +----------------------------------------------------------+

Example Usage
-------------
>>> from igortext.format import Scale, WaveDescriptor, serialize_to_string
>>> descriptor = WaveDescriptor(
...     name="spectrum",
...     x_unit_name="nm",
...     x_scale=Scale.from_start_and_delta(400.0, 0.5),
... )
>>> print(serialize_to_string(descriptor, [0.1, 0.25, 0.5]))  # doctest: +SKIP
"""

from igortext.format.types import Scale, WaveDescriptor
from igortext.format.validation import (
    ValidationError,
    ValidationResult,
    validate_descriptor,
)
from igortext.format.itx import (
    SinkWriteError,
    format_number,
    save_itx,
    serialize_to,
    serialize_to_string,
)
from igortext.format.importers import infer_x_scale, load_npy_samples, load_text_samples

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
