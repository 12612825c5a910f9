"""Igor Text (ITX) wave writer.

This module turns a WaveDescriptor and a sequence of samples into the text
of an ITX file, either as a string or streamed into a sink.
"""

import logging
from collections.abc import Iterable, Iterator
from itertools import islice
from pathlib import Path
from typing import SupportsFloat

from igortext.format.itx.constants import (
    BEGIN_KEYWORD,
    COMMAND_PREFIX,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_ENCODING,
    END_KEYWORD,
    ITX_HEADER,
    NEWLINE,
    WAVES_KEYWORD,
)
from igortext.format.itx.numeric import format_number
from igortext.format.itx.sink import Sink, make_writer
from igortext.format.types import WaveDescriptor
from igortext.format.validation import (
    ValidationError,
    validate_descriptor,
    validate_sample_shape,
)

logger = logging.getLogger(__name__)


def serialize_to_string(
    descriptor: WaveDescriptor,
    data: Iterable[SupportsFloat],
) -> str:
    """Serialize a wave to ITX text.

    Args:
        descriptor: Name, units and scaling of the wave.
        data: Samples in wave order. Consumed once.

    Returns:
        The complete ITX body.

    Raises:
        ValidationError: If the descriptor or data shape is invalid.
    """
    _validate(descriptor, data)
    return "".join(_iter_itx_chunks(descriptor, data, DEFAULT_CHUNK_SIZE))


def serialize_to(
    descriptor: WaveDescriptor,
    data: Iterable[SupportsFloat],
    sink: Sink,
    *,
    encoding: str = DEFAULT_ENCODING,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Stream a wave as ITX text into a sink.

    The output equals serialize_to_string() for the same arguments. Nothing
    is written if validation fails. If the sink fails midway, whatever was
    already written stays in the sink.

    Args:
        descriptor: Name, units and scaling of the wave.
        data: Samples in wave order. Consumed once.
        sink: Text or binary object with a ``write`` method.
        encoding: Encoding used for binary sinks.
        chunk_size: Maximum number of sample lines per write.

    Raises:
        ValidationError: If the descriptor or data shape is invalid.
        SinkWriteError: If the sink rejects a write.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    _validate(descriptor, data)
    write = make_writer(sink, encoding)
    for chunk in _iter_itx_chunks(descriptor, data, chunk_size):
        write(chunk)


def save_itx(
    path: Path | str,
    descriptor: WaveDescriptor,
    data: Iterable[SupportsFloat],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Path:
    """Write a wave to an ITX file, replacing any existing file.

    Args:
        path: Output file path. Parent directories are created.
        descriptor: Name, units and scaling of the wave.
        data: Samples in wave order. Consumed once.
        encoding: Text encoding of the file.

    Returns:
        Path to the written file.

    Raises:
        ValidationError: If the descriptor or data shape is invalid. No file
            is created in that case.
        SinkWriteError: If writing to the file fails.
    """
    path = Path(path)
    _validate(descriptor, data)

    path.parent.mkdir(parents=True, exist_ok=True)
    # Binary mode keeps newlines as "\n" on every platform
    with open(path, "wb") as f:
        write = make_writer(f, encoding)
        for chunk in _iter_itx_chunks(descriptor, data, DEFAULT_CHUNK_SIZE):
            write(chunk)

    logger.info(f"Wrote ITX wave '{descriptor.name}' to {path}")
    return path


def _validate(descriptor: WaveDescriptor, data: Iterable[SupportsFloat]) -> None:
    """Raise ValidationError for unwritable input and log warnings."""
    result = validate_descriptor(descriptor)
    if not result.valid:
        raise ValidationError(f"Wave validation failed: {result.errors}", field="name")

    shape_result = validate_sample_shape(data)
    if not shape_result.valid:
        raise ValidationError(f"Wave data validation failed: {shape_result.errors}", field="data")

    for warning in result.warnings:
        logger.warning(warning)


def _iter_itx_chunks(
    descriptor: WaveDescriptor,
    data: Iterable[SupportsFloat],
    chunk_size: int,
) -> Iterator[str]:
    """Yield the ITX body in pieces: header, sample blocks, trailer."""
    name = descriptor.name
    yield (
        f"{ITX_HEADER}{NEWLINE}"
        f"{WAVES_KEYWORD} '{name}'{NEWLINE}"
        f"{BEGIN_KEYWORD}{NEWLINE}"
    )

    samples = iter(data)
    while block := list(islice(samples, chunk_size)):
        yield "".join(f"{format_number(value)}{NEWLINE}" for value in block)

    yield f"{END_KEYWORD}{NEWLINE}"
    yield _format_scale_directive(descriptor) + NEWLINE


def _format_scale_directive(descriptor: WaveDescriptor) -> str:
    """Format the ``X SetScale`` command line for both axes."""
    x_scale = descriptor.x_scale
    y_scale = descriptor.y_scale
    x_unit = descriptor.x_unit_name or ""
    y_unit = descriptor.y_unit_name or ""
    name = descriptor.name

    return (
        f"{COMMAND_PREFIX} SetScale/P x "
        f"{format_number(x_scale.start)},{format_number(x_scale.delta)},\"{x_unit}\", '{name}'; "
        f"SetScale y "
        f"{format_number(y_scale.start)},{format_number(y_scale.delta)},\"{y_unit}\", '{name}'"
    )
