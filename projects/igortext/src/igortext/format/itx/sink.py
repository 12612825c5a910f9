"""Adapters between the ITX writer and text or binary sinks."""

import io
from collections.abc import Callable
from typing import Any, Protocol


class SinkWriteError(OSError):
    """A sink rejected part of an ITX body."""


class Sink(Protocol):
    """Anything with a ``write`` method, receiving ``str`` or ``bytes``."""

    def write(self, data: Any, /) -> Any: ...


def is_binary_sink(sink: Sink) -> bool:
    """Check whether a sink expects bytes rather than text."""
    if isinstance(sink, io.TextIOBase):
        return False
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(sink, "mode", "")


def make_writer(sink: Sink, encoding: str) -> Callable[[str], None]:
    """Return a callable that writes text to the sink.

    Text is encoded with ``encoding`` for binary sinks. Any exception raised
    by the sink or the encoder is re-raised as SinkWriteError.
    """
    binary = is_binary_sink(sink)

    def write(text: str) -> None:
        try:
            sink.write(text.encode(encoding) if binary else text)
        except Exception as e:
            raise SinkWriteError(f"Failed to write ITX data: {e}") from e

    return write
