import logging
import sys
from pathlib import Path
from typing import Annotated

import numpy as np
from cyclopts import App, Parameter
from numpy.typing import NDArray
from rich.console import Console
from rich.logging import RichHandler

from igortext.cli.validators import validate_non_negative_integer, validate_wave_name
from igortext.format import (
    Scale,
    SinkWriteError,
    ValidationError,
    WaveDescriptor,
    load_npy_samples,
    load_text_samples,
    save_itx,
    serialize_to,
)
from igortext.format.itx.constants import ITX_SUFFIX

app = App(name="igortext", help="A utility for exporting numeric data as Igor Text waves")
console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green")


def configure_logging() -> None:
    """Send igortext log warnings to standard error through rich."""
    logger = logging.getLogger("igortext")
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return
    handler = RichHandler(console=error_console, show_time=False, show_path=False)
    handler.setLevel(logging.WARNING)
    logger.addHandler(handler)


def load_samples(
    source: Path,
    column: int,
    x_column: int | None,
    delimiter: str | None,
    skip_rows: int,
) -> tuple[NDArray[np.float64], Scale | None]:
    """Load samples from a .npy or delimited text file."""
    if source.suffix.lower() == ".npy":
        if x_column is not None:
            raise ValueError("x_column is only supported for text files")
        return load_npy_samples(source), None

    return load_text_samples(
        source,
        column=column,
        delimiter=delimiter,
        skip_rows=skip_rows,
        x_column=x_column,
    )


def build_descriptor(
    name: str,
    num_samples: int,
    inferred_x_scale: Scale | None,
    x_start: float,
    x_delta: float,
    x_end: float | None,
    x_unit: str | None,
    y_unit: str | None,
    y_start: float,
    y_delta: float,
) -> WaveDescriptor:
    """Assemble a WaveDescriptor from command line options."""
    if inferred_x_scale is not None:
        if x_end is not None:
            raise ValueError("x_end cannot be combined with an x column")
        x_scale = inferred_x_scale
    elif x_end is not None:
        x_scale = Scale.from_start_and_end(x_start, x_end, num_samples)
    else:
        x_scale = Scale.from_start_and_delta(x_start, x_delta)

    return WaveDescriptor(
        name=name,
        x_unit_name=x_unit,
        y_unit_name=y_unit,
        x_scale=x_scale,
        y_scale=Scale.from_start_and_delta(y_start, y_delta),
    )


@app.command
def convert(
    source: Path,
    name: Annotated[str, Parameter(validator=validate_wave_name)],
    output: Path | None = None,
    x_start: float = 0.0,
    x_delta: float = 1.0,
    x_end: float | None = None,
    x_unit: str | None = None,
    y_unit: str | None = None,
    y_start: float = 0.0,
    y_delta: float = 0.0,
    column: Annotated[int, Parameter(validator=validate_non_negative_integer)] = 0,
    x_column: Annotated[int | None, Parameter(validator=validate_non_negative_integer)] = None,
    delimiter: str | None = None,
    skip_rows: Annotated[int, Parameter(validator=validate_non_negative_integer)] = 0,
) -> int:
    """
    Convert a data file to an Igor Text (.itx) wave file.

    Parameters
    ----------
    source: Path
        The .npy or delimited text file holding the samples
    name: str
        The wave name used inside Igor
    output: Path | None
        The output destination for the .itx file (default: source with .itx suffix)
    x_start: float
        The x coordinate of the first sample (default: 0)
    x_delta: float
        The x increment between samples (default: 1)
    x_end: float | None
        The x coordinate at the end of the wave. Overrides x_delta,
        which becomes (x_end - x_start) / (samples + 1)
    x_unit: str | None
        The unit of the x axis, e.g. 'nm'
    y_unit: str | None
        The unit of the data values
    y_start: float
        The y scale start (default: 0)
    y_delta: float
        The y scale delta (default: 0, unscaled)
    column: int
        The column of a text file holding the samples (default: 0)
    x_column: int | None
        A column of evenly spaced x coordinates to infer the x scale from
    delimiter: str | None
        The column separator of a text file (default: whitespace)
    skip_rows: int
        The number of header lines to skip in a text file (default: 0)
    """
    configure_logging()

    if not source.exists():
        print_error(f"Error: Source file not found: {source}")
        return 1

    if output is None:
        output = source.with_suffix(ITX_SUFFIX)

    try:
        samples, inferred_x_scale = load_samples(source, column, x_column, delimiter, skip_rows)
        descriptor = build_descriptor(
            name,
            len(samples),
            inferred_x_scale,
            x_start,
            x_delta,
            x_end,
            x_unit,
            y_unit,
            y_start,
            y_delta,
        )
    except ValueError as e:
        print_error(f"Error: {e}")
        return 1

    try:
        save_itx(output, descriptor, samples)
    except ValidationError as e:
        print_error(f"[FAIL] Validation error: {e}")
        return 1
    except SinkWriteError as e:
        print_error(f"[FAIL] {e}")
        return 1

    print_success(f"Exported {len(samples)} samples as wave '{name}' to {output}")
    return 0


@app.command
def show(
    source: Path,
    name: Annotated[str, Parameter(validator=validate_wave_name)],
    x_start: float = 0.0,
    x_delta: float = 1.0,
    x_end: float | None = None,
    x_unit: str | None = None,
    y_unit: str | None = None,
    y_start: float = 0.0,
    y_delta: float = 0.0,
    column: Annotated[int, Parameter(validator=validate_non_negative_integer)] = 0,
    x_column: Annotated[int | None, Parameter(validator=validate_non_negative_integer)] = None,
    delimiter: str | None = None,
    skip_rows: Annotated[int, Parameter(validator=validate_non_negative_integer)] = 0,
) -> int:
    """
    Print the Igor Text for a data file to standard output.

    Parameters
    ----------
    source: Path
        The .npy or delimited text file holding the samples
    name: str
        The wave name used inside Igor
    x_start: float
        The x coordinate of the first sample (default: 0)
    x_delta: float
        The x increment between samples (default: 1)
    x_end: float | None
        The x coordinate at the end of the wave. Overrides x_delta
    x_unit: str | None
        The unit of the x axis
    y_unit: str | None
        The unit of the data values
    y_start: float
        The y scale start (default: 0)
    y_delta: float
        The y scale delta (default: 0, unscaled)
    column: int
        The column of a text file holding the samples (default: 0)
    x_column: int | None
        A column of evenly spaced x coordinates to infer the x scale from
    delimiter: str | None
        The column separator of a text file (default: whitespace)
    skip_rows: int
        The number of header lines to skip in a text file (default: 0)
    """
    configure_logging()

    if not source.exists():
        print_error(f"Error: Source file not found: {source}")
        return 1

    try:
        samples, inferred_x_scale = load_samples(source, column, x_column, delimiter, skip_rows)
        descriptor = build_descriptor(
            name,
            len(samples),
            inferred_x_scale,
            x_start,
            x_delta,
            x_end,
            x_unit,
            y_unit,
            y_start,
            y_delta,
        )
    except ValueError as e:
        print_error(f"Error: {e}")
        return 1

    try:
        serialize_to(descriptor, samples, sys.stdout)
    except ValidationError as e:
        print_error(f"[FAIL] Validation error: {e}")
        return 1
    except SinkWriteError as e:
        print_error(f"[FAIL] {e}")
        return 1

    return 0
