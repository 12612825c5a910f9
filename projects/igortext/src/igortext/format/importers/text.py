"""Delimited text sample import.

Reads numeric columns from CSV, TSV or whitespace separated files, such as
spectra exported by instrument software, and optionally derives the x scale
from a column of evenly spaced coordinates.
"""

from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from igortext.format.types import Scale


def load_text_samples(
    path: Path | str,
    *,
    column: int = 0,
    delimiter: str | None = None,
    skip_rows: int = 0,
    x_column: int | None = None,
) -> tuple[NDArray[np.float64], Scale | None]:
    """Load one column of a delimited text file as wave samples.

    Args:
        path: Path to the text file.
        column: Index of the column holding the samples.
        delimiter: Column separator. None splits on whitespace.
        skip_rows: Number of leading lines to skip, e.g. a header row.
        x_column: Index of a column of evenly spaced x coordinates. When
            given, the x scale is inferred from it.

    Returns:
        Tuple of (samples, x_scale) where x_scale is None unless x_column
        was given.

    Raises:
        ValueError: If a column index is out of range, the file holds no
            numeric rows, or the x column is not evenly spaced.
        FileNotFoundError: If file doesn't exist.

    Example:
        >>> samples, x_scale = load_text_samples("trace.txt", column=1, x_column=0)
        >>> # x_scale.start == first x value, x_scale.delta == spacing
    """
    path = Path(path)
    table = np.loadtxt(path, delimiter=delimiter, skiprows=skip_rows, ndmin=2, dtype=np.float64)

    if table.size == 0:
        raise ValueError(f"{path.name} contains no numeric rows")

    num_columns = table.shape[1]
    for label, index in (("column", column), ("x_column", x_column)):
        if index is not None and not 0 <= index < num_columns:
            raise ValueError(f"{label} {index} out of range, {path.name} has {num_columns} columns")

    samples = table[:, column]
    x_scale = infer_x_scale(table[:, x_column]) if x_column is not None else None

    return samples, x_scale


def infer_x_scale(x_values: NDArray[np.floating], *, rtol: float = 1e-6) -> Scale:
    """Derive an x scale from evenly spaced coordinates.

    The start is the first coordinate and the delta is the mean spacing.

    Args:
        x_values: Coordinates in sample order.
        rtol: Allowed relative deviation of any single step from the mean.

    Returns:
        The inferred Scale.

    Raises:
        ValueError: If fewer than two coordinates are given or the spacing
            is not uniform.
    """
    x = np.asarray(x_values, dtype=np.float64)
    if x.ndim != 1 or len(x) < 2:
        raise ValueError("at least two x coordinates are needed to infer a scale")

    steps = np.diff(x)
    delta = float(np.mean(steps))

    if not np.allclose(steps, delta, rtol=rtol, atol=0.0):
        max_deviation = float(np.max(np.abs(steps - delta)))
        raise ValueError(
            f"x coordinates are not evenly spaced (mean step {delta}, "
            f"max deviation {max_deviation})"
        )

    return Scale.from_start_and_delta(float(x[0]), delta)
