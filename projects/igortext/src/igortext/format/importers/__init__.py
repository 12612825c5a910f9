"""Sample importers.

This subpackage loads one-dimensional sample data from files so it can be
written as an ITX wave.

Supported formats:
- Delimited text: one or more numeric columns (CSV, TSV, whitespace)
- NumPy: ``.npy`` files holding a one-dimensional array

Example usage:
    >>> from igortext.format.importers import load_text_samples
    >>> from igortext.format import WaveDescriptor, save_itx
    >>>
    >>> # Column 1 holds intensities, column 0 the wavelengths
    >>> samples, x_scale = load_text_samples("spectrum.csv", column=1, x_column=0, delimiter=",")
    >>> save_itx("spectrum.itx", WaveDescriptor(name="spectrum", x_scale=x_scale), samples)
"""

from igortext.format.importers.npy import load_npy_samples
from igortext.format.importers.text import infer_x_scale, load_text_samples

__all__ = [
    "load_text_samples",
    "infer_x_scale",
    "load_npy_samples",
]
