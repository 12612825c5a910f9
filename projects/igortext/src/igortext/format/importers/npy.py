"""NumPy ``.npy`` sample import."""

from pathlib import Path

import numpy as np
from numpy.typing import NDArray


def load_npy_samples(path: Path | str) -> NDArray[np.float64]:
    """Load a one-dimensional array from a ``.npy`` file.

    Args:
        path: Path to the ``.npy`` file.

    Returns:
        The samples as float64.

    Raises:
        ValueError: If the array is not one-dimensional.
        FileNotFoundError: If file doesn't exist.
    """
    path = Path(path)
    array = np.load(path, allow_pickle=False)

    if array.ndim != 1:
        raise ValueError(f"{path.name} holds an array of shape {array.shape}, expected 1D")

    return array.astype(np.float64)
