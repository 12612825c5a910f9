"""Unit tests for the sample importers."""

from pathlib import Path

import numpy as np
import pytest

from igortext.format import Scale, infer_x_scale, load_npy_samples, load_text_samples


class TestLoadTextSamples:
    """Tests for load_text_samples."""

    def test_single_column(self, tmp_path: Path) -> None:
        """Test a plain one-column file."""
        path = tmp_path / "trace.txt"
        path.write_text("1.0\n2.5\n-3\n")

        samples, x_scale = load_text_samples(path)

        np.testing.assert_array_equal(samples, [1.0, 2.5, -3.0])
        assert samples.dtype == np.float64
        assert x_scale is None

    def test_csv_with_header_and_x_column(self, tmp_path: Path) -> None:
        """Test a CSV file with a header and an x column."""
        path = tmp_path / "spectrum.csv"
        path.write_text("wavelength,intensity\n400,0.1\n400.5,0.2\n401,0.4\n401.5,0.3\n")

        samples, x_scale = load_text_samples(
            path, column=1, delimiter=",", skip_rows=1, x_column=0
        )

        np.testing.assert_array_equal(samples, [0.1, 0.2, 0.4, 0.3])
        assert x_scale == Scale(400.0, 0.5)

    def test_single_row(self, tmp_path: Path) -> None:
        """Test that one row of columns is read as one sample."""
        path = tmp_path / "one.txt"
        path.write_text("5 6 7\n")

        samples, _ = load_text_samples(path, column=2)

        np.testing.assert_array_equal(samples, [7.0])

    def test_column_out_of_range(self, tmp_path: Path) -> None:
        """Test that a missing column raises ValueError."""
        path = tmp_path / "two.txt"
        path.write_text("1 2\n3 4\n")

        with pytest.raises(ValueError, match="out of range"):
            load_text_samples(path, column=2)

    def test_x_column_out_of_range(self, tmp_path: Path) -> None:
        """Test that a missing x column raises ValueError."""
        path = tmp_path / "two.txt"
        path.write_text("1 2\n3 4\n")

        with pytest.raises(ValueError, match="x_column"):
            load_text_samples(path, column=1, x_column=5)

    def test_uneven_x_column(self, tmp_path: Path) -> None:
        """Test that an unevenly spaced x column raises ValueError."""
        path = tmp_path / "uneven.txt"
        path.write_text("0 1\n1 2\n3 3\n")

        with pytest.raises(ValueError, match="evenly spaced"):
            load_text_samples(path, column=1, x_column=0)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_text_samples(tmp_path / "missing.txt")


class TestInferXScale:
    """Tests for infer_x_scale."""

    def test_uniform_spacing(self) -> None:
        """Test start and delta of evenly spaced coordinates."""
        scale = infer_x_scale(np.array([10.0, 12.0, 14.0, 16.0]))

        assert scale == Scale(10.0, 2.0)

    def test_arange_rounding_tolerated(self) -> None:
        """Test that floating point noise in the spacing is accepted."""
        scale = infer_x_scale(np.arange(0.0, 1.0, 0.1))

        assert scale.start == 0.0
        assert scale.delta == pytest.approx(0.1)

    def test_descending(self) -> None:
        """Test a decreasing axis."""
        scale = infer_x_scale(np.array([3.0, 2.0, 1.0]))

        assert scale == Scale(3.0, -1.0)

    def test_too_few_points(self) -> None:
        """Test that one coordinate is not enough."""
        with pytest.raises(ValueError, match="at least two"):
            infer_x_scale(np.array([1.0]))

    def test_uneven_spacing(self) -> None:
        """Test that uneven spacing is rejected."""
        with pytest.raises(ValueError, match="not evenly spaced"):
            infer_x_scale(np.array([0.0, 1.0, 3.0]))


class TestLoadNpySamples:
    """Tests for load_npy_samples."""

    def test_1d_array(self, tmp_path: Path) -> None:
        """Test loading a 1D array."""
        path = tmp_path / "data.npy"
        np.save(path, np.array([1, 2, 3], dtype=np.int16))

        samples = load_npy_samples(path)

        np.testing.assert_array_equal(samples, [1.0, 2.0, 3.0])
        assert samples.dtype == np.float64

    def test_2d_array_rejected(self, tmp_path: Path) -> None:
        """Test that 2D arrays raise ValueError."""
        path = tmp_path / "image.npy"
        np.save(path, np.zeros((2, 2)))

        with pytest.raises(ValueError, match="expected 1D"):
            load_npy_samples(path)
