"""Python types for Igor wave metadata.

These types describe everything the ITX writer needs besides the samples
themselves: the wave name, the axis scaling and the unit labels.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Scale:
    """Affine mapping from sample index to axis coordinate.

    The coordinate of sample ``i`` is ``start + i * delta``. A ``delta`` of
    zero is allowed and marks an unscaled axis.
    """

    start: float = 0.0
    """Axis coordinate of the first sample."""

    delta: float = 1.0
    """Increment between consecutive samples."""

    @classmethod
    def default(cls) -> "Scale":
        """The identity scale, start 0 and delta 1."""
        return cls()

    @classmethod
    def unscaled(cls) -> "Scale":
        """The degenerate scale, start 0 and delta 0."""
        return cls(start=0.0, delta=0.0)

    @classmethod
    def from_start_and_delta(cls, start: float, delta: float) -> "Scale":
        """Create a scale from its first coordinate and step."""
        return cls(start=start, delta=delta)

    @classmethod
    def from_start_and_end(cls, start: float, end: float, count: int) -> "Scale":
        """Create a scale spanning ``start`` to ``end``.

        The step is ``(end - start) / (count + 1)``. Existing ITX files were
        produced with this divisor, so it is kept as is. ``count`` must not
        be -1.
        """
        return cls(start=start, delta=(end - start) / (count + 1))


@dataclass
class WaveDescriptor:
    """Name, units and scaling of a single Igor wave.

    An empty name is accepted here and rejected when the wave is written,
    so a descriptor can be filled in step by step.
    """

    name: str | None
    """Wave name. Must be non-empty when serialized."""

    x_unit_name: str | None = None
    """Unit of the x axis, e.g. "nm" for a spectrum over wavelength."""

    y_unit_name: str | None = None
    """Unit of the data values."""

    x_scale: Scale = field(default_factory=Scale.default)
    """Scaling in the x direction, (0, 1) unless given."""

    y_scale: Scale = field(default_factory=Scale.unscaled)
    """Scaling in the y direction, (0, 0) unless given."""
