"""Property-based tests (Hypothesis) for the ITX writer.

These tests verify that:
1. Data block: one line per sample, in order, parsing back to the same doubles
2. Name placement: the wave name appears on the WAVES line and twice in the scale line
3. Sink equivalence: string and streamed output are identical
"""

import io

from hypothesis import given, settings
from hypothesis import strategies as st

from igortext.format import Scale, WaveDescriptor, serialize_to, serialize_to_string


def finite_floats() -> st.SearchStrategy[float]:
    """Generate any finite double."""
    return st.floats(allow_nan=False, allow_infinity=False)


@st.composite
def wave_names(draw: st.DrawFn) -> str:
    """Generate names free of quotes and line breaks."""
    return draw(
        st.text(
            min_size=1,
            max_size=40,
            alphabet=st.characters(
                whitelist_categories=["L", "N", "Pc", "Pd"],
            ),
        )
    )


@st.composite
def descriptors(draw: st.DrawFn) -> WaveDescriptor:
    """Generate a descriptor with arbitrary finite scales and unit labels."""
    units = st.one_of(
        st.none(),
        st.text(max_size=10, alphabet=st.characters(whitelist_categories=["L", "N"])),
    )
    return WaveDescriptor(
        name=draw(wave_names()),
        x_unit_name=draw(units),
        y_unit_name=draw(units),
        x_scale=Scale.from_start_and_delta(draw(finite_floats()), draw(finite_floats())),
        y_scale=Scale.from_start_and_delta(draw(finite_floats()), draw(finite_floats())),
    )


def data_lines(text: str) -> list[str]:
    """Return the lines between BEGIN and END."""
    lines = text.split("\n")
    return lines[lines.index("BEGIN") + 1 : lines.index("END")]


class TestDataBlock:
    """Property tests for the sample lines."""

    @settings(max_examples=100)
    @given(descriptor=descriptors(), data=st.lists(finite_floats(), max_size=50))
    def test_one_line_per_sample_in_order(
        self, descriptor: WaveDescriptor, data: list[float]
    ) -> None:
        """Every sample gets exactly one line and parses back unchanged."""
        text = serialize_to_string(descriptor, data)

        lines = data_lines(text)
        assert len(lines) == len(data)
        assert [float(line) for line in lines] == data

    @settings(max_examples=50)
    @given(descriptor=descriptors())
    def test_empty_data_block(self, descriptor: WaveDescriptor) -> None:
        """An empty wave has BEGIN directly followed by END."""
        text = serialize_to_string(descriptor, [])

        assert "BEGIN\nEND\n" in text


class TestFormatInvariants:
    """Property tests for the header and scale directive."""

    @settings(max_examples=100)
    @given(descriptor=descriptors(), data=st.lists(finite_floats(), max_size=10))
    def test_name_placement(self, descriptor: WaveDescriptor, data: list[float]) -> None:
        """The name is on the WAVES line and twice in the scale line."""
        lines = serialize_to_string(descriptor, data).split("\n")
        quoted = f"'{descriptor.name}'"

        assert lines[0] == "IGOR"
        assert lines[1] == f"WAVES/D {quoted}"
        scale_line = lines[-2]
        assert scale_line.startswith("X SetScale/P x ")
        assert scale_line.endswith(f", {quoted}")
        assert f", {quoted}; SetScale y " in scale_line
        assert lines[-1] == ""

    @settings(max_examples=100)
    @given(descriptor=descriptors())
    def test_scale_values_round_trip(self, descriptor: WaveDescriptor) -> None:
        """The four scale numbers parse back to the descriptor's values."""
        scale_line = serialize_to_string(descriptor, []).split("\n")[-2]

        x_part, y_part = scale_line.split("; SetScale y ")
        x_start, x_delta = x_part.removeprefix("X SetScale/P x ").split(",")[:2]
        y_start, y_delta = y_part.split(",")[:2]

        assert float(x_start) == descriptor.x_scale.start
        assert float(x_delta) == descriptor.x_scale.delta
        assert float(y_start) == descriptor.y_scale.start
        assert float(y_delta) == descriptor.y_scale.delta

    @settings(max_examples=100)
    @given(
        descriptor=descriptors(),
        data=st.lists(finite_floats(), max_size=30),
        chunk_size=st.integers(min_value=1, max_value=8),
    )
    def test_stream_matches_string(
        self, descriptor: WaveDescriptor, data: list[float], chunk_size: int
    ) -> None:
        """Streaming to an in-memory sink yields the same text as serialize_to_string."""
        text_sink = io.StringIO()
        byte_sink = io.BytesIO()

        serialize_to(descriptor, data, text_sink, chunk_size=chunk_size)
        serialize_to(descriptor, data, byte_sink, chunk_size=chunk_size)

        expected = serialize_to_string(descriptor, data)
        assert text_sink.getvalue() == expected
        assert byte_sink.getvalue() == expected.encode("utf-8")
