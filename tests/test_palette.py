"""Tests for gradient sampling and channel tables."""

import pytest

from vector_heatmap.core.gradients import BLUE_RED, STEPPED_COLORS, SUNRISE
from vector_heatmap.preprocessing.palette import (
    PALETTE_SIZE,
    channel_table,
    parse_color,
    sample_gradient,
)


class TestParseColor:
    """Tests for parse_color()."""

    def test_tuple_passthrough(self):
        assert parse_color((10, 20, 30)) == (10, 20, 30)

    def test_long_hex(self):
        assert parse_color("#E74C3C") == (231, 76, 60)

    def test_short_hex(self):
        assert parse_color("#0f0") == (0, 255, 0)

    @pytest.mark.parametrize("bad", ["#12345", "#zzzzzz", "red"])
    def test_invalid_hex_raises(self, bad):
        with pytest.raises(ValueError, match="Invalid hex color"):
            parse_color(bad)

    def test_wrong_channel_count_raises(self):
        with pytest.raises(ValueError, match="3 channels"):
            parse_color((1, 2))


class TestSampleGradient:
    """Tests for sample_gradient()."""

    def test_default_size(self):
        assert len(sample_gradient(BLUE_RED)) == PALETTE_SIZE == 128

    def test_endpoints_match_stops(self):
        palette = sample_gradient(BLUE_RED)
        assert palette[0] == (0, 0, 255)
        assert palette[-1] == (255, 0, 0)

    def test_linear_interpolation(self):
        palette = sample_gradient([(0.0, (0, 0, 0)), (1.0, (200, 100, 50))], samples=5)
        assert palette == [
            (0, 0, 0),
            (50, 25, 12),
            (100, 50, 25),
            (150, 75, 38),
            (200, 100, 50),
        ]

    def test_middle_stop_is_hit(self):
        palette = sample_gradient(
            [(0.0, (0, 0, 0)), (0.5, (100, 100, 100)), (1.0, (0, 0, 0))], samples=3
        )
        assert palette[1] == (100, 100, 100)

    def test_repeated_stops_make_steps(self):
        palette = sample_gradient(STEPPED_COLORS, samples=9)
        assert palette[0] == (0, 0, 128)
        assert palette[2] == (0, 0, 255)
        assert palette[8] == (255, 0, 0)

    def test_unsorted_stops_are_ordered(self):
        forward = sample_gradient(SUNRISE, samples=16)
        shuffled = sample_gradient(list(reversed(SUNRISE)), samples=16)
        assert forward == shuffled

    def test_stops_inside_unit_range_clamp_ends(self):
        palette = sample_gradient([(0.25, "#000000"), (0.75, "#ffffff")], samples=5)
        assert palette[0] == (0, 0, 0)
        assert palette[-1] == (255, 255, 255)
        assert palette[2] == (128, 128, 128)

    def test_single_stop_is_constant(self):
        palette = sample_gradient([(0.3, (9, 8, 7))])
        assert palette == [(9, 8, 7)] * PALETTE_SIZE

    def test_empty_gradient_is_black(self):
        assert sample_gradient([], samples=4) == [(0, 0, 0)] * 4

    def test_hex_colors_accepted(self):
        palette = sample_gradient([(0, "#0000ff"), (1, "#ff0000")], samples=2)
        assert palette == [(0, 0, 255), (255, 0, 0)]


class TestChannelTable:
    """Tests for channel_table()."""

    def test_reversed_and_normalized(self):
        palette = [(0, 0, 255), (128, 0, 128), (255, 0, 0)]
        assert channel_table(palette, "r") == pytest.approx([255 / 256, 0.5, 0.0])
        assert channel_table(palette, "b") == pytest.approx([0.0, 0.5, 255 / 256])

    def test_values_within_unit_range(self):
        table = channel_table(sample_gradient(SUNRISE), "g")
        assert all(0.0 <= value <= 1.0 for value in table)

    def test_unknown_channel(self):
        with pytest.raises(ValueError, match="Unknown channel"):
            channel_table([(0, 0, 0)], "a")
