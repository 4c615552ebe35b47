"""Unit tests for the unique color generator."""

import itertools
import random
from unittest.mock import Mock, PropertyMock, patch

import pytest

from huecycle.colors import ColorHistory
from huecycle.core import ColorSpace
from huecycle.exceptions import ColorSpaceExhaustedError
from huecycle.models import Color


def scripted_space(values, **kwargs) -> ColorSpace:
    """ColorSpace whose channel draws come from a fixed sequence."""
    rng = Mock(spec=random.Random)
    rng.randint.side_effect = values
    return ColorSpace(rng=rng, **kwargs)


class TestNextUnique:
    """Test ColorSpace.next_unique."""

    @pytest.mark.unit
    def test_returns_color_with_derived_fields(self, color_space, history):
        """Test the returned color carries hex and label."""
        color = color_space.next_unique(history)

        assert isinstance(color, Color)
        assert color.hex == ColorSpace.hex_of(color.red, color.green, color.blue)
        assert color.label == ColorSpace.label_color_for(color)

    @pytest.mark.unit
    def test_records_returned_color(self, color_space, history):
        """Test the color is recorded in the history."""
        color = color_space.next_unique(history)
        assert history.contains(color.to_rgb_tuple())
        assert len(history) == 1

    @pytest.mark.unit
    def test_colors_are_unique(self, color_space, history):
        """Test many draws against one history never repeat."""
        colors = [color_space.next_unique(history).to_rgb_tuple() for _ in range(5000)]

        assert len(set(colors)) == len(colors)
        assert len(history) == 5000

    @pytest.mark.unit
    def test_draws_channels_in_range(self):
        """Test channels are drawn from 0-255 inclusive."""
        rng = Mock(spec=random.Random)
        rng.randint.side_effect = [0, 128, 255]
        space = ColorSpace(rng=rng)

        color = space.next_unique(ColorHistory())

        assert color.to_rgb_tuple() == (0, 128, 255)
        rng.randint.assert_called_with(0, 255)

    @pytest.mark.unit
    def test_retries_on_duplicate(self, history):
        """Test a duplicate draw is discarded and drawn again."""
        history.record((1, 2, 3))
        space = scripted_space([1, 2, 3, 1, 2, 3, 4, 5, 6])

        color = space.next_unique(history)

        assert color.to_rgb_tuple() == (4, 5, 6)
        assert len(history) == 2

    @pytest.mark.unit
    def test_seeded_spaces_repeat_sequence(self):
        """Test equal seeds give equal color sequences."""
        first = ColorSpace(rng=random.Random(42))
        second = ColorSpace(rng=random.Random(42))
        h1, h2 = ColorHistory(), ColorHistory()

        assert [first.next_unique(h1) for _ in range(10)] == [second.next_unique(h2) for _ in range(10)]

    @pytest.mark.unit
    def test_reset_allows_reuse(self, history):
        """Test colors can be issued again after a reset."""
        space = scripted_space([7, 7, 7, 7, 7, 7])
        assert space.next_unique(history).to_rgb_tuple() == (7, 7, 7)

        history.reset()

        assert space.next_unique(history).to_rgb_tuple() == (7, 7, 7)


class TestExhaustion:
    """Test the optional retry cap and the full-space guard."""

    @pytest.mark.unit
    def test_max_retries_raises(self, history):
        """Test hitting the retry cap raises ColorSpaceExhaustedError."""
        history.record((1, 2, 3))
        space = scripted_space(itertools.cycle([1, 2, 3]), max_retries=5)

        with pytest.raises(ColorSpaceExhaustedError) as exc_info:
            space.next_unique(history)

        assert exc_info.value.attempts == 5
        assert exc_info.value.max_retries == 5
        assert exc_info.value.recorded == 1

    @pytest.mark.unit
    def test_retry_cap_not_hit_below_limit(self, history):
        """Test a unique draw before the cap succeeds."""
        history.record((1, 2, 3))
        space = scripted_space([1, 2, 3, 1, 2, 3, 9, 9, 9], max_retries=3)

        assert space.next_unique(history).to_rgb_tuple() == (9, 9, 9)

    @pytest.mark.unit
    def test_full_history_raises_immediately(self, color_space, history):
        """Test an exhausted history raises instead of looping forever."""
        with patch.object(ColorHistory, "is_exhausted", new_callable=PropertyMock, return_value=True):
            with pytest.raises(ColorSpaceExhaustedError) as exc_info:
                color_space.next_unique(history)

        assert exc_info.value.max_retries is None

    @pytest.mark.unit
    def test_invalid_max_retries(self):
        """Test the retry cap must be positive."""
        with pytest.raises(ValueError):
            ColorSpace(max_retries=0)


class TestStaticHelpers:
    """Test hex and label helpers exposed on ColorSpace."""

    @pytest.mark.unit
    def test_hex_of(self):
        assert ColorSpace.hex_of(0, 171, 255) == "#00abff"

    @pytest.mark.unit
    def test_label_color_for_accepts_triples_and_colors(self):
        assert ColorSpace.label_color_for((0, 0, 0)) == "rgba(255, 255, 255, 0.95)"
        assert ColorSpace.label_color_for(Color(red=255, green=255, blue=255)) == "rgba(0, 0, 0, 0.6)"
