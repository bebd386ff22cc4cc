"""Tests for extrapolation range options."""

import math

import pytest
import torch


class TestParseExtrapolate:
    @pytest.mark.parametrize(
        "option, expected",
        [
            ("0%", 0.0),
            ("10%", 10.0),
            ("12.5%", 12.5),
            ("10 %", 10.0),
            ("10   %", 10.0),
        ],
    )
    def test_percentage_strings(self, option, expected):
        """Test parsing of valid percentage strings."""
        from spliner import Percentage, parse_extrapolate

        assert parse_extrapolate(option) == Percentage(expected)

    @pytest.mark.parametrize(
        "option",
        [
            "",
            "%",
            "10",
            "-5%",
            "1e2%",
            "10%%",
            ".5%",
            "ten%",
            "10% wide",
            " 10%",
            "10% ",
            "10%\n",
        ],
    )
    def test_rejects_malformed_strings(self, option):
        """Test that malformed percentage strings raise ConfigurationError."""
        from spliner import ConfigurationError, parse_extrapolate

        with pytest.raises(ConfigurationError):
            parse_extrapolate(option)

    def test_none(self):
        """Test that no option means no margin."""
        from spliner import parse_extrapolate

        assert parse_extrapolate(None) is None

    def test_interval_from_tuple(self):
        """Test building an interval from a pair of numbers."""
        from spliner import Interval, parse_extrapolate

        assert parse_extrapolate((-1, 3)) == Interval(-1.0, 3.0)
        assert parse_extrapolate([0.5, 0.5]) == Interval(0.5, 0.5)
        assert parse_extrapolate(
            (torch.tensor(0.0), torch.tensor(1.0))
        ) == Interval(0.0, 1.0)

    def test_interval_passthrough(self):
        """Test that an Interval is returned as given."""
        from spliner import Interval, parse_extrapolate

        assert parse_extrapolate(Interval(-2.0, 2.0)) == Interval(-2.0, 2.0)

    def test_reversed_interval_kept_as_given(self):
        """A reversed interval is returned unchanged and holds no points."""
        from spliner import Interval, parse_extrapolate

        interval = parse_extrapolate((2.0, 1.0))

        assert interval == Interval(2.0, 1.0)
        assert 1.5 not in interval

    @pytest.mark.parametrize(
        "option",
        [(1.0,), (0.0, 1.0, 2.0), ("a", "b"), (True, False)],
    )
    def test_rejects_bad_intervals(self, option):
        """Test that pairs that are not two numbers raise ConfigurationError."""
        from spliner import ConfigurationError, parse_extrapolate

        with pytest.raises(ConfigurationError):
            parse_extrapolate(option)

    @pytest.mark.parametrize("option", [42, 0.1, object(), {"lower": 0}])
    def test_rejects_other_types(self, option):
        """Test that unsupported option types raise ConfigurationError."""
        from spliner import ConfigurationError, parse_extrapolate

        with pytest.raises(ConfigurationError):
            parse_extrapolate(option)

    @pytest.mark.parametrize("value", [-1.0, math.inf, math.nan])
    def test_rejects_bad_percentage_values(self, value):
        """Test that negative or non-finite percentages raise ConfigurationError."""
        from spliner import ConfigurationError, Percentage, parse_extrapolate

        with pytest.raises(ConfigurationError):
            parse_extrapolate(Percentage(value))

    def test_configuration_error_is_spline_error(self):
        """Test the exception hierarchy."""
        from spliner import ConfigurationError, SplineError

        assert issubclass(ConfigurationError, SplineError)


class TestResolveRange:
    def test_no_margin(self):
        """Test that no option and 0% give the key point span."""
        from spliner import Interval, resolve_range

        assert resolve_range(1.0, 3.0, None) == Interval(1.0, 3.0)
        assert resolve_range(1.0, 3.0, "0%") == Interval(1.0, 3.0)

    def test_percentage_margin(self):
        """10% of an x-span of 2.0 adds 0.2 on each side."""
        from spliner import resolve_range

        lower, upper = resolve_range(1.0, 3.0, "10%")

        assert lower == pytest.approx(0.8)
        assert upper == pytest.approx(3.2)

    def test_percentage_object(self):
        """Test resolving a Percentage option."""
        from spliner import Percentage, resolve_range

        lower, upper = resolve_range(0.0, 4.0, Percentage(25.0))

        assert (lower, upper) == (-1.0, 5.0)

    def test_interval_verbatim(self):
        """Test that an explicit interval is used as given."""
        from spliner import Interval, resolve_range

        assert resolve_range(0.0, 1.0, (-5.0, 7.0)) == Interval(-5.0, 7.0)

    def test_interval_not_covering_key_points_warns(self):
        """Test that a narrow interval emits ExtrapolationRangeWarning."""
        from spliner import ExtrapolationRangeWarning, Interval, resolve_range

        with pytest.warns(ExtrapolationRangeWarning):
            result = resolve_range(0.0, 1.0, (0.25, 2.0))

        assert result == Interval(0.25, 2.0)

    def test_reversed_interval_warns(self):
        """A reversed interval never covers the key points."""
        from spliner import ExtrapolationRangeWarning, Interval, resolve_range

        with pytest.warns(ExtrapolationRangeWarning):
            result = resolve_range(0.0, 2.0, (2.5, -1.0))

        assert result == Interval(2.5, -1.0)

    def test_interval_membership(self):
        """Test that interval membership is closed."""
        from spliner import Interval

        interval = Interval(-1.0, 1.0)

        assert -1.0 in interval
        assert 1.0 in interval
        assert 0.0 in interval
        assert 1.5 not in interval
        assert math.nan not in interval
