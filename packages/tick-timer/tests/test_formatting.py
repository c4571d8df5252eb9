"""Tests for get_time_min_sec and get_formatted_time."""
import pytest

from tick_timer import get_formatted_time, get_time_min_sec


class TestGetTimeMinSec:
    """Splitting seconds into (minutes, seconds)."""
    def test_zero(self):
        """Zero seconds is 0 minutes 0 seconds."""
        assert get_time_min_sec(0) == (0, 0)

    def test_under_a_minute(self):
        """Under a minute gives zero minutes."""
        assert get_time_min_sec(42) == (0, 42)

    def test_minutes_and_seconds(self):
        """Whole minutes and leftover seconds are separated."""
        assert get_time_min_sec(65) == (1, 5)
        assert get_time_min_sec(600) == (10, 0)

    def test_last_second_of_the_hour(self):
        """3599 is the largest value before wrapping."""
        assert get_time_min_sec(3599) == (59, 59)

    def test_hours_are_discarded(self):
        """3600 wraps to 0:00, 3661 to 1:01."""
        assert get_time_min_sec(3600) == (0, 0)
        assert get_time_min_sec(3661) == (1, 1)
        assert get_time_min_sec(7325) == (2, 5)

    @pytest.mark.parametrize("t", [0, 1, 59, 60, 61, 599, 1234, 3599, 3600, 5000, 86399])
    def test_matches_floor_formula(self, t):
        """Result equals floor((t % 3600) / 60), (t % 3600) % 60."""
        assert get_time_min_sec(t) == ((t % 3600) // 60, (t % 3600) % 60)

    def test_negative_uses_floor_modulo(self):
        """Negative times wrap into the previous hour; components stay non-negative."""
        assert get_time_min_sec(-1) == (59, 59)
        assert get_time_min_sec(-65) == (58, 55)
        assert get_time_min_sec(-3600) == (0, 0)

    def test_float_input_is_floored(self):
        """Fractional seconds are dropped."""
        assert get_time_min_sec(65.9) == (1, 5)

    def test_returns_ints(self):
        """Both components are ints even for float input."""
        minutes, seconds = get_time_min_sec(125.5)
        assert isinstance(minutes, int)
        assert isinstance(seconds, int)


class TestGetFormattedTime:
    """Formatting seconds as m:ss strings."""
    def test_default_separator(self):
        """65 seconds formats as "1:05"."""
        assert get_formatted_time(65) == "1:05"

    def test_custom_separator(self):
        """The separator string is placed between the parts verbatim."""
        assert get_formatted_time(65, ".") == "1.05"
        assert get_formatted_time(65, " min ") == "1 min 05"

    def test_seconds_zero_padded_minutes_not(self):
        """Seconds always have two digits, minutes are unpadded."""
        assert get_formatted_time(0) == "0:00"
        assert get_formatted_time(9) == "0:09"
        assert get_formatted_time(600) == "10:00"

    def test_wraps_past_the_hour(self):
        """Hours are discarded, so 3661 formats as "1:01"."""
        assert get_formatted_time(3661) == "1:01"
        assert get_formatted_time(3600) == "0:00"

    def test_negative(self):
        """-1 wraps to the last second of the hour."""
        assert get_formatted_time(-1) == "59:59"
