"""Tests for half-open window resolution."""

import pytest

from seqext.core.window import resolve_window
from seqext.errors import InvalidArgumentError
from seqext.types import Window


class TestResolveWindow:
    """Test resolve_window bounds handling."""

    def test_positive_bounds(self):
        """Test a plain in-range window."""
        assert resolve_window(10, 5, 9) == Window(5, 9)

    def test_negative_end_counts_from_tail(self):
        """Test that a negative end is relative to the length."""
        assert resolve_window(10, 0, -1) == Window(0, 9)
        assert resolve_window(10, 2, -5) == Window(2, 5)

    def test_full_range(self):
        """Test the boundary window covering everything."""
        window = resolve_window(10, 0, 10)
        assert window == Window(0, 10)
        assert len(window) == 10

    def test_negative_start_is_empty(self):
        """Test that start is never tail-relative."""
        assert resolve_window(10, -1, 5) is None

    def test_start_past_length_is_empty(self):
        """Test start overflow."""
        assert resolve_window(10, 11, 5) is None

    def test_zero_end_is_empty(self):
        """Test that an end of zero always yields nothing."""
        assert resolve_window(10, 0, 0) is None

    def test_start_after_positive_end_is_empty(self):
        """Test an inverted positive range."""
        assert resolve_window(10, 6, 3) is None

    def test_negative_end_underflow(self):
        """Test negative ends reaching before start."""
        assert resolve_window(10, 1, -20) is None
        assert resolve_window(10, 1, -10) is None

    def test_negative_end_meeting_start_is_empty_window(self):
        """Test a negative end landing exactly on start."""
        window = resolve_window(10, 0, -10)
        assert window == Window(0, 0)
        assert len(window) == 0

    def test_end_past_length_is_clamped(self):
        """Test that a large positive end keeps end <= length."""
        assert resolve_window(10, 3, 50) == Window(3, 10)

    def test_start_equal_to_length(self):
        """Test a start sitting exactly at the end of the sequence."""
        assert resolve_window(10, 10, 12) == Window(10, 10)

    def test_negative_length_rejected(self):
        """Test that a negative length is an invalid argument."""
        with pytest.raises(InvalidArgumentError):
            resolve_window(-1, 0, 1)

    def test_window_as_slice(self):
        """Test converting a window into a slice object."""
        assert list(range(10))[Window(2, 4).as_slice()] == [2, 3]
