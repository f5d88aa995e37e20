"""
Unit tests for privy.utils.strings.
"""

import pytest

from privy.core.exceptions import InvalidArgumentError
from privy.utils.strings import is_nothing, is_something, split_lines


class TestPredicates:
    """Tests for is_nothing and is_something."""

    @pytest.mark.parametrize("value", [None, "", " ", "\t\r\n"])
    def test_blank_values(self, value):
        """Verify that None, empty and whitespace strings are nothing."""
        assert is_nothing(value) is True
        assert is_something(value) is False

    @pytest.mark.parametrize("value", ["a", " a ", "0"])
    def test_non_blank_values(self, value):
        """Verify that any visible character makes a string something."""
        assert is_nothing(value) is False
        assert is_something(value) is True


class TestSplitLines:
    """Tests for split_lines."""

    def test_splits_on_all_line_endings(self):
        """Verify that \\n, \\r\\n and \\r all separate lines."""
        assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]

    def test_drops_empty_lines(self):
        """Verify that blank entries are removed."""
        assert split_lines("\n\nfirst\n\n\nsecond\n") == ["first", "second"]

    def test_keeps_line_content(self):
        """Verify that whitespace inside a line is preserved."""
        assert split_lines("  padded  \nnext") == ["  padded  ", "next"]

    def test_limits_number_of_lines(self):
        """Verify that a positive count keeps the first lines only."""
        assert split_lines("1\n2\n3\n4", number_of_lines=2) == ["1", "2"]

    def test_limit_larger_than_content(self):
        """Verify that a large count returns every line."""
        assert split_lines("1\n2", number_of_lines=10) == ["1", "2"]

    def test_empty_text(self):
        """Verify that empty text has no lines."""
        assert split_lines("") == []

    def test_negative_count_rejected(self):
        """Verify that a negative count is an invalid argument."""
        with pytest.raises(InvalidArgumentError, match="positive integer"):
            split_lines("a", number_of_lines=-1)
