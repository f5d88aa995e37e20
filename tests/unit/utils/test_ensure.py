"""
Unit tests for privy.utils.ensure.
"""

from decimal import Decimal

import pytest

from privy.core.config import PrivyConfig, set_config
from privy.core.exceptions import EnsureFailedError, PrivateAccessError
from privy.utils.ensure import are_equal_with_tolerance


class TestFloatTolerance:
    """Tests for float comparisons."""

    def test_within_tolerance_passes(self):
        """Verify that a difference below the tolerance passes."""
        are_equal_with_tolerance(1.0, 1.0005, tolerance=0.001)

    def test_outside_tolerance_fails(self):
        """Verify the failure message for values too far apart."""
        with pytest.raises(EnsureFailedError) as exc_info:
            are_equal_with_tolerance(1.0, 1.002, tolerance=0.001)

        message = str(exc_info.value)
        assert "Expected: 1" in message
        assert "Actual: 1.002" in message
        assert exc_info.value.expected == 1.0
        assert exc_info.value.actual == 1.002

    def test_default_tolerance(self):
        """Verify that the default float tolerance is 0.001."""
        are_equal_with_tolerance(2.0, 2.0009)
        with pytest.raises(EnsureFailedError):
            are_equal_with_tolerance(2.0, 2.0011)

    def test_default_tolerance_follows_config(self):
        """Verify that the configured tolerance is used when none is given."""
        set_config(PrivyConfig.model_validate({"ensure": {"float_tolerance": 0.5}}))
        are_equal_with_tolerance(2.0, 2.4)

    def test_integral_values_render_without_fraction(self):
        """Verify that integral floats are printed without a trailing .0."""
        with pytest.raises(EnsureFailedError, match=r"^Expected: 3, Actual: 5\. $"):
            are_equal_with_tolerance(3.0, 5.0)

    def test_user_message_appended(self):
        """Verify that the caller's message is included."""
        with pytest.raises(EnsureFailedError, match="interest rounding") as exc_info:
            are_equal_with_tolerance(1.0, 2.0, message="interest rounding")

        assert exc_info.value.user_message == "interest rounding"

    def test_symmetric(self):
        """Verify that the order of expected and actual does not matter."""
        with pytest.raises(EnsureFailedError):
            are_equal_with_tolerance(1.002, 1.0, tolerance=0.001)

    def test_ints_are_accepted(self):
        """Verify that integers compare like floats."""
        are_equal_with_tolerance(3, 3)
        with pytest.raises(EnsureFailedError):
            are_equal_with_tolerance(3, 4, tolerance=1)

    def test_non_numbers_rejected(self):
        """Verify that non-numeric input is a TypeError, not an assertion failure."""
        with pytest.raises(TypeError):
            are_equal_with_tolerance("1", 1.0)


class TestDecimalTolerance:
    """Tests for Decimal comparisons."""

    def test_default_decimal_tolerance(self):
        """Verify that Decimals default to a 0.01 tolerance."""
        are_equal_with_tolerance(Decimal("1.000"), Decimal("1.009"))
        with pytest.raises(EnsureFailedError):
            are_equal_with_tolerance(Decimal("1.00"), Decimal("1.02"))

    def test_difference_equal_to_tolerance_fails(self):
        """Verify that the tolerance bound itself is a failure."""
        with pytest.raises(EnsureFailedError, match="Expected: 1.00, Actual: 1.01"):
            are_equal_with_tolerance(Decimal("1.00"), Decimal("1.01"), tolerance=Decimal("0.01"))

    def test_mixed_decimal_and_float(self):
        """Verify that floats are converted when compared with a Decimal."""
        are_equal_with_tolerance(Decimal("0.1"), 0.1, tolerance=0.001)


class TestEnsureFailedError:
    """Tests for the failure type."""

    def test_is_an_assertion_error(self):
        """Verify that pytest treats the failure as an assertion."""
        with pytest.raises(AssertionError):
            are_equal_with_tolerance(0.0, 1.0)

    def test_is_not_an_accessor_error(self):
        """Verify that tolerance failures are distinct from accessor errors."""
        assert not issubclass(EnsureFailedError, PrivateAccessError)
