"""Tolerance-based equality assertions.

``are_equal_with_tolerance`` fails when two numbers differ by the tolerance or
more. It raises EnsureFailedError, an AssertionError, so pytest reports it
like a failed ``assert``.
"""

from decimal import Decimal
from numbers import Real
from typing import Optional, Union

from privy.core.config import get_config
from privy.core.exceptions import EnsureFailedError

Number = Union[float, int, Decimal]


def _format_number(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def are_equal_with_tolerance(
    expected: Number,
    actual: Number,
    tolerance: Optional[Number] = None,
    message: str = "",
) -> None:
    """Assert that ``actual`` is within ``tolerance`` of ``expected``.

    When either value is a Decimal both are compared as Decimals and the
    default tolerance is the configured ``ensure.decimal_tolerance`` (0.01);
    otherwise the default is ``ensure.float_tolerance`` (0.001).

    Args:
        expected: The expected value.
        actual: The value produced by the code under test.
        tolerance: Allowed absolute difference; the values fail when their
            difference is greater than or equal to it.
        message: Extra text appended to the failure message.

    Raises:
        EnsureFailedError: If the values are too far apart.
        TypeError: If a value is not a real number.
    """
    for value in (expected, actual, tolerance):
        if value is not None and not isinstance(value, (Real, Decimal)):
            raise TypeError(f"Expected a real number, got {type(value).__name__}")

    settings = get_config().ensure
    if isinstance(expected, Decimal) or isinstance(actual, Decimal):
        limit = settings.decimal_tolerance if tolerance is None else _as_decimal(tolerance)
        difference = abs(_as_decimal(expected) - _as_decimal(actual))
    else:
        limit = settings.float_tolerance if tolerance is None else tolerance
        difference = abs(expected - actual)

    if difference >= limit:
        raise EnsureFailedError(
            f"Expected: {_format_number(expected)}, Actual: {_format_number(actual)}. {message}",
            expected=expected,
            actual=actual,
            user_message=message,
        )
