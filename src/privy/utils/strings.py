"""String predicates used by tests and by the resource helpers."""

import re
from typing import List, Optional

from privy.core import guard
from privy.core.exceptions import InvalidArgumentError

_LINE_BREAK = re.compile(r"[\r\n]")


def is_nothing(value: Optional[str]) -> bool:
    """Return True if the string is None, empty or whitespace only."""
    return value is None or not value.strip()


def is_something(value: Optional[str]) -> bool:
    """Return True if the string has at least one non-whitespace character.

    The direct opposite of ``is_nothing``.
    """
    return not is_nothing(value)


def split_lines(value: str, number_of_lines: int = 0) -> List[str]:
    """Split at new line characters and drop the empty entries.

    ``\\r\\n`` pairs therefore produce a single line, and blank lines are
    skipped. Line content itself is not stripped.

    Args:
        value: The text to split.
        number_of_lines: Keep at most this many lines; 0 keeps all of them.

    Returns:
        The non-empty lines, in order.

    Raises:
        InvalidArgumentError: If number_of_lines is negative.
    """
    guard.against(
        number_of_lines < 0,
        InvalidArgumentError,
        "Number of Lines must be a positive integer.",
    )
    lines = [line for line in _LINE_BREAK.split(value) if line]
    if number_of_lines > 0:
        return lines[:number_of_lines]
    return lines
