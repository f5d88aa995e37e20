"""Guard clauses used to validate arguments before any reflection happens."""

from typing import Any, Type

from privy.core.exceptions import InvalidArgumentError


def against(
    condition: Any,
    error_cls: Type[Exception] = InvalidArgumentError,
    message: str = "",
) -> None:
    """Raise ``error_cls(message)`` when ``condition`` is truthy.

    Args:
        condition: The failure predicate. Any truthy value triggers the error.
        error_cls: Exception class to raise.
        message: Message handed to the exception.

    Raises:
        Exception: An instance of ``error_cls`` if the condition holds.

    Example:
        against(instance is None, InvalidArgumentError, "instance cannot be null")
    """
    if condition:
        raise error_cls(message)


def against_none_or_empty(value: Any, argument_name: str) -> None:
    """Reject None, and empty strings, for a required argument."""
    against(value is None, InvalidArgumentError, f"{argument_name} cannot be null")
    against(
        isinstance(value, str) and not value,
        InvalidArgumentError,
        f"{argument_name} cannot be empty",
    )


def against_non_type(value: Any, argument_name: str = "type_") -> None:
    """Reject anything that is not a class object."""
    against(value is None, InvalidArgumentError, f"{argument_name} cannot be null")
    against(
        not isinstance(value, type),
        InvalidArgumentError,
        f"{argument_name} must be a class, got {type(value).__name__}",
    )
