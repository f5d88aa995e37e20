"""Custom exception definitions for privy.

The accessor raises a small, typed taxonomy so that tests can tell a bad call
(InvalidArgumentError) apart from a missing member (MemberNotFoundError,
UnsupportedMemberError) or a result of the wrong type (CastMismatchError).
Each class also derives from the closest built-in exception, so callers that
already catch ``ValueError`` or ``AttributeError`` keep working.

Exceptions raised *inside* an invoked member are never wrapped; they reach the
caller as the original object.
"""

from typing import Any, Optional


class PrivyError(Exception):
    """Base class for all custom exceptions in the privy library."""

    pass


class PrivateAccessError(PrivyError):
    """Base class for errors raised while resolving or accessing a member."""

    pass


class InvalidArgumentError(PrivateAccessError, ValueError):
    """Raised when a required argument is None, empty or of the wrong kind."""

    pass


class MemberNotFoundError(PrivateAccessError, AttributeError):
    """Raised when no matching field, property or static field exists."""

    def __init__(
        self,
        message: str,
        member_name: Optional[str] = None,
        member_kind: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.member_name: Optional[str] = member_name
        self.member_kind: Optional[str] = member_kind


class UnsupportedMemberError(PrivateAccessError, AttributeError):
    """Raised when a type does not include a method by the requested name."""

    def __init__(self, message: str, member_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.member_name: Optional[str] = member_name


class CastMismatchError(PrivateAccessError, TypeError):
    """Raised when a typed invocation returns a value of an unexpected type."""

    def __init__(
        self,
        message: str,
        member_name: Optional[str] = None,
        expected_type: Optional[str] = None,
        actual_type: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.member_name: Optional[str] = member_name
        self.expected_type: Optional[str] = expected_type
        self.actual_type: Optional[str] = actual_type


class EnsureFailedError(PrivyError, AssertionError):
    """Raised by the tolerance assertions when two values are too far apart."""

    def __init__(
        self,
        message: str = "",
        expected: Any = None,
        actual: Any = None,
        user_message: str = "",
    ) -> None:
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.user_message = user_message


class ResourceNotFoundError(PrivyError, FileNotFoundError):
    """Raised when a packaged resource cannot be found."""

    def __init__(self, message: str, resource_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.resource_name: Optional[str] = resource_name


__all__ = [
    "PrivyError",
    "PrivateAccessError",
    "InvalidArgumentError",
    "MemberNotFoundError",
    "UnsupportedMemberError",
    "CastMismatchError",
    "EnsureFailedError",
    "ResourceNotFoundError",
]
