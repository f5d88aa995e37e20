"""Member resolution, invocation and the supporting error types."""

from privy.core import guard
from privy.core.accessor import (
    construct,
    get_constant,
    get_field,
    get_property,
    get_static_field,
    invoke_function,
    invoke_method,
    invoke_static_function,
    invoke_static_method,
    set_field,
    set_property,
    set_static_field,
)
from privy.core.exceptions import (
    CastMismatchError,
    EnsureFailedError,
    InvalidArgumentError,
    MemberNotFoundError,
    PrivateAccessError,
    PrivyError,
    ResourceNotFoundError,
    UnsupportedMemberError,
)

__all__ = [
    "guard",
    "construct",
    "get_constant",
    "get_field",
    "get_property",
    "get_static_field",
    "invoke_function",
    "invoke_method",
    "invoke_static_function",
    "invoke_static_method",
    "set_field",
    "set_property",
    "set_static_field",
    "CastMismatchError",
    "EnsureFailedError",
    "InvalidArgumentError",
    "MemberNotFoundError",
    "PrivateAccessError",
    "PrivyError",
    "ResourceNotFoundError",
    "UnsupportedMemberError",
]
