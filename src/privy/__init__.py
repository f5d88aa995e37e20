"""
privy: Private Member Access for Tests
======================================

privy lets test code read, write and invoke the non-public members of
arbitrary Python objects and classes, and ships a few small helpers test
authors tend to need alongside it.

Core Features:
- Private field, property and static field access
- Private instance, static and class method invocation with result checks
- Constructor matching by argument types
- Tolerance-based numeric assertions
- Packaged text resource extraction

Examples:
    import privy

    class Account:
        _fee = 2

        def __init__(self):
            self.__balance = 10

        def _withdraw(self, amount):
            self.__balance -= amount + self._fee
            return self.__balance

    account = Account()
    privy.set_field(account, "__balance", 100)
    assert privy.invoke_function(account, "_withdraw", int, 8) == 90
    assert privy.get_static_field(Account, "_fee") == 2

    privy.are_equal_with_tolerance(1.0, 1.0005, tolerance=0.001)
"""

from __future__ import annotations

import importlib.metadata
from typing import Optional

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
from privy.core.config import PrivyConfig
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
from privy.utils.ensure import are_equal_with_tolerance
from privy.utils.resources import (
    extract_resource_as_lines,
    extract_resource_as_text,
    list_resources,
)
from privy.utils.strings import is_nothing, is_something, split_lines

# Version detection
try:
    __version__ = importlib.metadata.version("privy")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"


def initialize_privy(
    config_path: Optional[str] = None,
    verbose_logging: bool = False,
    env_prefix: str = "PRIVY",
) -> PrivyConfig:
    """Load configuration, make it active and configure logging.

    Calling this is optional; every helper falls back to lazily loaded
    defaults.

    Args:
        config_path: Optional path to a YAML configuration file. Defaults to
            ``$PRIVY_CONFIG`` or ``privy.yaml`` in the working directory.
        verbose_logging: Log member resolution at DEBUG level.
        env_prefix: Prefix of the environment variables to consider.

    Returns:
        The active configuration.
    """
    from privy.core.config import load_config, set_config
    from privy.core.utils.logging import configure_logging

    config = load_config(file_path=config_path, env_prefix=env_prefix)
    set_config(config)
    configure_logging(verbose=verbose_logging)
    return config


__all__ = [
    "__version__",
    "initialize_privy",
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
    "are_equal_with_tolerance",
    "extract_resource_as_lines",
    "extract_resource_as_text",
    "list_resources",
    "is_nothing",
    "is_something",
    "split_lines",
    "CastMismatchError",
    "EnsureFailedError",
    "InvalidArgumentError",
    "MemberNotFoundError",
    "PrivateAccessError",
    "PrivyError",
    "ResourceNotFoundError",
    "UnsupportedMemberError",
]
