"""Configuration exception module.

This module defines exception types specific to the configuration system.
"""

from privy.core.exceptions import PrivyError


class ConfigError(PrivyError):
    """Exception raised for configuration errors.

    This includes errors such as:
    - Invalid YAML in the configuration file
    - Configuration validation failures
    - File access errors
    """
    pass
