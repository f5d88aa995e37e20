"""privy configuration system.

Settings are read from a YAML file and ``PRIVY_*`` environment variables and
validated with Pydantic. They only tune defaults: tolerances for the
tolerance assertions, the logging level and the resource text encoding.

Example usage:
```python
from privy.core.config import get_config, load_config, set_config

# Load configuration from a specific file
config = load_config("privy.yaml")

# Make it the active configuration
set_config(config)

tolerance = get_config().ensure.float_tolerance
```
"""

from .exceptions import ConfigError
from .loader import get_config, load_config, reset_config, set_config
from .schema import EnsureConfig, LoggingConfig, PrivyConfig, ResourceConfig

__all__ = [
    'PrivyConfig',
    'LoggingConfig',
    'EnsureConfig',
    'ResourceConfig',
    'load_config',
    'get_config',
    'set_config',
    'reset_config',
    'ConfigError'
]
