"""Configuration schema module.

This module defines the data structures used for configuration in privy.
The schemas are designed to be minimal but extensible through Pydantic.
"""

import logging
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: str = "WARNING"

    # Allow arbitrary extension
    model_config = {"extra": "allow"}

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        if isinstance(value, int):
            value = logging.getLevelName(value)
        level = str(value).upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @property
    def level_value(self) -> int:
        """Numeric value of the configured level."""
        return getattr(logging, self.level)


class EnsureConfig(BaseModel):
    """Default tolerances for the tolerance assertions.

    Attributes:
        float_tolerance: Allowed absolute difference for float comparisons
        decimal_tolerance: Allowed absolute difference for Decimal comparisons
    """

    float_tolerance: float = Field(default=0.001, gt=0)
    decimal_tolerance: Decimal = Field(default=Decimal("0.01"), gt=0)

    model_config = {"extra": "allow"}


class ResourceConfig(BaseModel):
    """Configuration for reading packaged resources.

    Attributes:
        encoding: Text encoding used when a resource is read as text
    """

    encoding: str = "utf-8"

    model_config = {"extra": "allow"}


class PrivyConfig(BaseModel):
    """Root configuration with minimal required sections.

    Attributes:
        logging: Logging configuration
        ensure: Tolerance assertion defaults
        resources: Resource extraction defaults
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    ensure: EnsureConfig = Field(default_factory=EnsureConfig)
    resources: ResourceConfig = Field(default_factory=ResourceConfig)

    # Allow arbitrary extension
    model_config = {"extra": "allow"}
