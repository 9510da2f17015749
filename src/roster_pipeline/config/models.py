"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: LogLevel = "WARNING"
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


class AgeRangeConfig(BaseModel):
    """Half-open age range, ``low <= age < high``."""

    low: int = Field(default=14, ge=0)
    high: int = Field(default=30, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "AgeRangeConfig":
        if self.low > self.high:
            raise ValueError(f"low={self.low} must not exceed high={self.high}")
        return self


class SelectiveServiceConfig(BaseModel):
    """Closed age range for selective service eligibility."""

    min_age: int = Field(default=18, ge=0)
    max_age: int = Field(default=25, ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> "SelectiveServiceConfig":
        if self.min_age > self.max_age:
            raise ValueError(
                f"min_age={self.min_age} must not exceed max_age={self.max_age}"
            )
        return self


class DemoConfig(BaseModel):
    """Thresholds for the demonstration queries."""

    older_than_age: int = Field(default=20, ge=0)
    age_range: AgeRangeConfig = Field(default_factory=AgeRangeConfig)
    selective_service: SelectiveServiceConfig = Field(
        default_factory=SelectiveServiceConfig,
    )


class RosterPipelineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
