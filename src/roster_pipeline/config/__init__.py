"""
Configuration Package - Models and Loaders.

This package handles configuration of the demonstration program:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - RosterPipelineConfig: Root configuration object
    - LoggingConfig: Log level and format
    - DemoConfig: Thresholds used by the demonstration queries

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles
"""

from roster_pipeline.config.models import (
    AgeRangeConfig,
    DemoConfig,
    LoggingConfig,
    RosterPipelineConfig,
    SelectiveServiceConfig,
)
from roster_pipeline.config.loader import (
    ConfigLoader,
    load_config,
    load_default_config,
)

__all__ = [
    "AgeRangeConfig",
    "DemoConfig",
    "LoggingConfig",
    "RosterPipelineConfig",
    "SelectiveServiceConfig",
    "ConfigLoader",
    "load_config",
    "load_default_config",
]
