"""
Validation Package - Argument Validation.

Pipeline arguments are checked before any element is consumed:
    - InvalidArgumentError: Raised for a missing or malformed argument
    - validate_pipeline_arguments: Fail-fast check of the callables
    - require_callable / require_source: Single-argument checks

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
    - Failures from user callables are never wrapped
"""

from roster_pipeline.validation.argument_validator import (
    InvalidArgumentError,
    require_callable,
    require_source,
    validate_pipeline_arguments,
)

__all__ = [
    "InvalidArgumentError",
    "require_callable",
    "require_source",
    "validate_pipeline_arguments",
]
