"""
Argument Validator - Validate Pipeline Arguments.

Validates the callables handed to the pipeline before traversal starts:
    - Predicate, transform and action are present and callable
    - Source is present

Design Notes:
    - Fail-fast principle: nothing is consumed from the source on error
    - All problems reported at once, joined with "; "
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional


class InvalidArgumentError(Exception):
    """Raised when a required pipeline argument is absent or malformed."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def _callable_error(value: Any, field: str) -> Optional[str]:
    if value is None:
        return f"{field} is required"
    if not callable(value):
        return f"{field} must be callable, got {type(value).__name__}"
    return None


def require_callable(value: Any, field: str) -> None:
    """
    Check a single callable argument.

    Raises:
        InvalidArgumentError: If ``value`` is None or not callable
    """
    error = _callable_error(value, field)
    if error:
        raise InvalidArgumentError(error, field=field)


def require_source(source: Optional[Iterable[Any]]) -> None:
    """
    Check the source sequence.

    An empty source is valid; only an absent one is rejected.

    Raises:
        InvalidArgumentError: If ``source`` is None
    """
    if source is None:
        raise InvalidArgumentError("source is required", field="source")


def validate_pipeline_arguments(
    predicate: Any,
    transform: Any,
    action: Any,
) -> None:
    """
    Validate the predicate, transform and action together.

    Args:
        predicate: Filter callable
        transform: Mapping callable
        action: Consumer callable

    Raises:
        InvalidArgumentError: If any of them is absent or not callable.
            ``field`` names the argument when exactly one is invalid.
    """
    errors: List[str] = []
    fields: List[str] = []

    for field, value in (
        ("predicate", predicate),
        ("transform", transform),
        ("action", action),
    ):
        error = _callable_error(value, field)
        if error:
            errors.append(error)
            fields.append(field)

    if errors:
        raise InvalidArgumentError(
            "; ".join(errors),
            field=fields[0] if len(fields) == 1 else None,
        )
