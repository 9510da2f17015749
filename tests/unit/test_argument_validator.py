"""
Unit Tests for Argument Validation.

Test Aspects Covered:
    ✅ Error Handling: Missing and non-callable arguments
    ✅ Edge Cases: Several invalid arguments at once
"""

from __future__ import annotations

import pytest

from roster_pipeline.validation.argument_validator import (
    InvalidArgumentError,
    require_callable,
    require_source,
    validate_pipeline_arguments,
)


class TestValidatePipelineArguments:
    """Test cases for validate_pipeline_arguments."""

    def test_accepts_callables(self) -> None:
        validate_pipeline_arguments(bool, str, print)

    def test_reports_all_problems(self) -> None:
        """
        SCENARIO: Predicate missing and action not callable
        EXPECTED: One error listing both; no single field
        """
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_pipeline_arguments(None, str, 42)

        error = exc_info.value
        assert error.message == "predicate is required; action must be callable, got int"
        assert error.field is None

    def test_single_problem_names_field(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            validate_pipeline_arguments(bool, None, print)

        assert exc_info.value.field == "transform"


class TestSingleArgumentChecks:
    """Test cases for require_callable and require_source."""

    def test_require_callable_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError, match="mapper is required"):
            require_callable(None, "mapper")

    def test_require_callable_accepts_bound_method(self) -> None:
        require_callable([].append, "block")

    def test_require_source_accepts_empty(self) -> None:
        require_source([])
        require_source(iter(()))

    def test_require_source_rejects_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            require_source(None)
