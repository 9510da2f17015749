"""
Filters Package - Predicate Builders.

This package contains the predicates the demonstrations filter the roster
with, from fixed comparisons to named predicate objects.

Predicates:
    - older_than: age >= threshold
    - within_age_range: low <= age < high
    - is_eligible_for_selective_service: male and min_age <= age <= max_age
    - CheckPersonEligibleForSelectiveService: Same test as a CheckPerson object

Transforms:
    - identity: Pass-through transform for filter-only pipelines
"""

from roster_pipeline.filters.predicates import (
    CheckPersonEligibleForSelectiveService,
    identity,
    is_eligible_for_selective_service,
    older_than,
    within_age_range,
)

__all__ = [
    "CheckPersonEligibleForSelectiveService",
    "identity",
    "is_eligible_for_selective_service",
    "older_than",
    "within_age_range",
]
