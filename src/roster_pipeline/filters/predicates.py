"""
Roster Predicates.

Builders return plain closures so they can be handed straight to the
pipeline. Age ranges follow two conventions:
    - within_age_range is half-open (high excluded)
    - selective service eligibility is closed (both ends included)
"""

from __future__ import annotations

from typing import TypeVar

from roster_pipeline.domain.entities import Person
from roster_pipeline.interfaces.functions import Predicate

T = TypeVar("T")

SELECTIVE_SERVICE_MIN_AGE = 18
SELECTIVE_SERVICE_MAX_AGE = 25


def identity(value: T) -> T:
    """Return the value unchanged."""
    return value


def older_than(age: int) -> Predicate[Person]:
    """Match people whose age is at least ``age``."""

    def _test(person: Person) -> bool:
        return person.age >= age

    return _test


def within_age_range(low: int, high: int) -> Predicate[Person]:
    """Match people with ``low <= age < high``."""

    def _test(person: Person) -> bool:
        return low <= person.age < high

    return _test


def is_eligible_for_selective_service(
    person: Person,
    min_age: int = SELECTIVE_SERVICE_MIN_AGE,
    max_age: int = SELECTIVE_SERVICE_MAX_AGE,
) -> bool:
    """Check for a male aged ``min_age`` to ``max_age`` inclusive."""
    return person.is_male and min_age <= person.age <= max_age


class CheckPersonEligibleForSelectiveService:
    """Predicate object for selective service eligibility."""

    def __init__(
        self,
        min_age: int = SELECTIVE_SERVICE_MIN_AGE,
        max_age: int = SELECTIVE_SERVICE_MAX_AGE,
    ) -> None:
        self.min_age = min_age
        self.max_age = max_age

    def test(self, person: Person) -> bool:
        return is_eligible_for_selective_service(
            person, min_age=self.min_age, max_age=self.max_age
        )
