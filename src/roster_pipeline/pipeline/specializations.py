"""
Roster Specializations of the Element Pipeline.

Each routine fixes some of the pipeline's arguments: identity as the
transform, a fixed or supplied predicate, and a display routine as the
action. None of them traverses the roster itself.
"""

from __future__ import annotations

from typing import Iterable

from roster_pipeline.domain.entities import Person, print_person
from roster_pipeline.filters.predicates import identity, older_than, within_age_range
from roster_pipeline.interfaces.check_person import CheckPerson
from roster_pipeline.interfaces.functions import Action, Predicate, Transform, Y
from roster_pipeline.pipeline.element_pipeline import process_elements
from roster_pipeline.validation.argument_validator import InvalidArgumentError

PersonAction = Action[Person]


def print_person_older_than(
    roster: Iterable[Person],
    age: int,
    display: PersonAction = print_person,
) -> None:
    """Display everyone aged ``age`` or older."""
    process_elements(roster, older_than(age), identity, display)


def print_persons_within_age_range(
    roster: Iterable[Person],
    low: int,
    high: int,
    display: PersonAction = print_person,
) -> None:
    """Display everyone with ``low <= age < high``."""
    process_elements(roster, within_age_range(low, high), identity, display)


def print_persons(
    roster: Iterable[Person],
    tester: CheckPerson,
    display: PersonAction = print_person,
) -> None:
    """
    Display everyone accepted by a predicate object.

    Raises:
        InvalidArgumentError: If tester has no ``test`` method
    """
    if not isinstance(tester, CheckPerson):
        raise InvalidArgumentError(
            f"tester must provide test(person), got {type(tester).__name__}",
            field="tester",
        )
    process_elements(roster, tester.test, identity, display)


def print_persons_with_predicate(
    roster: Iterable[Person],
    tester: Predicate[Person],
    display: PersonAction = print_person,
) -> None:
    """Display everyone accepted by a predicate function."""
    process_elements(roster, tester, identity, display)


def process_persons(
    roster: Iterable[Person],
    tester: Predicate[Person],
    block: PersonAction,
) -> None:
    """Run ``block`` on everyone accepted by ``tester``."""
    process_elements(roster, tester, identity, block)


def process_persons_with_function(
    roster: Iterable[Person],
    tester: Predicate[Person],
    mapper: Transform[Person, Y],
    block: Action[Y],
) -> None:
    """Run ``block`` on ``mapper(person)`` for everyone accepted by ``tester``."""
    process_elements(roster, tester, mapper, block)
