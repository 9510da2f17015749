"""
Demonstration Program.

Runs a fixed sequence of roster queries, each one more generic than the
last, and writes the results to the console. Every query goes through the
same element pipeline; only the way its behaviour is supplied changes.
"""

from __future__ import annotations

import logging
from operator import attrgetter
from pathlib import Path
from typing import Optional, Union

from roster_pipeline import configure_logging
from roster_pipeline.adapters.console_printer import ConsolePrinter
from roster_pipeline.adapters.roster_provider import StaticRosterProvider
from roster_pipeline.config.loader import load_config, load_default_config
from roster_pipeline.config.models import RosterPipelineConfig
from roster_pipeline.domain.entities import Person
from roster_pipeline.filters.predicates import (
    CheckPersonEligibleForSelectiveService,
    is_eligible_for_selective_service,
)
from roster_pipeline.interfaces.roster_provider import RosterProvider
from roster_pipeline.ordering.age_order import sorted_by_age
from roster_pipeline.pipeline.element_pipeline import process_elements
from roster_pipeline.pipeline.specializations import (
    print_person_older_than,
    print_persons,
    print_persons_with_predicate,
    print_persons_within_age_range,
    process_persons,
    process_persons_with_function,
)

logger = logging.getLogger(__name__)

ELIGIBLE = "Persons who are eligible for Selective Service"


def run_demo(
    provider: RosterProvider,
    printer: ConsolePrinter,
    config: RosterPipelineConfig,
) -> None:
    """
    Write every demonstration section to ``printer``.

    Args:
        provider: Source of the roster
        printer: Output for headings, people and emails
        config: Query thresholds
    """
    roster = provider.get_roster()
    settings = config.demo
    min_age = settings.selective_service.min_age
    max_age = settings.selective_service.max_age

    def eligible(p: Person) -> bool:
        return is_eligible_for_selective_service(p, min_age=min_age, max_age=max_age)

    def section(title: str) -> None:
        logger.info(f"Running section: {title}")
        printer.section(title)

    section(f"Persons older than {settings.older_than_age}:")
    print_person_older_than(roster, settings.older_than_age, printer.print_person)
    printer.blank_line()

    low, high = settings.age_range.low, settings.age_range.high
    section(f"Persons range between {low} and {high}:")
    print_persons_within_age_range(roster, low, high, printer.print_person)
    printer.blank_line()

    section(f"{ELIGIBLE}:")
    print_persons(
        roster,
        CheckPersonEligibleForSelectiveService(min_age=min_age, max_age=max_age),
        printer.print_person,
    )
    printer.blank_line()

    class InlineEligibilityCheck:
        def test(self, person: Person) -> bool:
            return person.is_male and min_age <= person.age <= max_age

    section(f"{ELIGIBLE} (inline check):")
    print_persons(roster, InlineEligibilityCheck(), printer.print_person)
    printer.blank_line()

    section(f"{ELIGIBLE} (predicate):")
    print_persons_with_predicate(
        roster,
        lambda p: p.is_male and min_age <= p.age <= max_age,
        printer.print_person,
    )
    printer.blank_line()

    section(f"{ELIGIBLE} (predicate and action):")
    process_persons(roster, eligible, printer.print_person)
    printer.blank_line()

    section("Emails of persons eligible (mapper):")
    process_persons_with_function(
        roster, eligible, lambda p: p.email, printer.print_line
    )
    printer.blank_line()

    section("Emails of persons eligible (generic):")
    process_elements(roster, eligible, attrgetter("email"), printer.print_line)
    printer.blank_line()

    section("Emails of adult males (bulk operation):")
    for email in (p.email for p in roster if p.is_male and p.age >= min_age):
        printer.print_line(email)
    printer.blank_line()

    section("Persons sorted by age:")
    for person in sorted_by_age(roster):
        printer.print_person(person)


def main(config_path: Optional[Union[str, Path]] = None) -> int:
    """
    Program entry point.

    Args:
        config_path: Optional YAML config; the packaged default.yaml is
            used when omitted

    Returns:
        Process exit code
    """
    config = load_config(config_path) if config_path else load_default_config()
    configure_logging(
        level=getattr(logging, config.logging.level),
        format=config.logging.format,
    )
    run_demo(StaticRosterProvider(), ConsolePrinter(), config)
    return 0
