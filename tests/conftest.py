"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import List

import pytest

from roster_pipeline.adapters.collector import ListCollector
from roster_pipeline.adapters.console_printer import ConsolePrinter
from roster_pipeline.adapters.roster_provider import StaticRosterProvider
from roster_pipeline.config.models import RosterPipelineConfig
from roster_pipeline.domain.entities import Person, Sex


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def roster_provider() -> StaticRosterProvider:
    """Create the fixed roster provider."""
    return StaticRosterProvider()


@pytest.fixture
def roster(roster_provider: StaticRosterProvider) -> List[Person]:
    """Roster with ages [16, 19, 20, 24, 30] and genders [M, M, F, M, F]."""
    return roster_provider.get_roster()


@pytest.fixture
def collector() -> ListCollector:
    """Create an accumulating action."""
    return ListCollector()


@pytest.fixture
def output() -> io.StringIO:
    """In-memory stream for printer output."""
    return io.StringIO()


@pytest.fixture
def printer(output: io.StringIO) -> ConsolePrinter:
    """Create a printer writing to the in-memory stream."""
    return ConsolePrinter(stream=output)


@pytest.fixture
def default_config() -> RosterPipelineConfig:
    """Create default configuration."""
    return RosterPipelineConfig()


@pytest.fixture
def unordered_people() -> List[Person]:
    """People listed out of age order, with one tie."""
    return [
        Person(name="Carol", gender=Sex.FEMALE, age=41, email="carol@example.com"),
        Person(name="Dan", gender=Sex.MALE, age=22, email="dan@example.com"),
        Person(name="Eve", gender=Sex.FEMALE, age=35, email="eve@example.com"),
        Person(name="Finn", gender=Sex.MALE, age=22, email="finn@example.com"),
        Person(name="Gail", gender=Sex.FEMALE, age=7, email="gail@example.com"),
    ]
