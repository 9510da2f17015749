"""
Static Roster Provider.

Hands out the fixed demonstration roster. Records are built once per
provider and shared; every call returns a fresh list so callers cannot
reorder the provider's copy.
"""

from __future__ import annotations

from typing import List

from roster_pipeline.domain.entities import Person, Sex


class StaticRosterProvider:
    """Fixed in-memory roster."""

    # (name, gender, age, email)
    ROSTER = [
        ("Bob", Sex.MALE, 16, "bob@example.com"),
        ("Fred", Sex.MALE, 19, "fred@example.com"),
        ("Jane", Sex.FEMALE, 20, "jane@example.com"),
        ("George", Sex.MALE, 24, "george@example.com"),
        ("Alice", Sex.FEMALE, 30, "alice@example.com"),
    ]

    def __init__(self) -> None:
        self._people = [
            Person(name=name, gender=gender, age=age, email=email)
            for name, gender, age, email in self.ROSTER
        ]

    def get_roster(self) -> List[Person]:
        """Get the roster in its fixed order."""
        return list(self._people)


def create_roster() -> List[Person]:
    """Shortcut for ``StaticRosterProvider().get_roster()``."""
    return StaticRosterProvider().get_roster()
