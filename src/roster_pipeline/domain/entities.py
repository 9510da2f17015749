"""
Core Domain Entities.

This module defines the roster record and the small helpers that render and
order it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Sex(str, Enum):
    """Gender of a roster member."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class Person(BaseModel):
    """A member of the roster."""

    name: str = Field(..., description="Display name")
    gender: Sex = Field(..., description="Gender")
    age: int = Field(..., ge=0, description="Age in whole years")
    email: str = Field(..., description="Email address")

    model_config = {"frozen": True}

    @property
    def is_male(self) -> bool:
        return self.gender is Sex.MALE


def format_person(person: Person) -> str:
    """Render a person as ``"name, age"``."""
    return f"{person.name}, {person.age}"


def print_person(person: Person) -> None:
    """Write a person to stdout."""
    print(format_person(person))


def compare_age(a: Person, b: Person) -> int:
    """
    Compare two people by age.

    Returns:
        Negative if ``a`` is younger, zero if the same age, positive if older
    """
    return (a.age > b.age) - (a.age < b.age)
