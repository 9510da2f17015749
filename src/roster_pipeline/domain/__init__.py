"""
Domain Layer - Roster Records.

This package contains the record type the pipeline demonstrations operate
on. It plays the part of an external data provider: the pipeline core never
imports it.

Entities:
    - Person: An immutable roster member
    - Sex: Two-valued gender enum

Helpers:
    - format_person / print_person: Stable human-readable rendering
    - compare_age: Three-way ordering by age

Design Principles:
    - Immutable records (frozen pydantic models)
    - No infrastructure dependencies
"""

from roster_pipeline.domain.entities import (
    Person,
    Sex,
    compare_age,
    format_person,
    print_person,
)

__all__ = ["Person", "Sex", "compare_age", "format_person", "print_person"]
