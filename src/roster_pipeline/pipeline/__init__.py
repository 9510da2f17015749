"""
Pipeline Package - Filter, Map and Act in One Pass.

This package contains the generic pipeline runner and the roster-specific
routines built on top of it.

Components:
    - ElementPipeline: Holds predicate/transform/action, runs over a source
    - process_elements: One-shot functional form of ElementPipeline
    - Specializations: Printer and processor routines for the roster

The pipeline is responsible for:
    - Validating its callables before touching the source
    - Visiting every element exactly once, in order
    - Letting failures from the callables propagate unchanged

Design Principles:
    - One implementation; specializations only supply arguments
    - No I/O or logging of its own
"""

from roster_pipeline.pipeline.element_pipeline import ElementPipeline, process_elements
from roster_pipeline.pipeline.specializations import (
    print_person_older_than,
    print_persons,
    print_persons_with_predicate,
    print_persons_within_age_range,
    process_persons,
    process_persons_with_function,
)

__all__ = [
    "ElementPipeline",
    "process_elements",
    "print_person_older_than",
    "print_persons",
    "print_persons_with_predicate",
    "print_persons_within_age_range",
    "process_persons",
    "process_persons_with_function",
]
