"""
Roster Pipeline - Filter, Map and Act over an In-Memory Roster.

A small demonstration of parameterizing behaviour with functions: fixed
predicates, predicate objects, lambdas, predicate/action pairs and finally
a generic predicate/transform/action pipeline over any iterable.

Main Components:
    - domain: Person record and age helpers
    - interfaces: Function-type aliases and protocols
    - pipeline: The generic runner and its roster specializations
    - filters: Predicate builders
    - ordering: Sort-by-age utility
    - adapters: Roster provider, console printer, collecting action
    - config: Configuration models and loaders
    - demo: The demonstration program

Example:
    >>> from roster_pipeline import create_roster, process_elements
    >>> emails = []
    >>> process_elements(create_roster(), lambda p: p.age >= 20, lambda p: p.email, emails.append)

"""

import logging

from roster_pipeline.adapters.roster_provider import create_roster
from roster_pipeline.pipeline.element_pipeline import ElementPipeline, process_elements
from roster_pipeline.validation.argument_validator import InvalidArgumentError

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Roster Pipeline.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import roster_pipeline
        >>> roster_pipeline.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("roster_pipeline").setLevel(level)


__all__ = [
    "ElementPipeline",
    "InvalidArgumentError",
    "configure_logging",
    "create_roster",
    "process_elements",
]
