"""
Element Pipeline - Generic Filter/Map/Act Runner.

The ElementPipeline applies a predicate, a transform and an action to each
element of a source in a single pass. It is generic over the element type X
and the transformed type Y.

Guarantees:
    - Exactly one predicate call per element
    - Transform and action called once per element that passes
    - Source order preserved, nothing skipped or duplicated
    - The first exception from a callable stops the run and reaches the
      caller as-is
"""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from roster_pipeline.interfaces.functions import Action, Predicate, Transform
from roster_pipeline.validation.argument_validator import (
    require_source,
    validate_pipeline_arguments,
)

X = TypeVar("X")
Y = TypeVar("Y")


class ElementPipeline(Generic[X, Y]):
    """Filter -> map -> act over any iterable."""

    def __init__(
        self,
        predicate: Predicate[X],
        transform: Transform[X, Y],
        action: Action[Y],
    ) -> None:
        """
        Initialize pipeline with its callables.

        Args:
            predicate: Decides which elements are processed
            transform: Maps a passing element to the value handed to action
            action: Consumes each transformed value

        Raises:
            InvalidArgumentError: If any callable is absent or not callable
        """
        validate_pipeline_arguments(predicate, transform, action)
        self.predicate = predicate
        self.transform = transform
        self.action = action

    def run(self, source: Iterable[X]) -> None:
        """
        Traverse ``source`` once.

        Args:
            source: Finite iterable; may be empty

        Raises:
            InvalidArgumentError: If source is None
        """
        require_source(source)

        predicate = self.predicate
        transform = self.transform
        action = self.action

        for element in source:
            if predicate(element):
                action(transform(element))


def process_elements(
    source: Iterable[X],
    predicate: Predicate[X],
    transform: Transform[X, Y],
    action: Action[Y],
) -> None:
    """
    Run a one-off pipeline over ``source``.

    Arguments are validated before the first element is read.

    Example:
        >>> emails = []
        >>> process_elements(roster, older_than(20), attrgetter("email"), emails.append)
    """
    ElementPipeline(predicate, transform, action).run(source)
