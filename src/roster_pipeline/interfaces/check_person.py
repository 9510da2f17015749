"""
CheckPerson Protocol.

A predicate object: anything with a ``test(person) -> bool`` method. Named
classes, classes defined inline at the call site, and adapters around plain
functions all satisfy it structurally.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - runtime_checkable so callers can reject malformed testers up front
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roster_pipeline.domain.entities import Person


@runtime_checkable
class CheckPerson(Protocol):
    """Abstract interface for person predicate objects."""

    def test(self, person: Person) -> bool:
        """
        Decide whether a person matches.

        Args:
            person: Roster member to check

        Returns:
            True if the person should be processed
        """
        ...
