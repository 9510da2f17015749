"""
Roster Provider Protocol.

Defines the data access contract for the demonstration. A provider hands
out a fixed, ordered, finite list of people.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typing import List

    from roster_pipeline.domain.entities import Person


@runtime_checkable
class RosterProvider(Protocol):
    """Abstract interface for roster access."""

    def get_roster(self) -> List[Person]:
        """
        Get the roster in its fixed order.

        Returns:
            A new list of people; callers may not mutate the records
        """
        ...
