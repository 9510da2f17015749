"""
Sort roster members by age using the three-way age comparator.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List

from roster_pipeline.domain.entities import Person, compare_age


def sorted_by_age(people: Iterable[Person]) -> List[Person]:
    """
    Return a new list ordered by ascending age.

    The sort is stable, so people of the same age keep their relative order.
    The input is left untouched.
    """
    return sorted(people, key=cmp_to_key(compare_age))
