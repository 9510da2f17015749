"""
List Collector.

An action that records every value it receives, in call order.
"""

from __future__ import annotations

from typing import Generic, List, TypeVar

T = TypeVar("T")


class ListCollector(Generic[T]):
    """Accumulating action."""

    def __init__(self) -> None:
        self.items: List[T] = []

    def __call__(self, value: T) -> None:
        self.items.append(value)

    def clear(self) -> None:
        """Forget everything collected so far."""
        self.items.clear()
