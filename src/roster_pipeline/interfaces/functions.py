"""
Function-Type Aliases for Pipeline Roles.

Each alias is generic over its element types, so ``Predicate[Person]`` and
``Transform[Person, str]`` read the way the pipeline uses them.
"""

from __future__ import annotations

from typing import Callable, TypeVar

X = TypeVar("X")
Y = TypeVar("Y")

# Pure boolean test over one element
Predicate = Callable[[X], bool]

# Pure mapping from one element type to another
Transform = Callable[[X], Y]

# Side-effecting consumer, return value ignored
Action = Callable[[Y], None]
