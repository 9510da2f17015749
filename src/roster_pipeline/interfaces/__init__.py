"""
Interfaces Layer - Function Types and Protocols.

The pipeline is parameterized by plain callables, so most roles are just
function-type aliases. Protocols are used where an object contract is the
point of the demonstration.

Aliases:
    - Predicate: element -> bool
    - Transform: element -> value
    - Action: value -> None

Protocols:
    - CheckPerson: Predicate object with a ``test`` method
    - RosterProvider: Source of the demonstration roster
"""

from roster_pipeline.interfaces.functions import Action, Predicate, Transform
from roster_pipeline.interfaces.check_person import CheckPerson
from roster_pipeline.interfaces.roster_provider import RosterProvider

__all__ = ["Action", "Predicate", "Transform", "CheckPerson", "RosterProvider"]
