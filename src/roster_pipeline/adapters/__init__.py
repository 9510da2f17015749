"""
Adapters Package - Infrastructure Implementations.

Concrete implementations used by the demonstration and the tests.

Providers:
    - StaticRosterProvider: The fixed in-memory roster

Actions:
    - ConsolePrinter: Writes people and lines to a text stream
    - ListCollector: Accumulates every value it is called with

Design Principles:
    - Providers implement the RosterProvider protocol
    - Actions are plain callables or expose bound methods usable as actions
    - No business logic in adapters
"""

from roster_pipeline.adapters.roster_provider import StaticRosterProvider, create_roster
from roster_pipeline.adapters.console_printer import ConsolePrinter
from roster_pipeline.adapters.collector import ListCollector

__all__ = [
    "StaticRosterProvider",
    "create_roster",
    "ConsolePrinter",
    "ListCollector",
]
