"""
Console Printer.

Renders demonstration output to a text stream. Its bound methods are
handed to the pipeline as actions.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from roster_pipeline.domain.entities import Person, format_person


class ConsolePrinter:
    """Simple stream-based printer."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console printer.

        Args:
            stream: Output stream. If None, the current sys.stdout is used
                at write time.
        """
        self._stream = stream

    def section(self, title: str) -> None:
        """Write a section heading."""
        self._write(title)

    def print_person(self, person: Person) -> None:
        """Write one person."""
        self._write(format_person(person))

    def print_line(self, text: str) -> None:
        """Write a line of text."""
        self._write(text)

    def blank_line(self) -> None:
        self._write("")

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(text, file=stream)
