"""Application ports for the process boundary."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from testdata_formatter.application.results import CommandResult


class CommandRunner(Protocol):
    """Run an external command synchronously."""

    def run(self, argv: Sequence[str]) -> CommandResult:
        """Run ``argv`` and return its exit status and combined output.

        Raises ``CommandError`` if the process cannot be started.
        """
