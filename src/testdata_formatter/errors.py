"""Exception hierarchy for test-data formatting."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class FormatterError(Exception):
    """Base error for all test-data formatting failures."""


class InvalidRequestError(FormatterError):
    """Pipeline request failed schema validation."""


class UnrecognizedFormatError(FormatterError):
    """Requested format token is not present in the format table."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"format extension {token!r} not recognized")


class CommandError(FormatterError):
    """External tool could not be started or exited with a non-zero status.

    Parameters
    ----------
    tool : str
        Executable that was invoked.
    args : Sequence[str]
        Arguments passed to the executable.
    returncode : int | None
        Exit status, or ``None`` when the process never started.
    output : str
        Combined stdout/stderr text (or the OS error text).
    """

    def __init__(
        self,
        tool: str,
        args: Sequence[str],
        returncode: int | None,
        output: str,
    ) -> None:
        self.tool = tool
        self.arguments = tuple(args)
        self.returncode = returncode
        self.output = output
        status = (
            "could not be started"
            if returncode is None
            else f"exited with status {returncode}"
        )
        super().__init__(
            f"OS command `{tool} {' '.join(self.arguments)}` {status}\n"
            f"Stdout/Stderr: {output}"
        )


class OutputVerificationError(FormatterError):
    """Tool reported success but the expected output file is missing."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Failed to stat file {str(path)!r}")


class PipelineStepError(FormatterError):
    """A pipeline step failed; the underlying error is chained as ``__cause__``."""

    def __init__(self, step_index: int, token: str, input_path: Path, reason: str) -> None:
        self.step_index = step_index
        self.token = token
        self.input_path = input_path
        super().__init__(
            f"could not format test data (step {step_index}, format {token!r}, "
            f"input {str(input_path)!r}): {reason}"
        )
