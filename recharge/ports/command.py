"""Command port - Abstraction for running external executables.

The deployment workflow shells out to the build tool and to git. All
of those calls go through this protocol so the orchestration can be
tested with a fake runner instead of real binaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import CommandResult


class CommandRunnerPort(Protocol):
    """Port for external command execution.

    Implementation: adapters/process/subprocess_runner.py
    """

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        capture: bool = False,
    ) -> CommandResult:
        """Run a command and wait for it to finish.

        Args:
            args: Argument vector, executable first.
            cwd: Working directory (None for the current one).
            capture: Capture stdout/stderr instead of inheriting them.

        Returns:
            CommandResult with the exit status and any captured output.
            A non-zero status is reported, never raised.
        """
        ...
