"""Subprocess command runner adapter.

Runs external executables with either inherited or captured I/O and
reports the exit status as a CommandResult. A command that cannot be
launched at all (missing executable, bad cwd) is reported with exit
status 127 and the OS error text on stderr.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from ...domain.models import CommandResult

LAUNCH_FAILURE_RETURNCODE = 127
TIMEOUT_RETURNCODE = 124


@dataclass
class SubprocessCommandRunner:
    """Command runner backed by ``subprocess.run``.

    This adapter implements CommandRunnerPort.

    Attributes:
        timeout_seconds: Per-command timeout (None waits indefinitely)
    """

    timeout_seconds: Optional[float] = None
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(
        self,
        args: Sequence[str],
        cwd: Optional[Path] = None,
        capture: bool = False,
    ) -> CommandResult:
        argv = tuple(str(a) for a in args)
        self._logger.debug(
            "Running command",
            extra={"command": list(argv), "cwd": str(cwd) if cwd else None},
        )

        try:
            proc = subprocess.run(
                list(argv),
                cwd=str(cwd) if cwd else None,
                capture_output=capture,
                text=True,
                timeout=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired as e:
            self._logger.warning(
                "Command timed out",
                extra={"command": list(argv), "timeout": self.timeout_seconds},
            )
            return CommandResult(
                args=argv,
                returncode=TIMEOUT_RETURNCODE,
                stderr=f"Timed out after {e.timeout} seconds",
            )
        except OSError as e:
            self._logger.warning(
                "Command could not be started",
                extra={"command": list(argv), "error": str(e)},
            )
            return CommandResult(
                args=argv,
                returncode=LAUNCH_FAILURE_RETURNCODE,
                stderr=str(e),
            )

        result = CommandResult(
            args=argv,
            returncode=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )
        if not result.ok:
            self._logger.debug(
                "Command failed",
                extra={"command": list(argv), "returncode": result.returncode},
            )
        return result
