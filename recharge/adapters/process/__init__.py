"""Process adapters - Implementations of CommandRunnerPort.

Available implementations:
- SubprocessCommandRunner: runs commands through the subprocess module
"""

from .subprocess_runner import SubprocessCommandRunner

__all__ = ["SubprocessCommandRunner"]
