"""Version-control adapters - Implementations of VersionControlPort.

Available implementations:
- GitCLIAdapter: shells out to the git executable
"""

from .git_cli import GitCLIAdapter

__all__ = ["GitCLIAdapter"]
