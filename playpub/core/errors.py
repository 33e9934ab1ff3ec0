"""Process exit codes for the playpub CLI.

The numeric values are part of the CLI contract used by build pipelines:
- 0: Success (including a run skipped because of the build result)
- 1: Configuration error (track, rollout, patterns, release notes)
- 2: Discovery error (no artifact matched the pattern)
- 3: Artifact error (unreadable package, bad expansion file name)
- 4: Upload error (at least one application group failed)
- 5: I/O error (config file unreadable)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    CONFIG_ERROR = 1
    DISCOVERY_ERROR = 2
    ARTIFACT_ERROR = 3
    UPLOAD_ERROR = 4
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
