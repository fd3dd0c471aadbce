"""Custom exceptions for deskstash."""

from __future__ import annotations

from typing import Optional, Sequence


class DeskstashError(Exception):
    """Base exception for deskstash."""

    pass


class NotARepositoryError(DeskstashError):
    """Raised when a path is not a git working tree."""

    pass


class GitNotFoundError(DeskstashError):
    """Raised when the git executable cannot be located."""

    pass


class CommandFailedError(DeskstashError):
    """Raised when git exits with a code the caller did not expect."""

    def __init__(
        self,
        args: Sequence[str],
        exit_code: int,
        stderr: str = "",
        stdout: str = "",
        message: Optional[str] = None,
    ) -> None:
        self.command = list(args)
        self.exit_code = exit_code
        self.stderr = stderr
        self.stdout = stdout
        if message is None:
            detail = stderr.strip() or f"exit code {exit_code}"
            message = f"git {' '.join(self.command)} failed: {detail}"
        super().__init__(message)


class UnbornRepositoryError(CommandFailedError):
    """Raised when HEAD has no commit yet, so there is nothing to stash against."""

    pass


class StashStoreError(CommandFailedError):
    """Raised when a stash commit was created but could not be stored in the stash list.

    object_id is the orphaned stash commit; it is reachable only by its id.
    """

    def __init__(self, object_id: str, cause: CommandFailedError) -> None:
        self.object_id = object_id
        super().__init__(
            cause.command,
            cause.exit_code,
            stderr=cause.stderr,
            stdout=cause.stdout,
            message=f"stash {object_id} was created but not stored: {cause}",
        )


class SwitchInProgressError(DeskstashError):
    """Raised when a branch switch is submitted while another is still running."""

    pass


class InvalidConfigKeyError(DeskstashError):
    """Raised when a config key is invalid (e.g. not section.option)."""

    pass
