"""Runner: invoke the git executable in a repository directory."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from . import config
from .constants import DEFAULT_GIT
from .errors import CommandFailedError, GitNotFoundError, NotARepositoryError

LOG = logging.getLogger(__name__)


def git_available() -> bool:
    """Return True if a git executable can be found."""
    return shutil.which(config.git_executable() or DEFAULT_GIT) is not None


@dataclass(frozen=True)
class CommandResult:
    stdout: str
    stderr: str
    exit_code: int


class GitRunner:
    """Runs git with an argument list; blocks until the process exits."""

    def __init__(self, git_exe: Optional[str] = None) -> None:
        exe = git_exe or config.git_executable() or DEFAULT_GIT
        self._git = shutil.which(exe)
        if not self._git:
            raise GitNotFoundError(f"git not found: {exe}")

    def run(
        self,
        repository_path: Path,
        args: List[str],
        ok_codes: Iterable[int] = (0,),
        env: Optional[dict] = None,
    ) -> CommandResult:
        """Run git in repository_path. Raises CommandFailedError on an exit code outside ok_codes."""
        full = [self._git] + list(args)
        e = os.environ.copy()
        # No interactive credential prompts
        e["GIT_TERMINAL_PROMPT"] = "0"
        if env:
            e.update(env)
        if not Path(repository_path).is_dir():
            raise NotARepositoryError(f"no such directory: {repository_path}")
        LOG.debug("git %s (cwd=%s)", " ".join(args), repository_path)
        try:
            r = subprocess.run(
                full,
                cwd=repository_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=e,
            )
        except FileNotFoundError as err:
            raise GitNotFoundError(str(err)) from err
        result = CommandResult(r.stdout or "", r.stderr or "", r.returncode)
        if result.exit_code not in tuple(ok_codes):
            LOG.debug("git %s exited %d: %s", args[0] if args else "", result.exit_code, result.stderr.strip())
            raise CommandFailedError(args, result.exit_code, stderr=result.stderr, stdout=result.stdout)
        return result
