"""Repository: a working tree path bound to the git runner."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .constants import HEAD_REF
from .errors import NotARepositoryError, UnbornRepositoryError
from .runner import CommandResult, GitRunner

LOG = logging.getLogger(__name__)


class Repository:
    """Git working tree at path; every query goes through git."""

    def __init__(self, path: str | Path = ".", runner: Optional[GitRunner] = None) -> None:
        self.path = Path(path).resolve()
        self.git_dir = self.path / ".git"
        self._runner = runner

    @classmethod
    def discover(cls, path: str | Path = ".", runner: Optional[GitRunner] = None) -> "Repository":
        """Repository whose working tree contains path (path may be a subdirectory)."""
        start = cls(path, runner)
        r = start.git("rev-parse", "--show-toplevel", ok_codes=(0, 128))
        top = r.stdout.strip()
        if r.exit_code != 0 or not top:
            raise NotARepositoryError(f"not a git repository: {start.path}")
        return cls(top, start._runner)

    @property
    def runner(self) -> GitRunner:
        if self._runner is None:
            self._runner = GitRunner()
        return self._runner

    def require_repo(self) -> None:
        """Raise NotARepositoryError if not a git working tree (.git dir, or .git file for worktrees)."""
        if not self.git_dir.exists():
            raise NotARepositoryError(f"not a git repository: {self.path}")

    def git(self, *args: str, ok_codes: Iterable[int] = (0,)) -> CommandResult:
        """Run git in this repository."""
        return self.runner.run(self.path, list(args), ok_codes=ok_codes)

    def resolve_ref(self, ref: str) -> Optional[str]:
        """Return the object id ref points at, or None if it does not resolve."""
        r = self.git("rev-parse", "--verify", "--quiet", ref, ok_codes=(0, 1))
        sha = r.stdout.strip()
        if r.exit_code != 0 or not sha:
            return None
        return sha

    def resolve_tip(self) -> str:
        """Return the commit HEAD points at. Raises UnbornRepositoryError if there is none."""
        args = ["rev-parse", "--verify", "--quiet", HEAD_REF]
        r = self.git(*args, ok_codes=(0, 1))
        sha = r.stdout.strip()
        if r.exit_code != 0 or not sha:
            raise UnbornRepositoryError(
                args,
                r.exit_code,
                stderr=r.stderr,
                stdout=r.stdout,
                message=f"no commits yet in {self.path}",
            )
        return sha

    def current_branch_name(self) -> Optional[str]:
        """Short name of the checked out branch; None when HEAD is detached."""
        r = self.git("symbolic-ref", "--quiet", "--short", HEAD_REF, ok_codes=(0, 1))
        name = r.stdout.strip()
        return name if r.exit_code == 0 and name else None

    def checkout_branch(self, branch_name: str) -> None:
        """Switch the working tree to an existing branch."""
        self.git("checkout", branch_name, "--")
        LOG.info("checked out %s in %s", branch_name, self.path)

    def reset_hard(self) -> None:
        """Discard tracked changes in the index and working tree."""
        self.git("reset", "--hard", "--quiet", HEAD_REF)
