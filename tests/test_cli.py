"""Tests for the CLI: stash create/list/last, switch."""

import io
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from gitrepo import git, init_repo, requires_git, stash_list  # noqa: E402

from deskstash.cli import main  # noqa: E402


def run_cli(*argv: str) -> tuple:
    out = io.StringIO()
    with redirect_stdout(out):
        code = main(list(argv))
    return code, out.getvalue()


@requires_git
class TestStashCommands(unittest.TestCase):
    def setUp(self) -> None:
        self.path = init_repo("deskstash_cli_")
        self.readme = self.path / "README.md"

    def test_create_then_list_and_last(self) -> None:
        self.readme.write_text("change\n")
        code, out = run_cli("-C", str(self.path), "stash", "create")
        self.assertEqual(code, 0)
        stash_id = out.strip()
        self.assertEqual(len(stash_id), 40)

        code, out = run_cli("-C", str(self.path), "stash", "list")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), f"stash@{{0}} {stash_id[:7]} master")

        code, out = run_cli("-C", str(self.path), "stash", "last", "master")
        self.assertEqual(code, 0)
        self.assertIn(stash_id[:7], out)

    def test_create_with_explicit_branch(self) -> None:
        self.readme.write_text("change\n")
        run_cli("-C", str(self.path), "stash", "create", "--branch", "feature/x")
        code, out = run_cli("-C", str(self.path), "stash", "last", "feature/x")
        self.assertEqual(code, 0)
        self.assertTrue(out.strip().endswith("feature/x"))

    def test_create_nothing_to_save(self) -> None:
        code, out = run_cli("-C", str(self.path), "stash", "create")
        self.assertEqual(code, 0)
        self.assertIn("No local changes to save", out)

    def test_last_missing_exits_1(self) -> None:
        code, out = run_cli("-C", str(self.path), "stash", "last", "master")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_unborn_repository_reports_error(self) -> None:
        path = init_repo("deskstash_cli_unborn_", initial_commit=False)
        code, out = run_cli("-C", str(path), "stash", "list")
        self.assertEqual(code, 1)
        self.assertIn("Error:", out)

    def test_runs_from_subdirectory(self) -> None:
        sub = self.path / "docs" / "api"
        sub.mkdir(parents=True)
        self.readme.write_text("change\n")
        code, out = run_cli("-C", str(sub), "stash", "create")
        self.assertEqual(code, 0)
        stash_id = out.strip()
        code, out = run_cli("-C", str(sub), "stash", "list")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), f"stash@{{0}} {stash_id[:7]} master")

    def test_not_a_repository(self) -> None:
        d = tempfile.mkdtemp(prefix="deskstash_cli_norepo_")
        code, out = run_cli("-C", d, "stash", "list")
        self.assertEqual(code, 1)
        self.assertIn("Not a git repository", out)

    def test_switch_stashes_changes(self) -> None:
        git(self.path, "branch", "other")
        self.readme.write_text("change\n")
        code, out = run_cli("-C", str(self.path), "switch", "other")
        self.assertEqual(code, 0)
        self.assertIn("Stashed changes from master", out)
        self.assertEqual(git(self.path, "symbolic-ref", "--short", "HEAD"), "other")
        self.assertEqual(len(stash_list(self.path)), 1)

    def test_switch_bring_changes(self) -> None:
        git(self.path, "branch", "other")
        self.readme.write_text("change\n")
        code, _ = run_cli("-C", str(self.path), "switch", "other", "--bring-changes")
        self.assertEqual(code, 0)
        self.assertEqual(self.readme.read_text(), "change\n")
        self.assertEqual(stash_list(self.path), [])
