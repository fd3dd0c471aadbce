"""CLI: argparse and command dispatch."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import config
from .constants import SHORT_SHA_LEN
from .errors import DeskstashError, NotARepositoryError
from .repo import Repository
from .stash import StashEntry, create_stash_entry, get_desktop_stash_entries, get_last_stash_entry
from .switch import StashOption, SwitchBranchController


def _repo(args: argparse.Namespace) -> Repository:
    return Repository.discover(Path(args.repo_path or Path.cwd()))


def _format_entry(entry: StashEntry) -> str:
    return f"{entry.name} {entry.stash_sha[:SHORT_SHA_LEN]} {entry.branch_name}"


def _branch_or_current(repo: Repository, branch: Optional[str]) -> Optional[str]:
    if branch:
        return branch
    return repo.current_branch_name()


def cmd_stash(args: argparse.Namespace) -> int:
    repo = _repo(args)
    sub = getattr(args, "stash_subcommand", None)
    if not sub or sub == "list":
        for entry in get_desktop_stash_entries(repo):
            print(_format_entry(entry))
        return 0
    if sub == "create":
        branch = _branch_or_current(repo, args.branch)
        if not branch:
            print("Error: HEAD is detached; pass --branch")
            return 1
        stash_id = create_stash_entry(repo, branch)
        if stash_id is None:
            print("No local changes to save")
        else:
            print(stash_id)
        return 0
    if sub == "last":
        branch = _branch_or_current(repo, args.branch)
        if not branch:
            print("Error: HEAD is detached; pass a branch name")
            return 1
        entry = get_last_stash_entry(repo, branch)
        if entry is None:
            return 1
        print(_format_entry(entry))
        return 0
    print("Usage: deskstash stash create|list|last")
    return 1


def cmd_switch(args: argparse.Namespace) -> int:
    repo = _repo(args)
    current = repo.current_branch_name()
    if not current:
        print("Error: HEAD is detached; nothing to switch from")
        return 1
    controller = SwitchBranchController(repo, current, args.branch)
    if args.bring_changes:
        controller.select_option(StashOption.BRING_CHANGES_TO_BRANCH)
    stash_id = controller.submit()
    if stash_id:
        print(f"Stashed changes from {current} as {stash_id[:SHORT_SHA_LEN]}")
    print(f"Switched to branch {args.branch}")
    return 0


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="deskstash",
        description="Create and find the desktop client's own git stashes.",
    )
    parser.add_argument("-C", dest="repo_path", default=None, help="Repository path (default: cwd)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log git invocations")
    sub = parser.add_subparsers(dest="command", help="Commands")

    # stash
    p_stash = sub.add_parser("stash", help="Create or list desktop stashes")
    stash_sub = p_stash.add_subparsers(dest="stash_subcommand")
    p_stash_create = stash_sub.add_parser("create", help="Stash changes under a desktop message")
    p_stash_create.add_argument("-b", "--branch", help="Branch to record (default: current branch)")
    stash_sub.add_parser("list", help="List desktop stashes, most recent first")
    p_stash_last = stash_sub.add_parser("last", help="Show the most recent desktop stash for a branch")
    p_stash_last.add_argument("branch", nargs="?", default=None, help="Branch name (default: current branch)")

    # switch
    p_switch = sub.add_parser("switch", help="Switch branch, stashing local changes first")
    p_switch.add_argument("branch", help="Branch to check out")
    p_switch.add_argument(
        "--bring-changes", action="store_true", help="Carry local changes to the new branch instead of stashing"
    )

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)
    handlers = {
        "stash": cmd_stash,
        "switch": cmd_switch,
    }
    handler = handlers.get(args.command)
    if not handler:
        parser.print_help()
        return 1
    try:
        return handler(args) or 0
    except NotARepositoryError:
        print("Not a git repository")
        return 1
    except (DeskstashError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
