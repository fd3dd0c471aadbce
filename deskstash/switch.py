"""Switch branch with uncommitted changes: stash them first, or carry them along."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Optional

from .errors import SwitchInProgressError
from .repo import Repository
from .stash import create_stash_entry

LOG = logging.getLogger(__name__)


class StashOption(enum.IntEnum):
    STASH_CHANGES = 0
    BRING_CHANGES_TO_BRANCH = 1


@dataclass(frozen=True)
class SwitchBranchState:
    is_creating_stash: bool = False
    selected_option: StashOption = StashOption.STASH_CHANGES


class SwitchBranchController:
    """State and submit action behind the "switch branch" confirmation.

    The state only changes through select_option() and the outcome of
    submit().
    """

    def __init__(self, repo: Repository, current_branch: str, checkout_branch_name: str) -> None:
        self.repo = repo
        self.current_branch = current_branch
        self.checkout_branch_name = checkout_branch_name
        self.state = SwitchBranchState()

    def option_titles(self) -> list[tuple[str, str]]:
        """(title, description) for each StashOption, in option order."""
        return [
            (
                f"Yes, stash my changes from {self.current_branch}",
                "Stash your in-progress work and return to it later",
            ),
            (
                f"No, bring my changes to {self.checkout_branch_name}",
                "Your in-progress work will automatically follow you to the new branch",
            ),
        ]

    def select_option(self, option: StashOption) -> None:
        if self.state.is_creating_stash:
            return
        self.state = replace(self.state, selected_option=StashOption(option))

    def submit(self) -> Optional[str]:
        """Apply the selected option and check out the target branch.

        Returns the id of the stash created, or None if none was.
        """
        if self.state.is_creating_stash:
            raise SwitchInProgressError("a branch switch is already in progress")
        stash_id = None
        if self.state.selected_option == StashOption.STASH_CHANGES:
            self.state = replace(self.state, is_creating_stash=True)
            try:
                stash_id = create_stash_entry(self.repo, self.current_branch)
                if stash_id is not None:
                    # Changes are safe in the stash list now
                    self.repo.reset_hard()
            finally:
                self.state = replace(self.state, is_creating_stash=False)
        self.repo.checkout_branch(self.checkout_branch_name)
        LOG.info(
            "switched %s -> %s (%s)",
            self.current_branch,
            self.checkout_branch_name,
            f"stashed {stash_id}" if stash_id else "changes carried over",
        )
        return stash_id
