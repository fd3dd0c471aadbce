"""Desktop stash entries: create tagged stashes and read them back from the stash reflog."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .constants import FIELD_SEPARATOR, STASH_REF
from .errors import CommandFailedError, StashStoreError
from .message import decode_stash_message, encode_stash_message
from .repo import Repository

LOG = logging.getLogger(__name__)

# selector, stash commit, reflog subject (the stored message)
_LOG_FORMAT = "%gd%x1f%H%x1f%gs"


@dataclass(frozen=True)
class StashEntry:
    """A stash in refs/stash whose message was written by the desktop client."""

    name: str
    stash_sha: str
    branch_name: str
    tip_sha: str


def _parse_record(line: str) -> Optional[StashEntry]:
    parts = line.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        return None
    name, stash_sha, subject = parts
    decoded = decode_stash_message(subject)
    if decoded is None:
        return None
    return StashEntry(name, stash_sha, decoded.branch_name, decoded.tip_sha)


def get_desktop_stash_entries(repo: Repository) -> list[StashEntry]:
    """Return desktop stash entries, most recent first (stash reflog order).

    Raises UnbornRepositoryError when HEAD has no commit and no stash exists.
    """
    repo.require_repo()
    if repo.resolve_ref(STASH_REF) is None:
        # No stash list at all: still an error on an unborn repository
        repo.resolve_tip()
        return []
    r = repo.git("log", "-g", f"--format={_LOG_FORMAT}", STASH_REF, "--")
    entries: list[StashEntry] = []
    for line in r.stdout.splitlines():
        if not line:
            continue
        entry = _parse_record(line)
        if entry is None:
            LOG.debug("skipping stash record not created by desktop: %r", line)
            continue
        entries.append(entry)
    return entries


def get_last_stash_entry(repo: Repository, branch_name: str) -> Optional[StashEntry]:
    """Return the most recent desktop stash taken on branch_name, or None."""
    for entry in get_desktop_stash_entries(repo):
        if entry.branch_name == branch_name:
            return entry
    return None


def create_stash_entry(
    repo: Repository, branch_name: str, tip_sha: Optional[str] = None
) -> Optional[str]:
    """Stash working tree changes on branch_name under a desktop message; return the stash id.

    The working tree is left untouched. Returns None when there is nothing
    to stash. Raises UnbornRepositoryError if HEAD has no commit, and
    StashStoreError if the stash commit was created but could not be stored.
    """
    repo.require_repo()
    if tip_sha is None:
        tip_sha = repo.resolve_tip()
    message = encode_stash_message(branch_name, tip_sha)
    object_id = repo.git("stash", "create").stdout.strip()
    if not object_id:
        LOG.info("no local changes to stash on %s", branch_name)
        return None
    try:
        repo.git("stash", "store", "-m", message, object_id)
    except CommandFailedError as e:
        raise StashStoreError(object_id, e) from e
    LOG.info("stored stash %s for %s", object_id, branch_name)
    return object_id


create_stash = create_stash_entry
get_last_stash_entry_for_branch = get_last_stash_entry
