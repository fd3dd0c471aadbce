"""deskstash: tag, list and look up the desktop client's own git stashes."""

from .errors import CommandFailedError, DeskstashError, UnbornRepositoryError
from .repo import Repository
from .stash import StashEntry, create_stash_entry, get_desktop_stash_entries, get_last_stash_entry

__all__ = [
    "Repository",
    "StashEntry",
    "create_stash_entry",
    "get_desktop_stash_entries",
    "get_last_stash_entry",
    "DeskstashError",
    "CommandFailedError",
    "UnbornRepositoryError",
]
