"""Stash message codec: the marker string that tags a stash as created by the desktop client.

Format: ``!!GitHub_Desktop<BRANCH@TIPSHA>``. The decoder anchors on the
fixed tail (``@`` + full object id + ``>``), so branch names containing
``/``, ``@``, ``<`` or ``>`` decode unchanged.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from .constants import DESKTOP_STASH_MARKER
from .util import is_object_id

_MESSAGE_RE = re.compile(
    re.escape(DESKTOP_STASH_MARKER)
    + r"<(?P<branch>.+)@(?P<sha>[0-9a-fA-F]{64}|[0-9a-fA-F]{40})>"
)

# ASCII space, control characters and DEL are rejected by git in ref names
_INVALID_BRANCH_RE = re.compile(r"[\x00-\x20\x7f]")


class StashMessage(NamedTuple):
    branch_name: str
    tip_sha: str


def encode_stash_message(branch_name: str, tip_sha: str) -> str:
    """Build the message for a stash taken on branch_name at tip_sha."""
    if not branch_name or _INVALID_BRANCH_RE.search(branch_name):
        raise ValueError(f"invalid branch name for stash message: {branch_name!r}")
    if not is_object_id(tip_sha):
        raise ValueError(f"invalid tip commit id: {tip_sha!r}")
    return f"{DESKTOP_STASH_MARKER}<{branch_name}@{tip_sha}>"


def decode_stash_message(message: str) -> Optional[StashMessage]:
    """Parse a stash message. Returns None if it was not written by encode_stash_message."""
    m = _MESSAGE_RE.fullmatch(message.strip())
    if m is None:
        return None
    branch = m.group("branch")
    if _INVALID_BRANCH_RE.search(branch):
        return None
    return StashMessage(branch, m.group("sha"))


def is_desktop_stash_message(message: str) -> bool:
    """Return True if message carries the desktop stash marker and parses."""
    return decode_stash_message(message) is not None
