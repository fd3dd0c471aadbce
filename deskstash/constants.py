"""Constants for deskstash: stash marker, ref names, record separators."""

from __future__ import annotations

# Default git executable, looked up on PATH when not configured
DEFAULT_GIT = "git"

# Prefix of every stash message written by the desktop client
DESKTOP_STASH_MARKER = "!!GitHub_Desktop"

# Stash ref and its reflog
STASH_REF = "refs/stash"
HEAD_REF = "HEAD"

# Unit separator between fields of one `git log -g` record
FIELD_SEPARATOR = "\x1f"

# Object id lengths (hex)
SHA1_HEX_LEN = 40
SHA256_HEX_LEN = 64

# Short id length for display
SHORT_SHA_LEN = 7
