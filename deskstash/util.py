"""Helper functions: safe text read, object id checks."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .constants import SHA1_HEX_LEN, SHA256_HEX_LEN

_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def is_object_id(value: str) -> bool:
    """Return True if value looks like a full SHA-1 or SHA-256 object id."""
    return len(value) in (SHA1_HEX_LEN, SHA256_HEX_LEN) and _HEX_RE.fullmatch(value) is not None


def read_text_safe(path: Path) -> Optional[str]:
    """Read file as text; return None if not found or error."""
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return None
