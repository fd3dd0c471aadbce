#!/usr/bin/env python3
"""Thin wrapper: run deskstash CLI. Usage: python main.py <cmd> ... (same as python -m deskstash)."""

import sys

if __name__ == "__main__":
    from deskstash.cli import main
    sys.exit(main())
