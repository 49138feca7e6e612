"""Simple command parsing utilities for the development CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None

    cmd = parts[0].lower()

    if cmd == "insert":
        # Everything after x and y is the payload, spaces included.
        head = text[1:].split(maxsplit=3)
        return CLICommand(name="insert", args=head[1:])

    return CLICommand(name=cmd, args=parts[1:])


__all__ = ["CLICommand", "parse_command"]
