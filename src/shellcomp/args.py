"""
Command line as seen by the completion engine.

The shell gives us the whole line and the offset of the cursor in it.
Everything after the cursor is ignored, the rest is split on whitespace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Args:
    """Tokens of a completion request"""

    all: Tuple[str, ...] = ()
    """All tokens after the program name, including the one being completed"""
    completed: Tuple[str, ...] = ()
    """Tokens before the one being completed"""
    last: str = ""
    """The token under the cursor, possibly empty"""

    @classmethod
    def make(cls, completed: Tuple[str, ...], last: str) -> Args:
        return cls(all=(*completed, last), completed=completed, last=last)

    def split_last_equal(self) -> Args:
        """Treat --flag=value under the cursor as a flag followed by its value"""
        if self.last.startswith("-") and "=" in self.last:
            flag, value = self.last.split("=", 1)
            return Args.make((*self.completed, flag), value)
        return self


def parse_point(value: Any, line: str) -> int:
    """Convert COMP_POINT like value to an offset into line"""
    if value is None or value == "":
        return len(line)
    try:
        point = int(value)
    except (TypeError, ValueError):
        log.debug(f"Invalid cursor offset {value!r}, using end of line")
        return len(line)
    return max(0, min(point, len(line)))


def parse_line(line: str, point: Optional[Any] = None) -> Args:
    """Split line truncated at point into Args. The program name is dropped"""
    line = line[: parse_point(point, line)]
    parts = line.split()
    if not line or line[-1].isspace():
        parts.append("")
    if len(parts) <= 1:
        # Still typing the program name.
        return Args(last=parts[0] if parts else "")
    # First is the program name.
    args = Args.make(tuple(parts[1:-1]), parts[-1])
    log.debug(f"line={line!r} {args}")
    return args
