"""Utility functions."""
from typing import Optional, Tuple

TAB_WIDTH = 4


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except ValueError:
        return None


def indent_width(line: str) -> int:
    """Width of the leading whitespace of a line, with tabs expanded."""
    expanded = line.expandtabs(TAB_WIDTH)
    return len(expanded) - len(expanded.lstrip())


def split_dash_list(txt: str) -> Optional[Tuple[int, ...]]:
    """Split a dash-joined list like '21-15-9' into ints (None if any part is not a number)."""
    parts = [to_int(p) if p.isdigit() else None for p in txt.split("-")]
    if len(parts) < 2 or any(p is None for p in parts):
        return None
    return tuple(parts)
