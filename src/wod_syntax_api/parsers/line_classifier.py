"""
Line Classifier

Tags each raw line of WOD text as a block header, format header, exercise
line, blank line or something unrecognized. Classification only looks at the
shape of the line; schemes and header parameters are parsed later.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from wod_syntax_api.utils import indent_width
from .format_header import looks_like_format_header
from .rep_scheme import is_rep_scheme, split_trailing_scheme

COMMENT_PATTERN = re.compile(r'^(//|--)')
BLOCK_HEADER_PATTERN = re.compile(r'^#+\s*(.*)$')


@dataclass(frozen=True)
class BlankLine:
    line_number: int


@dataclass(frozen=True)
class BlockHeader:
    line_number: int
    title: str
    raw: str


@dataclass(frozen=True)
class FormatHeaderLine:
    line_number: int
    raw: str


@dataclass(frozen=True)
class ExerciseLine:
    """
    An exercise line.

    Top-level lines (indent 0) are split into ``name`` and ``scheme`` text.
    Indented lines keep the whole stripped text in ``text``.
    """
    line_number: int
    indent: int
    raw: str
    text: str
    name: Optional[str] = None
    scheme: Optional[str] = None


@dataclass(frozen=True)
class UnclassifiedLine:
    line_number: int
    raw: str


ClassifiedLine = Union[BlankLine, BlockHeader, FormatHeaderLine, ExerciseLine, UnclassifiedLine]


def classify_line(line: str, line_number: int) -> ClassifiedLine:
    """
    Classify a single line.

    Args:
        line: Raw line without its trailing newline
        line_number: 1-based line number

    Returns:
        One of BlankLine, BlockHeader, FormatHeaderLine, ExerciseLine,
        UnclassifiedLine
    """
    stripped = line.strip()

    if not stripped or COMMENT_PATTERN.match(stripped):
        return BlankLine(line_number)

    header_match = BLOCK_HEADER_PATTERN.match(stripped)
    if header_match:
        return BlockHeader(line_number, title=header_match.group(1).strip(), raw=line)

    indent = indent_width(line)
    if indent > 0:
        return ExerciseLine(line_number, indent=indent, raw=line, text=stripped)

    if stripped.endswith(':'):
        return FormatHeaderLine(line_number, raw=line)

    name, colon, scheme = stripped.rpartition(':')
    # "EMOM Burpee Test: 1" is an exercise whose name starts with a keyword
    if colon and name.strip() and is_rep_scheme(scheme):
        return ExerciseLine(
            line_number, indent=0, raw=line, text=stripped,
            name=name.strip(), scheme=scheme.strip(),
        )

    if looks_like_format_header(stripped):
        return FormatHeaderLine(line_number, raw=line)

    if colon:
        if name.strip() and scheme.strip():
            return ExerciseLine(
                line_number, indent=0, raw=line, text=stripped,
                name=name.strip(), scheme=scheme.strip(),
            )
        return UnclassifiedLine(line_number, raw=line)

    parts = split_trailing_scheme(stripped)
    if parts:
        name, scheme = parts
        return ExerciseLine(line_number, indent=0, raw=line, text=stripped, name=name, scheme=scheme)

    return UnclassifiedLine(line_number, raw=line)
