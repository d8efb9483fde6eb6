"""
Format-Header Parser

Recognizes the four special training formats that open a group of nested
exercises:

    AMRAP 12min:
    EMOM 10min:
    21-15-9 For Time:   (or just "For Time:")
    5 Rounds:
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from wod_syntax_api.utils import split_dash_list, to_int
from .errors import MalformedFormatHeaderError
from .models import ExerciseEntry, FormatGroupEntry, FormatKind

_MINUTES = r'\s*min(?:ute)?s?'

AMRAP_PATTERN = re.compile(rf'^AMRAP\s+(\d+){_MINUTES}\s*:$', re.IGNORECASE)
EMOM_PATTERN = re.compile(rf'^EMOM\s+(\d+){_MINUTES}\s*:$', re.IGNORECASE)
FOR_TIME_PATTERN = re.compile(r'^(?:(\d+(?:-\d+)+)\s+)?For\s+Time\s*:$', re.IGNORECASE)
ROUNDS_PATTERN = re.compile(r'^(\d+)\s+Rounds?\s*:$', re.IGNORECASE)

# Any line that starts like a format header, valid or not
FORMAT_KEYWORD_PATTERN = re.compile(
    r'^(?:AMRAP|EMOM)\b'
    r'|^(?:[\d-]+\s+)?For\s+Time\b'
    r'|^\d+\s+Rounds?\b',
    re.IGNORECASE
)


@dataclass(frozen=True)
class FormatHeader:
    """Parameters read from a format header line"""
    format: FormatKind
    line_number: Optional[int] = None
    content: Optional[str] = None
    duration_minutes: Optional[int] = None
    rounds: Optional[int] = None
    rep_ladder: Optional[Tuple[int, ...]] = None
    description: Optional[str] = None

    def to_entry(self, exercises: Tuple[ExerciseEntry, ...]) -> FormatGroupEntry:
        """Attach the nested exercises and build the document entry."""
        return FormatGroupEntry(
            format=self.format,
            duration_minutes=self.duration_minutes,
            rounds=self.rounds,
            rep_ladder=self.rep_ladder,
            description=self.description,
            exercises=exercises,
        )


def looks_like_format_header(text: str) -> bool:
    """True if the line starts with a format keyword."""
    return bool(FORMAT_KEYWORD_PATTERN.match(text.strip()))


def is_format_header(text: str) -> bool:
    """True if the text is a complete header of one of the four formats."""
    text = text.strip()
    return any(
        pattern.match(text)
        for pattern in (AMRAP_PATTERN, EMOM_PATTERN, FOR_TIME_PATTERN, ROUNDS_PATTERN)
    )


def _positive(value: Optional[str], line_number: Optional[int], content: str) -> int:
    number = to_int(value)
    if not number or number < 1:
        raise MalformedFormatHeaderError(line_number, content)
    return number


def parse_format_header(raw: str, line_number: Optional[int] = None) -> FormatHeader:
    """
    Parse a format header line.

    Args:
        raw: The header line, e.g. "AMRAP 12min:"
        line_number: Line the header came from, for error reporting

    Returns:
        FormatHeader with the format-specific parameters filled in

    Raises:
        MalformedFormatHeaderError: If the line is not one of the four formats
            or its number is missing or not positive
    """
    text = raw.strip()

    match = AMRAP_PATTERN.match(text)
    if match:
        return FormatHeader(
            format=FormatKind.AMRAP,
            line_number=line_number,
            content=raw,
            duration_minutes=_positive(match.group(1), line_number, raw),
        )

    match = EMOM_PATTERN.match(text)
    if match:
        return FormatHeader(
            format=FormatKind.EMOM,
            line_number=line_number,
            content=raw,
            duration_minutes=_positive(match.group(1), line_number, raw),
        )

    match = FOR_TIME_PATTERN.match(text)
    if match:
        ladder_text = match.group(1)
        return FormatHeader(
            format=FormatKind.FOR_TIME,
            line_number=line_number,
            content=raw,
            rep_ladder=split_dash_list(ladder_text) if ladder_text else None,
            description=ladder_text,
        )

    match = ROUNDS_PATTERN.match(text)
    if match:
        return FormatHeader(
            format=FormatKind.ROUNDS,
            line_number=line_number,
            content=raw,
            rounds=_positive(match.group(1), line_number, raw),
        )

    raise MalformedFormatHeaderError(line_number, raw)
