"""
Rep-Scheme Parser

Reads the scheme written after an exercise name ("Bench Press: 3x8") and the
"<reps> <name>" form used for exercises nested under a format header
("  10 Box Jumps").
"""

import re
from typing import Optional, Tuple

from wod_syntax_api.utils import split_dash_list
from .errors import UnrecognizedLineError, UnrecognizedRepSchemeError
from .models import ExerciseEntry, Ladder, PlainReps, RepScheme, SetsRepRange, SetsReps

# Checked in this order; the first match wins
SETS_REP_RANGE_PATTERN = re.compile(r'^(\d+)\s*x\s*(\d+)-(\d+)$', re.IGNORECASE)  # "3x8-12"
SETS_REPS_PATTERN = re.compile(r'^(\d+)\s*x\s*(\d+)$', re.IGNORECASE)  # "3x8", "3 x 8"
LADDER_PATTERN = re.compile(r'^\d+(?:-\d+)+$')  # "5-5-5-3-3-1"
PLAIN_REPS_PATTERN = re.compile(r'^\d+$')  # "5"

# Trailing scheme on a top-level line written without a colon: "Back Squat 3x8"
TRAILING_SCHEME_PATTERN = re.compile(
    r'^(?P<name>.*?\S)\s+(?P<scheme>\d+\s*x\s*\d+(?:-\d+)?|\d+(?:-\d+)+)$',
    re.IGNORECASE
)

# Nested exercise: "10 Box Jumps", "Plank Hold"
NESTED_REPS_PATTERN = re.compile(r'^(\d+)\s+(.+)$')

# "[Back Squat]" marks a name as a loggable catalog exercise
BRACKETED_NAME_PATTERN = re.compile(r'^\[([^\]]+)\]$')


def parse_rep_scheme(token: str, line_number: Optional[int] = None, content: Optional[str] = None) -> RepScheme:
    """
    Parse a rep-scheme token.

    Args:
        token: Text after the exercise name, e.g. "3x8-12"
        line_number: Line the token came from, for error reporting
        content: Full source line, for error reporting

    Returns:
        SetsRepRange, SetsReps, Ladder or PlainReps

    Raises:
        UnrecognizedRepSchemeError: If the token matches none of the forms
    """
    token = token.strip()

    match = SETS_REP_RANGE_PATTERN.match(token)
    if match:
        return SetsRepRange(
            sets=int(match.group(1)),
            reps_min=int(match.group(2)),
            reps_max=int(match.group(3)),
        )

    match = SETS_REPS_PATTERN.match(token)
    if match:
        return SetsReps(sets=int(match.group(1)), reps=int(match.group(2)))

    if LADDER_PATTERN.match(token):
        return Ladder(rounds=split_dash_list(token), source=token)

    if PLAIN_REPS_PATTERN.match(token):
        return PlainReps(reps=int(token))

    raise UnrecognizedRepSchemeError(line_number, token, content if content is not None else token)


def is_rep_scheme(token: str) -> bool:
    """True if the token is one of the four rep-scheme forms."""
    token = token.strip()
    return any(
        pattern.match(token)
        for pattern in (SETS_REP_RANGE_PATTERN, SETS_REPS_PATTERN, LADDER_PATTERN, PLAIN_REPS_PATTERN)
    )


def split_name(raw_name: str) -> Tuple[str, bool]:
    """Return (name, loggable), unwrapping a bracketed name."""
    name = " ".join(raw_name.split())
    match = BRACKETED_NAME_PATTERN.match(name)
    if match:
        return match.group(1).strip(), True
    return name, False


def split_trailing_scheme(text: str) -> Optional[Tuple[str, str]]:
    """Split "Back Squat 3x8" into ("Back Squat", "3x8"), or None."""
    match = TRAILING_SCHEME_PATTERN.match(text.strip())
    if not match:
        return None
    return match.group("name"), match.group("scheme")


def parse_exercise(name_text: str, scheme_text: str, line_number: Optional[int] = None,
                   content: Optional[str] = None) -> ExerciseEntry:
    """Build a top-level exercise from its name and scheme parts."""
    scheme = parse_rep_scheme(scheme_text, line_number, content)
    name, loggable = split_name(name_text)
    if not name:
        raise UnrecognizedLineError(line_number, content, reason="exercise has no name")
    return ExerciseEntry(name=name, scheme=scheme, loggable=loggable)


def parse_nested_exercise(text: str, line_number: Optional[int] = None) -> ExerciseEntry:
    """
    Parse an exercise nested under a format header.

    A leading integer is the rep count and the rest is the name. Without a
    leading integer the whole text is the name and reps is None.
    """
    stripped = text.strip()
    reps = None

    match = NESTED_REPS_PATTERN.match(stripped)
    if match:
        reps = int(match.group(1))
        stripped = match.group(2)
    elif PLAIN_REPS_PATTERN.match(stripped):
        raise UnrecognizedLineError(line_number, text, reason="rep count has no exercise name")

    name, loggable = split_name(stripped)
    if not name:
        raise UnrecognizedLineError(line_number, text, reason="exercise has no name")
    return ExerciseEntry(name=name, reps=reps, loggable=loggable)
