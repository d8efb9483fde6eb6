"""Exercise lists derived from parsed WOD documents."""
import logging
from typing import Iterator, List, Optional

from wod_syntax_api.parsers.errors import WodParseError
from wod_syntax_api.parsers.models import ExerciseEntry, FormatGroupEntry, WodDocument
from wod_syntax_api.parsers.wod_parser import parse

logger = logging.getLogger(__name__)


def flatten_exercises(document: WodDocument) -> Iterator[ExerciseEntry]:
    """
    Yield every exercise in document order.

    Format group headers are skipped and their nested exercises are yielded
    in place.
    """
    for block in document.blocks:
        for entry in block.entries:
            if isinstance(entry, FormatGroupEntry):
                yield from entry.exercises
            else:
                yield entry


def loggable_exercise_names(document: WodDocument) -> List[str]:
    """Unique names of loggable ([bracketed]) exercises, first occurrence first."""
    names: List[str] = []
    seen = set()
    for exercise in flatten_exercises(document):
        key = exercise.name.lower()
        if exercise.loggable and key not in seen:
            seen.add(key)
            names.append(exercise.name)
    return names


def extract_loggable_exercises(text: Optional[str]) -> List[str]:
    """
    Parse WOD text and return its loggable exercise names.

    Used for workout summaries, so invalid or empty text yields [] instead
    of raising.
    """
    if not text:
        return []
    try:
        document = parse(text)
    except WodParseError as e:
        logger.info(f"Skipping exercise extraction for invalid WOD text: {e}")
        return []
    return loggable_exercise_names(document)
