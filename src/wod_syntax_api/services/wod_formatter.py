"""Formatting of parsed WOD documents for display and for writing back to WOD text."""
import logging
from typing import List, Optional

from wod_syntax_api.parsers.models import (
    Block,
    ExerciseEntry,
    FormatGroupEntry,
    FormatKind,
    RepScheme,
    WodDocument,
)

logger = logging.getLogger(__name__)

# Font Awesome icon per format, used next to the group label
FORMAT_ICONS = {
    FormatKind.AMRAP: "fa-stopwatch",
    FormatKind.EMOM: "fa-clock",
    FormatKind.FOR_TIME: "fa-flag-checkered",
    FormatKind.ROUNDS: "fa-redo",
}

NESTED_INDENT = "  "


class WodFormatter:
    """Stateless formatting of WOD documents."""

    @staticmethod
    def format_label(group: FormatGroupEntry) -> str:
        """
        Human-readable label for a format group.

        Examples: "AMRAP 12min", "EMOM 10min", "21-15-9 For Time",
        "For Time", "5 Rounds"
        """
        if group.format in (FormatKind.AMRAP, FormatKind.EMOM):
            return f"{group.format.value} {group.duration_minutes}min"

        if group.format == FormatKind.FOR_TIME:
            ladder = WodFormatter._ladder_text(group)
            return f"{ladder} For Time" if ladder else "For Time"

        if group.format == FormatKind.ROUNDS:
            noun = "Round" if group.rounds == 1 else "Rounds"
            return f"{group.rounds} {noun}"

        raise ValueError(f"Unknown format: {group.format}")

    @staticmethod
    def format_icon(kind: FormatKind) -> str:
        """Font Awesome icon name for a format."""
        return FORMAT_ICONS[kind]

    @staticmethod
    def scheme_display(scheme: Optional[RepScheme]) -> str:
        """Display string for a rep scheme ('' when there is none)."""
        return scheme.display if scheme is not None else ""

    @staticmethod
    def exercise_display(exercise: ExerciseEntry) -> str:
        """One-line summary of an exercise, e.g. 'Bench Press 3x8' or '10 Box Jumps'."""
        if exercise.scheme is not None:
            return f"{exercise.name} {exercise.scheme.display}"
        if exercise.reps is not None:
            return f"{exercise.reps} {exercise.name}"
        return exercise.name

    @staticmethod
    def group_labels(document: WodDocument) -> List[str]:
        """Labels of every format group in document order."""
        return [
            WodFormatter.format_label(entry)
            for block in document.blocks
            for entry in block.entries
            if isinstance(entry, FormatGroupEntry)
        ]

    @staticmethod
    def render_wod_text(document: WodDocument) -> str:
        """
        Write a document back to WOD syntax.

        Parsing the returned text produces a document equal to the input.

        Args:
            document: Parsed WOD document

        Returns:
            WOD text with one blank line between blocks
        """
        rendered_blocks = [WodFormatter._render_block(block) for block in document.blocks]
        text = "\n\n".join("\n".join(lines) for lines in rendered_blocks)
        logger.debug(f"Rendered {len(document.blocks)} blocks to WOD text")
        return text + "\n"

    @staticmethod
    def _render_block(block: Block) -> List[str]:
        lines = [f"# {block.name}"]
        for entry in block.entries:
            if isinstance(entry, FormatGroupEntry):
                lines.append(f"{WodFormatter.format_label(entry)}:")
                for exercise in entry.exercises:
                    lines.append(NESTED_INDENT + WodFormatter._render_nested(exercise))
            else:
                lines.append(WodFormatter._render_top_level(entry))
        return lines

    @staticmethod
    def _render_name(exercise: ExerciseEntry) -> str:
        return f"[{exercise.name}]" if exercise.loggable else exercise.name

    @staticmethod
    def _render_top_level(exercise: ExerciseEntry) -> str:
        name = WodFormatter._render_name(exercise)
        if exercise.scheme is not None:
            return f"{name}: {exercise.scheme.display}"
        if exercise.reps is not None:
            return f"{name}: {exercise.reps}"
        return name

    @staticmethod
    def _render_nested(exercise: ExerciseEntry) -> str:
        name = WodFormatter._render_name(exercise)
        if exercise.reps is not None:
            return f"{exercise.reps} {name}"
        return name

    @staticmethod
    def _ladder_text(group: FormatGroupEntry) -> Optional[str]:
        if group.description:
            return group.description
        if group.rep_ladder:
            return "-".join(str(r) for r in group.rep_ladder)
        return None
