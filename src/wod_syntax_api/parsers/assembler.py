"""
Block Assembler

Folds the stream of classified lines into blocks. All state lives on the
assembler instance, which is created fresh for every parse call.
"""

import logging
from typing import List, Optional

from .errors import (
    EmptyFormatGroupError,
    MalformedFormatHeaderError,
    OrphanExerciseError,
    OrphanIndentedLineError,
    UnrecognizedLineError,
)
from .format_header import FormatHeader, is_format_header, parse_format_header
from .line_classifier import (
    BlankLine,
    BlockHeader,
    ClassifiedLine,
    ExerciseLine,
    FormatHeaderLine,
    UnclassifiedLine,
)
from .models import Block, Entry, ExerciseEntry, WodDocument
from .rep_scheme import parse_exercise, parse_nested_exercise

logger = logging.getLogger(__name__)


class BlockAssembler:
    """Single-pass fold of classified lines into a WodDocument"""

    def __init__(self):
        self.blocks: List[Block] = []
        self.block_name: Optional[str] = None
        self.block_entries: List[Entry] = []
        self.group: Optional[FormatHeader] = None
        self.group_exercises: List[ExerciseEntry] = []

    @property
    def has_open_block(self) -> bool:
        return self.block_name is not None

    def feed(self, line: ClassifiedLine) -> None:
        """Consume one classified line."""
        if isinstance(line, BlankLine):
            return

        if isinstance(line, BlockHeader):
            self._close_block()
            # Blank headers are named after their position
            self.block_name = line.title or f"Block {len(self.blocks) + 1}"
            return

        if isinstance(line, FormatHeaderLine):
            if not self.has_open_block:
                raise OrphanExerciseError(line.line_number, line.raw)
            self._close_group()
            self.group = parse_format_header(line.raw, line.line_number)
            self.group_exercises = []
            return

        if isinstance(line, ExerciseLine):
            if not self.has_open_block:
                raise OrphanExerciseError(line.line_number, line.raw)
            if line.indent > 0:
                self._add_nested(line)
            else:
                self._add_top_level(line)
            return

        if isinstance(line, UnclassifiedLine):
            raise UnrecognizedLineError(line.line_number, line.raw)

        raise TypeError(f"Unknown line type: {type(line).__name__}")

    def finish(self) -> WodDocument:
        """Close any open group and block and return the document."""
        self._close_block()
        return WodDocument(blocks=tuple(self.blocks))

    def _add_top_level(self, line: ExerciseLine) -> None:
        self._close_group()
        self.block_entries.append(parse_exercise(line.name, line.scheme, line.line_number, line.raw))

    def _add_nested(self, line: ExerciseLine) -> None:
        if self.group is None:
            raise OrphanIndentedLineError(line.line_number, line.raw)
        if is_format_header(line.text):
            raise MalformedFormatHeaderError(
                line.line_number, line.raw, reason="format headers cannot be nested; move it to the start of the line",
            )
        self.group_exercises.append(parse_nested_exercise(line.text, line.line_number))

    def _close_group(self) -> None:
        if self.group is None:
            return
        if not self.group_exercises:
            raise EmptyFormatGroupError(self.group.line_number, self.group.content)
        self.block_entries.append(self.group.to_entry(tuple(self.group_exercises)))
        self.group = None
        self.group_exercises = []

    def _close_block(self) -> None:
        self._close_group()
        if self.block_name is None:
            return
        self.blocks.append(Block(name=self.block_name, entries=tuple(self.block_entries)))
        logger.debug(f"Closed block {self.block_name!r} with {len(self.block_entries)} entries")
        self.block_name = None
        self.block_entries = []
