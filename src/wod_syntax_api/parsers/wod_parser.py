"""
WOD Parser

Parses WOD (Workout of the Day) text syntax into a WodDocument.

Syntax example:

    # Block 1: Strength
    Back Squat: 5-5-5-5-5
    Bench Press: 3x8

    # Block 2: Conditioning
    AMRAP 12min:
      10 Box Jumps
      15 Push-ups

Parsing is a pure function of the input text. Each call builds its own
BlockAssembler, so a single WodParser can be shared across requests.
"""

import logging

from .assembler import BlockAssembler
from .errors import EmptyInputError
from .line_classifier import BlankLine, classify_line
from .models import WodDocument

logger = logging.getLogger(__name__)


class WodParser:
    """Parser for WOD text syntax"""

    def parse(self, text: str) -> WodDocument:
        """
        Parse WOD text.

        Args:
            text: Raw WOD text as written by the author

        Returns:
            WodDocument with blocks and entries in source order

        Raises:
            WodParseError: The first problem found, with its line number.
                Nothing is returned for an invalid document.
        """
        # Only "\n" ends a line, so numbers match what editors show
        lines = [
            classify_line(line.rstrip("\r"), number)
            for number, line in enumerate(text.split("\n"), 1)
        ]

        if all(isinstance(line, BlankLine) for line in lines):
            raise EmptyInputError()

        assembler = BlockAssembler()
        for line in lines:
            assembler.feed(line)
        document = assembler.finish()

        logger.debug(
            f"Parsed WOD: {len(document.blocks)} blocks, "
            f"{sum(len(b.entries) for b in document.blocks)} entries from {len(lines)} lines"
        )
        return document


_parser = WodParser()


def parse(text: str) -> WodDocument:
    """Parse WOD text with the shared parser."""
    return _parser.parse(text)
