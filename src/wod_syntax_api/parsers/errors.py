"""Errors raised while parsing WOD syntax.

Every error carries the 1-based line number and the raw line that caused it
(where there is one), so the author can be pointed at the exact spot.
"""
from typing import Optional


class WodParseError(ValueError):
    """Base class for all WOD syntax errors."""

    reason = "invalid WOD syntax"

    def __init__(self, line_number: Optional[int] = None, content: Optional[str] = None, reason: Optional[str] = None):
        self.line_number = line_number
        self.content = content
        if reason is not None:
            self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.line_number is None:
            return self.reason[:1].upper() + self.reason[1:]
        message = f"Line {self.line_number}: {self.reason}"
        if self.content is not None:
            message += f" ({self.content.strip()!r})"
        return message

    @property
    def message(self) -> str:
        return str(self)

    def to_dict(self) -> dict:
        """Shape used by the HTTP layer for error details."""
        return {
            "error": type(self).__name__,
            "message": self.message,
            "line_number": self.line_number,
            "content": self.content,
        }


class EmptyInputError(WodParseError):
    """Raised when the text holds no blocks, exercises or headers."""

    reason = "workout text is empty"

    def __init__(self):
        super().__init__()


class OrphanExerciseError(WodParseError):
    """Raised for content that appears before the first block header."""

    reason = "exercise appears before any block header; start the workout with a '# Block' line"


class OrphanIndentedLineError(WodParseError):
    """Raised for an indented line that does not belong to a format group."""

    reason = "indented line is not under an AMRAP, EMOM, For Time or Rounds header"


class UnrecognizedLineError(WodParseError):
    """Raised for a line that is neither a header nor an exercise."""

    reason = "unrecognized line"


class MalformedFormatHeaderError(WodParseError):
    """Raised when a format header is missing or has invalid parameters."""

    reason = "malformed format header; expected 'AMRAP <N>min:', 'EMOM <N>min:', '[21-15-9] For Time:' or '<N> Rounds:'"


class UnrecognizedRepSchemeError(WodParseError):
    """Raised when the scheme after an exercise name cannot be read."""

    def __init__(self, line_number: Optional[int], token: str, content: Optional[str] = None):
        self.token = token
        super().__init__(
            line_number,
            content,
            reason=f"unrecognized rep scheme {token!r}; expected e.g. 3x8, 3x8-12, 5-5-3 or 5",
        )


class EmptyFormatGroupError(WodParseError):
    """Raised when a format header has no nested exercises."""

    reason = "format header has no exercises; indent the exercises below it"
