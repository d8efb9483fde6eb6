"""
WOD endpoints

POST /wod/parse      parse WOD text into a structured document
POST /wod/render     normalize WOD text and list the format group labels
POST /wod/exercises  list loggable exercise names

Parse errors are returned as 422 with the offending line, so the editor can
redisplay the author's text together with the message.
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from wod_syntax_api.config import settings
from wod_syntax_api.parsers.errors import WodParseError
from wod_syntax_api.parsers.models import WodDocument
from wod_syntax_api.parsers.wod_parser import parse
from wod_syntax_api.services.wod_exercises import flatten_exercises, loggable_exercise_names
from wod_syntax_api.services.wod_formatter import WodFormatter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/wod", tags=["wod"])


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class WodTextRequest(BaseModel):
    """Request body carrying raw WOD text"""
    text: str = Field(..., description="WOD text as written by the author")


class ParseWodResponse(BaseModel):
    """Response model for POST /wod/parse"""
    success: bool = True
    document: dict[str, Any]
    block_count: int
    exercise_count: int


class RenderWodResponse(BaseModel):
    """Response model for POST /wod/render"""
    text: str
    labels: list[str] = Field(default_factory=list)


class ExercisesResponse(BaseModel):
    """Response model for POST /wod/exercises"""
    exercises: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def check_input_size(text: str) -> None:
    """Reject oversized input before it reaches the parser."""
    if len(text) > settings.WOD_MAX_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"WOD text is too long ({len(text)} characters, limit {settings.WOD_MAX_CHARS})",
        )
    line_count = text.count("\n") + 1
    if line_count > settings.WOD_MAX_LINES:
        raise HTTPException(
            status_code=413,
            detail=f"WOD text has too many lines ({line_count}, limit {settings.WOD_MAX_LINES})",
        )


def parse_or_422(text: str) -> WodDocument:
    """Parse WOD text, mapping parse errors to HTTP 422."""
    check_input_size(text)
    try:
        return parse(text)
    except WodParseError as e:
        logger.warning(f"Rejected WOD text: {e}")
        raise HTTPException(status_code=422, detail=e.to_dict())


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.post("/parse", response_model=ParseWodResponse)
def parse_wod(request: WodTextRequest) -> ParseWodResponse:
    """Parse WOD text into blocks and entries."""
    logger.info(f"Parsing WOD text ({len(request.text)} chars)")
    document = parse_or_422(request.text)
    return ParseWodResponse(
        document=document.model_dump(mode="json"),
        block_count=len(document.blocks),
        exercise_count=sum(1 for _ in flatten_exercises(document)),
    )


@router.post("/render", response_model=RenderWodResponse)
def render_wod(request: WodTextRequest) -> RenderWodResponse:
    """Parse WOD text and write it back in normalized form."""
    document = parse_or_422(request.text)
    return RenderWodResponse(
        text=WodFormatter.render_wod_text(document),
        labels=WodFormatter.group_labels(document),
    )


@router.post("/exercises", response_model=ExercisesResponse)
def list_exercises(request: WodTextRequest) -> ExercisesResponse:
    """List loggable exercise names in the order they first appear."""
    document = parse_or_422(request.text)
    return ExercisesResponse(exercises=loggable_exercise_names(document))
