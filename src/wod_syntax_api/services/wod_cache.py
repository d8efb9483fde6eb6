"""Cache payload for parsed WOD documents.

The raw WOD text stays the source of truth; the parsed document is stored next
to it as a derived cache that can always be rebuilt by parsing again.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import ValidationError

from wod_syntax_api.parsers.models import WodDocument
from wod_syntax_api.parsers.wod_parser import parse

logger = logging.getLogger(__name__)


class WodCacheService:
    """Static helpers for building and reading the parsed-workout cache."""

    @staticmethod
    def to_cache(document: WodDocument, source_text: Optional[str] = None) -> Dict[str, Any]:
        """Serialize a document to a JSON-compatible dict, preserving all ordering."""
        payload = document.model_dump(mode="json")
        payload["parsed_at"] = datetime.now(timezone.utc).isoformat()
        if source_text is not None:
            payload["source"] = source_text
        return payload

    @staticmethod
    def from_cache(data: Dict[str, Any]) -> WodDocument:
        """
        Rebuild a document from a cache payload.

        Raises:
            pydantic.ValidationError: If the payload does not describe a valid document
        """
        return WodDocument.model_validate({"blocks": data.get("blocks", [])})

    @staticmethod
    def load_or_parse(data: Optional[Dict[str, Any]], source_text: str) -> WodDocument:
        """Return the cached document, re-parsing the source text when the cache is missing or stale."""
        if data:
            try:
                return WodCacheService.from_cache(data)
            except ValidationError as e:
                logger.warning("Discarding unreadable WOD cache: %s", e)
        logger.debug("WOD cache MISS, parsing source text")
        return parse(source_text)

    @staticmethod
    def parse_and_cache(text: str) -> Dict[str, Any]:
        """
        Parse WOD text and build its cache payload in one step.

        Raises:
            WodParseError: If the text is invalid; nothing is produced
        """
        document = parse(text)
        return WodCacheService.to_cache(document, text)
